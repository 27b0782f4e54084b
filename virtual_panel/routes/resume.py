"""
Resume API Route

Description:
This module defines the FastAPI route that scores an uploaded PDF resume for ATS
compatibility.

Upload problems (missing file, wrong type, oversized file, too little text) are client
errors. If the AI gateway cannot produce a usable analysis the keyword-based fallback
scorer is used, and the same goes for any unexpected error once the text is in hand.
A PDF that cannot be parsed is reported as a 500 because there is no text to fall
back on.

Arguments:
- resume: Multipart file field holding the PDF.
- request: Starlette request, required for rate limiting.

Returns:
- ResumeAnalysisResponse envelope.

Dependencies:
- fastapi: For routing, file uploads and dependency injection.
- virtual_panel.services.pdf_extraction: For text extraction.
- virtual_panel.services.ai_gateway: For the model-backed analysis.
- virtual_panel.services.fallback: For the deterministic scorer.
- loguru: For logging request handling.
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile
from loguru import logger

from virtual_panel.core.config import settings
from virtual_panel.core.route_limiters import limiter, ROUTE_LIMIT
from virtual_panel.errors.exceptions import (
    FileTooLarge,
    InsufficientResumeText,
    InternalServerError,
    MissingResumeFileError,
    UnsupportedFileType,
)
from virtual_panel.schemas.resume_analysis import ResumeAnalysisResponse
from virtual_panel.services.ai_gateway import AIGateway, get_ai_gateway
from virtual_panel.services.fallback import score_resume
from virtual_panel.services.pdf_extraction import PDFExtractionError, PdfTextExtractor, get_pdf_text_extractor

PDF_CONTENT_TYPE = "application/pdf"
CHUNK_SIZE = 1024 * 64

router = APIRouter(
    prefix="/api/resume",
    tags=["resume"],
    responses={404: {"description": "Not found"}}
)


async def read_upload(upload: UploadFile, max_bytes: int) -> bytes:
    """Read an upload into memory, stopping as soon as it exceeds max_bytes."""
    chunks = []
    total = 0
    while True:
        chunk = await upload.read(CHUNK_SIZE)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            raise FileTooLarge(max_bytes)
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/analyze", response_model=ResumeAnalysisResponse)
@limiter.limit(ROUTE_LIMIT)
async def analyze_resume(
    request: Request,
    resume: Optional[UploadFile] = File(None),
    gateway: AIGateway = Depends(get_ai_gateway),
    extractor: PdfTextExtractor = Depends(get_pdf_text_extractor),
):
    """
    Score an uploaded PDF resume.
    """
    logger.info("Resume analysis request received")

    if resume is None:
        raise MissingResumeFileError()

    if resume.content_type != PDF_CONTENT_TYPE:
        logger.warning(f"Rejected resume upload with content type {resume.content_type}")
        raise UnsupportedFileType(resume.content_type)

    content = await read_upload(resume, settings.max_resume_bytes)

    try:
        resume_text = await extractor.extract(content)
    except PDFExtractionError as e:
        logger.error(f"Error in resume analysis: {e}")
        raise InternalServerError("Failed to analyze resume", error=str(e)) from e

    if not resume_text or len(resume_text.strip()) < settings.min_resume_text_chars:
        raise InsufficientResumeText()

    try:
        result = await gateway.analyze_resume(resume_text)

        if result.ok:
            analysis = result.value
        else:
            logger.warning(f"AI analysis unavailable ({result.reason.value}): {result.detail}")
            analysis = score_resume(resume_text)
    except Exception as e:
        logger.error(f"Error in resume analysis, using fallback: {e}")
        analysis = score_resume(resume_text)

    return ResumeAnalysisResponse(
        analysis=analysis,
        message="Resume analysis completed",
    )
