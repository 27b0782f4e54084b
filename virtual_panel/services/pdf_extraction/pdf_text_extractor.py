"""
PDF Text Extractor

Extracts plain text from an uploaded PDF held in memory. Parsing is CPU bound, so the
async entry point hands the work to the thread pool and the event loop keeps serving
other requests in the meantime. Nothing is written to disk.

Dependencies:
- pypdf: For reading PDF pages and extracting their text
- fastapi.concurrency: For running the parser in the thread pool
- loguru: For logging extraction results
"""
import io

from fastapi.concurrency import run_in_threadpool
from loguru import logger
from pypdf import PdfReader


class PDFExtractionError(Exception):
    """Raised when an uploaded PDF cannot be read."""
    pass


def extract_pdf_text(content: bytes) -> str:
    """
    Extract the text of every page, joined by newlines.

    Args:
        content (bytes): Raw PDF bytes

    Returns:
        str: Extracted text; empty when the PDF has no text layer

    Raises:
        PDFExtractionError: If the bytes are not a readable PDF
    """
    try:
        reader = PdfReader(io.BytesIO(content))
        text_parts = []
        for page in reader.pages:
            page_text = (page.extract_text() or "").strip()
            if page_text:
                text_parts.append(page_text)
    except Exception as e:
        raise PDFExtractionError(f"PDF parsing failed: {e}") from e

    return "\n".join(text_parts)


class PdfTextExtractor:
    """Async wrapper used by the resume route; replaceable in tests."""

    async def extract(self, content: bytes) -> str:
        text = await run_in_threadpool(extract_pdf_text, content)
        logger.info(f"PDF text extracted, length: {len(text)}")
        return text


pdf_text_extractor = PdfTextExtractor()


def get_pdf_text_extractor() -> PdfTextExtractor:
    """FastAPI dependency returning the shared extractor."""
    return pdf_text_extractor
