"""
Interview API Routes

Description:
This module defines the FastAPI routes that generate interview questions for a role and
analyze a completed interview transcript.

Both routes always answer 200 once the input is valid. The AI gateway reports whether
its output is usable; when it is not, or when anything unexpected goes wrong, the
deterministic fallback result is returned instead, so the user always gets questions
and feedback.

Arguments:
- payload: InterviewQuestionsRequest or InterviewAnalysisRequest JSON body.
- request: Starlette request, required for rate limiting.

Returns:
- InterviewQuestionsResponse or InterviewAnalysisResponse envelopes.

Dependencies:
- fastapi: For routing and dependency injection.
- virtual_panel.services.ai_gateway: For the model-backed results.
- virtual_panel.services.fallback: For the deterministic substitutes.
- loguru: For logging request handling and fallbacks.
"""
from fastapi import APIRouter, Depends, Request
from loguru import logger

from virtual_panel.core.route_limiters import limiter, ROUTE_LIMIT
from virtual_panel.errors.exceptions import MissingRoleError, MissingTranscriptError
from virtual_panel.schemas.interview_analysis import InterviewAnalysisResponse
from virtual_panel.schemas.interview_analysis_request import InterviewAnalysisRequest
from virtual_panel.schemas.interview_questions_request import InterviewQuestionsRequest
from virtual_panel.schemas.interview_questions_response import InterviewQuestionsResponse
from virtual_panel.services.ai_gateway import AIGateway, get_ai_gateway
from virtual_panel.services.fallback import score_interview, select_questions

DEFAULT_ROLE = "default"

router = APIRouter(
    prefix="/api/interview",
    tags=["interview"],
    responses={404: {"description": "Not found"}}
)


@router.post("/questions", response_model=InterviewQuestionsResponse)
@limiter.limit(ROUTE_LIMIT)
async def generate_questions(
    request: Request,
    payload: InterviewQuestionsRequest,
    gateway: AIGateway = Depends(get_ai_gateway),
):
    """
    Generate five interview questions for the requested role.
    """
    role = (payload.role or "").strip()
    if not role:
        raise MissingRoleError()

    try:
        logger.info(f"Generating questions for role: {role}")
        result = await gateway.generate_questions(role)

        if result.ok:
            questions = result.value
        else:
            logger.warning(f"AI generation unavailable ({result.reason.value}): {result.detail}")
            questions = select_questions(role)

        return InterviewQuestionsResponse(
            questions=questions,
            message=f"Generated {len(questions)} questions for {role}",
        )
    except Exception as e:
        logger.error(f"Error in /questions route: {e}")
        return InterviewQuestionsResponse(
            questions=select_questions(role or DEFAULT_ROLE),
            message="Using default questions due to technical issue",
        )


@router.post("/analyze", response_model=InterviewAnalysisResponse)
@limiter.limit(ROUTE_LIMIT)
async def analyze_interview(
    request: Request,
    payload: InterviewAnalysisRequest,
    gateway: AIGateway = Depends(get_ai_gateway),
):
    """
    Score a completed interview transcript.
    """
    if not payload.transcript:
        raise MissingTranscriptError()

    transcript = payload.transcript
    role = (payload.role or "").strip() or DEFAULT_ROLE

    try:
        logger.info(f"Analyzing interview for role: {role}")
        result = await gateway.analyze_transcript(transcript, role)

        if result.ok:
            analysis = result.value
        else:
            logger.warning(f"AI analysis unavailable ({result.reason.value}): {result.detail}")
            analysis = score_interview(transcript, role)

        return InterviewAnalysisResponse(
            analysis=analysis,
            message="Interview analysis completed",
        )
    except Exception as e:
        logger.error(f"Error in /analyze route: {e}")
        return InterviewAnalysisResponse(
            analysis=score_interview(transcript, role),
            message="Analysis completed with default feedback",
        )
