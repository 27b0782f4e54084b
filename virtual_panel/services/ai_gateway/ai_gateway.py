"""
AI Gateway

This module wraps every call to the generative language model. It renders the prompt,
sends it through the OpenAI-compatible chat completions API with a bounded wait, and
turns the free-text reply into the shape the routes expect.

Nothing in here raises for collaborator problems. Network errors, timeouts, empty
replies and unusable output all come back as a GatewayResult failure with a
FailureReason, and the caller picks the matching fallback.

The module contains:
- AIGateway: question generation, transcript analysis and resume analysis
- get_ai_gateway: FastAPI dependency returning the process-wide gateway

Dependencies:
- openai: For the AsyncOpenAI chat completions client
- asyncio: For the per-call timeout
- pydantic: For validating parsed analysis objects
- loguru: For logging calls and failures
"""
import asyncio
from typing import List, Optional, Sequence

from loguru import logger
from openai import APITimeoutError, AsyncOpenAI
from pydantic import ValidationError

from virtual_panel.core.ai_client_manager import get_ai_client_manager
from virtual_panel.core.config import settings
from virtual_panel.core.secure_prompt_manager import SecurePromptManager, secure_prompt_manager
from virtual_panel.helper.extract_json_object import extract_json_object
from virtual_panel.helper.parse_numbered_questions import parse_numbered_questions
from virtual_panel.schemas.gateway_result import FailureReason, GatewayResult
from virtual_panel.schemas.interview_analysis import InterviewAnalysis
from virtual_panel.schemas.resume_analysis import ResumeAnalysis
from virtual_panel.schemas.transcript_entry import TranscriptEntry

EXPECTED_QUESTION_COUNT = 5
INTERVIEW_ANALYSIS_FIELDS = ("overallScore", "strengths", "weaknesses", "improvements", "resources", "summary")
RESUME_ANALYSIS_FIELDS = ("atsScore", "suggestions")


class AIGateway:
    """
    Gateway to the generative model.

    Args:
        interview_client: Client for questions and transcript analysis, or None when AI is disabled
        resume_client: Client for resume analysis, or None when AI is disabled
        interview_model: Model name used for interview prompts
        resume_model: Model name used for resume prompts
        timeout_seconds: Upper bound on a single model call
        prompt_manager: Source of the rendered prompts
    """

    def __init__(
        self,
        interview_client: Optional[AsyncOpenAI],
        resume_client: Optional[AsyncOpenAI],
        interview_model: str = settings.interview_model,
        resume_model: str = settings.resume_model,
        timeout_seconds: float = settings.ai_timeout_seconds,
        prompt_manager: SecurePromptManager = secure_prompt_manager,
    ):
        self.interview_client = interview_client
        self.resume_client = resume_client
        self.interview_model = interview_model
        self.resume_model = resume_model
        self.timeout_seconds = timeout_seconds
        self.prompt_manager = prompt_manager

    async def _complete(self, client: Optional[AsyncOpenAI], model: str, prompt: str) -> GatewayResult[str]:
        """Send one prompt and return the reply text, never raising."""
        if client is None:
            return GatewayResult.failure(FailureReason.NOT_CONFIGURED, "No valid API key configured")

        try:
            response = await asyncio.wait_for(
                client.chat.completions.create(
                    model=model,
                    messages=[
                        {
                            "role": "user",
                            "content": prompt
                        }
                    ]
                ),
                timeout=self.timeout_seconds,
            )
        except (asyncio.TimeoutError, APITimeoutError):
            return GatewayResult.failure(
                FailureReason.TIMEOUT,
                f"Model did not answer within {self.timeout_seconds:g}s",
            )
        except Exception as e:
            return GatewayResult.failure(FailureReason.UPSTREAM_ERROR, str(e) or type(e).__name__)

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            return GatewayResult.failure(FailureReason.EMPTY_RESPONSE, f"Unexpected response shape: {e}")

        if not content or not content.strip():
            return GatewayResult.failure(FailureReason.EMPTY_RESPONSE, "Model returned no text")

        logger.debug(f"Model response preview: {content[:100]}...")
        return GatewayResult.success(content)

    async def generate_questions(self, role: str) -> GatewayResult[List[str]]:
        """
        Ask the model for five interview questions for a role.

        Returns:
            GatewayResult[List[str]]: Exactly five questions, or WRONG_QUESTION_COUNT
            when the reply did not contain five usable numbered lines
        """
        try:
            prompt = self.prompt_manager.get_question_generation_prompt(role)
        except ValueError as e:
            return GatewayResult.failure(FailureReason.INVALID_PROMPT, f"Could not build prompt: {e}")

        logger.info(f"Requesting interview questions for role: {role}")
        completion = await self._complete(self.interview_client, self.interview_model, prompt)
        if not completion.ok:
            return GatewayResult.failure(completion.reason, completion.detail)

        questions = parse_numbered_questions(completion.value)
        if len(questions) != EXPECTED_QUESTION_COUNT:
            return GatewayResult.failure(
                FailureReason.WRONG_QUESTION_COUNT,
                f"Expected {EXPECTED_QUESTION_COUNT} questions, got {len(questions)}",
            )

        logger.info(f"Successfully generated {len(questions)} questions with AI")
        return GatewayResult.success(questions)

    async def analyze_transcript(
        self, transcript: Sequence[TranscriptEntry], role: str
    ) -> GatewayResult[InterviewAnalysis]:
        """
        Ask the model to score a completed interview.

        The reply must contain a JSON object with all six analysis fields; anything
        else is reported as a failure so the route can fall back.
        """
        try:
            prompt = self.prompt_manager.get_interview_analysis_prompt(transcript, role)
        except ValueError as e:
            return GatewayResult.failure(FailureReason.INVALID_PROMPT, f"Could not build prompt: {e}")

        logger.info(f"Requesting interview analysis for role: {role} ({len(transcript)} answers)")
        completion = await self._complete(self.interview_client, self.interview_model, prompt)
        if not completion.ok:
            return GatewayResult.failure(completion.reason, completion.detail)

        extracted = extract_json_object(completion.value, INTERVIEW_ANALYSIS_FIELDS)
        if not extracted.ok:
            return GatewayResult.failure(extracted.reason, extracted.detail)

        try:
            analysis = InterviewAnalysis.model_validate(extracted.value)
        except ValidationError as e:
            return GatewayResult.failure(FailureReason.MISSING_FIELDS, f"Invalid analysis structure: {e.error_count()} error(s)")

        logger.info("Successfully analyzed interview with AI")
        return GatewayResult.success(analysis)

    async def analyze_resume(self, resume_text: str) -> GatewayResult[ResumeAnalysis]:
        """Ask the model for an ATS score and suggestions for extracted resume text."""
        try:
            prompt = self.prompt_manager.get_resume_analysis_prompt(resume_text)
        except ValueError as e:
            return GatewayResult.failure(FailureReason.INVALID_PROMPT, f"Could not build prompt: {e}")

        logger.info(f"Requesting resume analysis ({len(resume_text)} chars)")
        completion = await self._complete(self.resume_client, self.resume_model, prompt)
        if not completion.ok:
            return GatewayResult.failure(completion.reason, completion.detail)

        extracted = extract_json_object(completion.value, RESUME_ANALYSIS_FIELDS)
        if not extracted.ok:
            return GatewayResult.failure(extracted.reason, extracted.detail)

        try:
            analysis = ResumeAnalysis.model_validate(extracted.value)
        except ValidationError as e:
            return GatewayResult.failure(FailureReason.MISSING_FIELDS, f"Invalid analysis structure: {e.error_count()} error(s)")

        logger.info("Resume analyzed successfully with AI")
        return GatewayResult.success(analysis)


_ai_gateway: Optional[AIGateway] = None


def get_ai_gateway() -> AIGateway:
    """
    FastAPI dependency returning the shared gateway.

    Built on first use from the AIClientManager; tests replace it through
    app.dependency_overrides.
    """
    global _ai_gateway

    if _ai_gateway is None:
        manager = get_ai_client_manager()
        _ai_gateway = AIGateway(
            interview_client=manager.get_interview_client(),
            resume_client=manager.get_resume_client(),
        )

    return _ai_gateway
