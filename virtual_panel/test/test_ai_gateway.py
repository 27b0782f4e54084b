"""
Test AI Gateway

This module tests that AIGateway turns every kind of model outcome into a
GatewayResult and never raises for collaborator failures.

Dependencies:
- pytest / pytest-asyncio: For testing framework
- virtual_panel.services.ai_gateway: The module being tested
"""
import json

import pytest

from conftest import FakeAIClient
from virtual_panel.schemas.gateway_result import FailureReason
from virtual_panel.schemas.transcript_entry import TranscriptEntry
from virtual_panel.services.ai_gateway import AIGateway

FIVE_QUESTIONS = "\n".join([
    "1. Tell me about a system you designed end to end.",
    "2. How do you approach code reviews on your team?",
    "3. Describe a production incident you helped resolve.",
    "4. How do you decide between two competing designs?",
    "5. What are you hoping to learn in your next role?",
])

INTERVIEW_ANALYSIS = {
    "overallScore": 82,
    "strengths": ["Clear", "Structured", "Relevant"],
    "weaknesses": ["Short", "Vague", "Generic"],
    "improvements": ["STAR", "Metrics", "Examples"],
    "resources": ["Book", "Course", "Blog"],
    "summary": "Solid interview overall.",
}

TRANSCRIPT = [
    TranscriptEntry(question="Tell me about yourself.", answer="I build APIs.", questionNumber=1),
    TranscriptEntry(question="Why this role?", answer=None, questionNumber=2),
]


def gateway_with(client, timeout=1.0):
    return AIGateway(
        interview_client=client,
        resume_client=client,
        interview_model="interview-model",
        resume_model="resume-model",
        timeout_seconds=timeout,
    )


class TestGenerateQuestions:

    @pytest.mark.asyncio
    async def test_five_questions(self):
        client = FakeAIClient(content=FIVE_QUESTIONS)
        result = await gateway_with(client).generate_questions("Backend Engineer")
        assert result.ok
        assert len(result.value) == 5
        assert result.value[0] == "Tell me about a system you designed end to end."

    @pytest.mark.asyncio
    async def test_prompt_mentions_role_and_uses_interview_model(self):
        client = FakeAIClient(content=FIVE_QUESTIONS)
        await gateway_with(client).generate_questions("Backend Engineer")
        call = client.completions.calls[0]
        assert call["model"] == "interview-model"
        assert "Backend Engineer position" in call["messages"][0]["content"]

    @pytest.mark.asyncio
    async def test_four_questions_is_a_failure(self):
        content = "\n".join(FIVE_QUESTIONS.split("\n")[:4])
        result = await gateway_with(FakeAIClient(content=content)).generate_questions("Engineer")
        assert not result.ok
        assert result.reason == FailureReason.WRONG_QUESTION_COUNT

    @pytest.mark.asyncio
    async def test_six_questions_is_a_failure(self):
        content = FIVE_QUESTIONS + "\n6. Do you have any questions for us today?"
        result = await gateway_with(FakeAIClient(content=content)).generate_questions("Engineer")
        assert result.reason == FailureReason.WRONG_QUESTION_COUNT

    @pytest.mark.asyncio
    async def test_short_line_drops_count_below_five(self):
        content = "\n".join(FIVE_QUESTIONS.split("\n")[:4] + ["5. Why us?"])
        result = await gateway_with(FakeAIClient(content=content)).generate_questions("Engineer")
        assert result.reason == FailureReason.WRONG_QUESTION_COUNT

    @pytest.mark.asyncio
    async def test_no_client_is_not_configured(self):
        result = await gateway_with(None).generate_questions("Engineer")
        assert result.reason == FailureReason.NOT_CONFIGURED

    @pytest.mark.asyncio
    async def test_client_error_is_upstream_error(self):
        client = FakeAIClient(error=ConnectionError("network down"))
        result = await gateway_with(client).generate_questions("Engineer")
        assert result.reason == FailureReason.UPSTREAM_ERROR
        assert "network down" in result.detail

    @pytest.mark.asyncio
    async def test_slow_model_times_out(self):
        client = FakeAIClient(content=FIVE_QUESTIONS, delay=0.5)
        result = await gateway_with(client, timeout=0.01).generate_questions("Engineer")
        assert result.reason == FailureReason.TIMEOUT

    @pytest.mark.asyncio
    async def test_blank_reply_is_empty_response(self):
        result = await gateway_with(FakeAIClient(content="   ")).generate_questions("Engineer")
        assert result.reason == FailureReason.EMPTY_RESPONSE

    @pytest.mark.asyncio
    async def test_none_reply_is_empty_response(self):
        result = await gateway_with(FakeAIClient(content=None)).generate_questions("Engineer")
        assert result.reason == FailureReason.EMPTY_RESPONSE


class TestAnalyzeTranscript:

    @pytest.mark.asyncio
    async def test_valid_analysis(self):
        content = "Sure!\n" + json.dumps(INTERVIEW_ANALYSIS)
        result = await gateway_with(FakeAIClient(content=content)).analyze_transcript(TRANSCRIPT, "Engineer")
        assert result.ok
        assert result.value.overallScore == 82
        assert result.value.summary == "Solid interview overall."

    @pytest.mark.asyncio
    async def test_prompt_embeds_numbered_transcript(self):
        client = FakeAIClient(content=json.dumps(INTERVIEW_ANALYSIS))
        await gateway_with(client).analyze_transcript(TRANSCRIPT, "Engineer")
        prompt = client.completions.calls[0]["messages"][0]["content"]
        assert "Q1: Tell me about yourself.\nA1: I build APIs." in prompt
        assert "Q2: Why this role?" in prompt
        assert '"overallScore"' in prompt

    @pytest.mark.asyncio
    async def test_missing_field_is_rejected(self):
        partial = {key: value for key, value in INTERVIEW_ANALYSIS.items() if key != "resources"}
        result = await gateway_with(FakeAIClient(content=json.dumps(partial))).analyze_transcript(TRANSCRIPT, "Engineer")
        assert result.reason == FailureReason.MISSING_FIELDS

    @pytest.mark.asyncio
    async def test_out_of_range_score_is_rejected(self):
        invalid = dict(INTERVIEW_ANALYSIS, overallScore=140)
        result = await gateway_with(FakeAIClient(content=json.dumps(invalid))).analyze_transcript(TRANSCRIPT, "Engineer")
        assert result.reason == FailureReason.MISSING_FIELDS

    @pytest.mark.asyncio
    async def test_prose_reply_has_no_object(self):
        client = FakeAIClient(content="The candidate did well overall.")
        result = await gateway_with(client).analyze_transcript(TRANSCRIPT, "Engineer")
        assert result.reason == FailureReason.NO_OPENING_BRACE


class TestAnalyzeResume:

    @pytest.mark.asyncio
    async def test_valid_analysis_uses_resume_model(self):
        client = FakeAIClient(content='```json\n{"atsScore": 77, "suggestions": ["Add metrics"]}\n```')
        result = await gateway_with(client).analyze_resume("Experienced engineer " * 10)
        assert result.ok
        assert result.value.atsScore == 77
        assert client.completions.calls[0]["model"] == "resume-model"

    @pytest.mark.asyncio
    async def test_missing_suggestions(self):
        result = await gateway_with(FakeAIClient(content='{"atsScore": 77}')).analyze_resume("resume text")
        assert result.reason == FailureReason.MISSING_FIELDS

    @pytest.mark.asyncio
    async def test_empty_suggestions(self):
        client = FakeAIClient(content='{"atsScore": 77, "suggestions": []}')
        result = await gateway_with(client).analyze_resume("resume text")
        assert result.reason == FailureReason.MISSING_FIELDS

    @pytest.mark.asyncio
    async def test_malformed_json(self):
        client = FakeAIClient(content='{"atsScore": 77, "suggestions": ["a",]}')
        result = await gateway_with(client).analyze_resume("resume text")
        assert result.reason == FailureReason.PARSE_ERROR

    @pytest.mark.asyncio
    async def test_not_configured(self):
        result = await gateway_with(None).analyze_resume("resume text")
        assert result.reason == FailureReason.NOT_CONFIGURED
