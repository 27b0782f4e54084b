"""
Shared pytest fixtures.

Environment variables are pinned before the application is imported so tests never
reach a real model, never hit the rate limiter and always run with production-style
error suppression.
"""
import os

os.environ["GEMINI_API_KEY"] = ""
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENVIRONMENT"] = "test"

import asyncio
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from virtual_panel.main import app
from virtual_panel.schemas.gateway_result import FailureReason, GatewayResult


def make_completion(content):
    """Build an object shaped like an OpenAI chat completion response."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class FakeCompletions:
    def __init__(self, content=None, error=None, delay=0.0):
        self.content = content
        self.error = error
        self.delay = delay
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return make_completion(self.content)


class FakeAIClient:
    """Stand-in for AsyncOpenAI exposing only chat.completions.create."""

    def __init__(self, content=None, error=None, delay=0.0):
        self.completions = FakeCompletions(content=content, error=error, delay=delay)
        self.chat = SimpleNamespace(completions=self.completions)


class StubGateway:
    """Gateway replacement returning preset results and recording calls."""

    def __init__(self, questions=None, interview=None, resume=None, error=None):
        unavailable = GatewayResult.failure(FailureReason.UPSTREAM_ERROR, "stubbed failure")
        self.questions = questions or unavailable
        self.interview = interview or unavailable
        self.resume = resume or unavailable
        self.error = error
        self.calls = []

    async def generate_questions(self, role):
        self.calls.append(("generate_questions", role))
        if self.error is not None:
            raise self.error
        return self.questions

    async def analyze_transcript(self, transcript, role):
        self.calls.append(("analyze_transcript", role))
        if self.error is not None:
            raise self.error
        return self.interview

    async def analyze_resume(self, resume_text):
        self.calls.append(("analyze_resume", resume_text))
        if self.error is not None:
            raise self.error
        return self.resume


def words(count, word="word"):
    return " ".join([word] * count)


def make_transcript(count, words_per_answer):
    return [
        {
            "question": f"Question number {index}?",
            "answer": words(words_per_answer),
            "questionNumber": index,
        }
        for index in range(1, count + 1)
    ]


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
