"""
Secure Prompt Manager Module

This module provides a secure way to manage AI prompts by isolating them from user data
to prevent injection attacks. It implements a template-based system with explicit
placeholders and sanitization of every injected value.

The module contains:
- PromptTemplate: A dataclass for secure prompt templates with placeholders
- SecurePromptManager: Main class for the question, interview and resume prompts
- sanitize_text: Utility function for text sanitization
- format_transcript: Renders a transcript as numbered Q/A blocks

Dependencies:
- dataclasses: For template data structures
- typing: For type hints
- re: For regex-based sanitization
- html: For HTML entity encoding
- loguru: For logging truncation and unknown placeholders
"""

from typing import Dict, Sequence
from dataclasses import dataclass
import re
import html

from loguru import logger

from virtual_panel.schemas.transcript_entry import TranscriptEntry


def sanitize_text(text: str, max_length: int = 1000, escape_html: bool = True) -> str:
    """
    Sanitize text input to prevent injection attacks and ensure data safety.

    This function performs multiple sanitization steps:
    1. Optional HTML entity encoding
    2. Strips leading/trailing whitespace
    3. Removes null bytes and other control characters
    4. Configurable length limiting
    5. Normalizes unicode characters

    Args:
        text (str): The text to sanitize
        max_length (int): Maximum allowed length (default: 1000)
        escape_html (bool): Whether to HTML escape the text (default: True)

    Returns:
        str: The sanitized text

    Raises:
        ValueError: If text is None or empty after sanitization
    """
    if text is None:
        raise ValueError("Text cannot be None")

    text = str(text)

    if escape_html:
        text = html.escape(text)

    text = text.strip()

    # Remove null bytes and other control characters (except newlines and tabs)
    text = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', text)

    if len(text) > max_length:
        text = text[:max_length]
        logger.warning(f"Text truncated to {max_length} characters for security")

    text = text.encode('utf-8', errors='ignore').decode('utf-8')

    if not text:
        raise ValueError("Text cannot be empty after sanitization")

    return text


@dataclass
class PromptTemplate:
    """Secure prompt template with placeholders for safe data injection."""
    template: str
    placeholders: Dict[str, str]
    sanitization_config: Dict[str, Dict] = None  # Per-placeholder sanitization config

    def render(self, **kwargs) -> str:
        """
        Safely render the template with provided data.

        Args:
            **kwargs: Data to inject into placeholders

        Returns:
            str: Rendered prompt with sanitized data

        Raises:
            ValueError: If required placeholders are missing or data is invalid
        """
        missing_placeholders = set(self.placeholders.keys()) - set(kwargs.keys())
        if missing_placeholders:
            raise ValueError(f"Missing required placeholders: {missing_placeholders}")

        sanitized_data = {}
        for key, value in kwargs.items():
            if key in self.placeholders:
                config = self.sanitization_config.get(key, {}) if self.sanitization_config else {}
                max_length = config.get('max_length', 1000)
                escape_html = config.get('escape_html', True)

                sanitized_data[key] = sanitize_text(str(value), max_length=max_length, escape_html=escape_html)
            else:
                # Skip unknown keys to prevent injection
                logger.warning(f"Unknown placeholder key: {key}")
                continue

        try:
            return self.template.format(**sanitized_data)
        except KeyError as e:
            raise ValueError(f"Template rendering error: {e}") from e


def format_transcript(transcript: Sequence[TranscriptEntry]) -> str:
    """
    Render a transcript as numbered question/answer blocks.

    Example:
        Q1: Tell me about yourself.
        A1: I am a backend developer...
    """
    blocks = []
    for index, entry in enumerate(transcript, start=1):
        answer = entry.answer or "(no answer given)"
        blocks.append(f"Q{index}: {entry.question}\nA{index}: {answer}")
    return "\n\n".join(blocks)


class SecurePromptManager:
    """
    Secure prompt manager that isolates prompts from user data.

    Every prompt the service sends to the generative model is built here from a
    predefined template; user-controlled values only ever enter through placeholders.
    """

    def __init__(self):
        self._templates = self._initialize_templates()

    def _initialize_templates(self) -> Dict[str, PromptTemplate]:
        """Initialize secure prompt templates with explicit placeholders."""
        return {
            "question_generation": PromptTemplate(
                template="""Generate exactly 5 professional interview questions for a {role} position.

Requirements:
- Questions should be relevant to the role
- Mix behavioral and technical questions
- Make them realistic and commonly asked
- Return only the questions, numbered 1-5
- Each question on a new line
- No additional text or explanations

Format:
1. [Question 1]
2. [Question 2]
3. [Question 3]
4. [Question 4]
5. [Question 5]""",
                placeholders={
                    "role": "Target job role",
                },
                sanitization_config={
                    "role": {"max_length": 200, "escape_html": False},
                },
            ),
            "interview_analysis": PromptTemplate(
                template="""Analyze this job interview transcript for a {role} position:

{transcript}

Provide a comprehensive analysis in the following JSON format:
{{
  "overallScore": [score from 0-100],
  "strengths": ["strength 1", "strength 2", "strength 3"],
  "weaknesses": ["weakness 1", "weakness 2", "weakness 3"],
  "improvements": ["improvement 1", "improvement 2", "improvement 3"],
  "resources": ["resource 1", "resource 2", "resource 3"],
  "summary": "Overall performance summary in 2-3 sentences"
}}

Make the analysis specific, constructive, and actionable. Focus on communication skills, technical knowledge, and role-specific competencies.""",
                placeholders={
                    "role": "Target job role",
                    "transcript": "Numbered question/answer transcript",
                },
                sanitization_config={
                    "role": {"max_length": 200, "escape_html": False},
                    "transcript": {"max_length": 20000, "escape_html": False},
                },
            ),
            "resume_analysis": PromptTemplate(
                template="""Analyze this resume for ATS (Applicant Tracking System) compatibility and provide improvement suggestions:

RESUME TEXT:
{resume_text}

Please provide your analysis in the following JSON format:
{{
  "atsScore": [number from 0-100],
  "suggestions": [
    "suggestion 1",
    "suggestion 2",
    "suggestion 3",
    "suggestion 4",
    "suggestion 5"
  ]
}}

Consider these ATS factors:
- Keyword usage and relevance
- Formatting and structure
- Contact information completeness
- Skills section clarity
- Work experience descriptions
- Education details
- Overall readability

Make suggestions specific and actionable.""",
                placeholders={
                    "resume_text": "Plain text extracted from the uploaded resume",
                },
                sanitization_config={
                    "resume_text": {"max_length": 30000, "escape_html": False},
                },
            ),
        }

    def get_question_generation_prompt(self, role: str) -> str:
        """Get the prompt asking for five numbered interview questions for a role."""
        return self._templates["question_generation"].render(role=role)

    def get_interview_analysis_prompt(self, transcript: Sequence[TranscriptEntry], role: str) -> str:
        """
        Get a secure interview analysis prompt with the sanitized transcript embedded.

        Args:
            transcript: Ordered question/answer pairs from the session
            role: Target job role

        Returns:
            str: Secure prompt with sanitized data

        Raises:
            ValueError: If data validation fails
        """
        return self._templates["interview_analysis"].render(
            role=role,
            transcript=format_transcript(transcript),
        )

    def get_resume_analysis_prompt(self, resume_text: str) -> str:
        """Get the ATS analysis prompt for extracted resume text."""
        return self._templates["resume_analysis"].render(resume_text=resume_text)


# Global instance for reuse across the application
secure_prompt_manager = SecurePromptManager()
