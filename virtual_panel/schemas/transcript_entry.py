"""
Description:
Schema for a single answered question in an interview transcript.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.
"""
from typing import Optional

from pydantic import BaseModel, Field


class TranscriptEntry(BaseModel):
    question: str = Field(..., description="Question that was asked")
    answer: Optional[str] = Field(default=None, description="Transcribed spoken answer; may be empty")
    questionNumber: Optional[int] = Field(default=None, ge=1, description="1-based position of the question")
