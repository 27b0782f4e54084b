"""
Description:
This module defines the success envelope returned by question generation.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.
"""
from typing import List

from pydantic import BaseModel, Field


class InterviewQuestionsResponse(BaseModel):
    success: bool = True
    questions: List[str] = Field(..., description="Exactly five interview questions")
    message: str
