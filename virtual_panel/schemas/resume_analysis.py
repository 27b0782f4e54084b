"""
Description:
This module defines the schema for a resume ATS analysis and its success envelope.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.
"""
from typing import List

from pydantic import BaseModel, Field


class ResumeAnalysis(BaseModel):
    atsScore: int = Field(ge=0, le=100, description="Estimated ATS compatibility between 0 and 100")
    suggestions: List[str] = Field(..., min_length=1, description="Actionable improvement suggestions")


class ResumeAnalysisResponse(BaseModel):
    success: bool = True
    analysis: ResumeAnalysis
    message: str
