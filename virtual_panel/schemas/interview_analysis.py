"""
Description:
This module defines the schema for a completed interview analysis and the success
envelope that carries it.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.
"""
from typing import List

from pydantic import BaseModel, Field


class InterviewAnalysis(BaseModel):
    overallScore: int = Field(ge=0, le=100, description="Interview score between 0 and 100")
    strengths: List[str] = Field(..., description="Strengths of the candidate")
    weaknesses: List[str] = Field(..., description="Weaknesses of the candidate")
    improvements: List[str] = Field(..., description="Areas for improvement")
    resources: List[str] = Field(..., description="Suggested learning resources")
    summary: str = Field(..., description="Overall performance summary")


class InterviewAnalysisResponse(BaseModel):
    success: bool = True
    analysis: InterviewAnalysis
    message: str
