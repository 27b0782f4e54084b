"""
Application State Schemas

Typed, immutable snapshot of one user's rehearsal session: who they are, the last
resume analysis, and the interview in progress. Instances are frozen; the reducer
produces new snapshots instead of editing existing ones.

Dependencies:
- pydantic: For data validation and serialization
- typing: For type hints
"""
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from virtual_panel.schemas.interview_analysis import InterviewAnalysis
from virtual_panel.schemas.resume_analysis import ResumeAnalysis
from virtual_panel.schemas.transcript_entry import TranscriptEntry


class UserProfile(BaseModel):
    """Candidate identity entered on the home page."""
    model_config = ConfigDict(frozen=True)

    name: str = ""
    role: str = ""


class InterviewData(BaseModel):
    """Questions asked, answers collected so far and the final analysis."""
    model_config = ConfigDict(frozen=True)

    questions: Tuple[str, ...] = ()
    responses: Tuple[TranscriptEntry, ...] = ()
    analysis: Optional[InterviewAnalysis] = None


class AppState(BaseModel):
    model_config = ConfigDict(frozen=True)

    user: UserProfile = UserProfile()
    resumeAnalysis: Optional[ResumeAnalysis] = None
    interviewData: InterviewData = InterviewData()
