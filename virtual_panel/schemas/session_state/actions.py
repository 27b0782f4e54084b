"""
Session Actions

The closed set of actions understood by the session reducer. Each action is a small
frozen model tagged with a literal `type`, so a raw dict can be parsed into the right
variant with `parse_action`.

Dependencies:
- pydantic: For tagged-union parsing
- typing: For type hints
"""
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from virtual_panel.schemas.interview_analysis import InterviewAnalysis
from virtual_panel.schemas.resume_analysis import ResumeAnalysis
from virtual_panel.schemas.transcript_entry import TranscriptEntry


class UserUpdate(BaseModel):
    """Partial user fields; unset fields keep their current value."""
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    role: Optional[str] = None


class SetUser(BaseModel):
    model_config = ConfigDict(frozen=True)
    type: Literal["SET_USER"] = "SET_USER"
    payload: UserUpdate


class SetResumeAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)
    type: Literal["SET_RESUME_ANALYSIS"] = "SET_RESUME_ANALYSIS"
    payload: Optional[ResumeAnalysis] = None


class SetInterviewQuestions(BaseModel):
    model_config = ConfigDict(frozen=True)
    type: Literal["SET_INTERVIEW_QUESTIONS"] = "SET_INTERVIEW_QUESTIONS"
    payload: List[str]


class AddInterviewResponse(BaseModel):
    model_config = ConfigDict(frozen=True)
    type: Literal["ADD_INTERVIEW_RESPONSE"] = "ADD_INTERVIEW_RESPONSE"
    payload: TranscriptEntry


class SetInterviewAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)
    type: Literal["SET_INTERVIEW_ANALYSIS"] = "SET_INTERVIEW_ANALYSIS"
    payload: Optional[InterviewAnalysis] = None


class ResetInterview(BaseModel):
    model_config = ConfigDict(frozen=True)
    type: Literal["RESET_INTERVIEW"] = "RESET_INTERVIEW"


SessionAction = Annotated[
    Union[
        SetUser,
        SetResumeAnalysis,
        SetInterviewQuestions,
        AddInterviewResponse,
        SetInterviewAnalysis,
        ResetInterview,
    ],
    Field(discriminator="type"),
]

_action_adapter = TypeAdapter(SessionAction)


def parse_action(raw: dict) -> SessionAction:
    """
    Parse a `{"type": ..., "payload": ...}` dict into its action model.

    Raises:
        pydantic.ValidationError: If the type is unknown or the payload is invalid
    """
    return _action_adapter.validate_python(raw)
