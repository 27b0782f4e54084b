from .app_state import AppState, UserProfile, InterviewData
from .actions import (
    SessionAction,
    UserUpdate,
    SetUser,
    SetResumeAnalysis,
    SetInterviewQuestions,
    AddInterviewResponse,
    SetInterviewAnalysis,
    ResetInterview,
    parse_action,
)

__all__ = [
    "AppState",
    "UserProfile",
    "InterviewData",
    "SessionAction",
    "UserUpdate",
    "SetUser",
    "SetResumeAnalysis",
    "SetInterviewQuestions",
    "AddInterviewResponse",
    "SetInterviewAnalysis",
    "ResetInterview",
    "parse_action",
]
