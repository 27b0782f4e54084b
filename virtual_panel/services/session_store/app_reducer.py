"""
Session Reducer

Pure transition function for the rehearsal session state. Given a state and one action
from the closed SessionAction set it returns a new AppState; the input state is never
modified.

Dependencies:
- virtual_panel.schemas.session_state: For the state and action models
"""
from virtual_panel.schemas.session_state import (
    AddInterviewResponse,
    AppState,
    InterviewData,
    ResetInterview,
    SessionAction,
    SetInterviewAnalysis,
    SetInterviewQuestions,
    SetResumeAnalysis,
    SetUser,
)


def app_reducer(state: AppState, action: SessionAction) -> AppState:
    """
    Apply one action to the session state.

    Raises:
        ValueError: If the action is not one of the SessionAction variants
    """
    if isinstance(action, SetUser):
        changes = action.payload.model_dump(exclude_none=True)
        return state.model_copy(update={"user": state.user.model_copy(update=changes)})

    if isinstance(action, SetResumeAnalysis):
        return state.model_copy(update={"resumeAnalysis": action.payload})

    if isinstance(action, SetInterviewQuestions):
        interview_data = state.interviewData.model_copy(update={"questions": tuple(action.payload)})
        return state.model_copy(update={"interviewData": interview_data})

    if isinstance(action, AddInterviewResponse):
        responses = state.interviewData.responses + (action.payload,)
        interview_data = state.interviewData.model_copy(update={"responses": responses})
        return state.model_copy(update={"interviewData": interview_data})

    if isinstance(action, SetInterviewAnalysis):
        interview_data = state.interviewData.model_copy(update={"analysis": action.payload})
        return state.model_copy(update={"interviewData": interview_data})

    if isinstance(action, ResetInterview):
        return state.model_copy(update={"interviewData": InterviewData()})

    raise ValueError(f"Unsupported session action: {action!r}")
