from .question_selector import select_questions
from .interview_scorer import score_interview
from .resume_scorer import score_resume

__all__ = [
    "select_questions",
    "score_interview",
    "score_resume",
]
