"""
Fallback Interview Scorer

Deterministic interview analysis computed from answer lengths alone. Used whenever the
generative model is unavailable or its reply cannot be used.

Scoring:
- base 60
- +15 when the average answer is longer than 50 words
- +10 when the average answer is longer than 30 words (also applies above 50)
- +15 when all five questions were answered
- capped at 95
"""
import math
from typing import Sequence

from virtual_panel.schemas.interview_analysis import InterviewAnalysis
from virtual_panel.schemas.transcript_entry import TranscriptEntry

BASE_SCORE = 60
MAX_SCORE = 95
FULL_INTERVIEW_LENGTH = 5


def count_words(answer: str) -> int:
    return len(answer.split()) if answer else 0


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def average_words_per_answer(transcript: Sequence[TranscriptEntry]) -> int:
    word_count = sum(count_words(entry.answer) for entry in transcript)
    return round_half_up(word_count / max(len(transcript), 1))


def score_interview(transcript: Sequence[TranscriptEntry], role: str) -> InterviewAnalysis:
    """
    Score a transcript without the model.

    Args:
        transcript: Ordered question/answer pairs; may be empty
        role: Target job role, interpolated into the improvement tips

    Returns:
        InterviewAnalysis: Same inputs always give the same analysis
    """
    avg_words = average_words_per_answer(transcript)

    score = BASE_SCORE
    if avg_words > 50:
        score += 15
    if avg_words > 30:
        score += 10
    if len(transcript) == FULL_INTERVIEW_LENGTH:
        score += 15

    return InterviewAnalysis(
        overallScore=min(score, MAX_SCORE),
        strengths=[
            "Completed the interview process",
            "Provided responses to all questions",
            "Gave detailed responses" if avg_words > 30 else "Participated actively",
        ],
        weaknesses=[
            "Responses could be more detailed" if avg_words < 20 else "Could improve on specific examples",
            "Consider adding more concrete examples",
            "Work on structuring responses better",
        ],
        improvements=[
            "Practice the STAR method (Situation, Task, Action, Result) for behavioral questions",
            f"Research more about {role} specific skills and technologies",
            "Prepare specific examples from your experience",
        ],
        resources=[
            "Cracking the Coding Interview (if technical role)",
            "LinkedIn Learning courses for professional skills",
            "Industry-specific blogs and publications",
        ],
        summary=(
            "You completed the interview and provided responses to all questions. "
            f"With an average of {avg_words} words per answer, there's room to develop more "
            "comprehensive responses with specific examples."
        ),
    )
