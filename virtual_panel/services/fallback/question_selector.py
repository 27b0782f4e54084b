"""
Fallback Question Selector

Picks a fixed list of five questions for a role when the generative model cannot be
used. Matching is a case-insensitive substring test in either direction and the first
category in FALLBACK_QUESTIONS order wins.
"""
from typing import List

from virtual_panel.constants.fallback_catalog import DEFAULT_CATEGORY, FALLBACK_QUESTIONS


def select_questions(role: str) -> List[str]:
    """
    Return the fallback questions for a role.

    Args:
        role (str): Free-text job title, e.g. "Senior Software Developer"

    Returns:
        List[str]: A fresh list of five questions; "default" when no category matches
    """
    normalized_role = (role or "").lower()

    for category, questions in FALLBACK_QUESTIONS.items():
        if category in normalized_role or normalized_role in category:
            return list(questions)

    return list(FALLBACK_QUESTIONS[DEFAULT_CATEGORY])
