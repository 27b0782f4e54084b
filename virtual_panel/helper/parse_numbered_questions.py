"""
Description:
Extracts interview questions from a numbered-list model reply.

Only lines that start with "<integer>." are kept; the number prefix is removed and any
question of 10 characters or fewer is discarded as noise.

Dependencies:
- virtual_panel.constants.regex_patterns: For the numbered-line patterns.
"""
from typing import List

from virtual_panel.constants.regex_patterns import REGEX_PATTERNS

MIN_QUESTION_LENGTH = 10


def parse_numbered_questions(content: str) -> List[str]:
    questions = []
    for line in content.split('\n'):
        line = line.strip()
        if not line or not REGEX_PATTERNS['numbered_line'].match(line):
            continue
        question = REGEX_PATTERNS['numbered_prefix'].sub('', line, count=1).strip()
        if len(question) > MIN_QUESTION_LENGTH:
            questions.append(question)
    return questions
