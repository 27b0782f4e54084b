"""
Fallback Resume Scorer

Keyword and layout presence checks that approximate how well a resume would parse in
an applicant tracking system. Suggestions are the same fixed list for every resume.
"""
from virtual_panel.constants.fallback_catalog import RESUME_SUGGESTIONS
from virtual_panel.schemas.resume_analysis import ResumeAnalysis

BASE_SCORE = 40
MAX_SCORE = 95
SECTION_BONUS = 10
FORMAT_BONUS = 5
MIN_STRUCTURED_LINES = 20

# Each entry scores once if any of its keywords appears.
SECTION_CHECKS = (
    ('experience', 'work'),
    ('education', 'degree'),
    ('skills', 'technical'),
    ('project', 'achievement'),
)


def score_resume(resume_text: str) -> ResumeAnalysis:
    text = resume_text.lower()
    score = BASE_SCORE

    for keywords in SECTION_CHECKS:
        if any(keyword in text for keyword in keywords):
            score += SECTION_BONUS

    # Contact details only count when both are present.
    if 'email' in text and 'phone' in text:
        score += SECTION_BONUS

    if '•' in resume_text or '-' in resume_text:
        score += FORMAT_BONUS
    if len(resume_text.split('\n')) > MIN_STRUCTURED_LINES:
        score += FORMAT_BONUS

    return ResumeAnalysis(
        atsScore=min(score, MAX_SCORE),
        suggestions=list(RESUME_SUGGESTIONS),
    )
