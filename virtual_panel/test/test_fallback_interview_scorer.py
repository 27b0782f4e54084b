"""
Test Fallback Interview Scorer

Dependencies:
- pytest: For testing framework
- virtual_panel.services.fallback.interview_scorer: The module being tested
"""
import pytest

from conftest import make_transcript, words
from virtual_panel.schemas.transcript_entry import TranscriptEntry
from virtual_panel.services.fallback import score_interview
from virtual_panel.services.fallback.interview_scorer import average_words_per_answer, round_half_up


def transcript_of(count, words_per_answer):
    return [TranscriptEntry(**entry) for entry in make_transcript(count, words_per_answer)]


class TestScoreInterview:
    """Score arithmetic and templated sections."""

    def test_five_long_answers_capped_at_95(self):
        analysis = score_interview(transcript_of(5, 55), "Software Developer")
        assert analysis.overallScore == 95

    def test_three_short_answers_get_base_score(self):
        analysis = score_interview(transcript_of(3, 10), "Software Developer")
        assert analysis.overallScore == 60

    def test_both_length_bonuses_apply_above_fifty(self):
        """60 + 15 + 10 = 85 for four answers of 51 words."""
        analysis = score_interview(transcript_of(4, 51), "Chef")
        assert analysis.overallScore == 85

    def test_middle_length_bonus_only(self):
        analysis = score_interview(transcript_of(4, 40), "Chef")
        assert analysis.overallScore == 70

    def test_complete_interview_bonus(self):
        analysis = score_interview(transcript_of(5, 10), "Chef")
        assert analysis.overallScore == 75

    def test_empty_transcript(self):
        analysis = score_interview([], "Chef")
        assert analysis.overallScore == 60
        assert "average of 0 words" in analysis.summary

    def test_missing_answers_count_as_zero_words(self):
        transcript = [
            TranscriptEntry(question="Q1?", answer=None),
            TranscriptEntry(question="Q2?", answer=""),
            TranscriptEntry(question="Q3?", answer=words(30)),
        ]
        assert average_words_per_answer(transcript) == 10

    def test_whitespace_runs_do_not_add_words(self):
        transcript = [TranscriptEntry(question="Q?", answer="  one   two\nthree  ")]
        assert average_words_per_answer(transcript) == 3

    def test_sections_have_three_items(self):
        analysis = score_interview(transcript_of(5, 25), "Nurse")
        assert len(analysis.strengths) == 3
        assert len(analysis.weaknesses) == 3
        assert len(analysis.improvements) == 3
        assert len(analysis.resources) == 3

    def test_detailed_answers_branch(self):
        analysis = score_interview(transcript_of(2, 35), "Nurse")
        assert analysis.strengths[2] == "Gave detailed responses"
        assert analysis.weaknesses[0] == "Could improve on specific examples"

    def test_short_answers_branch(self):
        analysis = score_interview(transcript_of(2, 5), "Nurse")
        assert analysis.strengths[2] == "Participated actively"
        assert analysis.weaknesses[0] == "Responses could be more detailed"

    def test_role_and_average_interpolated(self):
        analysis = score_interview(transcript_of(2, 12), "Data Scientist")
        assert "Research more about Data Scientist specific skills and technologies" in analysis.improvements
        assert "average of 12 words per answer" in analysis.summary

    def test_is_deterministic(self):
        transcript = transcript_of(4, 33)
        assert score_interview(transcript, "Chef") == score_interview(transcript, "Chef")


class TestRoundHalfUp:
    @pytest.mark.parametrize("value, expected", [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (0.0, 0)])
    def test_rounds_halves_up(self, value, expected):
        assert round_half_up(value) == expected
