"""
Test Structured Extraction

This module tests extract_json_object against the kinds of replies models actually
produce: prose around the object, fenced blocks, reasoning tags and broken JSON.

Dependencies:
- pytest: For testing framework
- virtual_panel.helper.extract_json_object: The module being tested
"""
import pytest

from virtual_panel.helper.extract_json_object import extract_json_object, find_balanced_object, strip_thinking
from virtual_panel.schemas.gateway_result import FailureReason


class TestExtractJsonObject:
    """Successful extraction paths."""

    def test_plain_object(self):
        result = extract_json_object('{"atsScore": 80, "suggestions": ["a"]}')
        assert result.ok
        assert result.value == {"atsScore": 80, "suggestions": ["a"]}

    def test_object_wrapped_in_prose_and_fences(self):
        content = 'Here is the analysis:\n```json\n{"atsScore": 72, "suggestions": ["Add keywords"]}\n```\nGood luck!'
        result = extract_json_object(content, ("atsScore", "suggestions"))
        assert result.ok
        assert result.value["atsScore"] == 72

    def test_think_block_is_ignored(self):
        content = '<think>maybe {"atsScore": 1}</think>{"atsScore": 64, "suggestions": ["x"]}'
        result = extract_json_object(content)
        assert result.ok
        assert result.value["atsScore"] == 64

    def test_falls_back_to_first_balanced_object(self):
        """Greedy span covers two objects; the first balanced one is used."""
        content = '{"atsScore": 70, "suggestions": ["a"]} and also {"other": true}'
        result = extract_json_object(content, ("atsScore",))
        assert result.ok
        assert result.value["atsScore"] == 70

    def test_braces_inside_strings(self):
        content = '{"summary": "use {curly} braces", "overallScore": 50} trailing }'
        result = extract_json_object(content)
        assert result.ok
        assert result.value["summary"] == "use {curly} braces"


class TestExtractionFailures:
    """Each documented failure mode."""

    @pytest.mark.parametrize("content", ["", "no json here", "[1, 2, 3]"])
    def test_no_opening_brace(self, content):
        result = extract_json_object(content)
        assert not result.ok
        assert result.reason == FailureReason.NO_OPENING_BRACE

    def test_never_closed(self):
        result = extract_json_object('{"atsScore": 80, "suggestions": ["a"]')
        assert result.reason == FailureReason.UNBALANCED_BRACES

    def test_nested_object_never_closed(self):
        result = extract_json_object('{"a": {"b": 1}')
        assert result.reason == FailureReason.UNBALANCED_BRACES

    def test_malformed_json(self):
        result = extract_json_object("{atsScore: 80, suggestions: ['a']}")
        assert result.reason == FailureReason.PARSE_ERROR

    def test_missing_required_field(self):
        result = extract_json_object('{"atsScore": 80}', ("atsScore", "suggestions"))
        assert result.reason == FailureReason.MISSING_FIELDS
        assert "suggestions" in result.detail

    def test_null_required_field(self):
        result = extract_json_object('{"atsScore": null, "suggestions": []}', ("atsScore", "suggestions"))
        assert result.reason == FailureReason.MISSING_FIELDS

    def test_none_input(self):
        assert extract_json_object(None).reason == FailureReason.NO_OPENING_BRACE


class TestHelpers:
    def test_strip_thinking(self):
        assert strip_thinking("<think>plan</think>  answer ") == "answer"

    def test_find_balanced_object_unclosed(self):
        assert find_balanced_object('{"a": {', 0) is None

    def test_find_balanced_object_with_escaped_quote(self):
        content = '{"a": "quote \\" and }"} rest'
        assert find_balanced_object(content, 0) == '{"a": "quote \\" and }"}'
