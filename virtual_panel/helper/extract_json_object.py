"""
Description:
Best-effort extraction of a JSON object from free-text model output.

Model replies are untrusted strings: they may wrap the object in prose, markdown fences
or <think> blocks, or may not contain an object at all. This module pulls out the first
usable object and reports exactly why it could not when it fails.

Failure modes (FailureReason):
- NO_OPENING_BRACE: the text contains no "{".
- UNBALANCED_BRACES: there is no closing brace for the object that was opened.
- PARSE_ERROR: a candidate span was found but is not a valid JSON object.
- MISSING_FIELDS: the object parsed but a required field is absent or null.

Arguments:
- content: Raw text returned by the model.
- required_fields: Keys that must be present with a non-null value.

Returns:
- GatewayResult[dict] holding the parsed object or the failure reason.

Dependencies:
- json: For decoding the candidate span.
- virtual_panel.constants.regex_patterns: For stripping <think> blocks.
- virtual_panel.schemas.gateway_result: For the result type.
- loguru: For debug logging of the extraction path.
"""
import json
from typing import Iterable, Optional

from loguru import logger

from virtual_panel.constants.regex_patterns import REGEX_PATTERNS
from virtual_panel.schemas.gateway_result import FailureReason, GatewayResult


def strip_thinking(content: str) -> str:
    """Remove <think>...</think> reasoning blocks some models emit before the answer."""
    content = REGEX_PATTERNS['think_block'].sub('', content)
    content = REGEX_PATTERNS['think_tag'].sub('', content)
    return content.strip()


def find_balanced_object(content: str, start: int) -> Optional[str]:
    """
    Return the brace-balanced span beginning at `start`, or None if it never closes.

    Braces inside JSON string literals are ignored.
    """
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(content)):
        char = content[i]
        if in_string:
            if escaped:
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
            if depth == 0:
                return content[start:i + 1]
    return None


def _decode_object(candidate: str):
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None


def extract_json_object(content: str, required_fields: Iterable[str] = ()) -> GatewayResult[dict]:
    if not content or not isinstance(content, str):
        return GatewayResult.failure(FailureReason.NO_OPENING_BRACE, "Empty model response")

    content = strip_thinking(content)

    json_start = content.find('{')
    if json_start == -1:
        return GatewayResult.failure(FailureReason.NO_OPENING_BRACE, "No JSON object found in response")

    json_end = content.rfind('}')
    if json_end < json_start:
        return GatewayResult.failure(FailureReason.UNBALANCED_BRACES, "JSON object is never closed")

    # Greedy span first: first "{" to last "}".
    data = _decode_object(content[json_start:json_end + 1])

    if data is None:
        balanced = find_balanced_object(content, json_start)
        if balanced is None:
            return GatewayResult.failure(FailureReason.UNBALANCED_BRACES, "JSON object is never closed")
        logger.debug("Greedy JSON span failed to parse, retrying with first balanced object")
        data = _decode_object(balanced)
        if data is None:
            return GatewayResult.failure(FailureReason.PARSE_ERROR, "Response contains malformed JSON")

    missing = [field for field in required_fields if data.get(field) is None]
    if missing:
        return GatewayResult.failure(
            FailureReason.MISSING_FIELDS,
            f"Missing required fields: {', '.join(missing)}",
        )

    return GatewayResult.success(data)
