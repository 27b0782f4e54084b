"""
Description:
This module contains precompiled regex patterns for parsing free-text model output.

Dependencies:
- re: Python's built-in regular expression module for pattern matching.
"""

import re

# Compile regex patterns once for better performance
REGEX_PATTERNS = {
    'numbered_line': re.compile(r"^\d+\."),
    'numbered_prefix': re.compile(r"^\d+\.\s*"),
    'think_block': re.compile(r"<think>.*?</think>", re.DOTALL | re.IGNORECASE),
    'think_tag': re.compile(r"</?think[^>]*>", re.IGNORECASE),
}
