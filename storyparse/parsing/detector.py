"""Decide whether a model response should go down the JSON or the text path."""

import re
from typing import Optional

from ..config.constants import DEFAULT_JSON_LENGTH_CEILING

# Structural signals that a response is (or contains) JSON
JSON_INDICATORS = (
    re.compile(r'^\s*\{.*\}\s*$', re.DOTALL),      # whole string is an object
    re.compile(r'^\s*\[.*\]\s*$', re.DOTALL),      # whole string is an array
    re.compile(r'"[\w\s]+"\s*:\s*'),               # at least one "key": value pair
)


def has_json_indicators(content: str) -> bool:
    return any(pattern.search(content) for pattern in JSON_INDICATORS)


def detect_format(content: str, length_ceiling: Optional[int] = None) -> str:
    """
    Guess the format of a trimmed model response.

    Args:
        content: Trimmed, non-empty response text
        length_ceiling: Responses this long or longer are assumed to be narrative

    Returns:
        'json' or 'text'
    """
    ceiling = length_ceiling if length_ceiling is not None else DEFAULT_JSON_LENGTH_CEILING

    if has_json_indicators(content) and len(content) < ceiling:
        return 'json'

    return 'text'
