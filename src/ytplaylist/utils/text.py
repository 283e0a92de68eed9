"""Positional text extraction and upstream text helpers.

The playlist page embeds its payload as inline script assignments, so
extraction works on delimiters rather than on an HTML or JS parser.
An empty string always means "not found".
"""

import re
from typing import Any

from pydantic import ValidationError

from ytplaylist.models.renderers import TEXT_ADAPTER

_NON_DIGITS = re.compile(r"\D+")


def between(haystack: str, left: str | re.Pattern[str], right: str) -> str:
    """Return the text between the first ``left`` and the next ``right``.

    Args:
        haystack: Text to search.
        left: Opening delimiter, either a literal string or a compiled pattern.
        right: Closing delimiter, searched for after ``left``.

    Returns:
        The enclosed substring, or an empty string if either delimiter is absent.
    """
    if isinstance(left, re.Pattern):
        match = left.search(haystack)
        if not match:
            return ""
        start = match.end()
    else:
        pos = haystack.find(left)
        if pos == -1:
            return ""
        start = pos + len(left)

    end = haystack.find(right, start)
    if end == -1:
        return ""
    return haystack[start:end]


def parse_text(value: Any) -> str:
    """Flatten an upstream text object (``simpleText`` or ``runs``).

    Returns an empty string for any unrecognized shape.
    """
    if value is None:
        return ""
    try:
        return TEXT_ADAPTER.validate_python(value).content
    except ValidationError:
        return ""


def parse_integer_from_text(value: Any) -> int:
    """Read an integer out of a stat such as ``"1,234 videos"``.

    Every non-digit character is dropped; text without digits yields 0.
    """
    text = value if isinstance(value, str) else parse_text(value)
    digits = _NON_DIGITS.sub("", text)
    return int(digits) if digits else 0
