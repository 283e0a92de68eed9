"""Utility functions for ytplaylist.

Available via `from ytplaylist.utils import ...` for power users.
Not re-exported at the top-level `ytplaylist` package.
"""

from ytplaylist.utils.cookies import load_cookie_header, with_consent_cookie
from ytplaylist.utils.text import between, parse_integer_from_text, parse_text
from ytplaylist.utils.traverse import find_renderer, get_path, require_path
from ytplaylist.utils.url import classify_reference, is_playlist_id, validate_id

__all__ = [
    "between",
    "classify_reference",
    "find_renderer",
    "get_path",
    "is_playlist_id",
    "load_cookie_header",
    "parse_integer_from_text",
    "parse_text",
    "require_path",
    "validate_id",
    "with_consent_cookie",
]
