"""Checked lookups into loosely-typed upstream JSON."""

from collections.abc import Iterable
from typing import Any

from ytplaylist.exceptions import TraversalError

Key = str | int


def get_path(data: Any, *path: Key) -> Any | None:
    """Follow ``path`` through nested dicts and lists.

    String keys index dicts, integer keys index lists. Any missing key,
    out-of-range index or unexpected container type yields None.
    """
    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return None
        elif not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current


def require_path(data: Any, *path: Key) -> Any:
    """Like get_path, but a missing value raises TraversalError."""
    value = get_path(data, *path)
    if value is None:
        raise TraversalError(f"Missing '{'.'.join(str(k) for k in path)}' in response")
    return value


def require_list(data: Any, *path: Key) -> list[Any]:
    """Like require_path, additionally checking that the value is a list."""
    value = require_path(data, *path)
    if not isinstance(value, list):
        raise TraversalError(f"Expected a list at '{'.'.join(str(k) for k in path)}'")
    return value


def renderer_tag(item: Any) -> str | None:
    """Return the tag of a renderer, i.e. its first top-level key."""
    if not isinstance(item, dict) or not item:
        return None
    return next(iter(item))


def find_renderer(items: Iterable[Any], tag: str) -> dict[str, Any] | None:
    """Find the first renderer tagged ``tag`` and return its body."""
    for item in items:
        if renderer_tag(item) == tag:
            return item[tag]
    return None
