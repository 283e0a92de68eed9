"""Extraction of the embedded playlist payload and API context from a page."""

import json
import logging
from typing import Any

from ytplaylist.config import ClientDefaults
from ytplaylist.models.request import (
    ClientInfo,
    NormalizedOptions,
    ParsedBody,
    RequestContext,
)
from ytplaylist.utils.text import between

logger = logging.getLogger(__name__)

# (left, right, closing brace cut off by the right delimiter), in priority order
_INITIAL_DATA_DELIMITERS: tuple[tuple[str, str, bool], ...] = (
    ("var ytInitialData = ", "};", True),
    ('window["ytInitialData"] = ', "};", True),
    ("var ytInitialData = ", ";</script>", False),
    ('window["ytInitialData"] = ', ";</script>", False),
)
_API_KEY_MARKERS = ('INNERTUBE_API_KEY":"', 'innertubeApiKey":"')
_CLIENT_VERSION_MARKERS = (
    'INNERTUBE_CONTEXT_CLIENT_VERSION":"',
    'innertube_context_client_version":"',
)
_BROWSE_ID_MARKER = '"key":"browse_id","value":"'


def _parse_between(body: str, left: str, right: str, add_end_curly: bool) -> dict[str, Any] | None:
    data = between(body, left, right)
    if not data:
        return None
    if add_end_curly:
        data += "}"
    try:
        parsed = json.loads(data)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


def _first_between(body: str, markers: tuple[str, ...], right: str = '"') -> str:
    for marker in markers:
        if value := between(body, marker, right):
            return value
    return ""


def build_request_context(
    client_version: str,
    options: NormalizedOptions | None = None,
    defaults: ClientDefaults | None = None,
) -> RequestContext:
    """Build the client context the browse API expects.

    Args:
        client_version: Scraped client version (empty string if unknown).
        options: Normalized options carrying locale and timezone overrides.
        defaults: Client defaults.

    Returns:
        A fresh RequestContext.
    """
    defaults = defaults or ClientDefaults()
    gl = options.gl if options and options.gl else defaults.gl
    hl = options.hl if options and options.hl else defaults.hl
    utc_offset = defaults.utc_offset_minutes
    if options and options.utc_offset_minutes is not None:
        utc_offset = options.utc_offset_minutes

    return RequestContext(
        client=ClientInfo(
            client_name=defaults.client_name,
            client_version=client_version or defaults.client_version,
            gl=gl,
            hl=hl,
            utc_offset_minutes=utc_offset,
        )
    )


def parse_body(
    body: str,
    options: NormalizedOptions | None = None,
    defaults: ClientDefaults | None = None,
) -> ParsedBody:
    """Scan a playlist page for its initial data, API key and client version.

    Never raises: every field that cannot be found is left empty.

    Args:
        body: Raw HTML of the playlist page.
        options: Normalized options used to build the request context.
        defaults: Client defaults.

    Returns:
        ParsedBody with whatever could be extracted.
    """
    json_data = None
    for left, right, add_end_curly in _INITIAL_DATA_DELIMITERS:
        json_data = _parse_between(body, left, right, add_end_curly)
        if json_data is not None:
            break

    api_key = _first_between(body, _API_KEY_MARKERS)
    client_version = _first_between(body, _CLIENT_VERSION_MARKERS)

    logger.debug(
        "Parsed page body: initial data %s, api key %s, client version %r",
        "found" if json_data is not None else "missing",
        "found" if api_key else "missing",
        client_version,
    )
    return ParsedBody(
        json_data=json_data,
        api_key=api_key or None,
        context=build_request_context(client_version, options, defaults),
    )


def scrape_browse_id(body: str) -> str:
    """Return the browse ID advertised in the page, or an empty string."""
    return between(body, _BROWSE_ID_MARKER, '"')
