"""Options normalization: defaults, limit repair, locale, browser headers."""

import logging
import math
from typing import Any

from requests.structures import CaseInsensitiveDict

from ytplaylist.config import ScraperConfig
from ytplaylist.exceptions import MissingPlaylistIdError
from ytplaylist.models.request import NormalizedOptions, PlaylistOptions, RequestOptions
from ytplaylist.utils.cookies import with_consent_cookie

logger = logging.getLogger(__name__)


def coerce_options(options: PlaylistOptions | dict[str, Any] | None) -> PlaylistOptions:
    """Accept options as a model, a plain dict, or None."""
    if options is None:
        return PlaylistOptions()
    if isinstance(options, PlaylistOptions):
        return options
    return PlaylistOptions.model_validate(options)


def _repair_limit(value: Any, default: int) -> int:
    """Return a usable positive limit, falling back to ``default``.

    Numbers and numeric strings are accepted; anything else, and any
    value that is not at least 1, silently becomes the default.
    """
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value if value >= 1 else default
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(number) or int(number) < 1:
        return default
    return int(number)


def build_headers(headers: dict[str, str], config: ScraperConfig) -> dict[str, str]:
    """Add the browser User-Agent and consent cookie to outbound headers.

    Header names are matched case-insensitively; caller values win,
    except that a caller cookie without consent gets the consent appended.
    """
    defaults = config.defaults
    merged: CaseInsensitiveDict[str] = CaseInsensitiveDict(headers)

    if not merged.get("user-agent"):
        merged["user-agent"] = defaults.user_agent
    merged["cookie"] = with_consent_cookie(
        merged.get("cookie"), defaults.consent_cookie, defaults.consent_cookie_name
    )
    return dict(merged)


def normalize_options(
    playlist_id: str,
    options: PlaylistOptions | dict[str, Any] | None = None,
    config: ScraperConfig | None = None,
) -> NormalizedOptions:
    """Merge caller options with defaults.

    Args:
        playlist_id: Canonical playlist ID.
        options: Caller options; unknown keys are ignored.
        config: Scraper configuration holding the defaults.

    Returns:
        Fresh NormalizedOptions with a limit of at least 1.

    Raises:
        MissingPlaylistIdError: If playlist_id is empty or not a string.
    """
    if not isinstance(playlist_id, str) or not playlist_id:
        raise MissingPlaylistIdError("playlist ID is mandatory and must be a string")

    config = config or ScraperConfig()
    opts = coerce_options(options)

    limit = _repair_limit(opts.limit, config.default_limit)
    if opts.limit is not None and limit != opts.limit:
        logger.debug("Invalid limit %r replaced with %d", opts.limit, limit)

    gl = opts.gl if isinstance(opts.gl, str) else None
    hl = opts.hl if isinstance(opts.hl, str) else None
    query = {
        "gl": gl or config.defaults.gl,
        "hl": hl or config.defaults.hl,
        "list": playlist_id,
    }

    utc_offset = opts.utc_offset_minutes
    if (
        isinstance(utc_offset, bool)
        or not isinstance(utc_offset, int | float)
        or not math.isfinite(utc_offset)
    ):
        utc_offset = None

    request_options = opts.request_options or RequestOptions()
    request_options = request_options.model_copy(
        update={"headers": build_headers(request_options.headers, config)}
    )

    return NormalizedOptions(
        limit=limit,
        query=query,
        request_options=request_options,
        gl=gl,
        hl=hl,
        utc_offset_minutes=int(utc_offset) if utc_offset is not None else None,
    )
