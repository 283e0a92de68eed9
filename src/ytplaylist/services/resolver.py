"""Playlist reference resolution, including channel page lookups."""

import logging
import re

from ytplaylist.client import PlaylistHttpClient
from ytplaylist.config import ScraperConfig
from ytplaylist.exceptions import UnresolvableChannelReferenceError
from ytplaylist.models.cancel import CancelToken
from ytplaylist.models.request import RequestOptions
from ytplaylist.services.options import build_headers
from ytplaylist.utils.url import UPLOADS_PREFIX, ParsedReference, classify_reference

logger = logging.getLogger(__name__)

# Channel pages link their RSS feed with the numeric channel ID
CHANNEL_ON_PAGE_PATTERN = re.compile(r"channel_id=UC([\w-]{22,32})\"")


class ReferenceResolver:
    """Resolves any playlist reference to a canonical playlist ID.

    Clean IDs and URLs are handled offline; user and custom channel URLs
    fetch the channel page to find the channel ID and return the
    channel's uploads playlist.
    """

    def __init__(self, client: PlaylistHttpClient, config: ScraperConfig | None = None) -> None:
        self._client = client
        self._config = config or ScraperConfig()

    def resolve(
        self,
        ref: str,
        request_options: RequestOptions | None = None,
        cancel_token: CancelToken | None = None,
    ) -> str:
        """Resolve a reference to a canonical playlist ID.

        Args:
            ref: Playlist ID, album ID, channel ID, or a YouTube URL.
            request_options: Options for the channel page request, if one is needed.
            cancel_token: Optional token checked before the channel page request.

        Returns:
            The canonical playlist ID.

        Raises:
            InvalidReferenceError: If ref is empty or not a string.
            UnsupportedHostError: If ref is a URL on a non-YouTube host.
            MixUnsupportedError: If the URL's list is a mix.
            UnsupportedReferenceShapeError: If nothing usable was found.
            UnresolvableChannelReferenceError: If the channel page has no channel ID.
            TransportError: If the channel page request fails.
        """
        parsed = classify_reference(ref)
        if not parsed.needs_fetch:
            return parsed.value
        return self._resolve_channel_page(parsed, request_options, cancel_token)

    def _resolve_channel_page(
        self,
        parsed: ParsedReference,
        request_options: RequestOptions | None,
        cancel_token: CancelToken | None,
    ) -> str:
        page_url = f"{self._config.site_url}/{parsed.kind.value}/{parsed.value}"
        logger.debug("Resolving channel page %s", page_url)

        options = request_options or RequestOptions()
        options = options.model_copy(
            update={"headers": build_headers(options.headers, self._config)}
        )
        body = self._client.get_text(page_url, options, cancel_token)
        if match := CHANNEL_ON_PAGE_PATTERN.search(body):
            return UPLOADS_PREFIX + match.group(1)

        raise UnresolvableChannelReferenceError(f"Unable to resolve the ref: {page_url}")
