"""Playlist fetching service.

Pipeline Overview:
==================
1. fetch_playlist() - Main entry point: runs the pipeline below inside a
                      bounded retry loop
2. _fetch_once() - Resolves the reference, normalizes options, fetches
                   the playlist page and extracts its initial data
3. _fetch_initial_data() - Internal API fallback used when the page did
                           not embed its initial data
4. _raise_for_alerts() - Surfaces explicit upstream errors (private or
                         deleted playlists)
5. _build_playlist() - Walks the sidebar and first page, then hands the
                       continuation token to the paginator
"""

import logging
from typing import Any
from urllib.parse import urlencode

from pydantic import ValidationError

from ytplaylist.client import PlaylistHttpClient
from ytplaylist.config import ScraperConfig
from ytplaylist.exceptions import (
    PlaylistError,
    TransportError,
    TraversalError,
    UnknownPlaylistError,
    UnsupportedPlaylistError,
    UpstreamAlertError,
)
from ytplaylist.models.cancel import CancelToken
from ytplaylist.models.domain import Image, Playlist
from ytplaylist.models.renderers import SidebarPrimaryInfo
from ytplaylist.models.request import NormalizedOptions, ParsedBody, PlaylistOptions
from ytplaylist.services.body import parse_body, scrape_browse_id
from ytplaylist.services.continuation import (
    ContinuationPaginator,
    continuation_token,
    take_items,
)
from ytplaylist.services.options import coerce_options, normalize_options
from ytplaylist.services.resolver import ReferenceResolver
from ytplaylist.utils.text import parse_integer_from_text, parse_text
from ytplaylist.utils.traverse import find_renderer, get_path, require_list

logger = logging.getLogger(__name__)

SIDEBAR_INFO_TAG = "playlistSidebarPrimaryInfoRenderer"
ITEM_SECTION_TAG = "itemSectionRenderer"
VIDEO_LIST_TAG = "playlistVideoListRenderer"

# Failures that may be scrape glitches rather than a missing playlist
_RETRYABLE_ERRORS = (UnsupportedPlaylistError, TraversalError)


def _is_present(value: Any) -> bool:
    """Containers count as present even when empty."""
    return isinstance(value, dict | list) or bool(value)


class PlaylistScraper:
    """Fetches playlists from the YouTube web frontend.

    The whole pipeline (resolve, fetch, parse, paginate) is retried on
    missing initial data and on unexpected response shapes. Resolution
    errors, the initial page request, unknown playlists and explicit
    upstream alerts are never retried.
    """

    def __init__(
        self,
        client: PlaylistHttpClient | None = None,
        config: ScraperConfig | None = None,
    ) -> None:
        """Initialize the scraper.

        Args:
            client: Optional HTTP client. Creates one over requests if not provided.
            config: Optional configuration. Reads the environment if not provided.
        """
        self._config = config or ScraperConfig.from_env()
        self._client = client or PlaylistHttpClient(config=self._config)
        self._resolver = ReferenceResolver(self._client, self._config)
        self._paginator = ContinuationPaginator(self._client, self._config)

    # ============================================================================
    # PUBLIC API
    # ============================================================================

    def resolve_id(self, ref: str, cancel_token: CancelToken | None = None) -> str:
        """Resolve a playlist reference to a canonical playlist ID.

        See ReferenceResolver.resolve for the accepted shapes and errors.
        """
        return self._resolver.resolve(ref, cancel_token=cancel_token)

    def fetch_playlist(
        self,
        ref: str,
        options: PlaylistOptions | dict[str, Any] | None = None,
        retries: int | None = None,
        cancel_token: CancelToken | None = None,
    ) -> Playlist:
        """Fetch a playlist with up to ``options.limit`` items.

        Args:
            ref: Playlist ID, album ID, channel ID, or a YouTube URL.
            options: Limit, locale, timezone and request options.
            retries: Retries after the first attempt. Defaults to the config value.
            cancel_token: Optional token checked before every request.

        Returns:
            The playlist, with items in playlist order.

        Raises:
            InvalidReferenceError, UnsupportedHostError, MixUnsupportedError,
            UnsupportedReferenceShapeError, UnresolvableChannelReferenceError:
                If the reference cannot be resolved.
            UnknownPlaylistError: If the page has no playlist sidebar.
            UpstreamAlertError: If YouTube reports an error for the playlist.
            UnsupportedPlaylistError: If no playlist data was found on any attempt.
            TraversalError: If the response kept missing required fields.
            TransportError: If the playlist page request fails.
            CancellationError: If cancel_token is cancelled.
        """
        retries = self._config.default_retries if retries is None else max(retries, 0)
        attempts = retries + 1
        caller_options = coerce_options(options)

        last_error: PlaylistError = UnsupportedPlaylistError("Unsupported playlist")
        for attempt in range(1, attempts + 1):
            if cancel_token:
                cancel_token.raise_if_cancelled()
            try:
                return self._fetch_once(ref, caller_options, cancel_token)
            except _RETRYABLE_ERRORS as e:
                last_error = e
                if attempt < attempts:
                    logger.warning(
                        "Fetching playlist %s failed (attempt %d/%d): %s",
                        ref,
                        attempt,
                        attempts,
                        e.message,
                    )

        logger.warning("Giving up on playlist %s after %d attempts", ref, attempts)
        raise last_error

    # ============================================================================
    # PIPELINE
    # ============================================================================

    def _fetch_once(
        self,
        ref: str,
        caller_options: PlaylistOptions,
        cancel_token: CancelToken | None,
    ) -> Playlist:
        playlist_id = self._resolver.resolve(
            ref, caller_options.request_options, cancel_token
        )
        # Fresh options on every attempt, so each one starts with a full budget
        opts = normalize_options(playlist_id, caller_options, self._config)

        page_url = self._config.playlist_url + urlencode(opts.query)
        body = self._client.get_text(page_url, opts.request_options, cancel_token)
        parsed = parse_body(body, opts, self._config.defaults)

        if parsed.json_data is None:
            parsed.json_data = self._fetch_initial_data(
                body, playlist_id, parsed, opts, cancel_token
            )
        if parsed.json_data is None:
            raise UnsupportedPlaylistError("Unsupported playlist")

        data = parsed.json_data
        # YouTube may serve its home page (status 204) for missing playlists
        if not _is_present(data.get("sidebar")):
            raise UnknownPlaylistError("Unknown Playlist")
        self._raise_for_alerts(data)

        try:
            return self._build_playlist(playlist_id, data, parsed, opts, cancel_token)
        except TransportError as e:
            raise TraversalError(e.message) from e

    def _fetch_initial_data(
        self,
        body: str,
        playlist_id: str,
        parsed: ParsedBody,
        opts: NormalizedOptions,
        cancel_token: CancelToken | None,
    ) -> dict[str, Any] | None:
        """Ask the browse API for the data the page did not embed.

        Failures are swallowed: the caller treats a None result as
        "unsupported playlist" and retries the whole pipeline.
        """
        browse_id = scrape_browse_id(body) or f"VL{playlist_id}"
        context = parsed.context
        if not parsed.api_key or context is None or not context.client.client_version:
            logger.debug("No initial data and no API key/client version for %s", playlist_id)
            return None

        logger.debug("Falling back to the browse API for %s", browse_id)
        try:
            response = self._client.post_json(
                self._config.browse_api_url + parsed.api_key,
                {"context": context.to_payload(), "browseId": browse_id},
                opts.request_options,
                cancel_token,
            )
        except TransportError as e:
            logger.debug("Browse API fallback failed for %s: %s", browse_id, e)
            return None
        return response if isinstance(response, dict) else None

    def _raise_for_alerts(self, data: dict[str, Any]) -> None:
        """Raise the first error alert of a response without contents."""
        alerts = data.get("alerts")
        if not isinstance(alerts, list) or not alerts or _is_present(data.get("contents")):
            return
        for alert in alerts:
            if get_path(alert, "alertRenderer", "type") == "ERROR":
                raise UpstreamAlertError(parse_text(get_path(alert, "alertRenderer", "text")))

    def _build_playlist(
        self,
        playlist_id: str,
        data: dict[str, Any],
        parsed: ParsedBody,
        opts: NormalizedOptions,
        cancel_token: CancelToken | None,
    ) -> Playlist:
        info = self._parse_sidebar_info(data)

        holder = info.thumbnail_renderer.holder
        widest = holder.thumbnail.widest() if holder else None
        if widest is None:
            raise TraversalError("Missing playlist thumbnail")

        raw_items = self._first_page_items(data)
        items = take_items(raw_items, opts, self._config.video_url)

        token = continuation_token(raw_items)
        if token and opts.limit >= 1:
            if not parsed.api_key or parsed.context is None:
                raise TraversalError("Missing API key for pagination")
            items.extend(
                self._paginator.paginate(
                    parsed.api_key, token, parsed.context, opts, cancel_token
                )
            )

        stats = info.stats
        playlist = Playlist(
            id=playlist_id,
            url=f"{self._config.playlist_url}list={playlist_id}",
            title=parse_text(info.title),
            description=parse_text(info.description) if info.description is not None else None,
            thumbnail=Image(url=widest.url, width=widest.width, height=widest.height),
            total_items=parse_integer_from_text(stats[0]) if stats else 0,
            views=parse_integer_from_text(stats[1]) if len(stats) == 3 else 0,
            items=items,
        )
        logger.debug(
            "Fetched playlist %s: %d items of %d", playlist_id, len(items), playlist.total_items
        )
        return playlist

    def _parse_sidebar_info(self, data: dict[str, Any]) -> SidebarPrimaryInfo:
        sidebar_items = require_list(data, "sidebar", "playlistSidebarRenderer", "items")
        raw_info = find_renderer(sidebar_items, SIDEBAR_INFO_TAG)
        if raw_info is None:
            raise TraversalError("Missing playlist info in sidebar")
        try:
            return SidebarPrimaryInfo.model_validate(raw_info)
        except ValidationError as e:
            raise TraversalError(f"Malformed playlist info: {e.error_count()} errors") from e

    def _first_page_items(self, data: dict[str, Any]) -> list[Any]:
        sections = require_list(
            data,
            "contents",
            "twoColumnBrowseResultsRenderer",
            "tabs",
            0,
            "tabRenderer",
            "content",
            "sectionListRenderer",
            "contents",
        )
        item_section = find_renderer(sections, ITEM_SECTION_TAG)
        if item_section is None:
            raise TraversalError("Empty playlist")
        video_list = find_renderer(require_list(item_section, "contents"), VIDEO_LIST_TAG)
        if video_list is None:
            raise TraversalError("Empty playlist")
        return require_list(video_list, "contents")
