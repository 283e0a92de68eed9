"""ytplaylist - Fetch YouTube playlists without an API key.

This library resolves playlist references (IDs, channel IDs and URLs),
scrapes the playlist page and follows the internal browse API's
continuation tokens, returning validated pydantic models.

Designed for use as a library in applications, with a CLI for
debugging and development.

Examples:
    Fetch the first 50 items of a playlist:
    ```python
    from ytplaylist import fetch_playlist

    playlist = fetch_playlist("https://www.youtube.com/playlist?list=PL...", {"limit": 50})
    for item in playlist.items:
        print(f"{item.author.name} - {item.title}")
    ```

    Reuse one scraper (and its HTTP session) for several playlists:
    ```python
    from ytplaylist import create_scraper, PlaylistOptions

    scraper = create_scraper()
    playlist = scraper.fetch_playlist("UCuAXFkgsw1L7xaCfnd5JJOw", PlaylistOptions(limit=10))
    ```
"""

from typing import Any

from ytplaylist.client import HttpTransport, PlaylistHttpClient
from ytplaylist.config import ClientDefaults, ScraperConfig
from ytplaylist.exceptions import (
    CancellationError,
    InvalidReferenceError,
    MissingPlaylistIdError,
    MixUnsupportedError,
    PlaylistError,
    TransportError,
    TraversalError,
    UnknownPlaylistError,
    UnresolvableChannelReferenceError,
    UnsupportedHostError,
    UnsupportedPlaylistError,
    UnsupportedReferenceShapeError,
    UpstreamAlertError,
)
from ytplaylist.models import (
    Author,
    CancelToken,
    Image,
    Playlist,
    PlaylistItem,
    PlaylistOptions,
    RequestOptions,
    playlist_json_schema,
)
from ytplaylist.services import PlaylistScraper
from ytplaylist.utils.url import validate_id


def create_scraper(
    config: ScraperConfig | None = None,
    transport: HttpTransport | None = None,
) -> PlaylistScraper:
    """Create a configured playlist scraper.

    This is the recommended way to create a scraper for library usage.

    Args:
        config: Optional configuration. Reads the environment if not provided.
        transport: Optional HTTP transport. Uses a requests.Session if not provided.

    Returns:
        A configured PlaylistScraper instance.
    """
    config = config or ScraperConfig.from_env()
    return PlaylistScraper(PlaylistHttpClient(transport, config), config)


def resolve_id(ref: str, transport: HttpTransport | None = None) -> str:
    """Resolve a playlist reference to a canonical playlist ID.

    User and custom channel URLs fetch the channel page; everything
    else is resolved offline.

    Args:
        ref: Playlist ID, album ID, channel ID, or a YouTube URL.
        transport: Optional HTTP transport.

    Returns:
        The canonical playlist ID.
    """
    return create_scraper(transport=transport).resolve_id(ref)


def fetch_playlist(
    ref: str,
    options: PlaylistOptions | dict[str, Any] | None = None,
    retries: int = 3,
    transport: HttpTransport | None = None,
    cancel_token: CancelToken | None = None,
) -> Playlist:
    """Fetch a playlist with up to ``options.limit`` items (100 by default).

    Args:
        ref: Playlist ID, album ID, channel ID, or a YouTube URL.
        options: Limit, locale (gl/hl), timezone and request options.
        retries: Whole-pipeline retries after the first attempt.
        transport: Optional HTTP transport.
        cancel_token: Optional token to abandon the fetch from another thread.

    Returns:
        The playlist.
    """
    scraper = create_scraper(transport=transport)
    return scraper.fetch_playlist(ref, options, retries=retries, cancel_token=cancel_token)


__all__ = [
    "Author",
    "CancelToken",
    "CancellationError",
    "ClientDefaults",
    "HttpTransport",
    "Image",
    "InvalidReferenceError",
    "MissingPlaylistIdError",
    "MixUnsupportedError",
    "Playlist",
    "PlaylistError",
    "PlaylistItem",
    "PlaylistOptions",
    "PlaylistScraper",
    "RequestOptions",
    "ScraperConfig",
    "TransportError",
    "TraversalError",
    "UnknownPlaylistError",
    "UnresolvableChannelReferenceError",
    "UnsupportedHostError",
    "UnsupportedPlaylistError",
    "UnsupportedReferenceShapeError",
    "UpstreamAlertError",
    "create_scraper",
    "fetch_playlist",
    "playlist_json_schema",
    "resolve_id",
    "validate_id",
]
