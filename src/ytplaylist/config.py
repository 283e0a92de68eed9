"""Configuration for ytplaylist."""

import os
from dataclasses import dataclass, field

# Environment variable that disables HTTP keep-alive for every request
DISABLE_KEEPALIVE_ENV = "YTPLAYLIST_DISABLE_KEEPALIVE"


@dataclass(frozen=True)
class ClientDefaults:
    """Values the upstream site expects from a regular desktop browser.

    Attributes:
        user_agent: User-Agent sent when the caller provides none.
        consent_cookie: Cookie that skips the legal consent interstitial.
        consent_cookie_name: Name part of the consent cookie, used to detect it.
        client_name: Client name reported in the internal API context.
        client_version: Fallback client version when none could be scraped.
        gl: Default content region.
        hl: Default interface language.
        utc_offset_minutes: Default timezone offset reported to the API.
    """

    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/87.0.4280.101 Safari/537.36"
    )
    consent_cookie: str = "SOCS=CAI"
    consent_cookie_name: str = "SOCS="
    client_name: str = "WEB"
    client_version: str = ""
    gl: str = "US"
    hl: str = "en"
    utc_offset_minutes: int = -300


@dataclass(frozen=True)
class ScraperConfig:
    """Playlist scraper configuration.

    Attributes:
        playlist_url: Base URL of the playlist HTML page (query appended).
        browse_api_url: Internal browse endpoint, API key appended.
        video_url: Base URL for watch links.
        site_url: Root URL used for channel profile pages.
        default_limit: Item limit used when the caller gives none or an invalid one.
        default_retries: Whole-pipeline retries when none are given.
        disable_keepalive: Send ``Connection: close`` on every request.
        timeout: Per-request timeout in seconds handed to the transport.
        defaults: Browser-like client defaults.
    """

    playlist_url: str = "https://www.youtube.com/playlist?"
    browse_api_url: str = "https://www.youtube.com/youtubei/v1/browse?key="
    video_url: str = "https://www.youtube.com/watch?v="
    site_url: str = "https://www.youtube.com"
    default_limit: int = 100
    default_retries: int = 3
    disable_keepalive: bool = False
    timeout: float | None = None
    defaults: ClientDefaults = field(default_factory=ClientDefaults)

    @classmethod
    def from_env(cls) -> "ScraperConfig":
        """Build a config honouring process-level environment toggles."""
        disable = os.environ.get(DISABLE_KEEPALIVE_ENV, "").strip().lower() == "true"
        return cls(disable_keepalive=disable)
