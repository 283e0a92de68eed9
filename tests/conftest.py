"""Test fixtures and configuration."""

from collections.abc import Callable

import pytest
from fakes import FakeTransport

from ytplaylist.client import PlaylistHttpClient
from ytplaylist.config import ScraperConfig
from ytplaylist.models.request import NormalizedOptions, RequestOptions
from ytplaylist.services import PlaylistScraper


@pytest.fixture
def config() -> ScraperConfig:
    """Create a config with keep-alive enabled regardless of the environment."""
    return ScraperConfig()


@pytest.fixture
def transport() -> FakeTransport:
    """Create an empty fake transport; tests queue responses on it."""
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport, config: ScraperConfig) -> PlaylistHttpClient:
    """Create an HTTP client over the fake transport."""
    return PlaylistHttpClient(transport, config)


@pytest.fixture
def scraper(client: PlaylistHttpClient, config: ScraperConfig) -> PlaylistScraper:
    """Create a playlist scraper over the fake transport."""
    return PlaylistScraper(client, config)


@pytest.fixture
def make_opts() -> Callable[..., NormalizedOptions]:
    """Create NormalizedOptions with a given budget."""

    def _make(limit: int = 100) -> NormalizedOptions:
        return NormalizedOptions(
            limit=limit,
            query={"gl": "US", "hl": "en", "list": "PLtest"},
            request_options=RequestOptions(),
        )

    return _make
