"""HTTP client wrapper around a pluggable transport."""

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import requests

from ytplaylist.config import ScraperConfig
from ytplaylist.exceptions import TransportError
from ytplaylist.models.cancel import CancelToken
from ytplaylist.models.request import RequestOptions

logger = logging.getLogger(__name__)


class TransportResponse(Protocol):
    """Response of a transport call: ``requests.Response`` fits."""

    @property
    def text(self) -> str: ...

    def json(self) -> Any: ...


class HttpTransport(Protocol):
    """Protocol for the HTTP transport.

    ``requests.Session`` implements it and is the default. Implement this
    protocol to plug in another client or a canned transport in tests.
    """

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        data: str | None = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        """Send a request and return its response."""
        ...


class PlaylistHttpClient:
    """Issues the page and browse API requests with consistent error handling.

    Every transport failure is wrapped in TransportError, and the
    optional cancel token is checked before each request is sent.
    """

    def __init__(
        self,
        transport: HttpTransport | None = None,
        config: ScraperConfig | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            transport: Optional transport. Creates a requests.Session if not provided.
            config: Optional scraper configuration. Reads the environment if not provided.
        """
        self._transport: HttpTransport = transport or requests.Session()
        self._config = config or ScraperConfig.from_env()

    def get_text(
        self,
        url: str,
        request_options: RequestOptions | None = None,
        cancel_token: CancelToken | None = None,
    ) -> str:
        """GET a page and return its body.

        Raises:
            TransportError: If the request fails.
            CancellationError: If cancel_token was cancelled.
        """
        response = self._send("GET", url, request_options, None, cancel_token)
        return response.text

    def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        request_options: RequestOptions | None = None,
        cancel_token: CancelToken | None = None,
    ) -> Any:
        """POST a JSON payload and decode the JSON response.

        Raises:
            TransportError: If the request fails or the response is not JSON.
            CancellationError: If cancel_token was cancelled.
        """
        response = self._send(
            "POST",
            url,
            request_options,
            json.dumps(payload),
            cancel_token,
            content_type="application/json",
        )
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON response from {url}: {e}") from e

    def _send(
        self,
        method: str,
        url: str,
        request_options: RequestOptions | None,
        data: str | None,
        cancel_token: CancelToken | None,
        content_type: str | None = None,
    ) -> TransportResponse:
        if cancel_token:
            cancel_token.raise_if_cancelled()

        options = request_options or RequestOptions()
        headers = dict(options.headers)
        if content_type:
            headers["Content-Type"] = content_type
        if options.keepalive is False or self._config.disable_keepalive:
            headers["Connection"] = "close"
        timeout = options.timeout if options.timeout is not None else self._config.timeout

        logger.debug("%s %s", method, url)
        try:
            return self._transport.request(
                method, url, headers=headers, data=data, timeout=timeout
            )
        except (requests.RequestException, OSError) as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise TransportError(f"Request to {url} failed: {e}") from e
