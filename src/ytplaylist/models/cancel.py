"""Cancellation token for playlist fetches."""

import threading

from ytplaylist.exceptions import CancellationError


class CancelToken:
    """Thread-safe cancellation flag checked before each network round-trip.

    Cancel it from another thread to abandon a running fetch: the next
    page request is never issued and ``CancellationError`` is raised.

    Example:
        >>> token = CancelToken()
        >>> # worker thread
        >>> scraper.fetch_playlist(ref, cancel_token=token)
        >>> # main thread
        >>> token.cancel()
    """

    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise CancellationError once cancel() has been called."""
        if self._event.is_set():
            raise CancellationError("Playlist fetch cancelled")
