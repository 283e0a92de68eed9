"""Custom exceptions for ytplaylist.

All exceptions include an HTTP status_code attribute for easy
integration with web frameworks like FastAPI.
"""


class PlaylistError(Exception):
    """Base exception for ytplaylist.

    Attributes:
        status_code: HTTP status code for API error responses.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# --- Resolution errors (never retried) ---


class InvalidReferenceError(PlaylistError):
    """Playlist reference is empty or not a string."""

    status_code: int = 400  # Bad Request


class UnsupportedHostError(PlaylistError):
    """URL points to a host that is not a known YouTube host."""

    status_code: int = 400  # Bad Request


class UnsupportedReferenceShapeError(PlaylistError):
    """Reference matches neither an ID pattern nor a resolvable URL shape."""

    status_code: int = 400  # Bad Request


class MixUnsupportedError(UnsupportedReferenceShapeError):
    """URL encodes a radio/mix list (``RD`` prefix), which is not supported."""


class UnresolvableChannelReferenceError(PlaylistError):
    """A user or custom channel page did not expose a channel ID."""

    status_code: int = 404  # Not Found


class MissingPlaylistIdError(PlaylistError):
    """Options were normalized without a playlist ID."""

    status_code: int = 400  # Bad Request


# --- Fetch errors ---


class UnsupportedPlaylistError(PlaylistError):
    """No playlist data could be extracted, even through the internal API.

    Retried by the scraper, surfaced once retries are exhausted.
    """

    status_code: int = 422  # Unprocessable Entity


class UnknownPlaylistError(PlaylistError):
    """The page has no playlist sidebar: the playlist is missing or removed.

    Never retried.
    """

    status_code: int = 404  # Not Found


class UpstreamAlertError(PlaylistError):
    """YouTube answered with an explicit error alert (e.g. private playlist).

    The message is the alert text, verbatim. Never retried.
    """

    status_code: int = 404  # Not Found


class TraversalError(PlaylistError):
    """A required field was missing while walking the playlist response.

    Retried by the scraper, surfaced once retries are exhausted.
    """

    status_code: int = 502  # Bad Gateway (upstream shape changed)


class TransportError(PlaylistError):
    """The HTTP transport failed or returned an undecodable body."""

    status_code: int = 502  # Bad Gateway (upstream failure)


class CancellationError(PlaylistError):
    """Operation was cancelled.

    Raised when a fetch is cancelled via a CancelToken.
    """

    status_code: int = 499  # Client Closed Request (nginx convention)
