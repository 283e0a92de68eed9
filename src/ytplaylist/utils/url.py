"""Playlist reference classification.

Turns IDs and URLs into canonical playlist IDs without touching the
network. User and custom channel URLs need a page fetch to learn the
channel ID; they are classified here and resolved by
``ytplaylist.services.resolver``.
"""

import re
from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import parse_qs, urljoin, urlparse

from ytplaylist.exceptions import (
    InvalidReferenceError,
    MixUnsupportedError,
    PlaylistError,
    UnsupportedHostError,
    UnsupportedReferenceShapeError,
)

# Matched with fullmatch, so a trailing newline never passes
PLAYLIST_ID_PATTERN = re.compile(r"(FL|PL|UU|LL|RD)[a-zA-Z0-9_-]{16,41}")
ALBUM_ID_PATTERN = re.compile(r"OLAK5uy_[a-zA-Z0-9_-]{33}")
CHANNEL_ID_PATTERN = re.compile(r"UC[a-zA-Z0-9_-]{22,32}")

# Radio/mix lists are generated per viewer and cannot be paginated
MIX_PREFIX = "RD"
UPLOADS_PREFIX = "UU"

# Relative references are resolved against the playlist page
BASE_URL = "https://www.youtube.com/playlist?"

_YOUTUBE_HOSTS = {
    "www.youtube.com",
    "youtube.com",
    "music.youtube.com",
}

# Maximum URL length to prevent potential abuse (standard browser limit)
MAX_URL_LENGTH = 2048


class ReferenceKind(StrEnum):
    """What a reference points to."""

    PLAYLIST = "playlist"  # value is a canonical playlist ID
    USER = "user"  # value is a legacy username, needs a page fetch
    CUSTOM = "c"  # value is a custom channel name, needs a page fetch


@dataclass(frozen=True)
class ParsedReference:
    kind: ReferenceKind
    value: str

    @property
    def needs_fetch(self) -> bool:
        return self.kind is not ReferenceKind.PLAYLIST


def is_playlist_id(value: str) -> bool:
    """Check for a clean playlist or album ID."""
    return bool(PLAYLIST_ID_PATTERN.fullmatch(value) or ALBUM_ID_PATTERN.fullmatch(value))


def channel_to_uploads_id(channel_id: str) -> str:
    """Turn ``UCxxxx`` into the channel's uploads playlist ``UUxxxx``."""
    return UPLOADS_PREFIX + channel_id[2:]


def classify_reference(ref: str) -> ParsedReference:
    """Classify a playlist reference.

    Args:
        ref: Playlist ID, album ID, channel ID, or a YouTube URL.

    Returns:
        The parsed reference. PLAYLIST references carry the final ID.

    Raises:
        InvalidReferenceError: If ref is empty or not a string.
        UnsupportedHostError: If ref is a URL on a non-YouTube host.
        MixUnsupportedError: If the URL's list is a mix.
        UnsupportedReferenceShapeError: If nothing usable was found.
    """
    if not isinstance(ref, str) or not ref:
        raise InvalidReferenceError("The playlist reference has to be a non-empty string")

    if is_playlist_id(ref):
        return ParsedReference(ReferenceKind.PLAYLIST, ref)
    if CHANNEL_ID_PATTERN.fullmatch(ref):
        return ParsedReference(ReferenceKind.PLAYLIST, channel_to_uploads_id(ref))

    if len(ref) > MAX_URL_LENGTH:
        raise UnsupportedReferenceShapeError(f'Unable to find an id in "{ref[:64]}..."')

    try:
        parsed = urlparse(urljoin(BASE_URL, ref))
    except ValueError as e:
        raise UnsupportedReferenceShapeError(f'Unable to parse "{ref}" as a URL') from e
    if parsed.netloc.lower() not in _YOUTUBE_HOSTS:
        raise UnsupportedHostError(f"Not a known YouTube link: {ref}")

    query = parse_qs(parsed.query, keep_blank_values=True)
    if "list" in query:
        list_id = query["list"][0]
        if is_playlist_id(list_id):
            return ParsedReference(ReferenceKind.PLAYLIST, list_id)
        if list_id.startswith(MIX_PREFIX):
            raise MixUnsupportedError("Mixes are not supported")
        raise UnsupportedReferenceShapeError(f"Invalid or unknown list query in url: {ref}")

    # Channel, user or custom channel page: look at the last two segments
    segments = parsed.path[1:].split("/")
    if len(segments) >= 2 and all(segments):
        kind, value = segments[-2], segments[-1]
        if kind == "channel" and CHANNEL_ID_PATTERN.fullmatch(value):
            return ParsedReference(ReferenceKind.PLAYLIST, channel_to_uploads_id(value))
        if kind == "user":
            return ParsedReference(ReferenceKind.USER, value)
        if kind == "c":
            return ParsedReference(ReferenceKind.CUSTOM, value)

    raise UnsupportedReferenceShapeError(f'Unable to find an id in "{ref}"')


def validate_id(ref: str) -> bool:
    """Check whether a reference looks resolvable, without any network access.

    User and custom channel URLs count as valid even though resolving
    them requires a page fetch that may still fail.

    Args:
        ref: Playlist ID, album ID, channel ID, or a YouTube URL.

    Returns:
        True if ``resolve_id`` would attempt the reference, False otherwise.
    """
    try:
        classify_reference(ref)
    except PlaylistError:
        return False
    return True
