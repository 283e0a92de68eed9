"""Domain models for ytplaylist.

These are the public models that represent the output of the library.
Attribute names are snake_case; ``model_dump(by_alias=True)`` produces
the camelCase keys (``shortUrl``, ``channelID``, ``isLive``).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["Author", "Image", "Playlist", "PlaylistItem", "playlist_json_schema"]

# YouTube video IDs are always 11 URL-safe base64 characters
VIDEO_ID_PATTERN = r"^[A-Za-z0-9_-]{11}$"


class DomainModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Image(DomainModel):
    """Playlist cover image."""

    url: str | None
    width: int
    height: int


class Author(DomainModel):
    """Channel that uploaded a playlist item."""

    name: str
    channel_id: str = Field(alias="channelID")
    url: str


class PlaylistItem(DomainModel):
    """A single video in a playlist.

    Attributes:
        id: Video ID.
        title: Video title (empty string when the title was unreadable).
        url: Full watch URL, including playlist parameters.
        short_url: Bare watch URL for the video.
        thumbnail: URL of the widest thumbnail, or an empty string.
        author: Uploading channel.
        is_live: Whether the video is a live stream.
        duration: Display duration such as ``"3:45"``, None for live streams.
    """

    id: str = Field(pattern=VIDEO_ID_PATTERN)
    title: str
    url: str
    short_url: str = Field(alias="shortUrl")
    thumbnail: str
    author: Author
    is_live: bool = Field(alias="isLive")
    duration: str | None


class Playlist(BaseModel):
    """A playlist with its metadata and (up to the requested limit) items.

    ``total_items`` and ``views`` are the totals reported by YouTube,
    independent of how many items were actually fetched.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    url: str
    title: str
    description: str | None = None
    thumbnail: Image
    total_items: int
    views: int
    items: list[PlaylistItem] = Field(default_factory=list)

    @field_validator("total_items", "views")
    @classmethod
    def non_negative(cls, v: int) -> int:
        """Totals parsed from stat text can never be negative."""
        if v < 0:
            raise ValueError("must not be negative")
        return v


def playlist_json_schema() -> dict[str, Any]:
    """JSON schema of the serialized Playlist (camelCase item keys)."""
    return Playlist.model_json_schema(by_alias=True)
