"""Data models for ytplaylist.

Public API:
    Playlist, PlaylistItem, Author, Image - Fetched playlist data
    PlaylistOptions, RequestOptions - Caller options
    CancelToken - Cancellation of a running fetch

Internal (not exported):
    renderers.py - View models for the upstream renderer JSON
"""

from ytplaylist.models.cancel import CancelToken
from ytplaylist.models.domain import (
    Author,
    Image,
    Playlist,
    PlaylistItem,
    playlist_json_schema,
)
from ytplaylist.models.request import PlaylistOptions, RequestOptions

__all__ = [
    "Author",
    "CancelToken",
    "Image",
    "Playlist",
    "PlaylistItem",
    "PlaylistOptions",
    "RequestOptions",
    "playlist_json_schema",
]
