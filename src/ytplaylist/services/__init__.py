"""Business logic services for ytplaylist.

Public API:
    PlaylistScraper - Resolve, fetch, parse and paginate a playlist

Internal (not exported):
    ReferenceResolver - Reference to playlist ID, with channel page lookups
    ContinuationPaginator - Continuation token pagination
    parse_item, parse_body, normalize_options - Pipeline steps
"""

from ytplaylist.services.playlist import PlaylistScraper

__all__ = [
    "PlaylistScraper",
]
