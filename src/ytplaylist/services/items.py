"""Conversion of playlist video renderers into PlaylistItem models."""

import logging
from typing import Any
from urllib.parse import urljoin

from pydantic import ValidationError

from ytplaylist.models.domain import Author, PlaylistItem
from ytplaylist.models.renderers import PlaylistVideoRenderer
from ytplaylist.utils.traverse import renderer_tag

logger = logging.getLogger(__name__)

VIDEO_RENDERER_TAG = "playlistVideoRenderer"
BASE_VIDEO_URL = "https://www.youtube.com/watch?v="


def parse_item(raw: Any, base_video_url: str = BASE_VIDEO_URL) -> PlaylistItem | None:
    """Turn one raw playlist entry into a PlaylistItem.

    Malformed entries must never abort a page, so every failure
    collapses to None, meaning "skip this entry".

    Args:
        raw: One element of a playlist video list.
        base_video_url: Watch URL prefix used to build absolute links.

    Returns:
        The parsed item, or None for continuation markers, unplayable,
        upcoming or author-less videos, and anything malformed.
    """
    if renderer_tag(raw) != VIDEO_RENDERER_TAG:
        return None

    try:
        renderer = PlaylistVideoRenderer.model_validate(raw[VIDEO_RENDERER_TAG])
    except ValidationError as e:
        logger.debug("Skipping malformed playlist entry: %d errors", e.error_count())
        return None

    return _build_item(renderer, base_video_url)


def _build_item(renderer: PlaylistVideoRenderer, base_video_url: str) -> PlaylistItem | None:
    if (
        renderer.short_byline_text is None
        or renderer.upcoming_event_data is not None
        or renderer.is_playable is False
    ):
        return None
    if not renderer.short_byline_text.runs:
        return None

    author = renderer.short_byline_text.runs[0]
    widest = renderer.thumbnail.widest()

    try:
        return PlaylistItem(
            id=renderer.video_id,
            title=renderer.title.content if renderer.title else "",
            url=urljoin(base_video_url, renderer.navigation_endpoint.url),
            short_url=base_video_url + renderer.video_id,
            thumbnail=widest.url if widest else "",
            author=Author(
                name=author.text,
                channel_id=author.navigation_endpoint.browse_endpoint.browse_id,
                url=urljoin(base_video_url, author.navigation_endpoint.url),
            ),
            is_live=renderer.is_live,
            duration=renderer.length_text.content if renderer.length_text else None,
        )
    except ValueError as e:
        # ValidationError, or urljoin rejecting a malformed link
        logger.debug("Skipping playlist entry %s: %s", renderer.video_id, e)
        return None
