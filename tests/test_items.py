"""Tests for playlist item parsing."""

import pytest
from fakes import PLAYLIST_ID, continuation_renderer, video_id, video_renderer

from ytplaylist.services.items import parse_item


class TestParseItem:
    """Tests for parse_item."""

    def test_parses_video(self) -> None:
        """Should build a complete item from a video renderer."""
        vid = video_id(1)
        item = parse_item(video_renderer(vid, title="First", author="Channel"))

        assert item is not None
        assert item.id == vid
        assert item.title == "First"
        assert item.url == f"https://www.youtube.com/watch?v={vid}&list={PLAYLIST_ID}&index=1"
        assert item.short_url == f"https://www.youtube.com/watch?v={vid}"
        assert item.thumbnail == f"https://i.ytimg.com/vi/{vid}/hq.jpg"
        assert item.author.name == "Channel"
        assert item.author.channel_id == "UCuAXFkgsw1L7xaCfnd5JJOw"
        assert item.author.url == "https://www.youtube.com/@somechannel"
        assert item.is_live is False
        assert item.duration == "3:45"

    def test_serializes_with_camel_case_keys(self) -> None:
        """Should dump the public key names."""
        item = parse_item(video_renderer(video_id(1)))
        assert item is not None

        data = item.model_dump(by_alias=True)
        assert {"shortUrl", "isLive"} <= data.keys()
        assert "channelID" in data["author"]

    def test_live_video(self) -> None:
        """Should flag live streams and leave the duration empty."""
        item = parse_item(video_renderer(video_id(1), live=True, duration=None))

        assert item is not None
        assert item.is_live is True
        assert item.duration is None

    def test_title_from_simple_text(self) -> None:
        """Should read titles given as simpleText."""
        raw = video_renderer(video_id(1))
        raw["playlistVideoRenderer"]["title"] = {"simpleText": "Plain"}
        item = parse_item(raw)
        assert item is not None
        assert item.title == "Plain"

    def test_missing_title_becomes_empty(self) -> None:
        """Should keep the item with an empty title."""
        raw = video_renderer(video_id(1))
        del raw["playlistVideoRenderer"]["title"]
        item = parse_item(raw)
        assert item is not None
        assert item.title == ""

    def test_empty_thumbnails(self) -> None:
        """Should use an empty thumbnail URL when none are listed."""
        raw = video_renderer(video_id(1), thumbnail={"thumbnails": []})
        item = parse_item(raw)
        assert item is not None
        assert item.thumbnail == ""

    def test_unplayable_video_is_skipped(self) -> None:
        """Should skip videos that cannot be played."""
        assert parse_item(video_renderer(video_id(1), isPlayable=False)) is None

    @pytest.mark.parametrize("event", [{"startTime": "1700000000"}, {}])
    def test_upcoming_video_is_skipped(self, event: dict) -> None:
        """Should skip premieres and scheduled streams."""
        assert parse_item(video_renderer(video_id(1), upcomingEventData=event)) is None

    def test_video_without_author_is_skipped(self) -> None:
        """Should skip deleted or private videos without a byline."""
        raw = video_renderer(video_id(1))
        del raw["playlistVideoRenderer"]["shortBylineText"]
        assert parse_item(raw) is None

    def test_empty_byline_is_skipped(self) -> None:
        """Should skip bylines without runs."""
        raw = video_renderer(video_id(1), shortBylineText={"runs": []})
        assert parse_item(raw) is None

    def test_continuation_marker_is_skipped(self) -> None:
        """Should return None for continuation markers."""
        assert parse_item(continuation_renderer("token")) is None

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            {},
            {"playlistVideoRenderer": None},
            {"playlistVideoRenderer": {"videoId": "abc"}},
        ],
    )
    def test_malformed_entries(self, raw: object) -> None:
        """Should never raise on malformed entries."""
        assert parse_item(raw) is None

    def test_invalid_video_id_is_skipped(self) -> None:
        """Should skip entries whose ID is not a video ID."""
        assert parse_item(video_renderer("short")) is None

    @pytest.mark.parametrize("field", ["navigationEndpoint", "shortBylineText"])
    def test_malformed_link_is_skipped(self, field: str) -> None:
        """Should skip entries whose links cannot be joined into a URL."""
        raw = video_renderer(video_id(1))
        renderer = raw["playlistVideoRenderer"]
        endpoint = (
            renderer["navigationEndpoint"]
            if field == "navigationEndpoint"
            else renderer["shortBylineText"]["runs"][0]["navigationEndpoint"]
        )
        endpoint["commandMetadata"]["webCommandMetadata"]["url"] = "http://[bad"

        assert parse_item(raw) is None

    def test_custom_base_url(self) -> None:
        """Should build links from the given base URL."""
        vid = video_id(1)
        item = parse_item(video_renderer(vid), "https://yt.example/watch?v=")
        assert item is not None
        assert item.short_url == f"https://yt.example/watch?v={vid}"
        assert item.author.url == "https://yt.example/@somechannel"
