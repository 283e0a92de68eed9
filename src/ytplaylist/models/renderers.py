"""View models for the upstream renderer JSON.

These are internal models: each one validates only the fields the
scraper reads from a given renderer kind and ignores everything else.
They may change whenever YouTube changes its frontend payload.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

__all__ = [
    "Byline",
    "BylineRun",
    "PlaylistVideoRenderer",
    "RunsText",
    "SidebarPrimaryInfo",
    "SimpleText",
    "TEXT_ADAPTER",
    "Thumbnail",
    "ThumbnailList",
]


class RendererModel(BaseModel):
    """Base model for upstream renderer payloads."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


# --- Text ---


class SimpleText(RendererModel):
    """Flat text field."""

    simple_text: str = Field(alias="simpleText")

    @property
    def content(self) -> str:
        return self.simple_text


class TextRun(RendererModel):
    text: str


class RunsText(RendererModel):
    """Text split into formatted segments."""

    runs: list[TextRun]

    @property
    def content(self) -> str:
        return "".join(run.text for run in self.runs)


Text = SimpleText | RunsText
TEXT_ADAPTER: TypeAdapter[Text] = TypeAdapter(Text)


# --- Thumbnails ---


class Thumbnail(RendererModel):
    url: str
    width: int
    height: int


class ThumbnailList(RendererModel):
    thumbnails: list[Thumbnail]

    def widest(self) -> Thumbnail | None:
        """Largest thumbnail by width; the first one wins on ties."""
        if not self.thumbnails:
            return None
        return max(self.thumbnails, key=lambda t: t.width)


# --- Navigation ---


class WebCommandMetadata(RendererModel):
    url: str


class CommandMetadata(RendererModel):
    web_command_metadata: WebCommandMetadata = Field(alias="webCommandMetadata")


class BrowseEndpoint(RendererModel):
    browse_id: str = Field(alias="browseId")


class NavigationEndpoint(RendererModel):
    command_metadata: CommandMetadata = Field(alias="commandMetadata")

    @property
    def url(self) -> str:
        return self.command_metadata.web_command_metadata.url


class ChannelNavigationEndpoint(NavigationEndpoint):
    browse_endpoint: BrowseEndpoint = Field(alias="browseEndpoint")


# --- Playlist video renderer ---


class BylineRun(RendererModel):
    """Author entry of a video (channel name and link)."""

    text: str
    navigation_endpoint: ChannelNavigationEndpoint = Field(alias="navigationEndpoint")


class Byline(RendererModel):
    runs: list[BylineRun]


class TimeStatusOverlay(RendererModel):
    style: str | None = None


class ThumbnailOverlay(RendererModel):
    time_status: TimeStatusOverlay | None = Field(
        default=None, alias="thumbnailOverlayTimeStatusRenderer"
    )


class PlaylistVideoRenderer(RendererModel):
    """One entry of a playlist video list (``playlistVideoRenderer``)."""

    video_id: str = Field(alias="videoId")
    title: Text | None = None
    short_byline_text: Byline | None = Field(default=None, alias="shortBylineText")
    thumbnail: ThumbnailList
    thumbnail_overlays: list[ThumbnailOverlay] = Field(
        default_factory=list, alias="thumbnailOverlays"
    )
    length_text: Text | None = Field(default=None, alias="lengthText")
    navigation_endpoint: NavigationEndpoint = Field(alias="navigationEndpoint")
    is_playable: bool | None = Field(default=None, alias="isPlayable")
    upcoming_event_data: Any = Field(default=None, alias="upcomingEventData")

    @property
    def is_live(self) -> bool:
        return any(
            o.time_status is not None and o.time_status.style == "LIVE"
            for o in self.thumbnail_overlays
        )


# --- Sidebar ---


class ThumbnailHolder(RendererModel):
    thumbnail: ThumbnailList


class PlaylistThumbnailRenderer(RendererModel):
    """Playlist cover: either the first video's thumbnail or a custom one."""

    video: ThumbnailHolder | None = Field(
        default=None, alias="playlistVideoThumbnailRenderer"
    )
    custom: ThumbnailHolder | None = Field(
        default=None, alias="playlistCustomThumbnailRenderer"
    )

    @property
    def holder(self) -> ThumbnailHolder | None:
        return self.video or self.custom


class SidebarPrimaryInfo(RendererModel):
    """Playlist metadata block (``playlistSidebarPrimaryInfoRenderer``).

    ``title`` and ``description`` stay loosely typed because they are
    flattened with the text helper, which tolerates unknown shapes.
    """

    title: Any = None
    description: Any = None
    thumbnail_renderer: PlaylistThumbnailRenderer = Field(alias="thumbnailRenderer")
    stats: list[Any]
