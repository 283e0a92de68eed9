"""Canned upstream payloads and an in-memory transport."""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

PLAYLIST_ID = "PLRBp0Fe2GpgmsW5VYz6CbJ_l1a8Yv53q3"
API_KEY = "AIzaTestKey"
CLIENT_VERSION = "2.20240101.00.00"


def thumb(url: str, width: int, height: int) -> dict[str, Any]:
    return {"url": url, "width": width, "height": height}


def video_id(n: int) -> str:
    """Build a valid 11 character video ID."""
    return f"video{n:06d}"


def video_renderer(
    vid: str,
    title: str = "Some Video",
    author: str = "Some Channel",
    duration: str | None = "3:45",
    live: bool = False,
    **overrides: Any,
) -> dict[str, Any]:
    renderer: dict[str, Any] = {
        "videoId": vid,
        "title": {"runs": [{"text": title}]},
        "shortBylineText": {
            "runs": [
                {
                    "text": author,
                    "navigationEndpoint": {
                        "browseEndpoint": {"browseId": "UCuAXFkgsw1L7xaCfnd5JJOw"},
                        "commandMetadata": {
                            "webCommandMetadata": {"url": "/@somechannel"}
                        },
                    },
                }
            ]
        },
        "thumbnail": {
            "thumbnails": [
                thumb(f"https://i.ytimg.com/vi/{vid}/default.jpg", 120, 90),
                thumb(f"https://i.ytimg.com/vi/{vid}/hq.jpg", 336, 188),
                thumb(f"https://i.ytimg.com/vi/{vid}/mq.jpg", 246, 138),
            ]
        },
        "navigationEndpoint": {
            "commandMetadata": {
                "webCommandMetadata": {
                    "url": f"/watch?v={vid}&list={PLAYLIST_ID}&index=1"
                }
            }
        },
        "isPlayable": True,
        "thumbnailOverlays": [
            {
                "thumbnailOverlayTimeStatusRenderer": {
                    "style": "LIVE" if live else "DEFAULT"
                }
            }
        ],
    }
    if duration is not None:
        renderer["lengthText"] = {"simpleText": duration}
    renderer.update(overrides)
    return {"playlistVideoRenderer": renderer}


def continuation_renderer(token: str) -> dict[str, Any]:
    return {
        "continuationItemRenderer": {
            "continuationEndpoint": {"continuationCommand": {"token": token}}
        }
    }


def videos(start: int, count: int) -> list[dict[str, Any]]:
    return [video_renderer(video_id(n), title=f"Video {n}") for n in range(start, start + count)]


def initial_data(
    items: list[dict[str, Any]],
    title: str = "Test Playlist",
    stats: list[Any] | None = None,
) -> dict[str, Any]:
    """Build the ytInitialData object of a playlist page."""
    if stats is None:
        stats = [
            {"runs": [{"text": "1,234"}, {"text": " videos"}]},
            {"simpleText": "56,789 views"},
            {"runs": [{"text": "Updated today"}]},
        ]
    return {
        "contents": {
            "twoColumnBrowseResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "content": {
                                "sectionListRenderer": {
                                    "contents": [
                                        {
                                            "itemSectionRenderer": {
                                                "contents": [
                                                    {
                                                        "playlistVideoListRenderer": {
                                                            "contents": items
                                                        }
                                                    }
                                                ]
                                            }
                                        }
                                    ]
                                }
                            }
                        }
                    }
                ]
            }
        },
        "sidebar": {
            "playlistSidebarRenderer": {
                "items": [
                    {
                        "playlistSidebarPrimaryInfoRenderer": {
                            "title": {"runs": [{"text": title}]},
                            "description": {"simpleText": "A description"},
                            "thumbnailRenderer": {
                                "playlistVideoThumbnailRenderer": {
                                    "thumbnail": {
                                        "thumbnails": [
                                            thumb("https://i.ytimg.com/small.jpg", 168, 94),
                                            thumb("https://i.ytimg.com/large.jpg", 336, 188),
                                        ]
                                    }
                                }
                            },
                            "stats": stats,
                        }
                    },
                    {"playlistSidebarSecondaryInfoRenderer": {}},
                ]
            }
        },
    }


def page_html(
    data: dict[str, Any] | None,
    api_key: str | None = API_KEY,
    client_version: str | None = CLIENT_VERSION,
) -> str:
    """Wrap initial data the way the playlist page embeds it."""
    parts = ["<html><head><script>"]
    config = {}
    if api_key:
        config["INNERTUBE_API_KEY"] = api_key
    if client_version:
        config["INNERTUBE_CONTEXT_CLIENT_VERSION"] = client_version
    parts.append(f"ytcfg.set({json.dumps(config, separators=(',', ':'))});")
    parts.append("</script></head><body><script>")
    if data is not None:
        parts.append(f"var ytInitialData = {json.dumps(data)};")
    parts.append("</script></body></html>")
    return "".join(parts)


def continuation_response(items: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "onResponseReceivedActions": [
            {"appendContinuationItemsAction": {"continuationItems": items}}
        ]
    }


class FakeResponse:
    def __init__(self, body: str) -> None:
        self._body = body

    @property
    def text(self) -> str:
        return self._body

    def json(self) -> Any:
        return json.loads(self._body)


@dataclass
class RecordedRequest:
    method: str
    url: str
    headers: dict[str, str]
    data: str | None

    @property
    def payload(self) -> Any:
        return json.loads(self.data) if self.data else None


class FakeTransport:
    """Serves queued responses per HTTP method and records every request.

    GET responses are strings (page bodies), POST responses are
    JSON-serializable objects. Queued exceptions are raised instead.
    """

    def __init__(
        self,
        pages: list[str | Exception] | None = None,
        api: list[Any] | None = None,
    ) -> None:
        self.pages = list(pages or [])
        self.api = list(api or [])
        self.requests: list[RecordedRequest] = []

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        data: str | None = None,
        timeout: float | None = None,
    ) -> FakeResponse:
        self.requests.append(RecordedRequest(method, url, dict(headers or {}), data))
        queue = self.pages if method == "GET" else self.api
        if not queue:
            raise AssertionError(f"Unexpected {method} {url}")
        result = queue.pop(0)
        if isinstance(result, Exception):
            raise result
        if method == "GET":
            return FakeResponse(result)
        return FakeResponse(json.dumps(result))

    def of(self, method: str) -> list[RecordedRequest]:
        return [r for r in self.requests if r.method == method]
