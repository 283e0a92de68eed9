"""Request-side models: caller options, normalized options, API context."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "ClientInfo",
    "NormalizedOptions",
    "ParsedBody",
    "PlaylistOptions",
    "RequestContext",
    "RequestOptions",
]


class RequestOptions(BaseModel):
    """Outbound request configuration handed to the transport.

    Attributes:
        headers: Extra request headers (User-Agent, Cookie, ...).
        keepalive: Set to False to send ``Connection: close``.
        timeout: Per-request timeout in seconds. None leaves it to the transport.
    """

    model_config = ConfigDict(extra="ignore")

    headers: dict[str, str] = Field(default_factory=dict)
    keepalive: bool | None = None
    timeout: float | None = None


class PlaylistOptions(BaseModel):
    """Options accepted by ``fetch_playlist``.

    Values are deliberately loosely typed: invalid limits are repaired
    and non-string locales are ignored during normalization instead of
    being rejected here. Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    limit: Any = None
    gl: Any = None
    hl: Any = None
    utc_offset_minutes: Any = Field(default=None, alias="utcOffsetMinutes")
    request_options: RequestOptions | None = Field(default=None, alias="requestOptions")


class NormalizedOptions(BaseModel):
    """Options after defaults and validation were applied.

    ``limit`` is the remaining item budget of one fetch. It is decremented
    in place by the first page and every continuation page, so the same
    instance must be passed along rather than copied.
    """

    model_config = ConfigDict(validate_assignment=True)

    limit: int = Field(ge=0)
    query: dict[str, str]
    request_options: RequestOptions
    gl: str | None = None
    hl: str | None = None
    utc_offset_minutes: int | None = None

    def consume(self, count: int) -> None:
        """Take ``count`` items out of the remaining budget."""
        self.limit -= count


class ClientInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    client_name: str = Field(alias="clientName")
    client_version: str = Field(alias="clientVersion")
    gl: str
    hl: str
    utc_offset_minutes: int = Field(alias="utcOffsetMinutes")


class RequestContext(BaseModel):
    """Client descriptor the internal browse API requires in every body."""

    client: ClientInfo
    user: dict[str, Any] = Field(default_factory=dict)
    request: dict[str, Any] = Field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        """Serialize with the upstream camelCase keys."""
        return self.model_dump(by_alias=True)


class ParsedBody(BaseModel):
    """What could be scraped from a playlist page.

    Any field may be missing; a missing ``json_data`` triggers the internal
    API fallback.
    """

    json_data: dict[str, Any] | None = None
    api_key: str | None = None
    context: RequestContext | None = None
