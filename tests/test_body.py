"""Tests for playlist page body extraction."""

import json

from fakes import API_KEY, CLIENT_VERSION, page_html

from ytplaylist.config import ClientDefaults
from ytplaylist.services.body import build_request_context, parse_body, scrape_browse_id
from ytplaylist.services.options import normalize_options

DATA = {"sidebar": {"a": 1}, "contents": {"b": [1, 2]}}


class TestParseBody:
    """Tests for parse_body."""

    def test_extracts_everything(self) -> None:
        """Should find the initial data, API key and client version."""
        parsed = parse_body(page_html(DATA))

        assert parsed.json_data == DATA
        assert parsed.api_key == API_KEY
        assert parsed.context is not None
        assert parsed.context.client.client_version == CLIENT_VERSION

    def test_window_assignment(self) -> None:
        """Should read the window["ytInitialData"] form."""
        body = f'<script>window["ytInitialData"] = {json.dumps(DATA)};</script>'
        assert parse_body(body).json_data == DATA

    def test_falls_back_to_script_terminator(self) -> None:
        """Should use the script terminator when the brace delimiter is broken."""
        body = '<script>var ytInitialData = {"a": "};x"};</script>'
        # "};" inside the string makes the first delimiter yield invalid JSON
        assert parse_body(body).json_data == {"a": "};x"}

    def test_whitespace_around_data(self) -> None:
        """Should tolerate whitespace between the assignment and the terminator."""
        body = '<script>var ytInitialData =   {"sidebar": {"a": 1}}  ;</script>'
        assert parse_body(body).json_data == {"sidebar": {"a": 1}}

    def test_missing_data(self) -> None:
        """Should leave the data empty but still build a context."""
        parsed = parse_body(page_html(None))

        assert parsed.json_data is None
        assert parsed.api_key == API_KEY
        assert parsed.context is not None

    def test_malformed_data(self) -> None:
        """Should never raise on malformed JSON."""
        parsed = parse_body("<script>var ytInitialData = {broken;</script>")
        assert parsed.json_data is None

    def test_non_object_data(self) -> None:
        """Should ignore initial data that is not a JSON object."""
        parsed = parse_body("<script>var ytInitialData = [1, 2];</script>")
        assert parsed.json_data is None

    def test_lowercase_markers(self) -> None:
        """Should accept the alternative API key and client version markers."""
        body = '"innertubeApiKey":"key2","innertube_context_client_version":"1.2"'
        parsed = parse_body(body)

        assert parsed.api_key == "key2"
        assert parsed.context is not None
        assert parsed.context.client.client_version == "1.2"

    def test_empty_body(self) -> None:
        """Should return empty fields for an empty page."""
        parsed = parse_body("")

        assert parsed.json_data is None
        assert parsed.api_key is None
        assert parsed.context is not None
        assert parsed.context.client.client_version == ""


class TestBuildRequestContext:
    """Tests for build_request_context."""

    def test_defaults(self) -> None:
        """Should use the client defaults without options."""
        context = build_request_context("1.0")

        assert context.to_payload() == {
            "client": {
                "clientName": "WEB",
                "clientVersion": "1.0",
                "gl": "US",
                "hl": "en",
                "utcOffsetMinutes": -300,
            },
            "user": {},
            "request": {},
        }

    def test_option_overrides(self) -> None:
        """Should take locale and timezone from the options."""
        opts = normalize_options("PLtest", {"gl": "DE", "hl": "de", "utcOffsetMinutes": 60})
        client = build_request_context("1.0", opts).client

        assert (client.gl, client.hl, client.utc_offset_minutes) == ("DE", "de", 60)

    def test_zero_offset_is_honoured(self) -> None:
        """Should send a zero offset instead of the default."""
        opts = normalize_options("PLtest", {"utcOffsetMinutes": 0})
        assert build_request_context("1.0", opts).client.utc_offset_minutes == 0

    def test_custom_defaults(self) -> None:
        """Should use the given defaults."""
        defaults = ClientDefaults(client_version="9.9", gl="FR")
        client = build_request_context("", defaults=defaults).client

        assert client.client_version == "9.9"
        assert client.gl == "FR"

    def test_contexts_are_independent(self) -> None:
        """Should build a new context on every call."""
        first = build_request_context("1.0")
        second = build_request_context("1.0")
        first.user["x"] = 1
        assert second.user == {}


class TestScrapeBrowseId:
    """Tests for scrape_browse_id."""

    def test_found(self) -> None:
        """Should read the advertised browse ID."""
        body = '{"key":"browse_id","value":"VLPLabc"}'
        assert scrape_browse_id(body) == "VLPLabc"

    def test_missing(self) -> None:
        """Should return an empty string without a browse ID."""
        assert scrape_browse_id("<html></html>") == ""
