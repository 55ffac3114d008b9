"""Tests for the httpx transport.

``respx`` patches ``httpx`` at the transport layer so no real network calls
are made.
"""

from __future__ import annotations

import httpx
import pytest
import respx

from notion_fetch.api.models import RawOutcome
from notion_fetch.api.request import build_page_request
from notion_fetch.api.transport import HttpxTransport

_URL = "https://api.notion.com/v1/pages/abc-123"


@pytest.fixture
def request_():
    return build_page_request("abc-123", "secret_token")


class TestHttpxTransport:
    def test_returns_status_and_body(self, request_) -> None:
        with respx.mock:
            respx.get(_URL).mock(return_value=httpx.Response(200, text='{"ok": true}'))
            outcome = HttpxTransport(timeout=5.0).send(request_)

        assert isinstance(outcome, RawOutcome)
        assert outcome.status_code == 200
        assert outcome.body == b'{"ok": true}'
        assert outcome.transport_error is None

    def test_sends_wire_contract_headers(self, request_) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(200, text="{}"))
            HttpxTransport(timeout=5.0).send(request_)

        sent = route.calls.last.request
        assert sent.method == "GET"
        assert sent.headers["Authorization"] == "Bearer secret_token"
        assert sent.headers["Notion-Version"] == "2025-09-03"

    def test_error_status_is_not_raised(self, request_) -> None:
        with respx.mock:
            respx.get(_URL).mock(return_value=httpx.Response(404, text="Not Found"))
            outcome = HttpxTransport(timeout=5.0).send(request_)

        assert outcome.status_code == 404
        assert outcome.body == b"Not Found"

    def test_reports_charset(self, request_) -> None:
        with respx.mock:
            respx.get(_URL).mock(
                return_value=httpx.Response(
                    200,
                    content="café".encode("latin-1"),
                    headers={"Content-Type": "text/plain; charset=latin-1"},
                )
            )
            outcome = HttpxTransport(timeout=5.0).send(request_)

        assert outcome.encoding == "latin-1"

    def test_connect_error_becomes_failed_outcome(self, request_) -> None:
        with respx.mock:
            respx.get(_URL).mock(side_effect=httpx.ConnectError("connection refused"))
            outcome = HttpxTransport(timeout=5.0).send(request_)

        assert outcome.status_code is None
        assert outcome.transport_error == "connection refused"

    def test_timeout_becomes_failed_outcome(self, request_) -> None:
        with respx.mock:
            respx.get(_URL).mock(side_effect=httpx.ReadTimeout("timed out"))
            outcome = HttpxTransport(timeout=5.0).send(request_)

        assert outcome.status_code is None
        assert outcome.transport_error

    def test_default_timeout_comes_from_settings(self, monkeypatch) -> None:
        monkeypatch.setattr("notion_fetch.api.transport.settings.request_timeout", 7.5)
        assert HttpxTransport()._timeout == 7.5
