"""Tests for the page request builder (no network)."""

from __future__ import annotations

import pytest

from notion_fetch.api.models import PageRequest
from notion_fetch.api.request import NOTION_VERSION, build_page_request, page_url


class TestBuildPageRequest:
    def test_builds_get_request_for_page(self) -> None:
        req = build_page_request("abc-123", "secret_token")

        assert isinstance(req, PageRequest)
        assert req.method == "GET"
        assert req.url == "https://api.notion.com/v1/pages/abc-123"

    def test_sends_bearer_and_version_headers(self) -> None:
        req = build_page_request("abc-123", "secret_token")

        assert req.headers == {
            "Authorization": "Bearer secret_token",
            "Notion-Version": "2025-09-03",
        }
        assert NOTION_VERSION == "2025-09-03"

    def test_is_deterministic(self) -> None:
        assert build_page_request("p", "k") == build_page_request("p", "k")

    def test_page_id_used_verbatim(self) -> None:
        assert page_url("275a1865b187807aadeaebaf36fb49b0").endswith(
            "/v1/pages/275a1865b187807aadeaebaf36fb49b0"
        )

    def test_empty_page_id_rejected(self) -> None:
        with pytest.raises(ValueError):
            build_page_request("", "secret_token")

    def test_repr_hides_credential(self) -> None:
        req = build_page_request("abc-123", "secret_token")
        assert "secret_token" not in repr(req)

    def test_request_is_immutable(self) -> None:
        req = build_page_request("abc-123", "secret_token")
        with pytest.raises(AttributeError):
            req.url = "https://evil.example.com/"  # type: ignore[misc]
