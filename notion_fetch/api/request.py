"""Build the authenticated page request.  No network access happens here."""

from __future__ import annotations

from notion_fetch.api.models import PageRequest

NOTION_API_BASE = "https://api.notion.com/v1"
NOTION_VERSION = "2025-09-03"


def page_url(page_id: str) -> str:
    """Return the endpoint URL for *page_id*, embedded verbatim."""
    return f"{NOTION_API_BASE}/pages/{page_id}"


def build_page_request(page_id: str, api_key: str) -> PageRequest:
    """Assemble the GET request for *page_id* authenticated with *api_key*.

    Both headers are part of the wire contract and are sent on every
    request.

    Raises:
        ValueError: If *page_id* is empty.
    """
    if not page_id:
        raise ValueError("page id must be a non-empty string")

    return PageRequest(
        method="GET",
        url=page_url(page_id),
        headers={
            "Authorization": f"Bearer {api_key}",
            "Notion-Version": NOTION_VERSION,
        },
    )
