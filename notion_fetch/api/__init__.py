"""Notion API package — request building, transport and response classification."""

from notion_fetch.api.classifier import classify, normalize_body
from notion_fetch.api.client import fetch_page
from notion_fetch.api.errors import (
    API_ERRORS,
    ApiError,
    ConnectionFailed,
    InvalidResponse,
    MissingCredential,
    NotFound,
    ServerError,
    Unauthorized,
)
from notion_fetch.api.models import PageRequest, PageResponse, RawOutcome
from notion_fetch.api.request import NOTION_VERSION, build_page_request
from notion_fetch.api.transport import HttpxTransport, Transport

__all__ = [
    "fetch_page",
    "build_page_request",
    "classify",
    "normalize_body",
    "HttpxTransport",
    "Transport",
    "PageRequest",
    "PageResponse",
    "RawOutcome",
    "NOTION_VERSION",
    "API_ERRORS",
    "ApiError",
    "MissingCredential",
    "ConnectionFailed",
    "Unauthorized",
    "NotFound",
    "ServerError",
    "InvalidResponse",
]
