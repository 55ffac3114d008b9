"""One-shot page fetch: credential check, build, send, classify."""

from __future__ import annotations

import logging

from notion_fetch.api.classifier import classify
from notion_fetch.api.errors import MissingCredential
from notion_fetch.api.models import PageResponse
from notion_fetch.api.request import build_page_request
from notion_fetch.api.transport import HttpxTransport, Transport
from notion_fetch.config import API_KEY_ENV

logger = logging.getLogger(__name__)


def fetch_page(
    page_id: str,
    api_key: str | None,
    transport: Transport | None = None,
) -> PageResponse:
    """Fetch *page_id* and return its normalised body.

    The credential is checked before anything else; when it is missing the
    transport is never touched.  Errors are not retried.

    Raises:
        ApiError: One of the subclasses in :data:`~notion_fetch.api.errors.API_ERRORS`.
        ValueError: If *page_id* is empty.
    """
    if not api_key:
        raise MissingCredential(f"{API_KEY_ENV} is not set in the environment")

    request = build_page_request(page_id, api_key)
    if transport is None:
        transport = HttpxTransport()

    outcome = transport.send(request)
    response = classify(outcome)
    logger.debug("Page %s fetched (%d chars).", page_id, len(response.data))
    return response
