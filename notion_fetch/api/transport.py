"""Transport abstraction and the ``httpx`` implementation.

All providers share a common interface: ``send(request) -> RawOutcome``.
A transport never raises for network problems; it reports them in the
returned :class:`RawOutcome` so the classifier can map every case.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import httpx

from notion_fetch.api.models import PageRequest, RawOutcome
from notion_fetch.config import settings

logger = logging.getLogger(__name__)


class Transport(ABC):
    """Synchronous request/response capability."""

    @abstractmethod
    def send(self, request: PageRequest) -> RawOutcome:
        """Execute *request* once and describe what happened."""


class HttpxTransport(Transport):
    """Send a request with a short-lived :class:`httpx.Client`.

    The client is opened per request and closed on every exit path.  The
    response is streamed so that a failure while reading the body is told
    apart from a failure to get a response at all.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = settings.request_timeout if timeout is None else timeout

    def send(self, request: PageRequest) -> RawOutcome:
        logger.debug("%s %s", request.method, request.url)
        try:
            with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
                with client.stream(
                    request.method, request.url, headers=request.headers
                ) as response:
                    status = response.status_code
                    logger.debug("Received HTTP %d from %s", status, request.url)
                    try:
                        body = response.read()
                    except httpx.HTTPError as exc:
                        logger.warning("Reading response body failed: %s", exc)
                        return RawOutcome.unreadable(status, str(exc))
                    return RawOutcome.received(status, body, response.encoding)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Request to %s failed: %s", request.url, exc)
            return RawOutcome.failed(str(exc) or type(exc).__name__)
