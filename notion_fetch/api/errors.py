"""Closed error taxonomy for a single page fetch.

Every failure the core can report is one of the :class:`ApiError`
subclasses listed in :data:`API_ERRORS`.  Callers can either catch the base
class and render ``str(exc)``, or dispatch on the concrete subclass (or its
``kind`` tag).
"""

from __future__ import annotations


class ApiError(Exception):
    """Base class for all fetch failures."""

    kind: str = "api_error"

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MissingCredential(ApiError):
    """No API key was available; no request was attempted."""

    kind = "missing_credential"


class ConnectionFailed(ApiError):
    """The transport could not deliver the request or get a response."""

    kind = "connection_failed"


class Unauthorized(ApiError):
    """HTTP 401 or 403."""

    kind = "unauthorized"


class NotFound(ApiError):
    """HTTP 404."""

    kind = "not_found"


class ServerError(ApiError):
    """HTTP 5xx."""

    kind = "server_error"


class InvalidResponse(ApiError):
    """Any other non-success status, or a 2xx body that could not be read.

    ``status_code`` tells the two apart: it is a 2xx code only in the
    unreadable-body case.
    """

    kind = "invalid_response"


API_ERRORS: tuple[type[ApiError], ...] = (
    MissingCredential,
    ConnectionFailed,
    Unauthorized,
    NotFound,
    ServerError,
    InvalidResponse,
)
