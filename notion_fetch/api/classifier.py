"""Map a transport outcome onto a :class:`PageResponse` or an :class:`ApiError`.

Status handling, in priority order:

    no status          -> ConnectionFailed
    401, 403           -> Unauthorized
    404                -> NotFound
    5xx                -> ServerError
    2xx, body unread   -> InvalidResponse
    2xx                -> PageResponse (always)
    anything else      -> InvalidResponse

A readable 2xx body is normalised by :func:`normalize_body`, which prefers
pretty-printed JSON and otherwise returns the text untouched.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from notion_fetch.api.errors import (
    ConnectionFailed,
    InvalidResponse,
    NotFound,
    ServerError,
    Unauthorized,
)
from notion_fetch.api.models import PageResponse, RawOutcome

logger = logging.getLogger(__name__)

_DEFAULT_ENCODING = "utf-8"


class _NotJson(Exception):
    """Step 1 failed: the body is not a JSON document."""


class _NotPrintable(Exception):
    """Step 2 failed: the parsed value cannot be printed back as strict JSON."""


def _status_label(status_code: int) -> str:
    reason = httpx.codes.get_reason_phrase(status_code)
    return f"HTTP {status_code} {reason}".rstrip()


# ---------------------------------------------------------------------------
# Body normalisation
# ---------------------------------------------------------------------------

def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise _NotJson(str(exc)) from exc


def _print_pretty(value: Any) -> str:
    # allow_nan=False: NaN/Infinity are accepted by the parser but are not JSON.
    try:
        out = json.dumps(value, indent=2, ensure_ascii=False, allow_nan=False)
    except (ValueError, TypeError, RecursionError) as exc:
        raise _NotPrintable(str(exc)) from exc
    # Unpaired surrogate escapes parse, but the printed text is not valid UTF-8.
    try:
        out.encode(_DEFAULT_ENCODING)
    except UnicodeEncodeError as exc:
        raise _NotPrintable(str(exc)) from exc
    return out


def normalize_body(text: str) -> str:
    """Return *text* as pretty-printed JSON, or unchanged if that is not possible.

    The steps run in order and each failure falls back to the raw text:

    1. parse *text* as JSON (:class:`_NotJson` on failure);
    2. print the value with two-space indentation, keys in document order
       (:class:`_NotPrintable` on failure).

    This never raises.
    """
    try:
        value = _parse_json(text)
    except _NotJson as exc:
        logger.debug("Body is not JSON (%s); using raw text.", exc)
        return text

    try:
        return _print_pretty(value)
    except _NotPrintable as exc:
        logger.debug("Parsed body could not be re-printed (%s); using raw text.", exc)
        return text


def _decode_body(outcome: RawOutcome) -> str:
    """Decode the body bytes with the response charset.

    Undecodable bytes become U+FFFD and an unknown charset falls back to
    UTF-8; only a failed body read is an error.
    """
    if outcome.body is None:
        raise InvalidResponse(
            f"failed to read response body: {outcome.body_error or 'no body'}",
            status_code=outcome.status_code,
        )
    encoding = outcome.encoding or _DEFAULT_ENCODING
    try:
        return outcome.body.decode(encoding, errors="replace")
    except LookupError:
        logger.debug("Unknown charset %r; decoding as UTF-8.", encoding)
        return outcome.body.decode(_DEFAULT_ENCODING, errors="replace")


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def classify(outcome: RawOutcome) -> PageResponse:
    """Classify *outcome*.

    Returns:
        The normalised :class:`PageResponse` for any 2xx status with a
        readable body.

    Raises:
        ConnectionFailed, Unauthorized, NotFound, ServerError,
        InvalidResponse: As listed in the module docstring.
    """
    status = outcome.status_code
    if status is None:
        raise ConnectionFailed(
            f"failed to send HTTP request to Notion: "
            f"{outcome.transport_error or 'no response'}"
        )

    if status in (401, 403):
        raise Unauthorized(f"unauthorized: {_status_label(status)}", status_code=status)
    if status == 404:
        raise NotFound(f"not found: {_status_label(status)}", status_code=status)
    if 500 <= status <= 599:
        raise ServerError(f"server error: {_status_label(status)}", status_code=status)
    if not 200 <= status <= 299:
        raise InvalidResponse(
            f"request failed: {_status_label(status)}", status_code=status
        )

    text = _decode_body(outcome)
    return PageResponse(data=normalize_body(text), status_code=status)
