"""Value objects passed between the request builder, transport and classifier."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PageRequest:
    """A fully assembled outbound request.

    ``headers`` carries the bearer token, so it is kept out of ``repr`` to
    stop the credential leaking into logs or tracebacks.
    """

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict, repr=False)


@dataclass(frozen=True)
class RawOutcome:
    """What the transport observed for one request.

    Exactly one of three shapes, built through the constructors below:

    * :meth:`failed` -- nothing came back; ``status_code`` is ``None``.
    * :meth:`received` -- a status line and the full body bytes.
    * :meth:`unreadable` -- a status line, but reading the body failed.
    """

    status_code: int | None = None
    body: bytes | None = None
    encoding: str | None = None
    transport_error: str | None = None
    body_error: str | None = None

    @classmethod
    def failed(cls, message: str) -> RawOutcome:
        return cls(transport_error=message)

    @classmethod
    def received(
        cls, status_code: int, body: bytes, encoding: str | None = None
    ) -> RawOutcome:
        return cls(status_code=status_code, body=body, encoding=encoding)

    @classmethod
    def unreadable(cls, status_code: int, message: str) -> RawOutcome:
        return cls(status_code=status_code, body_error=message)


@dataclass(frozen=True)
class PageResponse:
    """Normalised success value: pretty JSON, or the raw body text."""

    data: str
    status_code: int = 200
