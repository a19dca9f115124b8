"""Value objects exchanged with the HTTP transport."""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class TransportRequest:
    """A fully resolved request as handed to the transport."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(slots=True)
class TransportResponse:
    """Status line, headers and lazy body of an HTTP reply.

    ``stream`` is consumed once; the transport is responsible for releasing
    the connection when it is exhausted or closed.
    """

    status_code: int
    reason_phrase: str
    headers: Mapping[str, str]
    stream: AsyncIterator[bytes]
