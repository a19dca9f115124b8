"""Outbound port: HTTP transport interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pyfetch.transport.types import TransportRequest, TransportResponse


@runtime_checkable
class TransportPort(Protocol):
    """Performs the network exchange for a single request.

    Connection handling, TLS, redirects and wire framing all live behind this
    port. Failures are raised as-is and reach the caller unchanged.
    """

    async def send(self, request: TransportRequest) -> TransportResponse: ...

    async def start(self) -> None: ...

    async def stop(self) -> None: ...
