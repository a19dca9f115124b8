"""Fetcher — a fetch() bound to one transport."""

from __future__ import annotations

from pyfetch.api import Resource, fetch
from pyfetch.config.properties.client import ClientProperties
from pyfetch.core.config import Config
from pyfetch.http.request import RequestInit
from pyfetch.http.response import Response
from pyfetch.logging.structlog_adapter import StructlogAdapter
from pyfetch.transport.adapters.httpx_adapter import HttpxTransportAdapter
from pyfetch.transport.ports.outbound import TransportPort


class Fetcher:
    """Reusable fetch client.

    Accepts the same call shapes as :func:`pyfetch.fetch`, sending every
    request through the same transport:

        async with Fetcher.from_config(Config.from_file("pyfetch.yaml")) as fetcher:
            response = await fetcher.fetch("https://example.com/users/1")
            user = await response.json()

    Entering the context starts the transport (one shared connection pool for
    the httpx adapter); leaving it stops the transport.
    """

    def __init__(self, transport: TransportPort | None = None) -> None:
        self._transport: TransportPort = transport or HttpxTransportAdapter()

    @classmethod
    def from_config(cls, config: Config) -> Fetcher:
        """Build a fetcher whose httpx transport uses ``pyfetch.client.*`` settings.

        When *config* has a ``pyfetch.logging`` section, log output is set up
        through :class:`StructlogAdapter` as well.
        """
        if config.get_section("pyfetch.logging"):
            StructlogAdapter().configure(config)
        props = config.bind(ClientProperties)
        return cls(HttpxTransportAdapter.from_properties(props))

    @property
    def transport(self) -> TransportPort:
        return self._transport

    async def fetch(self, resource: Resource, init: RequestInit | None = None) -> Response:
        """Send a request through this fetcher's transport."""
        return await fetch(resource, init, transport=self._transport)

    async def start(self) -> None:
        await self._transport.start()

    async def stop(self) -> None:
        await self._transport.stop()

    async def __aenter__(self) -> Fetcher:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()
