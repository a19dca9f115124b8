# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""httpx-based HTTP transport adapter."""

from __future__ import annotations

import logging
from datetime import timedelta

import httpx

from pyfetch.config.properties.client import ClientProperties
from pyfetch.transport.types import TransportRequest, TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransportAdapter:
    """Transport adapter backed by httpx.AsyncClient.

    Before :meth:`start` every request runs on its own short-lived client,
    which is closed together with the response body. After :meth:`start` a
    single client is shared until :meth:`stop`.

    Args:
        timeout: Timeout applied to connect, read, write and pool waits.
        follow_redirects: Whether httpx follows redirects.
        headers: Headers added to every request unless the request sets them.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        timeout: timedelta = timedelta(seconds=30),
        follow_redirects: bool = True,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._follow_redirects = follow_redirects
        self._headers = headers or {}
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_properties(
        cls,
        props: ClientProperties,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> HttpxTransportAdapter:
        """Build an adapter from bound ``pyfetch.client.*`` properties."""
        return cls(
            timeout=timedelta(seconds=props.timeout),
            follow_redirects=props.follow_redirects,
            headers={str(k): str(v) for k, v in props.headers.items()},
            transport=transport,
        )

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout.total_seconds(),
            follow_redirects=self._follow_redirects,
            headers=self._headers,
            transport=self._transport,
        )

    async def send(self, request: TransportRequest) -> TransportResponse:
        """Send the request and return as soon as the headers have arrived."""
        shared = self._client
        client = shared if shared is not None else self._new_client()

        try:
            http_request = client.build_request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            )
            logger.debug("Sending %s %s", request.method, request.url)
            response = await client.send(http_request, stream=True)
        except BaseException:
            if client is not shared:
                await client.aclose()
            raise
        logger.debug("Received %s for %s %s", response.status_code, request.method, request.url)

        return TransportResponse(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            headers=dict(response.headers.items()),
            stream=_BodyStream(response, client if client is not shared else None),
        )

    async def start(self) -> None:
        """Open the shared client."""
        if self._client is None:
            self._client = self._new_client()

    async def stop(self) -> None:
        """Close the shared client."""
        await self.close()

    async def close(self) -> None:
        """Close the shared client, if one is open."""
        if self._client is not None:
            client, self._client = self._client, None
            await client.aclose()


class _BodyStream:
    """Chunks of a streamed httpx response.

    Exhausting, failing or closing the stream closes the response and, for a
    short-lived client, the client too. Closing works before the first chunk
    has been read.
    """

    def __init__(self, response: httpx.Response, owned_client: httpx.AsyncClient | None) -> None:
        self._response = response
        self._owned_client = owned_client
        self._chunks = response.aiter_bytes()

    def __aiter__(self) -> _BodyStream:
        return self

    async def __anext__(self) -> bytes:
        try:
            return await self._chunks.__anext__()
        except BaseException:
            await self.aclose()
            raise

    async def aclose(self) -> None:
        await self._chunks.aclose()
        await self._response.aclose()
        if self._owned_client is not None:
            client, self._owned_client = self._owned_client, None
            await client.aclose()
