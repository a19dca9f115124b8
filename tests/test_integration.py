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
"""End-to-end fetch() through the httpx adapter against an in-process server."""

from __future__ import annotations

import httpx
import pytest

from pyfetch.api import fetch
from pyfetch.http.request import RequestInit, RequestMethod
from pyfetch.transport.adapters.httpx_adapter import HttpxTransportAdapter


def _server(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/":
        return httpx.Response(200, content=b"Hello World!")
    if request.url.path == "/json":
        return httpx.Response(200, content=b'{ "test": "naisu"}')
    if request.url.path == "/echo-header":
        return httpx.Response(200, content=request.headers.get("test", "").encode())
    if request.url.path == "/echo-method":
        return httpx.Response(200, content=request.method.encode())
    if request.url.path == "/echo-body":
        return httpx.Response(201, content=request.content)
    return httpx.Response(404, content=b"not found")


@pytest.fixture
def transport() -> HttpxTransportAdapter:
    return HttpxTransportAdapter(transport=httpx.MockTransport(_server))


class TestFetchEndToEnd:
    @pytest.mark.asyncio
    async def test_reading_text(self, transport: HttpxTransportAdapter):
        res = await fetch("http://localhost:6969", transport=transport)

        assert res.status == 200
        assert res.ok is True
        assert await res.text() == "Hello World!"
        assert res.headers.get("content-length") == "12"

    @pytest.mark.asyncio
    async def test_reading_json(self, transport: HttpxTransportAdapter):
        res = await fetch("http://localhost:6969/json", transport=transport)

        assert res.status == 200
        assert await res.json() == {"test": "naisu"}

    @pytest.mark.asyncio
    async def test_request_header_is_sent(self, transport: HttpxTransportAdapter):
        init = RequestInit(headers={"test": "test"})
        res = await fetch("http://localhost:6969/echo-header", init, transport=transport)

        assert await res.text() == "test"

    @pytest.mark.asyncio
    async def test_default_method_reaches_server_as_get(self, transport: HttpxTransportAdapter):
        res = await fetch("http://localhost:6969/echo-method", transport=transport)
        assert await res.text() == "GET"

    @pytest.mark.asyncio
    async def test_post_body_round_trip(self, transport: HttpxTransportAdapter):
        init = RequestInit(method=RequestMethod.POST, body=b"ping")
        res = await fetch("http://localhost:6969/echo-body", init, transport=transport)

        assert res.status == 201
        assert res.status_text == "Created"
        assert await res.data() == b"ping"

    @pytest.mark.asyncio
    async def test_not_found(self, transport: HttpxTransportAdapter):
        res = await fetch("http://localhost:6969/missing", transport=transport)

        assert res.status == 404
        assert res.ok is False
        assert res.status_text == "Not Found"

    @pytest.mark.asyncio
    async def test_second_data_call_is_empty(self, transport: HttpxTransportAdapter):
        res = await fetch("http://localhost:6969", transport=transport)

        assert await res.data() == b"Hello World!"
        assert await res.data() == b""


class TestUnreadResponseRelease:
    @staticmethod
    def _tracking(transport: HttpxTransportAdapter) -> list[httpx.AsyncClient]:
        created: list[httpx.AsyncClient] = []
        new_client = transport._new_client

        def tracking_client() -> httpx.AsyncClient:
            client = new_client()
            created.append(client)
            return client

        transport._new_client = tracking_client  # type: ignore[method-assign]
        return created

    @pytest.mark.asyncio
    async def test_context_manager_releases_unread_response(self, transport: HttpxTransportAdapter):
        created = self._tracking(transport)

        async with await fetch("http://localhost:6969", transport=transport) as res:
            assert res.status == 200
            assert created[0].is_closed is False

        assert created[0].is_closed is True

    @pytest.mark.asyncio
    async def test_aclose_releases_unread_response(self, transport: HttpxTransportAdapter):
        created = self._tracking(transport)

        res = await fetch("http://localhost:6969/json", transport=transport)
        await res.aclose()

        assert created[0].is_closed is True

    @pytest.mark.asyncio
    async def test_draining_releases_response(self, transport: HttpxTransportAdapter):
        created = self._tracking(transport)

        res = await fetch("http://localhost:6969", transport=transport)
        await res.data()

        assert created[0].is_closed is True
