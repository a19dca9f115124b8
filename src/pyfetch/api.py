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
"""fetch() — normalize the supported call shapes and send through a transport."""

from __future__ import annotations

from collections.abc import AsyncIterable, Mapping
from typing import Any, Union

import httpx

from pyfetch.http.headers import Headers
from pyfetch.http.request import Request, RequestInit, parse_url
from pyfetch.http.response import Response
from pyfetch.http.status import reason_phrase
from pyfetch.kernel.exceptions import NotAnHTTPResponseException
from pyfetch.transport.adapters.httpx_adapter import HttpxTransportAdapter
from pyfetch.transport.ports.outbound import TransportPort
from pyfetch.transport.types import TransportResponse

Resource = Union[str, httpx.URL, RequestInit, Request]


async def fetch(
    resource: Resource,
    init: RequestInit | None = None,
    *,
    transport: TransportPort | None = None,
) -> Response:
    """Send a request and return the response once its headers have arrived.

    *resource* may be:

    - URL text, optionally with a :class:`RequestInit`; the text is parsed
      before anything is sent.
    - an ``httpx.URL``, optionally with a :class:`RequestInit`; the URL
      replaces any URL carried by the init.
    - a :class:`RequestInit` on its own, using its embedded URL.
    - a ready :class:`Request`.

    Args:
        resource: What to fetch, see above.
        init: Method, headers and body for URL resources.
        transport: Transport to send through. A new
            :class:`HttpxTransportAdapter` is used when omitted.

    Raises:
        InvalidURLException: URL text could not be parsed.
        MissingURLException: the resolved request has no URL.
        NotAnHTTPResponseException: the transport reply is not an HTTP response.
        TypeError: unsupported resource, or *init* given with a ready request.

    Errors raised by the transport are propagated unchanged.
    """
    return await send(build_request(resource, init), transport=transport)


def build_request(resource: Resource, init: RequestInit | None = None) -> Request:
    """Resolve any supported call shape into a :class:`Request`."""
    if isinstance(resource, Request):
        if init is not None:
            raise TypeError("A RequestInit cannot be combined with a ready Request")
        return resource

    if isinstance(resource, RequestInit):
        if init is not None:
            raise TypeError("Pass either a RequestInit or a URL with a RequestInit, not two inits")
        return Request(resource)

    if isinstance(resource, str):
        resource = parse_url(resource)

    if isinstance(resource, httpx.URL):
        request = Request(init)
        request.url = resource
        return request

    raise TypeError(f"Cannot fetch a {type(resource).__name__}")


async def send(request: Request, *, transport: TransportPort | None = None) -> Response:
    """Send a resolved request. Every other call shape ends up here."""
    transport_request = request.to_transport()
    active = transport if transport is not None else HttpxTransportAdapter()
    reply = await active.send(transport_request)
    return _to_response(reply)


def _to_response(reply: Any) -> Response:
    if (
        not isinstance(reply, TransportResponse)
        or not isinstance(reply.status_code, int)
        or not isinstance(reply.headers, Mapping)
        or not isinstance(reply.stream, AsyncIterable)
    ):
        raise NotAnHTTPResponseException(reply)

    return Response(
        status=reply.status_code,
        status_text=reason_phrase(reply.status_code),
        headers=Headers(reply.headers),
        body=reply.stream,
    )
