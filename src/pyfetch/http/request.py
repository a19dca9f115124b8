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
"""Request building — user-facing RequestInit and the resolved Request descriptor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import httpx

from pyfetch.http.headers import Headers
from pyfetch.kernel.exceptions import InvalidURLException, MissingURLException
from pyfetch.transport.types import TransportRequest


class RequestMethod(Enum):
    """HTTP methods supported by :func:`pyfetch.fetch`."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


def parse_url(text: str) -> httpx.URL:
    """Parse *text* into an absolute URL.

    Raises:
        InvalidURLException: if the text is not a URL or lacks a scheme or host.
    """
    try:
        url = httpx.URL(text)
    except httpx.InvalidURL as exc:
        raise InvalidURLException(text, str(exc)) from exc
    if not url.scheme or not url.host:
        raise InvalidURLException(text, "scheme and host are required")
    return url


@dataclass
class RequestInit:
    """Partial request configuration; every field is optional.

    Attributes:
        method: HTTP method, GET when unset.
        url: Target URL as text or ``httpx.URL``.
        headers: Header overrides, merged case-insensitively.
        body: Raw request body.
    """

    method: RequestMethod | None = None
    url: str | httpx.URL | None = None
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


class Request:
    """Fully resolved request, ready to hand to a transport.

    Built once from a :class:`RequestInit`. ``url`` may be replaced after
    construction; a missing URL is only an error when the request is sent.
    """

    def __init__(self, init: RequestInit | None = None) -> None:
        self.method: RequestMethod = RequestMethod.GET
        self.url: httpx.URL | None = None
        self.headers = Headers()
        self.body: bytes | None = None
        self._apply(init or RequestInit())

    def _apply(self, init: RequestInit) -> None:
        if init.method is not None:
            self.method = init.method
        if init.url is not None:
            self.url = parse_url(init.url) if isinstance(init.url, str) else init.url
        for key, value in init.headers.items():
            self.headers.set(key, value)
        if init.body is not None:
            self.body = init.body

    def to_transport(self) -> TransportRequest:
        """Translate into the transport's request form.

        Raises:
            MissingURLException: if no URL has been set.
        """
        if self.url is None:
            raise MissingURLException()
        return TransportRequest(
            method=self.method.value,
            url=str(self.url),
            headers=self.headers.all(),
            body=self.body,
        )

    def __repr__(self) -> str:
        return f"<Request [{self.method.value} {self.url}]>"
