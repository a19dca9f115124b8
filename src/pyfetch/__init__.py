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
"""pyfetch — a fetch-style API over an async HTTP transport.

    response = await pyfetch.fetch("https://example.com/api/items")
    if response.ok:
        items = await response.json()
"""

from pyfetch.api import build_request, fetch, send
from pyfetch.client import Fetcher
from pyfetch.http import Headers, Request, RequestInit, RequestMethod, Response
from pyfetch.logging import StructlogAdapter
from pyfetch.kernel import (
    DecodeException,
    InvalidURLException,
    JSONParseException,
    MissingURLException,
    NotAnHTTPResponseException,
    PyFetchException,
    RequestException,
    SchemaMismatchException,
)
from pyfetch.transport import (
    HttpxTransportAdapter,
    TransportPort,
    TransportRequest,
    TransportResponse,
)

__all__ = [
    # API
    "Fetcher",
    "build_request",
    "fetch",
    "send",
    # HTTP model
    "Headers",
    "Request",
    "RequestInit",
    "RequestMethod",
    "Response",
    # Transport
    "HttpxTransportAdapter",
    "TransportPort",
    "TransportRequest",
    "TransportResponse",
    # Logging
    "StructlogAdapter",
    # Exceptions
    "DecodeException",
    "InvalidURLException",
    "JSONParseException",
    "MissingURLException",
    "NotAnHTTPResponseException",
    "PyFetchException",
    "RequestException",
    "SchemaMismatchException",
]
