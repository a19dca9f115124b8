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
"""pyfetch HTTP model — headers, request descriptor and response wrapper."""

from pyfetch.http.headers import Headers
from pyfetch.http.request import Request, RequestInit, RequestMethod, parse_url
from pyfetch.http.response import Response
from pyfetch.http.status import reason_phrase

__all__ = [
    "Headers",
    "Request",
    "RequestInit",
    "RequestMethod",
    "Response",
    "parse_url",
    "reason_phrase",
]
