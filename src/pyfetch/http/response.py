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
"""Response wrapper with a lazy body stream and buffering helpers."""

from __future__ import annotations

import json as jsonlib
from collections.abc import AsyncIterable, AsyncIterator
from typing import Any, TypeVar, overload

from pydantic import TypeAdapter, ValidationError

from pyfetch.http.headers import Headers
from pyfetch.kernel.exceptions import JSONParseException, SchemaMismatchException

T = TypeVar("T")


class Response:
    """HTTP response as returned by :func:`pyfetch.fetch`.

    Created as soon as the status line and headers are available; the body
    may still be in flight. ``body`` is a single-pass async iterator: the
    buffering helpers (:meth:`data`, :meth:`text`, :meth:`json`) drain it, so
    only the first of them sees the payload. A second :meth:`data` call
    returns ``b""``.

    A response whose body is never drained holds its connection open until
    it is closed with :meth:`aclose` or by leaving ``async with response:``.

    Args:
        status: HTTP status code.
        status_text: Reason phrase for the status code.
        headers: Response headers.
        body: Async iterable of body chunks.
    """

    def __init__(
        self,
        status: int,
        status_text: str,
        headers: Headers,
        body: AsyncIterable[bytes],
    ) -> None:
        self.status = status
        self.status_text = status_text
        self.headers = headers
        self.body: AsyncIterator[bytes] = body.__aiter__()

    @property
    def ok(self) -> bool:
        """True for 2xx status codes."""
        return 200 <= self.status <= 299

    async def data(self) -> bytes:
        """Drain the body stream into a single bytes object."""
        buffer = bytearray()
        async for chunk in self.body:
            buffer.extend(chunk)
        return bytes(buffer)

    async def text(self) -> str | None:
        """Decode the body as UTF-8, or return ``None`` if it is not valid UTF-8."""
        raw = await self.data()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            return None

    @overload
    async def json(self) -> Any: ...

    @overload
    async def json(self, as_type: type[T]) -> T: ...

    async def json(self, as_type: Any = None) -> Any:
        """Parse the body as JSON.

        Without *as_type* the result is built from dicts, lists and scalars.
        With *as_type* (a pydantic model, dataclass, TypedDict or builtin
        generic) the JSON is validated straight into that type.
        Validation is strict: a JSON string is not accepted for a number field.

        Raises:
            JSONParseException: if the body is not valid JSON.
            SchemaMismatchException: if the JSON does not fit *as_type*.
        """
        raw = await self.data()
        if as_type is None:
            try:
                return jsonlib.loads(raw)
            except ValueError as exc:
                raise JSONParseException(
                    f"Response body is not valid JSON: {exc}", code="JSON_PARSE"
                ) from exc
        return _validate_json(raw, as_type)

    async def aclose(self) -> None:
        """Release the body stream without reading the rest of it."""
        aclose = getattr(self.body, "aclose", None)
        if aclose is not None:
            await aclose()

    def __aiter__(self) -> AsyncIterator[bytes]:
        return self.body

    async def __aenter__(self) -> Response:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"<Response [{self.status} {self.status_text}]>"


def _validate_json(raw: bytes, as_type: type[T]) -> T:
    try:
        return TypeAdapter(as_type).validate_json(raw, strict=True)
    except ValidationError as exc:
        # pydantic reports malformed JSON as a validation error of type json_invalid
        if any(err["type"] == "json_invalid" for err in exc.errors()):
            raise JSONParseException(
                f"Response body is not valid JSON: {exc}", code="JSON_PARSE"
            ) from exc
        raise SchemaMismatchException(
            f"Response JSON does not match {getattr(as_type, '__name__', as_type)!s}",
            code="SCHEMA_MISMATCH",
            context={"errors": exc.errors(include_url=False)},
        ) from exc
