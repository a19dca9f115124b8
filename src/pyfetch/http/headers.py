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
"""Case-insensitive HTTP header collection."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any


class Headers(MutableMapping[str, str]):
    """Mapping of header name to value with case-insensitive keys.

    Keys are lower-cased on every mutation and lookup, so ``set("Content-Type", ...)``
    and ``get("content-type")`` address the same entry. Mutating methods that
    have nothing better to return give back the instance for chaining::

        headers = Headers().set("Accept", "application/json").set("X-Trace", "1")

    Args:
        initial: Optional mapping to seed from. Entries go through :meth:`set`,
            so later entries win over earlier ones that differ only in case.
    """

    __slots__ = ("_headers",)

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._headers: dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    @staticmethod
    def _normalize(key: str) -> str:
        return key.lower()

    def set(self, key: str, value: str) -> Headers:
        """Store *value* under the normalized *key*, replacing any previous value."""
        self._headers[self._normalize(key)] = value
        return self

    def has(self, key: str) -> bool:
        """Return whether a header with this name exists, ignoring case."""
        return self._normalize(key) in self._headers

    def get(self, key: str, default: Any = None) -> Any:  # type: ignore[override]
        """Return the value of the header, or *default* if it is not set."""
        return self._headers.get(self._normalize(key), default)

    def delete(self, key: str) -> bool:
        """Remove the header. Returns ``False`` if it was not present."""
        normalized = self._normalize(key)
        if normalized not in self._headers:
            return False
        del self._headers[normalized]
        return True

    def all(self) -> dict[str, str]:
        """Return a copy of the headers keyed by lower-cased name."""
        return dict(self._headers)

    def clear(self) -> Headers:  # type: ignore[override]
        """Remove every header."""
        self._headers.clear()
        return self

    # ------------------------------------------------------------------
    # MutableMapping protocol
    # ------------------------------------------------------------------

    def __getitem__(self, key: str) -> str:
        return self._headers[self._normalize(key)]

    def __setitem__(self, key: str, value: str) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        if not self.delete(key):
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Headers):
            return self._headers == other._headers
        if isinstance(other, Mapping):
            return self._headers == Headers(other)._headers
        return NotImplemented

    def __repr__(self) -> str:
        return f"Headers({self._headers!r})"
