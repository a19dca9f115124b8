"""Reason phrases for HTTP status codes."""

from __future__ import annotations

from http import HTTPStatus

_CLASS_PHRASES = {
    1: "Informational",
    2: "Success",
    3: "Redirection",
    4: "Client Error",
    5: "Server Error",
}


def reason_phrase(status_code: int) -> str:
    """Return the standard reason phrase for *status_code*.

    The phrase comes from the standard table rather than from the server, so
    ``404`` is always ``"Not Found"`` however the server spelled it. Codes
    missing from the table fall back to the name of their class.
    """
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return _CLASS_PHRASES.get(status_code // 100, "Unknown")
