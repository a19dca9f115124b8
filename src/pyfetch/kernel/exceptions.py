"""Unified exception hierarchy for pyfetch.

All library exceptions inherit from PyFetchException so callers can catch
every library error with one handler. Errors raised by the transport itself
(connection refused, DNS, TLS, timeouts) are NOT part of this hierarchy: they
propagate unmodified from the transport.

Categories:
- RequestException: the caller built a request that cannot be sent
- NotAnHTTPResponseException: the transport replied with something that is not HTTP
- DecodeException: the response body could not be turned into the requested shape
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class PyFetchException(Exception):
    """Base exception for all pyfetch errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "INVALID_URL").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Request Exceptions
# =============================================================================


class RequestException(PyFetchException):
    """The request could not be built or sent as given."""


class InvalidURLException(RequestException):
    """URL text could not be parsed as an absolute URL."""

    def __init__(self, url: str, reason: str | None = None) -> None:
        message = f"Invalid URL: {url!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, code="INVALID_URL", context={"url": url})


class MissingURLException(RequestException):
    """A request was sent without a target URL."""

    def __init__(self, message: str = "Request has no URL") -> None:
        super().__init__(message, code="MISSING_URL")


# =============================================================================
# Protocol Exceptions
# =============================================================================


class NotAnHTTPResponseException(PyFetchException):
    """The transport reply is missing the status code or header map of an HTTP response."""

    def __init__(self, reply: object) -> None:
        super().__init__(
            f"Transport reply is not an HTTP response: {type(reply).__name__}",
            code="NOT_HTTP",
            context={"reply_type": type(reply).__name__},
        )


# =============================================================================
# Decode Exceptions
# =============================================================================


class DecodeException(PyFetchException):
    """The response body could not be decoded into the requested form."""


class JSONParseException(DecodeException):
    """The response body is not valid JSON."""


class SchemaMismatchException(DecodeException):
    """The response JSON does not match the shape of the requested type."""
