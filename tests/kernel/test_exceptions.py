"""Tests for the pyfetch exception hierarchy."""

from pyfetch.kernel.exceptions import (
    DecodeException,
    InvalidURLException,
    JSONParseException,
    MissingURLException,
    NotAnHTTPResponseException,
    PyFetchException,
    RequestException,
    SchemaMismatchException,
)


class TestPyFetchException:
    def test_basic_creation(self):
        exc = PyFetchException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = PyFetchException("bad", code="X_001", context={"url": "http://x"})
        assert exc.code == "X_001"
        assert exc.context["url"] == "http://x"

    def test_context_defaults_to_empty_dict(self):
        exc = PyFetchException("test")
        exc.context["key"] = "value"
        assert PyFetchException("test2").context == {}


class TestSpecificExceptions:
    def test_invalid_url_message_and_code(self):
        exc = InvalidURLException("ht!tp://", "bad scheme")
        assert str(exc) == "Invalid URL: 'ht!tp://' (bad scheme)"
        assert exc.code == "INVALID_URL"
        assert exc.context == {"url": "ht!tp://"}

    def test_invalid_url_without_reason(self):
        assert str(InvalidURLException("x")) == "Invalid URL: 'x'"

    def test_missing_url(self):
        exc = MissingURLException()
        assert str(exc) == "Request has no URL"
        assert exc.code == "MISSING_URL"

    def test_not_http_names_reply_type(self):
        exc = NotAnHTTPResponseException(b"raw")
        assert exc.code == "NOT_HTTP"
        assert exc.context == {"reply_type": "bytes"}
        assert "bytes" in str(exc)


class TestExceptionHierarchy:
    def test_request_errors(self):
        assert issubclass(RequestException, PyFetchException)
        assert issubclass(InvalidURLException, RequestException)
        assert issubclass(MissingURLException, RequestException)

    def test_decode_errors(self):
        assert issubclass(DecodeException, PyFetchException)
        assert issubclass(JSONParseException, DecodeException)
        assert issubclass(SchemaMismatchException, DecodeException)

    def test_not_http_is_pyfetch(self):
        assert issubclass(NotAnHTTPResponseException, PyFetchException)

    def test_catch_all_pyfetch_exceptions(self):
        exceptions = [
            InvalidURLException("x"),
            MissingURLException(),
            NotAnHTTPResponseException(None),
            JSONParseException("bad json"),
            SchemaMismatchException("bad shape"),
        ]
        for exc in exceptions:
            try:
                raise exc
            except PyFetchException as caught:
                assert caught is exc
