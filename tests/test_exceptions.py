"""Tests for exception classes."""

import pytest

from zendesk_client.exceptions import (
    ZendeskClientError,
    ZendeskRequestError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    ServiceUnavailableError,
    NetworkError,
    TimeoutError,
    ConnectionError,
    exception_from_response,
)


class TestZendeskClientError:
    """Tests for the base ZendeskClientError class."""

    def test_basic_creation(self):
        error = ZendeskClientError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.status_code is None
        assert error.error_code is None
        assert error.details == {}

    def test_str_includes_code_and_status(self):
        error = ZendeskClientError("Error", status_code=422, error_code="RecordInvalid")
        assert str(error) == "[RecordInvalid] Error (HTTP 422)"

    def test_repr(self):
        error = ZendeskClientError("Error", status_code=400, error_code="InvalidValue")
        repr_str = repr(error)
        assert "ZendeskClientError" in repr_str
        assert "400" in repr_str
        assert "InvalidValue" in repr_str


class TestZendeskRequestError:
    """Tests for the typed request exception."""

    def test_carries_status_and_content(self):
        error = ZendeskRequestError("Bad", status_code=418, content='{"error": "Teapot"}')
        assert error.status_code == 418
        assert error.content == '{"error": "Teapot"}'
        assert isinstance(error, ZendeskClientError)

    @pytest.mark.parametrize(
        "error_class, status_code",
        [
            (ValidationError, 422),
            (AuthenticationError, 401),
            (AuthorizationError, 403),
            (NotFoundError, 404),
            (ConflictError, 409),
            (RateLimitError, 429),
            (ServerError, 500),
            (ServiceUnavailableError, 503),
        ],
    )
    def test_subclasses_default_status(self, error_class, status_code):
        error = error_class()
        assert error.status_code == status_code
        assert isinstance(error, ZendeskRequestError)

    def test_rate_limit_retry_after(self):
        error = RateLimitError(retry_after=60)
        assert error.retry_after == 60


class TestNetworkErrors:
    """Tests for client-side network errors."""

    def test_network_errors_are_not_request_errors(self):
        for error in (NetworkError(), TimeoutError(), ConnectionError()):
            assert isinstance(error, NetworkError)
            assert not isinstance(error, ZendeskRequestError)
            assert error.status_code is None


class TestExceptionFromResponse:
    """Tests for exception_from_response."""

    @pytest.mark.parametrize(
        "status_code, expected",
        [
            (400, ValidationError),
            (401, AuthenticationError),
            (403, AuthorizationError),
            (404, NotFoundError),
            (409, ConflictError),
            (422, ValidationError),
            (429, RateLimitError),
            (500, ServerError),
            (503, ServiceUnavailableError),
            (507, ServerError),
            (302, ZendeskRequestError),
        ],
    )
    def test_mapping(self, status_code, expected):
        error = exception_from_response(status_code, "message")
        assert type(error) is expected
        assert error.status_code == status_code

    def test_preserves_payload(self):
        error = exception_from_response(
            503,
            "Maintenance",
            error_code="ServiceUnavailable",
            details={"window": "1h"},
            content="raw",
            retry_after=120,
        )
        assert error.error_code == "ServiceUnavailable"
        assert error.details == {"window": "1h"}
        assert error.content == "raw"
        assert error.retry_after == 120
