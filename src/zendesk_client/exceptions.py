"""
Exception hierarchy for the Zendesk client library.

Every non-success HTTP response is raised as a ``ZendeskRequestError`` (or one
of its status-specific subclasses), which keeps the HTTP status and the raw
response content for diagnostics. Transport faults raise ``NetworkError``.
"""

from typing import Any, Dict, Optional


class ZendeskClientError(Exception):
    """
    Base exception for all Zendesk client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        error_code: Zendesk error identifier (e.g., "RecordNotFound")
        details: Additional error details from the response
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.insert(0, f"[{self.error_code}]")
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"error_code={self.error_code!r})"
        )


class ZendeskRequestError(ZendeskClientError):
    """
    The API answered with a status the client cannot treat as success.

    Attributes:
        content: Raw response body, kept verbatim for diagnostics
    """

    def __init__(
        self,
        message: str = "Request failed",
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        content: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )
        self.content = content


# =============================================================================
# Validation Errors (400, 422)
# =============================================================================


class ValidationError(ZendeskRequestError):
    """
    The request was rejected as invalid.

    Zendesk answers 422 with ``RecordInvalid`` for payloads that fail
    validation and 400 for malformed requests.
    """

    def __init__(
        self,
        message: str = "Validation error",
        *,
        status_code: int = 422,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        content: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
            content=content,
        )


# =============================================================================
# Authentication / Authorization Errors (401, 403)
# =============================================================================


class AuthenticationError(ZendeskRequestError):
    """Credentials are missing or were rejected."""

    def __init__(
        self,
        message: str = "Authentication required",
        *,
        status_code: int = 401,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        content: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
            content=content,
        )


class AuthorizationError(ZendeskRequestError):
    """The authenticated agent may not perform the requested operation."""

    def __init__(
        self,
        message: str = "Access denied",
        *,
        status_code: int = 403,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        content: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
            content=content,
        )


# =============================================================================
# Not Found Errors (404)
# =============================================================================


class NotFoundError(ZendeskRequestError):
    """
    Requested resource was not found.

    Single-entity reads turn this into ``None``; every other operation lets
    it propagate.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        *,
        status_code: int = 404,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        content: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
            content=content,
        )


# =============================================================================
# Conflict Errors (409)
# =============================================================================


class ConflictError(ZendeskRequestError):
    """Request conflicts with the current state of the resource."""

    def __init__(
        self,
        message: str = "Resource conflict",
        *,
        status_code: int = 409,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        content: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
            content=content,
        )


# =============================================================================
# Rate Limit Errors (429)
# =============================================================================


class RateLimitError(ZendeskRequestError):
    """
    Rate limit exceeded.

    The retry_after attribute carries the server's Retry-After value in
    seconds. The client does not retry on its own.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        status_code: int = 429,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        content: Optional[str] = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
            content=content,
        )
        self.retry_after = retry_after


# =============================================================================
# Server Errors (5xx)
# =============================================================================


class ServerError(ZendeskRequestError):
    """Server-side error occurred."""

    def __init__(
        self,
        message: str = "Server error",
        *,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        content: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
            content=content,
        )


class ServiceUnavailableError(ServerError):
    """The service is temporarily unavailable."""

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        *,
        status_code: int = 503,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        content: Optional[str] = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
            content=content,
        )
        self.retry_after = retry_after


# =============================================================================
# Network Errors (Client-side)
# =============================================================================


class NetworkError(ZendeskClientError):
    """
    Network-level error occurred.

    Raised when there's a connection problem, DNS failure, or other
    network-related issues.
    """

    def __init__(
        self,
        message: str = "Network error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=None,
            error_code=None,
            details=details,
        )


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class ConnectionError(NetworkError):
    """Failed to establish connection to the server."""

    def __init__(
        self,
        message: str = "Failed to connect to server",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# Exception Mapping
# =============================================================================

STATUS_CODE_EXCEPTIONS = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
    500: ServerError,
    502: ServerError,
    503: ServiceUnavailableError,
    504: ServerError,
}


def exception_from_response(
    status_code: int,
    message: str,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    content: Optional[str] = None,
    retry_after: Optional[int] = None,
) -> ZendeskRequestError:
    """
    Create an appropriate exception from an HTTP response.

    Args:
        status_code: HTTP status code
        message: Error message
        error_code: Zendesk error identifier
        details: Additional error details
        content: Raw response body
        retry_after: Seconds from the Retry-After header (429/503 only)

    Returns:
        Appropriate ZendeskRequestError subclass
    """
    exception_class = STATUS_CODE_EXCEPTIONS.get(status_code)
    if exception_class is None:
        exception_class = ServerError if 500 <= status_code < 600 else ZendeskRequestError

    kwargs: Dict[str, Any] = {
        "status_code": status_code,
        "error_code": error_code,
        "details": details,
        "content": content,
    }
    if exception_class in (RateLimitError, ServiceUnavailableError):
        kwargs["retry_after"] = retry_after
    return exception_class(message, **kwargs)
