"""
Async HTTP client for the Zendesk API.

This module provides the transport layer built on httpx with:
- API token and OAuth authentication
- Request/response logging
- Mapping of error responses to typed exceptions
- Timeout configuration
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple, Union
import base64
import logging

import httpx
from pydantic import BaseModel

from zendesk_client.exceptions import (
    ConnectionError as ClientConnectionError,
    NetworkError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)

logger = logging.getLogger(__name__)


class AuthProvider(ABC):
    """Abstract base class for authentication providers."""

    @abstractmethod
    async def get_authorization(self) -> Optional[str]:
        """Get the value for the Authorization header."""
        ...

    @abstractmethod
    def is_authenticated(self) -> bool:
        """Check if credentials are available."""
        ...


class ApiTokenAuthProvider(AuthProvider):
    """Basic authentication with an agent email and an API token."""

    def __init__(self, email: Optional[str] = None, api_token: Optional[str] = None):
        self._email = email
        self._api_token = api_token

    async def get_authorization(self) -> Optional[str]:
        if not self.is_authenticated():
            return None
        raw = f"{self._email}/token:{self._api_token}".encode("utf-8")
        return f"Basic {base64.b64encode(raw).decode('ascii')}"

    def is_authenticated(self) -> bool:
        return bool(self._email and self._api_token)


class OAuthTokenAuthProvider(AuthProvider):
    """Bearer authentication with an OAuth access token."""

    def __init__(self, access_token: Optional[str] = None):
        self._access_token = access_token

    async def get_authorization(self) -> Optional[str]:
        if self._access_token:
            return f"Bearer {self._access_token}"
        return None

    def is_authenticated(self) -> bool:
        return bool(self._access_token)


class AsyncHTTPClient:
    """
    Async HTTP client for Zendesk API requests.

    This client handles:
    - Base URL management
    - Authentication header injection
    - Response parsing and error handling

    It never retries. Every non-2xx response is raised as a
    ``ZendeskRequestError`` subclass.
    """

    def __init__(
        self,
        base_url: str,
        auth_provider: Optional[AuthProvider] = None,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            base_url: Base URL for the API (e.g., "https://acme.zendesk.com/api/v2")
            auth_provider: Authentication provider for the Authorization header
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            transport: Custom httpx transport (e.g., ``httpx.MockTransport`` in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.auth_provider = auth_provider
        self.timeout = timeout
        self._default_headers = headers or {}
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncHTTPClient":
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_headers(self, extra_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Build request headers."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            **self._default_headers,
        }
        if extra_headers:
            headers.update(extra_headers)
        return headers

    async def _add_auth_header(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Add authentication header if available."""
        if self.auth_provider and self.auth_provider.is_authenticated():
            authorization = await self.auth_provider.get_authorization()
            if authorization:
                headers["Authorization"] = authorization
        return headers

    @staticmethod
    def _parse_error_body(response: httpx.Response) -> Tuple[str, Optional[str], Dict[str, Any]]:
        """
        Extract message, error code and details from a Zendesk error body.

        Zendesk uses two shapes:
        ``{"error": "RecordNotFound", "description": "Not found"}`` and
        ``{"error": {"title": "Forbidden", "message": "..."}}``.
        """
        status_code = response.status_code
        try:
            error_data = response.json()
        except ValueError:
            return response.text or f"HTTP {status_code}", None, {}

        if not isinstance(error_data, dict):
            return response.text or f"HTTP {status_code}", None, {}

        error = error_data.get("error")
        details = error_data.get("details")
        if isinstance(error, dict):
            error_code = error.get("title")
            detail = error.get("message") or error_code
        else:
            error_code = error
            detail = error_data.get("description") or error_data.get("message") or error

        if not detail:
            detail = response.text or f"HTTP {status_code}"
        return str(detail), error_code, details if isinstance(details, dict) else {}

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Convert HTTP error responses to appropriate exceptions."""
        detail, error_code, details = self._parse_error_body(response)

        retry_after = response.headers.get("Retry-After")
        try:
            retry_after_seconds = int(retry_after) if retry_after else None
        except ValueError:
            retry_after_seconds = None

        raise exception_from_response(
            response.status_code,
            detail,
            error_code=error_code,
            details=details,
            content=response.text,
            retry_after=retry_after_seconds,
        )

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        headers: Optional[Dict[str, str]] = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """
        Make an HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Request path (will be joined with base_url)
            params: Query parameters
            json_data: JSON body data (can be dict or Pydantic model)
            headers: Additional headers
            authenticated: Whether to include auth header

        Returns:
            httpx.Response object

        Raises:
            ZendeskRequestError: On non-2xx responses
            NetworkError: On connection failures
            TimeoutError: On request timeout
        """
        client = await self._get_client()

        request_headers = self._build_headers(headers)
        if authenticated:
            request_headers = await self._add_auth_header(request_headers)

        if json_data is not None and isinstance(json_data, BaseModel):
            json_data = json_data.model_dump(mode="json", exclude_none=True)

        if params:
            params = {k: v for k, v in params.items() if v is not None}

        logger.debug(f"{method} {path} params={params}")
        try:
            response = await client.request(
                method=method,
                url=path,
                params=params,
                json=json_data,
                headers=request_headers,
            )
        except httpx.TimeoutException as e:
            logger.warning(f"{method} {path} timed out: {e}")
            raise ClientTimeoutError(f"Request timed out: {e}") from e
        except httpx.ConnectError as e:
            logger.warning(f"{method} {path} could not connect: {e}")
            raise ClientConnectionError(f"Connection failed: {e}") from e
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise NetworkError(f"Request failed: {e}") from e

        logger.debug(f"{method} {path} -> HTTP {response.status_code}")
        if not response.is_success:
            logger.warning(f"{method} {path} failed with HTTP {response.status_code}")
            self._handle_error_response(response)
        return response

    async def get(
        self,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """Make a GET request."""
        return await self._request(
            "GET",
            path,
            params=params,
            headers=headers,
            authenticated=authenticated,
        )

    async def post(
        self,
        path: str,
        *,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """Make a POST request."""
        return await self._request(
            "POST",
            path,
            json_data=json_data,
            params=params,
            headers=headers,
            authenticated=authenticated,
        )

    async def put(
        self,
        path: str,
        *,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """Make a PUT request."""
        return await self._request(
            "PUT",
            path,
            json_data=json_data,
            params=params,
            headers=headers,
            authenticated=authenticated,
        )

    async def delete(
        self,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """Make a DELETE request."""
        return await self._request(
            "DELETE",
            path,
            params=params,
            headers=headers,
            authenticated=authenticated,
        )
