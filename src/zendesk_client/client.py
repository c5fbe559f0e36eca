"""
Main Zendesk API client.

This module provides the ZendeskClient class, the primary entry point
for interacting with the Zendesk API. It owns the HTTP session, picks the
authentication provider and hands out endpoint clients.
"""

from typing import Any, Dict, Optional, Type, TypeVar
import logging

import httpx

from zendesk_client.config import ZendeskSettings
from zendesk_client.endpoints import OrganizationMembershipsClient
from zendesk_client.http import (
    ApiTokenAuthProvider,
    AsyncHTTPClient,
    AuthProvider,
    OAuthTokenAuthProvider,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ZendeskClient:
    """
    Main client for the Zendesk API.

    Example usage:
        ```python
        async with ZendeskClient(subdomain="acme", email="agent@acme.com", api_token="...") as client:
            page = await client.organization_memberships.get_all(PagerParameters(page=1, page_size=50))
            membership = await client.organization_memberships.get(1234)
        ```
    """

    def __init__(
        self,
        subdomain: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        email: Optional[str] = None,
        api_token: Optional[str] = None,
        oauth_token: Optional[str] = None,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the Zendesk client.

        Args:
            subdomain: Account subdomain (e.g., "acme" for acme.zendesk.com)
            base_url: Full API URL, overrides subdomain
            email: Agent email for API token authentication
            api_token: API token, used together with email
            oauth_token: OAuth access token, takes precedence over api_token
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            transport: Custom httpx transport
            logger: Diagnostics sink handed to every endpoint client
        """
        self._settings = ZendeskSettings(
            subdomain=subdomain,
            base_url=base_url,
            email=email,
            api_token=api_token,
            oauth_token=oauth_token,
            timeout=timeout,
            headers=headers or {},
        )
        self._base_url = self._settings.api_url
        self._auth_provider = self._select_auth_provider(self._settings)
        self._http = AsyncHTTPClient(
            base_url=self._base_url,
            auth_provider=self._auth_provider,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )
        self._logger = logger

        # Endpoint clients (lazy-loaded)
        self._endpoint_clients: Dict[str, Any] = {}

    @classmethod
    def from_settings(
        cls,
        settings: ZendeskSettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "ZendeskClient":
        return cls(
            settings.subdomain,
            base_url=settings.base_url,
            email=settings.email,
            api_token=settings.api_token,
            oauth_token=settings.oauth_token,
            timeout=settings.timeout,
            headers=settings.headers,
            transport=transport,
            logger=logger,
        )

    @staticmethod
    def _select_auth_provider(settings: ZendeskSettings) -> Optional[AuthProvider]:
        if settings.oauth_token:
            return OAuthTokenAuthProvider(settings.oauth_token)
        if settings.email and settings.api_token:
            return ApiTokenAuthProvider(settings.email, settings.api_token)
        logger.debug("No credentials configured, requests will be unauthenticated")
        return None

    @property
    def base_url(self) -> str:
        """Get the base URL for the API."""
        return self._base_url

    @property
    def is_authenticated(self) -> bool:
        """Check if credentials are configured."""
        return self._auth_provider is not None and self._auth_provider.is_authenticated()

    @property
    def http(self) -> AsyncHTTPClient:
        """Get the underlying HTTP client for custom requests."""
        return self._http

    # =========================================================================
    # Endpoint Clients
    # =========================================================================

    def _get_endpoint_client(self, client_class: Type[T]) -> T:
        """Get or create an endpoint client instance."""
        class_name = client_class.__name__
        if class_name not in self._endpoint_clients:
            self._endpoint_clients[class_name] = client_class(self._http, logger=self._logger)
        return self._endpoint_clients[class_name]

    @property
    def organization_memberships(self) -> OrganizationMembershipsClient:
        return self._get_endpoint_client(OrganizationMembershipsClient)

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()
        self._endpoint_clients.clear()
        logger.debug("Client closed")

    async def __aenter__(self) -> "ZendeskClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        auth_status = "authenticated" if self.is_authenticated else "not authenticated"
        return f"ZendeskClient(base_url={self._base_url!r}, {auth_status})"
