"""
Zendesk Client Library.

A type-safe async HTTP client for the Zendesk Support API.

Example usage:
    ```python
    from zendesk_client import ZendeskClient, PagerParameters

    async with ZendeskClient(subdomain="acme", email="agent@acme.com", api_token="...") as client:
        page = await client.organization_memberships.get_all(PagerParameters(page=2, page_size=1))
        membership = await client.organization_memberships.get(1234)
    ```
"""

__version__ = "0.1.0"

# Main client
from zendesk_client.client import ZendeskClient
from zendesk_client.config import ZendeskSettings

# HTTP client components (for advanced usage)
from zendesk_client.http import (
    ApiTokenAuthProvider,
    AsyncHTTPClient,
    AuthProvider,
    OAuthTokenAuthProvider,
)

# Base classes (for building custom clients)
from zendesk_client.base import BaseEndpointClient, ResourceClient
from zendesk_client.endpoints import OrganizationMembershipsClient

# Models
from zendesk_client.models import (
    JobStatus,
    OrganizationMembership,
    Page,
    PagerParameters,
)

# Exceptions
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

__all__ = [
    "__version__",
    "ZendeskClient",
    "ZendeskSettings",
    "AsyncHTTPClient",
    "AuthProvider",
    "ApiTokenAuthProvider",
    "OAuthTokenAuthProvider",
    "BaseEndpointClient",
    "ResourceClient",
    "OrganizationMembershipsClient",
    "JobStatus",
    "OrganizationMembership",
    "Page",
    "PagerParameters",
    "ZendeskClientError",
    "ZendeskRequestError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "ServiceUnavailableError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
    "exception_from_response",
]
