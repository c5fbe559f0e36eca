"""Pytest configuration and fixtures for zendesk-client tests."""

import logging
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import httpx
import pytest
import pytest_asyncio

from zendesk_client.endpoints import OrganizationMembershipsClient
from zendesk_client.http import AsyncHTTPClient

from sample_sites import BASE_URL, OrganizationMembershipsSampleSite


# ============================================================================
# Mock HTTP Responses
# ============================================================================


def create_mock_response(
    status_code: int = 200,
    json_data: Optional[Any] = None,
    text: str = "",
    headers: Optional[Dict[str, str]] = None,
) -> httpx.Response:
    """Create a mock httpx.Response for testing."""
    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    response.text = text if text else (str(json_data) if json_data else "")
    response.headers = headers or {}

    if json_data is not None:
        response.json.return_value = json_data
    else:
        response.json.side_effect = ValueError("No JSON content")

    return response


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def make_response():
    """Factory for mock httpx responses."""
    return create_mock_response


@pytest.fixture
def base_url():
    """Default base URL for testing."""
    return BASE_URL


@pytest.fixture
def sample_site():
    """A fresh simulated server holding 100 memberships."""
    return OrganizationMembershipsSampleSite()


@pytest_asyncio.fixture
async def http_client(sample_site, base_url):
    """HTTP client wired to the sample site."""
    client = AsyncHTTPClient(base_url=base_url, transport=sample_site.transport)
    yield client
    await client.close()


@pytest.fixture
def memberships(http_client):
    """Organization memberships client talking to the sample site."""
    return OrganizationMembershipsClient(http_client, logger=logging.getLogger("tests.memberships"))


@pytest.fixture
def mock_membership_data():
    """Mock membership payload."""
    return {
        "id": 4,
        "url": f"{BASE_URL}/organization_memberships/4.json",
        "user_id": 29,
        "organization_id": 12,
        "default": True,
        "created_at": "2009-05-13T00:07:08Z",
        "updated_at": "2011-07-22T00:11:12Z",
    }


@pytest.fixture
def mock_error_response():
    """Mock Zendesk error body."""
    return {
        "error": "RecordInvalid",
        "description": "Record validation errors",
        "details": {"user_id": [{"description": "User can't be blank"}]},
    }
