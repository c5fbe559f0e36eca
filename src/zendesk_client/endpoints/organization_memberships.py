"""
Organization memberships endpoint client.

Memberships link users to organizations. Collections can be read globally,
per organization or per user; single memberships can be read, created and
deleted globally or through the owning user.
"""

from typing import AsyncIterator, Iterable, List, Optional
import logging

from zendesk_client.base import ResourceClient
from zendesk_client.http import AsyncHTTPClient
from zendesk_client.models import JobStatus, OrganizationMembership, Page, PagerParameters

RESOURCE = "organization_memberships"


class OrganizationMembershipsClient(ResourceClient[OrganizationMembership]):
    """
    Client for organization memberships endpoints.
    """

    def __init__(
        self,
        http_client: AsyncHTTPClient,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(
            http_client,
            response_model=OrganizationMembership,
            singular_key="organization_membership",
            plural_key="organization_memberships",
            logger=logger,
        )

    # =========================================================================
    # Collections
    # =========================================================================

    async def get_all(
        self,
        pager: Optional[PagerParameters] = None,
    ) -> Page[OrganizationMembership]:
        """List one page of all memberships in the account."""
        return await self._get_page(self._build_path(RESOURCE), pager)

    async def get_all_for_organization(
        self,
        organization_id: int,
        pager: Optional[PagerParameters] = None,
    ) -> Page[OrganizationMembership]:
        """
        List one page of the memberships of an organization.

        An organization without members yields an empty page; an unknown or
        invalid organization raises ``ZendeskRequestError``.
        """
        return await self._get_page(self._build_path("organizations", organization_id, RESOURCE), pager)

    async def get_all_for_user(
        self,
        user_id: int,
        pager: Optional[PagerParameters] = None,
    ) -> Page[OrganizationMembership]:
        """List one page of the memberships of a user."""
        return await self._get_page(self._build_path("users", user_id, RESOURCE), pager)

    async def iterate_all(self, page_size: int = 100) -> AsyncIterator[OrganizationMembership]:
        """Yield every membership in the account, one page request at a time."""
        async for membership in self._iterate_pages(self._build_path(RESOURCE), page_size=page_size):
            yield membership

    # =========================================================================
    # Single memberships
    # =========================================================================

    async def get(self, membership_id: int) -> Optional[OrganizationMembership]:
        """Get a membership by ID, or None if it does not exist."""
        return await self._get_single(self._build_path(RESOURCE, membership_id))

    async def get_for_user_and_organization(
        self,
        user_id: int,
        organization_id: int,
    ) -> Optional[OrganizationMembership]:
        """Get the membership of a user in an organization, or None if there is none."""
        return await self._get_single(self._build_path("users", user_id, RESOURCE, organization_id))

    async def create(self, membership: OrganizationMembership) -> OrganizationMembership:
        """Create a membership and return it as stored by the server."""
        return await self._post_single(self._build_path(RESOURCE), membership)

    async def post_for_user(
        self,
        membership: OrganizationMembership,
        user_id: int,
    ) -> OrganizationMembership:
        """Create a membership through the owning user."""
        return await self._post_single(self._build_path("users", user_id, RESOURCE), membership)

    async def create_many(self, memberships: Iterable[OrganizationMembership]) -> JobStatus:
        """
        Create several memberships in one request.

        Returns:
            The bulk job status; ``total`` is the number of accepted memberships

        Raises:
            ZendeskRequestError: If the server rejects the batch. There is no
                per-membership partial success.
        """
        return await self._post_many(self._build_path(RESOURCE, "create_many"), memberships)

    async def make_default(
        self,
        user_id: int,
        membership_id: int,
    ) -> Page[OrganizationMembership]:
        """Make a membership the user's default; returns the user's memberships."""
        response = await self._put(self._build_path("users", user_id, RESOURCE, membership_id, "make_default"))
        return self._parse_page(response)

    async def delete(self, membership_id: int) -> None:
        """Delete a membership."""
        await self._delete(self._build_path(RESOURCE, membership_id))

    async def delete_for_user(self, user_id: int, membership_id: int) -> None:
        """Delete a membership through the owning user."""
        await self._delete(self._build_path("users", user_id, RESOURCE, membership_id))

    async def delete_many(self, membership_ids: List[int]) -> JobStatus:
        """Delete several memberships in one request."""
        return await self._delete_many(self._build_path(RESOURCE, "destroy_many"), membership_ids)
