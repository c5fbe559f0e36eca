"""Endpoint clients, one per Zendesk resource."""

from zendesk_client.endpoints.organization_memberships import OrganizationMembershipsClient

__all__ = [
    "OrganizationMembershipsClient",
]
