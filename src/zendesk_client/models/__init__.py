from zendesk_client.models.base import JobStatus, Page, PagerParameters
from zendesk_client.models.organization_memberships import OrganizationMembership

__all__ = [
    "JobStatus",
    "OrganizationMembership",
    "Page",
    "PagerParameters",
]
