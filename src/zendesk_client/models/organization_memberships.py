from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OrganizationMembership(BaseModel):
    """Link between a user and an organization.

    Instances are frozen: build a new one to submit a change.
    """

    id: Optional[int] = Field(None, description="Assigned by the server on creation")
    url: Optional[str] = None
    user_id: Optional[int] = Field(None, description="Member user ID")
    organization_id: Optional[int] = Field(None, description="Organization ID")
    default: Optional[bool] = Field(None, description="Whether this is the user's default organization")
    organization_name: Optional[str] = None
    view_tickets: Optional[bool] = None
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Update timestamp")

    model_config = ConfigDict(frozen=True)
