"""
Connection settings for the Zendesk client.
"""

from typing import Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ZendeskSettings(BaseSettings):
    """
    Connection settings for the Zendesk API.

    Settings are loaded from environment variables with ZENDESK_ prefix.
    Example: ZENDESK_SUBDOMAIN, ZENDESK_API_TOKEN, etc.
    Keyword arguments take precedence over the environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="ZENDESK_",
        extra="ignore",
    )

    subdomain: Optional[str] = Field(None, description="Account subdomain, e.g. 'acme' for acme.zendesk.com")
    base_url: Optional[str] = Field(None, description="Full API URL; overrides subdomain")
    email: Optional[str] = Field(None, description="Agent email for API token authentication")
    api_token: Optional[str] = None
    oauth_token: Optional[str] = None
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    headers: Dict[str, str] = Field(default_factory=dict)

    @property
    def api_url(self) -> str:
        if self.base_url:
            return self.base_url.rstrip("/")
        if self.subdomain:
            return f"https://{self.subdomain}.zendesk.com/api/v2"
        raise ValueError("Either base_url or subdomain must be set")

    @classmethod
    def from_env(cls) -> "ZendeskSettings":
        """Load settings from the process environment only."""
        return cls()
