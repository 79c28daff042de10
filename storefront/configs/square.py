"""
Square API configuration settings.

Platform account credentials, environment selection and HTTP client options
for the Square REST API.

Dependencies: pydantic, pydantic_settings
System role: Remote payment platform connection configuration
"""

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from storefront.configs.base import BaseSettings

PRODUCTION_BASE_URL = "https://connect.squareup.com"
SANDBOX_BASE_URL = "https://connect.squareupsandbox.com"


class SquareSettings(BaseSettings):
    """Square platform account configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SQUARE_",
        case_sensitive=False,
        extra="ignore",
    )

    access_token: str | None = Field(
        default=None,
        description="Platform (main account) access token",
    )
    env: str = Field(
        default="sandbox",
        description="Square environment (sandbox or production)",
    )
    location_id: str | None = Field(
        default=None,
        description="Default location used for orders and payment links",
    )
    api_version: str = Field(
        default="2024-07-17",
        description="Value sent in the Square-Version header",
    )
    timeout_seconds: float = Field(default=30.0, description="HTTP request timeout in seconds")

    @field_validator("env")
    @classmethod
    def normalize_env(cls, value: str) -> str:
        return value.strip().lower()

    @property
    def is_production(self) -> bool:
        """Whether requests go to the live Square environment."""
        return self.env == "production"

    @property
    def base_url(self) -> str:
        """
        Resolve the REST API base URL for the configured environment.

        Returns:
            str: Production URL when env is "production", sandbox otherwise
        """
        return PRODUCTION_BASE_URL if self.is_production else SANDBOX_BASE_URL
