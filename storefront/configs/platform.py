"""
Platform fee and checkout configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Application fee and hosted checkout configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from storefront.configs.base import BaseSettings


class PlatformSettings(BaseSettings):
    """Platform-side checkout settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PLATFORM_",
        case_sensitive=False,
        extra="ignore",
    )

    app_fee_cents: int = Field(
        default=200,
        ge=0,
        description="Application fee collected on seller payment links, in minor units",
    )
    redirect_url: str = Field(
        default="https://example.com/thanks",
        description="Where hosted checkout sends the buyer after payment",
    )
    default_currency: str = Field(
        default="USD",
        description="Currency used when neither request nor order specify one",
    )
