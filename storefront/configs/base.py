"""
Base class for storefront settings.

Every settings group reads the process environment and an optional `.env`
file the same way; groups only add their own env prefix.

Dependencies: pydantic_settings
System role: Shared loading rules for storefront configuration
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Environment and `.env` loading shared by all settings groups."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
