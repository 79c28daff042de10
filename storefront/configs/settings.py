"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from storefront.configs.base import BaseSettings
from storefront.configs.platform import PlatformSettings
from storefront.configs.server import ServerSettings
from storefront.configs.square import SquareSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    debug: bool = Field(
        default=False,
        description="Run FastAPI in debug mode (tracebacks in 500 pages)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Aggregated settings
    square: SquareSettings = Field(default_factory=SquareSettings)
    platform: PlatformSettings = Field(default_factory=PlatformSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from storefront.configs import get_settings
        settings = get_settings()
        token = settings.square.access_token
    """
    return Settings()
