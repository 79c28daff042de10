"""
HTTP server and tenancy configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Web server binding and connected-seller policy
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from storefront.configs.base import BaseSettings


class ServerSettings(BaseSettings):
    """Server binding and tenancy policy."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STOREFRONT_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8081, description="Bind port")
    require_connected_seller: bool = Field(
        default=False,
        description="Reject store operations until a seller is set via /api/set",
    )
