"""
Common response models and utilities.

Shared base model and the error envelope.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Request model accepting camelCase or snake_case field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: bool = True
    details: Any = Field(default=None, description="Message or remote errors array")


class OkResponse(BaseModel):
    """Acknowledgement for local state changes."""

    ok: bool = True
