"""
Promo code schemas.

Dependencies: pydantic
System role: Promo code API contracts
"""

from storefront.models.common import CamelModel, OkResponse


class CreatePromoCodeRequest(CamelModel):
    """Request schema for creating a promo code; checked in the validators."""

    code: str | None = None
    type: str | None = None
    value: int | float | bool | str | None = None
    name: str | None = None


class PromoCodeCreatedResponse(OkResponse):
    code: str


class PromoCodeResponse(CamelModel):
    code: str
    type: str
    value: int | float
    name: str
