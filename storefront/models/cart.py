"""
Cart and order request schemas.

Fields are loosely typed. Presence and type checks happen in the
cart validators so failures map to 400 with a readable message.

Dependencies: pydantic
System role: Cart API contracts
"""

from storefront.models.common import CamelModel


class CreateCartRequest(CamelModel):
    location_id: str | None = None


class AddLineItemRequest(CamelModel):
    variation_id: str | None = None
    quantity: int | float | bool | str | None = None


class UpdateLineItemRequest(CamelModel):
    quantity: int | float | bool | str | None = None


class ApplyDiscountRequest(CamelModel):
    """Either ``promo_code`` or a direct ``name``/``type``/``value`` discount."""

    promo_code: str | None = None
    name: str | None = None
    type: str | None = None
    value: int | float | bool | str | None = None
    currency: str | None = None
