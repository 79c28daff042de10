"""
Checkout schemas.

Dependencies: pydantic
System role: Payment link API contracts
"""

from typing import Any

from storefront.models.common import CamelModel


class CreatePaymentLinkRequest(CamelModel):
    order_id: str | None = None
    seller_access_token: str | None = None


class PaymentLinkResponse(CamelModel):
    url: str | None = None
    payment_link: dict[str, Any] | None = None
