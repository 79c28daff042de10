"""
Connected seller schemas.

Dependencies: pydantic
System role: Seller credential API contracts
"""

from pydantic import Field

from storefront.models.common import CamelModel


class SetSellerRequest(CamelModel):
    seller_access_token: str | None = Field(None, description="Seller OAuth access token")
    seller_location_id: str | None = Field(None, description="Seller default location")


class SellerResponse(CamelModel):
    """Connected seller view with the token masked."""

    seller_access_token: str | None = None
    seller_location_id: str | None = None
