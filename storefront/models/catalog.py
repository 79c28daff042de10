"""
Catalog request schemas.

Dependencies: pydantic
System role: Catalog API contracts
"""

from pydantic import Field

from storefront.models.common import CamelModel


class VariationRequest(CamelModel):
    """One sellable variation of an item. Price is in minor units."""

    name: str | None = Field(None, max_length=255, description="Variation name")
    price: int | None = Field(None, ge=0, description="Price in minor units")
    currency: str | None = Field(None, min_length=3, max_length=3, description="ISO 4217 code")
    sku: str | None = Field(None, description="Stock keeping unit")


class CreateItemRequest(CamelModel):
    """Request schema for creating an item with variations."""

    name: str | None = Field(None, description="Item name")
    description: str | None = Field(None, description="Item description")
    category_id: str | None = Field(None, description="Existing category object id")
    variations: list[VariationRequest] = Field(default_factory=list)
