"""
Catalog API endpoints.

Routes:
- POST /catalog/items - Create item with variations
- GET /catalog/items - List/search items (cursor pagination)

Dependencies: storefront.application.services, storefront.models
System role: Catalog HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query

from storefront.api.deps.dependencies import get_catalog_service
from storefront.application.services import CatalogService
from storefront.models.catalog import CreateItemRequest

from .router_utils import handle_storefront_errors
from .router_utils.validators import validate_create_item

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.post("/items")
@handle_storefront_errors
async def create_item(
    request: CreateItemRequest,
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    """
    Create an ITEM and its ITEM_VARIATIONs.

    Body: ``{"name", "description"?, "categoryId"?, "variations": [{"name", "price", "currency", "sku"}]}``
    with prices in minor units. Returns Square's batch upsert result.
    """
    catalog_service.tenants.ensure_seller()
    validate_create_item(request)

    logger.info(
        "Creating catalog item",
        extra={"item_name": request.name, "variation_count": len(request.variations)},
    )
    return await catalog_service.create_item(
        name=request.name,
        variations=request.variations,
        description=request.description,
        category_id=request.category_id,
    )


@router.get("/items")
@handle_storefront_errors
async def list_items(
    cursor: str | None = None,
    limit: int | None = Query(None, ge=1, le=100),
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    """List items with their variations, ready for shopping UIs."""
    return await catalog_service.list_items(cursor=cursor, limit=limit)
