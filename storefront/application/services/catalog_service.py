"""
Catalog service orchestrator.

Creates items with variations and lists sellable items.

Dependencies: storefront.application.services.tenancy, storefront.core.payloads
System role: Catalog use case orchestration
"""

import logging
from typing import Any, Sequence

from storefront.application.services.tenancy import TenantRouter
from storefront.core.payloads import build_catalog_objects, compact, new_idempotency_key
from storefront.models.catalog import VariationRequest

logger = logging.getLogger(__name__)


class CatalogService:
    """Catalog service orchestrator."""

    def __init__(self, tenants: TenantRouter, default_currency: str = "USD") -> None:
        self.tenants = tenants
        self.default_currency = default_currency

    async def create_item(
        self,
        name: str,
        variations: Sequence[VariationRequest],
        description: str | None = None,
        category_id: str | None = None,
    ) -> dict[str, Any]:
        """
        Upsert an ITEM and its ITEM_VARIATIONs in one batch.

        Args:
            name: Item name
            variations: At least one variation
            description: Optional description
            category_id: Optional category id

        Returns:
            dict: Square batch upsert result (objects and id mappings)
        """
        client = self.tenants.store_client()
        objects = build_catalog_objects(
            name,
            variations,
            description=description,
            category_id=category_id,
            default_currency=self.default_currency,
        )
        result = await client.batch_upsert_catalog_objects(
            {"idempotency_key": new_idempotency_key(), "batches": [{"objects": objects}]}
        )
        logger.info(
            "Catalog item created",
            extra={"item_name": name, "variation_count": len(variations)},
        )
        return result

    async def list_items(self, cursor: str | None = None, limit: int | None = None) -> dict[str, Any]:
        """Search catalog items (items with their variations), one page at a time."""
        client = self.tenants.store_client()
        return await client.search_catalog_items(compact({"cursor": cursor, "limit": limit}))
