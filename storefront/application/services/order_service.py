"""
Order (cart) service orchestrator.

Cart operations on Square draft orders. Every mutation re-reads the order
and sends its current version, so Square rejects writes based on a stale
copy.

Dependencies: storefront.application.services.tenancy, storefront.core
System role: Cart and order use case orchestration
"""

import logging
from decimal import Decimal
from typing import Any

from storefront.application.services.tenancy import TenantRouter
from storefront.core.exceptions import LineItemNotFoundError, ValidationError
from storefront.core.payloads import (
    build_line_item,
    build_order_discount,
    format_quantity,
    new_idempotency_key,
    order_currency,
)
from storefront.core.promo_codes import DiscountType, PromoCodeStore

logger = logging.getLogger(__name__)


class OrderService:
    """Order service orchestrator."""

    def __init__(
        self,
        tenants: TenantRouter,
        promo_codes: PromoCodeStore,
        default_currency: str = "USD",
    ) -> None:
        """
        Initialize order service.

        Args:
            tenants: Credential and location resolver
            promo_codes: Promo code table
            default_currency: Currency when neither request nor order has one
        """
        self.tenants = tenants
        self.promo_codes = promo_codes
        self.default_currency = default_currency

    async def get_order(self, order_id: str) -> dict[str, Any]:
        """
        Retrieve an order with its latest version.

        Args:
            order_id: Square order id

        Returns:
            dict: The Square order object
        """
        result = await self.tenants.store_client().retrieve_order(order_id)
        return result.get("order") or {}

    async def update_order_with(
        self,
        order_id: str,
        patch: dict[str, Any],
        fields_to_clear: list[str] | None = None,
    ) -> dict[str, Any]:
        """
        Apply a sparse update stamped with the order's current version.

        Args:
            order_id: Square order id
            patch: Order fields to set
            fields_to_clear: Field paths to remove, e.g. ``line_items[uid]``

        Returns:
            dict: The updated order
        """
        current = await self.get_order(order_id)
        order = {
            **patch,
            "version": current.get("version"),
            "location_id": self.tenants.resolve_location(current.get("location_id")),
        }
        body: dict[str, Any] = {"order": order, "idempotency_key": new_idempotency_key()}
        if fields_to_clear:
            body["fields_to_clear"] = fields_to_clear

        result = await self.tenants.store_client().update_order(order_id, body)
        updated = result.get("order") or {}
        logger.info(
            "Order updated",
            extra={
                "order_id": order_id,
                "from_version": current.get("version"),
                "to_version": updated.get("version"),
                "fields_cleared": len(fields_to_clear or []),
            },
        )
        return updated

    async def create_cart(self, location_id: str | None = None) -> dict[str, Any]:
        """
        Create an OPEN draft order to act as a cart.

        Args:
            location_id: Optional override of the seller/platform location

        Raises:
            ValidationError: If no location can be resolved
        """
        client = self.tenants.store_client()
        resolved = self.tenants.resolve_location(location_id)
        if not resolved:
            raise ValidationError(
                "locationId required (no default location configured)", field="locationId"
            )

        result = await client.create_order(
            {
                "idempotency_key": new_idempotency_key(),
                "order": {"location_id": resolved, "state": "OPEN"},
            }
        )
        order = result.get("order") or {}
        logger.info("Cart created", extra={"order_id": order.get("id"), "location_id": resolved})
        return order

    async def add_line_item(
        self, order_id: str, variation_id: str, quantity: int | str | Decimal
    ) -> dict[str, Any]:
        """Add a catalog-priced line item with a fresh uid."""
        return await self.update_order_with(
            order_id, {"line_items": [build_line_item(variation_id, quantity)]}
        )

    async def update_line_item_quantity(
        self, order_id: str, line_item_uid: str, quantity: int | str | Decimal
    ) -> dict[str, Any]:
        """
        Change the quantity of one line item.

        Raises:
            LineItemNotFoundError: If the order has no line item with that uid
        """
        current = await self.get_order(order_id)
        if not any(li.get("uid") == line_item_uid for li in current.get("line_items") or []):
            raise LineItemNotFoundError(order_id, line_item_uid)

        return await self.update_order_with(
            order_id,
            {"line_items": [{"uid": line_item_uid, "quantity": format_quantity(quantity)}]},
        )

    async def remove_line_item(self, order_id: str, line_item_uid: str) -> dict[str, Any]:
        return await self.update_order_with(order_id, {}, [f"line_items[{line_item_uid}]"])

    async def apply_discount(
        self,
        order_id: str,
        promo_code: str | None = None,
        name: str | None = None,
        discount_type: DiscountType | None = None,
        value: float | None = None,
        currency: str | None = None,
    ) -> dict[str, Any]:
        """
        Add an ORDER-scoped discount, by promo code or given directly.

        The new discount gets a fresh uid, so existing discounts stay on the
        order alongside it.

        Raises:
            PromoCodeNotFoundError: If ``promo_code`` is unknown
        """
        order = await self.get_order(order_id)
        resolved_currency = currency or order_currency(order, self.default_currency)

        if promo_code:
            rule = self.promo_codes.get(promo_code)
            discount = build_order_discount(
                rule.name or promo_code.upper(), rule.type, rule.value, resolved_currency
            )
        else:
            discount = build_order_discount(name, discount_type, value, resolved_currency)

        logger.info(
            "Applying discount",
            extra={
                "order_id": order_id,
                "promo_code": promo_code.upper() if promo_code else None,
                "discount_name": discount["name"],
            },
        )
        return await self.update_order_with(order_id, {"discounts": [discount]})

    async def clear_discounts(self, order_id: str) -> dict[str, Any]:
        return await self.update_order_with(order_id, {}, ["discounts"])

    async def calculate(self, order_id: str) -> dict[str, Any]:
        """Recompute totals for the current order without persisting them."""
        order = await self.get_order(order_id)
        result = await self.tenants.store_client().calculate_order({"order": order})
        return result.get("order") or {}
