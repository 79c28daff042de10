"""
Checkout service orchestrator.

Creates hosted payment links on the seller's account with an application
fee paid to the platform.

Dependencies: storefront.application.services.tenancy, storefront.core.payloads
System role: Hosted checkout use case orchestration
"""

import logging
from typing import Any

from storefront.application.services.tenancy import TenantRouter
from storefront.core.payloads import (
    build_payment_link_line_items,
    new_idempotency_key,
    order_currency,
)

logger = logging.getLogger(__name__)


class CheckoutService:
    """Checkout service orchestrator."""

    def __init__(
        self,
        tenants: TenantRouter,
        app_fee_cents: int,
        redirect_url: str,
        default_currency: str = "USD",
    ) -> None:
        """
        Initialize checkout service.

        Args:
            tenants: Credential and location resolver
            app_fee_cents: Platform fee per link, in minor units
            redirect_url: Post-payment redirect for the buyer
            default_currency: Fallback currency
        """
        self.tenants = tenants
        self.app_fee_cents = app_fee_cents
        self.redirect_url = redirect_url
        self.default_currency = default_currency

    async def create_payment_link(
        self, order_id: str, seller_token: str | None = None
    ) -> dict[str, Any]:
        """
        Create a payment link reproducing an existing order.

        Payment links cannot attach an order by id, so the order is read on
        the seller's account and its lines rebuilt as quick items.

        Args:
            order_id: Order to charge for
            seller_token: Seller token from the request, if any

        Returns:
            dict: ``{"url": ..., "payment_link": {...}}``

        Raises:
            SellerNotConnectedError: If no seller token is available
            PaymentLinkError: If a line item price cannot be inferred
        """
        client = self.tenants.checkout_client(seller_token)

        order = (await client.retrieve_order(order_id)).get("order") or {}
        line_items = build_payment_link_line_items(order, self.default_currency)
        currency = order_currency(order, self.default_currency)

        result = await client.create_payment_link(
            {
                "idempotency_key": new_idempotency_key(),
                "order": {
                    "location_id": self.tenants.resolve_location(order.get("location_id")),
                    "line_items": line_items,
                },
                "checkout_options": {
                    "redirect_url": self.redirect_url,
                    "app_fee_money": {"amount": self.app_fee_cents, "currency": currency},
                },
            }
        )
        payment_link = result.get("payment_link") or {}
        logger.info(
            "Payment link created",
            extra={
                "order_id": order_id,
                "payment_link_id": payment_link.get("id"),
                "app_fee_cents": self.app_fee_cents,
                "currency": currency,
            },
        )
        return {"url": payment_link.get("url"), "payment_link": payment_link or None}
