"""
Cart API endpoints.

Routes:
- POST /cart - Create draft order
- POST /cart/{order_id}/line-items - Add line item
- PUT /cart/{order_id}/line-items/{line_item_uid} - Update quantity
- DELETE /cart/{order_id}/line-items/{line_item_uid} - Remove line item
- POST /cart/{order_id}/discounts - Apply order-level discount
- DELETE /cart/{order_id}/discounts - Clear discounts

All mutations return the updated Square order.

Dependencies: storefront.application.services, storefront.models.cart
System role: Cart HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from storefront.api.deps.dependencies import get_order_service
from storefront.application.services import OrderService
from storefront.core.promo_codes import DiscountType
from storefront.models.cart import (
    AddLineItemRequest,
    ApplyDiscountRequest,
    CreateCartRequest,
    UpdateLineItemRequest,
)

from .router_utils import handle_storefront_errors
from .router_utils.validators import (
    parse_quantity,
    validate_add_line_item,
    validate_discount,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cart", tags=["cart"])


@router.post("")
@handle_storefront_errors
async def create_cart(
    request: CreateCartRequest | None = Body(None),
    order_service: OrderService = Depends(get_order_service),
) -> dict[str, Any]:
    """Create an OPEN draft order. Body: ``{"locationId"?}``."""
    location_id = request.location_id if request else None
    return await order_service.create_cart(location_id)


@router.post("/{order_id}/line-items")
@handle_storefront_errors
async def add_line_item(
    order_id: str,
    request: AddLineItemRequest | None = Body(None),
    order_service: OrderService = Depends(get_order_service),
) -> dict[str, Any]:
    """
    Add a line item priced from the catalog.

    Body: ``{"variationId": "<ITEM_VARIATION id>", "quantity": 2}``.
    """
    order_service.tenants.ensure_seller()
    quantity = validate_add_line_item(request or AddLineItemRequest())

    logger.info(
        "Adding line item",
        extra={"order_id": order_id, "variation_id": request.variation_id, "quantity": quantity},
    )
    return await order_service.add_line_item(order_id, request.variation_id, quantity)


@router.put("/{order_id}/line-items/{line_item_uid}")
@handle_storefront_errors
async def update_line_item(
    order_id: str,
    line_item_uid: str,
    request: UpdateLineItemRequest | None = Body(None),
    order_service: OrderService = Depends(get_order_service),
) -> dict[str, Any]:
    """Set the quantity of a line item, addressed by its uid (not the catalog id)."""
    order_service.tenants.ensure_seller()
    quantity = parse_quantity(request.quantity if request else None)
    return await order_service.update_line_item_quantity(order_id, line_item_uid, quantity)


@router.delete("/{order_id}/line-items/{line_item_uid}")
@handle_storefront_errors
async def remove_line_item(
    order_id: str,
    line_item_uid: str,
    order_service: OrderService = Depends(get_order_service),
) -> dict[str, Any]:
    return await order_service.remove_line_item(order_id, line_item_uid)


@router.post("/{order_id}/discounts")
@handle_storefront_errors
async def apply_discount(
    order_id: str,
    request: ApplyDiscountRequest | None = Body(None),
    order_service: OrderService = Depends(get_order_service),
) -> dict[str, Any]:
    """
    Apply an ORDER-level discount.

    Body, either:
    - ``{"promoCode": "WELCOME10"}``
    - ``{"name": "Black Friday", "type": "PERCENT"|"FIXED", "value": 10, "currency"?}``
    """
    order_service.tenants.ensure_seller()
    request = request or ApplyDiscountRequest()
    validate_discount(request)

    return await order_service.apply_discount(
        order_id,
        promo_code=request.promo_code,
        name=request.name,
        discount_type=DiscountType(request.type) if request.type and not request.promo_code else None,
        value=request.value,
        currency=request.currency,
    )


@router.delete("/{order_id}/discounts")
@handle_storefront_errors
async def clear_discounts(
    order_id: str,
    order_service: OrderService = Depends(get_order_service),
) -> dict[str, Any]:
    """Remove every discount from the order."""
    return await order_service.clear_discounts(order_id)
