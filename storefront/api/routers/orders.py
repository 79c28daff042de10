"""
Order API endpoints.

Routes:
- POST /orders/{order_id}/calculate - Recompute totals without persisting
- GET /orders/{order_id} - Fetch order

Dependencies: storefront.application.services
System role: Order HTTP API
"""

from typing import Any

from fastapi import APIRouter, Depends

from storefront.api.deps.dependencies import get_order_service
from storefront.application.services import OrderService

from .router_utils import handle_storefront_errors

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("/{order_id}/calculate")
@handle_storefront_errors
async def calculate_order(
    order_id: str,
    order_service: OrderService = Depends(get_order_service),
) -> dict[str, Any]:
    """Return the order with taxes and discounts applied; nothing is saved."""
    return await order_service.calculate(order_id)


@router.get("/{order_id}")
@handle_storefront_errors
async def get_order(
    order_id: str,
    order_service: OrderService = Depends(get_order_service),
) -> dict[str, Any]:
    return await order_service.get_order(order_id)
