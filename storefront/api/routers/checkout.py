"""
Checkout API endpoints.

Routes:
- POST /checkout/links - Create hosted payment link with platform fee

Dependencies: storefront.application.services, storefront.models.checkout
System role: Hosted checkout HTTP API
"""

import logging

from fastapi import APIRouter, Body, Depends, Header, Query

from storefront.api.deps.dependencies import get_checkout_service
from storefront.application.services import CheckoutService
from storefront.models.checkout import CreatePaymentLinkRequest, PaymentLinkResponse

from .router_utils import handle_storefront_errors
from .router_utils.validators import require_order_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/checkout", tags=["checkout"])


@router.post("/links", response_model=PaymentLinkResponse)
@handle_storefront_errors
async def create_payment_link(
    request: CreatePaymentLinkRequest | None = Body(None),
    order_id: str | None = Query(None, alias="orderId"),
    x_seller_token: str | None = Header(None),
    checkout_service: CheckoutService = Depends(get_checkout_service),
) -> PaymentLinkResponse:
    """
    Create a payment link on the seller's account for an existing order.

    ``orderId`` comes from the body or the query string. The seller token
    comes from the ``X-Seller-Token`` header, the body ``sellerAccessToken``,
    or the connected seller, in that order.
    """
    checkout_service.tenants.ensure_seller()
    request = request or CreatePaymentLinkRequest()
    resolved_order_id = require_order_id(request.order_id or order_id)
    seller_token = x_seller_token or request.seller_access_token

    result = await checkout_service.create_payment_link(resolved_order_id, seller_token)
    return PaymentLinkResponse(**result)
