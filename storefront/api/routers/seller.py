"""
Connected seller API endpoints.

Routes:
- POST /set - Set connected seller credentials
- GET /get - Inspect connected seller (token masked)

Dependencies: storefront.core.seller, storefront.models.seller
System role: Seller credential HTTP API
"""

from fastapi import APIRouter, Depends

from storefront.api.deps.dependencies import get_connected_seller, get_settings_dependency
from storefront.configs import Settings
from storefront.core.exceptions import ValidationError
from storefront.core.seller import ConnectedSeller
from storefront.models.common import OkResponse
from storefront.models.seller import SellerResponse, SetSellerRequest

from .router_utils import handle_storefront_errors

router = APIRouter(tags=["seller"])


@router.post("/set", response_model=OkResponse)
@handle_storefront_errors
async def set_seller(
    request: SetSellerRequest,
    seller: ConnectedSeller = Depends(get_connected_seller),
    settings: Settings = Depends(get_settings_dependency),
) -> OkResponse:
    """Replace the connected seller used by all store routes."""
    if not request.seller_access_token:
        raise ValidationError("sellerAccessToken required", field="sellerAccessToken")

    seller.connect(
        request.seller_access_token,
        request.seller_location_id,
        fallback_location_id=settings.square.location_id,
    )
    return OkResponse()


@router.get("/get", response_model=SellerResponse)
async def get_seller(seller: ConnectedSeller = Depends(get_connected_seller)) -> SellerResponse:
    return SellerResponse(
        seller_access_token=seller.masked_token(),
        seller_location_id=seller.location_id or None,
    )
