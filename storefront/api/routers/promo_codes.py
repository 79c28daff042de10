"""
Promo code API endpoints.

Routes:
- POST /promo-codes - Create or overwrite a promo code
- GET /promo-codes/{code} - Validate a promo code

Dependencies: storefront.core.promo_codes, storefront.models.promo
System role: Promo code HTTP API
"""

from fastapi import APIRouter, Depends

from storefront.api.deps.dependencies import get_promo_code_store
from storefront.core.promo_codes import PromoCodeStore, normalize_code
from storefront.models.promo import (
    CreatePromoCodeRequest,
    PromoCodeCreatedResponse,
    PromoCodeResponse,
)

from .router_utils import handle_storefront_errors
from .router_utils.validators import validate_promo_code

router = APIRouter(prefix="/promo-codes", tags=["promo-codes"])


@router.post("", response_model=PromoCodeCreatedResponse)
@handle_storefront_errors
async def create_promo_code(
    request: CreatePromoCodeRequest,
    promo_codes: PromoCodeStore = Depends(get_promo_code_store),
) -> PromoCodeCreatedResponse:
    """
    Create a promo code.

    Body: ``{"code": "WELCOME10", "type": "PERCENT"|"FIXED", "value": 10, "name"?}``.
    FIXED values are minor units (500 = $5.00).
    """
    validate_promo_code(request)
    code = promo_codes.create(request.code, request.type, request.value, request.name)
    return PromoCodeCreatedResponse(code=code)


@router.get("/{code}", response_model=PromoCodeResponse)
@handle_storefront_errors
async def get_promo_code(
    code: str,
    promo_codes: PromoCodeStore = Depends(get_promo_code_store),
) -> PromoCodeResponse:
    rule = promo_codes.get(code)
    return PromoCodeResponse(code=normalize_code(code), **rule.to_dict())
