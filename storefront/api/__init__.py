"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    cart_router,
    catalog_router,
    checkout_router,
    health_router,
    orders_router,
    promo_codes_router,
    seller_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(catalog_router)
api_router.include_router(promo_codes_router)
api_router.include_router(seller_router)
api_router.include_router(cart_router)
api_router.include_router(orders_router)
api_router.include_router(checkout_router)

__all__ = ["api_router"]
