"""API routers."""

from .cart import router as cart_router
from .catalog import router as catalog_router
from .checkout import router as checkout_router
from .health import router as health_router
from .orders import router as orders_router
from .promo_codes import router as promo_codes_router
from .seller import router as seller_router

__all__ = [
    "cart_router",
    "catalog_router",
    "checkout_router",
    "health_router",
    "orders_router",
    "promo_codes_router",
    "seller_router",
]
