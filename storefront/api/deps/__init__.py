"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_catalog_service,
    get_checkout_service,
    get_connected_seller,
    get_order_service,
    get_promo_code_store,
    get_service_cache,
    get_settings_dependency,
    get_tenant_router,
)

__all__ = [
    "get_catalog_service",
    "get_checkout_service",
    "get_connected_seller",
    "get_order_service",
    "get_promo_code_store",
    "get_service_cache",
    "get_settings_dependency",
    "get_tenant_router",
]
