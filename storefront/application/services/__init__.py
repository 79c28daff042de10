"""Application services."""

from storefront.application.services.catalog_service import CatalogService
from storefront.application.services.checkout_service import CheckoutService
from storefront.application.services.order_service import OrderService
from storefront.application.services.tenancy import TenantRouter

__all__ = ["CatalogService", "CheckoutService", "OrderService", "TenantRouter"]
