"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: storefront.configs, storefront.application, storefront.boundary
System role: DI container for service injection
"""

from fastapi import Depends

from storefront.configs import Settings, get_settings
from storefront.application.services import (
    CatalogService,
    CheckoutService,
    OrderService,
    TenantRouter,
)
from storefront.boundary.square.client import SquareClientFactory
from storefront.core.promo_codes import PromoCodeStore, default_promo_codes
from storefront.core.seller import ConnectedSeller


class ServiceCache:
    """Container for process-lifetime instances."""

    def __init__(self):
        self._square_factory = None
        self._promo_codes = None
        self._seller = None

    @property
    def square_factory(self) -> SquareClientFactory:
        """Get cached Square client factory (one shared connection pool)."""
        if self._square_factory is None:
            self._square_factory = SquareClientFactory(get_settings().square)
        return self._square_factory

    @property
    def promo_codes(self) -> PromoCodeStore:
        """Get the promo code table, seeded on first use."""
        if self._promo_codes is None:
            self._promo_codes = PromoCodeStore(default_promo_codes())
        return self._promo_codes

    @property
    def seller(self) -> ConnectedSeller:
        """Get the connected seller record."""
        if self._seller is None:
            self._seller = ConnectedSeller()
        return self._seller

    async def aclose(self) -> None:
        """Close network resources and drop all cached instances."""
        if self._square_factory is not None:
            await self._square_factory.aclose()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._square_factory = None
        self._promo_codes = None
        self._seller = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_promo_code_store() -> PromoCodeStore:
    return get_service_cache().promo_codes


def get_connected_seller() -> ConnectedSeller:
    return get_service_cache().seller


def get_tenant_router(
    settings: Settings = Depends(get_settings_dependency),
    seller: ConnectedSeller = Depends(get_connected_seller),
) -> TenantRouter:
    """
    Get tenant router bound to the connected seller.

    Args:
        settings: Application settings (injected)
        seller: Connected seller record (injected)

    Returns:
        TenantRouter: Credential resolver for this request
    """
    return TenantRouter(
        factory=get_service_cache().square_factory,
        seller=seller,
        default_location_id=settings.square.location_id,
        require_connected_seller=settings.server.require_connected_seller,
    )


def get_catalog_service(
    tenants: TenantRouter = Depends(get_tenant_router),
    settings: Settings = Depends(get_settings_dependency),
) -> CatalogService:
    return CatalogService(tenants=tenants, default_currency=settings.platform.default_currency)


def get_order_service(
    tenants: TenantRouter = Depends(get_tenant_router),
    promo_codes: PromoCodeStore = Depends(get_promo_code_store),
    settings: Settings = Depends(get_settings_dependency),
) -> OrderService:
    return OrderService(
        tenants=tenants,
        promo_codes=promo_codes,
        default_currency=settings.platform.default_currency,
    )


def get_checkout_service(
    tenants: TenantRouter = Depends(get_tenant_router),
    settings: Settings = Depends(get_settings_dependency),
) -> CheckoutService:
    """
    Get checkout service instance.

    Returns:
        CheckoutService: Checkout service with the platform fee and redirect configured
    """
    return CheckoutService(
        tenants=tenants,
        app_fee_cents=settings.platform.app_fee_cents,
        redirect_url=settings.platform.redirect_url,
        default_currency=settings.platform.default_currency,
    )
