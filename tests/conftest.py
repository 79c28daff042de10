"""
Shared test fixtures and configuration for entire test suite.

Provides: isolated settings and service cache, the fake Square API wired in
through httpx.MockTransport, and ready-made services.
Dependencies: pytest, httpx, fastapi
System role: Test infrastructure and fixture management
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from storefront.api.deps.dependencies import (
    get_connected_seller,
    get_service_cache,
    get_tenant_router,
)
from storefront.application.services import TenantRouter
from storefront.boundary.square.client import SquareClientFactory
from storefront.configs import get_settings
from storefront.configs.square import SquareSettings
from storefront.core.promo_codes import PromoCodeStore, default_promo_codes
from storefront.core.seller import ConnectedSeller
from tests.fakes import LOCATION_ID, PLATFORM_TOKEN, FakeSquare


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch):
    """Fresh settings, promo table and seller record for every test."""
    monkeypatch.setenv("SQUARE_ACCESS_TOKEN", PLATFORM_TOKEN)
    monkeypatch.setenv("SQUARE_LOCATION_ID", LOCATION_ID)
    monkeypatch.setenv("SQUARE_ENV", "sandbox")
    monkeypatch.delenv("STOREFRONT_REQUIRE_CONNECTED_SELLER", raising=False)
    monkeypatch.delenv("PLATFORM_APP_FEE_CENTS", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    get_service_cache().clear()
    yield
    get_settings.cache_clear()
    get_service_cache().clear()


@pytest.fixture
def fake_square() -> FakeSquare:
    return FakeSquare()


@pytest.fixture
def square_factory(fake_square: FakeSquare) -> SquareClientFactory:
    settings = SquareSettings(access_token=PLATFORM_TOKEN, location_id=LOCATION_ID)
    http = httpx.AsyncClient(
        base_url=settings.base_url,
        transport=httpx.MockTransport(fake_square.handler),
    )
    return SquareClientFactory(settings, http=http)


@pytest.fixture
def seller() -> ConnectedSeller:
    return ConnectedSeller()


@pytest.fixture
def promo_codes() -> PromoCodeStore:
    return PromoCodeStore(default_promo_codes())


@pytest.fixture
def tenants(square_factory: SquareClientFactory, seller: ConnectedSeller) -> TenantRouter:
    return TenantRouter(factory=square_factory, seller=seller, default_location_id=LOCATION_ID)


@pytest.fixture
def client(tenants: TenantRouter, seller: ConnectedSeller) -> TestClient:
    """TestClient for the full app talking to the fake Square API."""
    from storefront.main import create_app

    app = create_app()
    app.dependency_overrides[get_tenant_router] = lambda: tenants
    app.dependency_overrides[get_connected_seller] = lambda: seller
    return TestClient(app)
