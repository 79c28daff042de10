"""
Test suite for connected seller endpoints.

System role: Verification of seller credential HTTP API
"""

from fastapi.testclient import TestClient

from storefront.core.seller import ConnectedSeller
from tests.fakes import LOCATION_ID, SELLER_TOKEN, FakeSquare


def test_get_seller_when_none_connected(client: TestClient) -> None:
    response = client.get("/api/get")

    assert response.status_code == 200
    assert response.json() == {"sellerAccessToken": None, "sellerLocationId": None}


def test_set_seller_should_store_credentials(client: TestClient, seller: ConnectedSeller) -> None:
    response = client.post(
        "/api/set",
        json={"sellerAccessToken": SELLER_TOKEN, "sellerLocationId": "L-SELLER"},
    )

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert seller.access_token == SELLER_TOKEN
    assert seller.location_id == "L-SELLER"


def test_get_seller_should_mask_token(client: TestClient) -> None:
    client.post("/api/set", json={"sellerAccessToken": SELLER_TOKEN, "sellerLocationId": "L-SELLER"})

    response = client.get("/api/get")

    assert response.json() == {"sellerAccessToken": "EAAAse...1234", "sellerLocationId": "L-SELLER"}


def test_set_seller_should_fall_back_to_platform_location(
    client: TestClient, seller: ConnectedSeller
) -> None:
    client.post("/api/set", json={"sellerAccessToken": SELLER_TOKEN})

    assert seller.location_id == LOCATION_ID


def test_set_seller_should_keep_previous_location(client: TestClient, seller: ConnectedSeller) -> None:
    client.post("/api/set", json={"sellerAccessToken": SELLER_TOKEN, "sellerLocationId": "L-SELLER"})
    client.post("/api/set", json={"sellerAccessToken": "EAAAother-token-9999"})

    assert seller.access_token == "EAAAother-token-9999"
    assert seller.location_id == "L-SELLER"


def test_set_seller_should_require_token(client: TestClient) -> None:
    response = client.post("/api/set", json={"sellerLocationId": "L-SELLER"})

    assert response.status_code == 400
    assert response.json() == {"error": True, "details": "sellerAccessToken required"}


def test_store_routes_should_use_connected_seller_token(
    client: TestClient, fake_square: FakeSquare
) -> None:
    client.post("/api/set", json={"sellerAccessToken": SELLER_TOKEN})

    client.get("/api/catalog/items")

    assert fake_square.requests[0].headers["Authorization"] == f"Bearer {SELLER_TOKEN}"
