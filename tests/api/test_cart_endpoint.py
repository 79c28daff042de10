"""
Test suite for cart API endpoints.

Runs the full stack against the fake Square API, which enforces order
versions the way the real service does.

System role: Verification of cart HTTP API
"""

import pytest
from fastapi.testclient import TestClient

from tests.fakes import LOCATION_ID, FakeSquare


@pytest.fixture
def order(fake_square: FakeSquare) -> dict:
    return fake_square.add_order(
        id="ORDER-1",
        version=3,
        line_items=[
            {"uid": "li-1", "quantity": "1", "catalog_object_id": "VAR-1"},
            {"uid": "li-2", "quantity": "2", "catalog_object_id": "VAR-2"},
        ],
        total_money={"amount": 5000, "currency": "CAD"},
    )


class TestCreateCart:
    """POST /api/cart."""

    def test_create_cart_should_open_order_at_default_location(
        self, client: TestClient, fake_square: FakeSquare
    ) -> None:
        response = client.post("/api/cart", json={})

        assert response.status_code == 200
        assert response.json()["state"] == "OPEN"
        body = fake_square.bodies("POST", "/v2/orders")[0]
        assert body["order"] == {"location_id": LOCATION_ID, "state": "OPEN"}
        assert body["idempotency_key"]

    def test_create_cart_should_accept_location_override(
        self, client: TestClient, fake_square: FakeSquare
    ) -> None:
        client.post("/api/cart", json={"locationId": "L-OTHER"})

        assert fake_square.bodies("POST", "/v2/orders")[0]["order"]["location_id"] == "L-OTHER"

    def test_create_cart_without_body(self, client: TestClient) -> None:
        response = client.post("/api/cart")

        assert response.status_code == 200


class TestLineItems:
    """Line item add/update/remove."""

    def test_add_line_item_should_send_current_version(
        self, client: TestClient, fake_square: FakeSquare, order: dict
    ) -> None:
        response = client.post(
            "/api/cart/ORDER-1/line-items", json={"variationId": "VAR-9", "quantity": 2}
        )

        assert response.status_code == 200
        assert response.json()["version"] == 4

        body = fake_square.bodies("PUT", "/v2/orders/ORDER-1")[0]
        assert body["order"]["version"] == 3
        assert body["order"]["location_id"] == LOCATION_ID
        (line_item,) = body["order"]["line_items"]
        assert line_item["quantity"] == "2"
        assert line_item["catalog_object_id"] == "VAR-9"
        assert line_item["uid"]

    @pytest.mark.parametrize(
        "body",
        [{"quantity": 1}, {"variationId": "VAR-9"}, {"variationId": "VAR-9", "quantity": 0}, {}],
    )
    def test_add_line_item_should_require_variation_and_quantity(
        self, client: TestClient, fake_square: FakeSquare, order: dict, body: dict
    ) -> None:
        response = client.post("/api/cart/ORDER-1/line-items", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": True, "details": "variationId and quantity required"}
        assert fake_square.requests == []

    def test_add_line_item_should_reject_non_numeric_quantity(
        self, client: TestClient, order: dict
    ) -> None:
        response = client.post(
            "/api/cart/ORDER-1/line-items", json={"variationId": "VAR-9", "quantity": "two"}
        )

        assert response.status_code == 400
        assert response.json()["details"] == "quantity must be a number"

    @pytest.mark.parametrize(
        "quantity, details",
        [
            ("1e5000", "quantity is too large"),
            ("1e999999999", "quantity is too large"),
            ("12345678901", "quantity is too large"),
            ("0.000001", "quantity allows at most 5 decimal places"),
            ("1e-999999999", "quantity allows at most 5 decimal places"),
        ],
    )
    def test_add_line_item_should_reject_out_of_range_quantity(
        self, client: TestClient, fake_square: FakeSquare, order: dict, quantity, details: str
    ) -> None:
        response = client.post(
            "/api/cart/ORDER-1/line-items", json={"variationId": "VAR-9", "quantity": quantity}
        )

        assert response.status_code == 400
        assert response.json() == {"error": True, "details": details}
        assert fake_square.bodies("PUT", "/v2/orders/ORDER-1") == []

    @pytest.mark.parametrize(
        "quantity, expected", [("1e2", "100"), ("1.50", "1.5"), (3.0, "3"), ("0.00001", "0.00001")]
    )
    def test_add_line_item_should_normalize_quantity(
        self, client: TestClient, fake_square: FakeSquare, order: dict, quantity, expected: str
    ) -> None:
        client.post(
            "/api/cart/ORDER-1/line-items", json={"variationId": "VAR-9", "quantity": quantity}
        )

        (line_item,) = fake_square.bodies("PUT", "/v2/orders/ORDER-1")[0]["order"]["line_items"]
        assert line_item["quantity"] == expected

    def test_update_line_item_should_change_only_that_quantity(
        self, client: TestClient, fake_square: FakeSquare, order: dict
    ) -> None:
        response = client.put("/api/cart/ORDER-1/line-items/li-2", json={"quantity": 5})

        assert response.status_code == 200
        quantities = {li["uid"]: li["quantity"] for li in response.json()["line_items"]}
        assert quantities == {"li-1": "1", "li-2": "5"}
        body = fake_square.bodies("PUT", "/v2/orders/ORDER-1")[0]
        assert body["order"]["line_items"] == [{"uid": "li-2", "quantity": "5"}]

    def test_update_unknown_line_item_should_return_404(
        self, client: TestClient, fake_square: FakeSquare, order: dict
    ) -> None:
        response = client.put("/api/cart/ORDER-1/line-items/nope", json={"quantity": 5})

        assert response.status_code == 404
        assert response.json() == {"error": True, "details": "line item uid not found"}
        assert fake_square.bodies("PUT", "/v2/orders/ORDER-1") == []

    def test_update_line_item_should_require_quantity(self, client: TestClient, order: dict) -> None:
        response = client.put("/api/cart/ORDER-1/line-items/li-1", json={})

        assert response.status_code == 400
        assert response.json() == {"error": True, "details": "quantity required"}

    def test_remove_line_item_should_clear_by_uid_path(
        self, client: TestClient, fake_square: FakeSquare, order: dict
    ) -> None:
        response = client.delete("/api/cart/ORDER-1/line-items/li-1")

        assert response.status_code == 200
        assert [li["uid"] for li in response.json()["line_items"]] == ["li-2"]
        body = fake_square.bodies("PUT", "/v2/orders/ORDER-1")[0]
        assert body["fields_to_clear"] == ["line_items[li-1]"]
        assert body["order"]["version"] == 3


class TestDiscounts:
    """Discount apply/clear."""

    def test_apply_promo_code_percent(
        self, client: TestClient, fake_square: FakeSquare, order: dict
    ) -> None:
        response = client.post("/api/cart/ORDER-1/discounts", json={"promoCode": "welcome10"})

        assert response.status_code == 200
        (discount,) = fake_square.bodies("PUT", "/v2/orders/ORDER-1")[0]["order"]["discounts"]
        assert discount["name"] == "Welcome 10%"
        assert discount["percentage"] == "10"
        assert discount["scope"] == "ORDER"
        assert "amount_money" not in discount

    def test_apply_fixed_promo_code_should_use_order_currency(
        self, client: TestClient, fake_square: FakeSquare, order: dict
    ) -> None:
        client.post("/api/promo-codes", json={"code": "FIVE", "type": "FIXED", "value": 500})

        client.post("/api/cart/ORDER-1/discounts", json={"promoCode": "FIVE"})

        (discount,) = fake_square.bodies("PUT", "/v2/orders/ORDER-1")[0]["order"]["discounts"]
        assert discount["amount_money"] == {"amount": 500, "currency": "CAD"}
        assert discount["name"] == "FIVE"

    def test_apply_direct_fixed_discount_with_currency(
        self, client: TestClient, fake_square: FakeSquare, order: dict
    ) -> None:
        client.post(
            "/api/cart/ORDER-1/discounts",
            json={"name": "Black Friday", "type": "FIXED", "value": 250, "currency": "USD"},
        )

        (discount,) = fake_square.bodies("PUT", "/v2/orders/ORDER-1")[0]["order"]["discounts"]
        assert discount["name"] == "Black Friday"
        assert discount["amount_money"] == {"amount": 250, "currency": "USD"}

    def test_apply_discount_should_keep_existing_discounts(
        self, client: TestClient, order: dict
    ) -> None:
        client.post("/api/cart/ORDER-1/discounts", json={"promoCode": "WELCOME10"})
        response = client.post(
            "/api/cart/ORDER-1/discounts", json={"name": "Extra", "type": "PERCENT", "value": 5}
        )

        assert [d["name"] for d in response.json()["discounts"]] == ["Welcome 10%", "Extra"]
        assert response.json()["version"] == 5

    def test_unknown_promo_code_should_return_404(
        self, client: TestClient, fake_square: FakeSquare, order: dict
    ) -> None:
        response = client.post("/api/cart/ORDER-1/discounts", json={"promoCode": "BOGUS"})

        assert response.status_code == 404
        assert response.json() == {"error": True, "details": "Invalid promo code"}
        assert fake_square.bodies("PUT", "/v2/orders/ORDER-1") == []

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"name": "X", "type": "PERCENT"},
            {"name": "X", "type": "HALF", "value": 5},
            {"type": "PERCENT", "value": 5},
        ],
    )
    def test_invalid_direct_discount_should_return_400(
        self, client: TestClient, order: dict, body: dict
    ) -> None:
        response = client.post("/api/cart/ORDER-1/discounts", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": True, "details": "promoCode or (name,type,value) required"}

    def test_fractional_fixed_discount_should_return_400(
        self, client: TestClient, fake_square: FakeSquare, order: dict
    ) -> None:
        response = client.post(
            "/api/cart/ORDER-1/discounts", json={"name": "Odd", "type": "FIXED", "value": 5.9}
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": True,
            "details": "value must be a whole number of minor units for FIXED discounts",
        }
        assert fake_square.requests == []

    def test_whole_float_fixed_discount_should_be_accepted(
        self, client: TestClient, fake_square: FakeSquare, order: dict
    ) -> None:
        response = client.post(
            "/api/cart/ORDER-1/discounts", json={"name": "Even", "type": "FIXED", "value": 300.0}
        )

        assert response.status_code == 200
        (discount,) = fake_square.bodies("PUT", "/v2/orders/ORDER-1")[0]["order"]["discounts"]
        assert discount["amount_money"]["amount"] == 300

    def test_fractional_percent_discount_should_be_kept(
        self, client: TestClient, fake_square: FakeSquare, order: dict
    ) -> None:
        client.post(
            "/api/cart/ORDER-1/discounts", json={"name": "Half", "type": "PERCENT", "value": 7.5}
        )

        (discount,) = fake_square.bodies("PUT", "/v2/orders/ORDER-1")[0]["order"]["discounts"]
        assert discount["percentage"] == "7.5"

    def test_clear_discounts(self, client: TestClient, fake_square: FakeSquare, order: dict) -> None:
        client.post("/api/cart/ORDER-1/discounts", json={"promoCode": "WELCOME10"})

        response = client.delete("/api/cart/ORDER-1/discounts")

        assert response.status_code == 200
        assert "discounts" not in response.json()
        assert fake_square.bodies("PUT", "/v2/orders/ORDER-1")[-1]["fields_to_clear"] == ["discounts"]


class TestRemoteFailures:
    """Remote errors are normalized to 500."""

    def test_unknown_order_should_return_remote_errors(self, client: TestClient) -> None:
        response = client.post("/api/cart/MISSING/line-items", json={"variationId": "V", "quantity": 1})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] is True
        assert body["details"][0]["code"] == "NOT_FOUND"

    def test_version_conflict_should_surface_as_500(
        self, client: TestClient, fake_square: FakeSquare, order: dict
    ) -> None:
        fake_square.fail(
            "PUT",
            "/v2/orders/ORDER-1",
            409,
            [{"category": "INVALID_REQUEST_ERROR", "code": "VERSION_MISMATCH"}],
        )

        response = client.delete("/api/cart/ORDER-1/discounts")

        assert response.status_code == 500
        assert response.json()["details"][0]["code"] == "VERSION_MISMATCH"


class TestRequireConnectedSeller:
    """STOREFRONT_REQUIRE_CONNECTED_SELLER=true."""

    @pytest.fixture(autouse=True)
    def require_seller(self, tenants) -> None:
        tenants.require_connected_seller = True

    def test_cart_routes_should_refuse_without_seller(
        self, client: TestClient, fake_square: FakeSquare, order: dict
    ) -> None:
        for method, path in [
            ("post", "/api/cart"),
            ("post", "/api/cart/ORDER-1/line-items"),
            ("put", "/api/cart/ORDER-1/line-items/li-1"),
            ("delete", "/api/cart/ORDER-1/line-items/li-1"),
            ("post", "/api/cart/ORDER-1/discounts"),
            ("delete", "/api/cart/ORDER-1/discounts"),
            ("get", "/api/orders/ORDER-1"),
            ("post", "/api/orders/ORDER-1/calculate"),
            ("get", "/api/catalog/items"),
        ]:
            response = client.request(method, path)
            assert response.status_code == 400, path
            assert response.json() == {"error": True, "details": "Set seller with /api/set"}

        assert fake_square.requests == []

    def test_cart_routes_should_work_once_seller_set(
        self, client: TestClient, fake_square: FakeSquare
    ) -> None:
        client.post("/api/set", json={"sellerAccessToken": "EAAAseller-token-1234", "sellerLocationId": "L-SELLER"})

        response = client.post("/api/cart", json={})

        assert response.status_code == 200
        assert fake_square.bodies("POST", "/v2/orders")[0]["order"]["location_id"] == "L-SELLER"
