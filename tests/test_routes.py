"""End-to-end tests through the HTTP routes."""

from fastapi.testclient import TestClient

from storefront.main import create_app


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy", "service": "storefront"}


class TestProductRoutes:
    def test_filter_and_sort(self, client):
        response = client.get("/api/products", params={"category": "Tech", "sort": "price-low"})
        body = response.json()

        assert response.status_code == 200
        assert [p["id"] for p in body["products"]] == [3, 12, 8]
        assert body["has_more"] is False

    def test_window(self, client):
        body = client.get("/api/products", params={"limit": 5}).json()
        assert len(body["products"]) == 5
        assert body["total"] == 12
        assert body["has_more"] is True

    def test_invalid_sort_is_rejected(self, client):
        assert client.get("/api/products", params={"sort": "random"}).status_code == 422

    def test_product_lookup(self, client):
        assert client.get("/api/products/3").json()["name"] == "Wireless Minimalist Earbuds"
        assert client.get("/api/products/404").status_code == 404

    def test_related_and_featured(self, client):
        assert [p["id"] for p in client.get("/api/products/3/related").json()] == [8, 12]
        assert [p["id"] for p in client.get("/api/products/featured").json()] == [1, 3, 5, 10]

    def test_categories_and_price_ranges(self, client):
        assert client.get("/api/products/categories").json()[0]["id"] == "all"
        assert len(client.get("/api/products/price-ranges").json()) == 5


class TestCartRoutes:
    def test_add_merges_and_totals(self, client):
        client.post("/api/cart/items", json={"product_id": 5, "quantity": 1})
        body = client.post("/api/cart/items", json={"product_id": 5, "quantity": 1}).json()

        assert len(body["items"]) == 1
        assert body["items"][0]["id"] == 5
        assert body["items"][0]["quantity"] == 2
        assert body["totals"]["subtotal"] == "116.00"
        assert body["totals"]["tax"] == "9.28"
        assert body["totals"]["shipping"] == "0.00"
        assert body["totals"]["total"] == "125.28"
        assert body["totals"]["item_count"] == 2

    def test_add_unknown_product(self, client):
        assert client.post("/api/cart/items", json={"product_id": 404}).status_code == 404

    def test_update_remove_clear(self, client):
        client.post("/api/cart/items", json={"product_id": 1})
        client.post("/api/cart/items", json={"product_id": 2})

        body = client.put("/api/cart/items/0", json={"quantity": 150}).json()
        assert body["items"][0]["quantity"] == 99

        body = client.put("/api/cart/items/0", json={"quantity": 0}).json()
        assert [i["id"] for i in body["items"]] == [2]

        assert client.delete("/api/cart/items/5").status_code == 404
        assert client.delete("/api/cart/items/0").json()["items"] == []

        client.post("/api/cart/items", json={"product_id": 3})
        assert client.delete("/api/cart").json()["items"] == []

    def test_cart_survives_restart(self, store_path):
        with TestClient(create_app(storage_path=store_path)) as first:
            first.post("/api/cart/items", json={"product_id": 2, "color": "Navy", "size": "L"})

        with TestClient(create_app(storage_path=store_path)) as second:
            [item] = second.get("/api/cart").json()["items"]

        assert (item["id"], item["color"], item["size"]) == (2, "Navy", "L")


class TestCheckoutRoutes:
    FIELDS = [
        {"field_id": "email", "value": "jane@example.com", "required": True, "field_type": "email"},
        {"field_id": "card-number", "value": "4111111111111111", "required": True},
    ]

    def test_validate_field(self, client):
        body = client.post(
            "/api/checkout/validate-field",
            json={"field_id": "card-number", "value": "4111111111111112", "required": True},
        ).json()
        assert body == {"field_id": "card-number", "valid": False, "error": "Please enter a valid card number"}

    def test_checkout_flow(self, client):
        client.post("/api/cart/items", json={"product_id": 1})

        body = client.post("/api/checkout", json={"fields": self.FIELDS}).json()
        assert body["success"] is True

        order_id = body["order"]["order_id"]
        assert client.get(f"/api/checkout/orders/{order_id}").status_code == 200
        assert client.get("/api/cart").json()["items"] == []

    def test_checkout_errors_are_values(self, client):
        client.post("/api/cart/items", json={"product_id": 1})
        fields = [{"field_id": "email", "value": "", "required": True, "field_type": "email"}]

        response = client.post("/api/checkout", json={"fields": fields})
        assert response.status_code == 200
        assert response.json()["errors"] == {"email": "This field is required"}

    def test_unknown_order(self, client):
        assert client.get("/api/checkout/orders/ORD-MISSING").status_code == 404


class TestPreferenceRoutes:
    def test_dark_mode(self, client):
        assert client.get("/api/preferences/dark-mode").json() == {"dark_mode": False}
        assert client.post("/api/preferences/dark-mode").json() == {"dark_mode": True}

    def test_wishlist(self, client):
        assert client.post("/api/preferences/wishlist/3").json() == {"product_ids": [3]}
        assert client.post("/api/preferences/wishlist/404").status_code == 404
        assert client.post("/api/preferences/wishlist/3").json() == {"product_ids": []}
