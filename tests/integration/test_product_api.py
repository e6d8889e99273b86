"""Integration tests for Product API endpoints.

Covers:
- CRUD operations via /api/products.
- The {success, data|message} envelope on every outcome.
- Domain exception mapping (404) and payload validation (400).
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration

MISSING_ID = 999999


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_product(make_product):
    return make_product(
        name="Widget Alpha",
        description="A fine widget",
        price=Decimal("19.99"),
        quantity=100,
    )


# ===========================================================================
# LIST
# ===========================================================================


class TestProductList:
    def test_list_empty(self, api_client):
        response = api_client.get("/api/products")
        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}

    def test_list_returns_products(self, api_client, sample_product):
        response = api_client.get("/api/products")
        body = response.json()
        assert response.status_code == 200
        assert body["success"] is True
        assert len(body["data"]) == 1
        assert body["data"][0]["name"] == "Widget Alpha"
        assert body["data"][0]["price"] == 19.99
        assert "message" not in body

    def test_list_is_ordered_by_id(self, api_client, make_product):
        first = make_product(name="Zeta")
        second = make_product(name="Alpha")
        body = api_client.get("/api/products").json()
        assert [p["id"] for p in body["data"]] == [first.id, second.id]

    def test_list_is_not_paginated(self, api_client, make_product):
        for i in range(30):
            make_product(name=f"Item {i}")
        body = api_client.get("/api/products").json()
        assert len(body["data"]) == 30

    def test_filter_by_name(self, api_client, make_product):
        make_product(name="Wireless Mouse")
        make_product(name="Keyboard")
        body = api_client.get("/api/products", {"name": "mouse"}).json()
        assert [p["name"] for p in body["data"]] == ["Wireless Mouse"]

    def test_filter_by_price_range(self, api_client, make_product):
        make_product(name="Cheap", price=Decimal("5.00"))
        make_product(name="Mid", price=Decimal("50.00"))
        make_product(name="Pricey", price=Decimal("500.00"))
        body = api_client.get(
            "/api/products", {"min_price": "10", "max_price": "100"}
        ).json()
        assert [p["name"] for p in body["data"]] == ["Mid"]

    def test_filter_in_stock(self, api_client, make_product):
        make_product(name="Available", quantity=3)
        make_product(name="Sold Out", quantity=0)
        body = api_client.get("/api/products", {"in_stock": "true"}).json()
        assert [p["name"] for p in body["data"]] == ["Available"]

    def test_invalid_filter_returns_400_envelope(self, api_client):
        response = api_client.get("/api/products", {"min_price": "cheap"})
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "min_price" in body["message"]


# ===========================================================================
# RETRIEVE
# ===========================================================================


class TestProductRetrieve:
    def test_retrieve_success(self, api_client, sample_product):
        response = api_client.get(f"/api/products/{sample_product.id}")
        body = response.json()
        assert response.status_code == 200
        assert body["success"] is True
        assert body["data"]["id"] == sample_product.id
        assert body["data"]["name"] == "Widget Alpha"
        assert body["data"]["quantity"] == 100

    def test_retrieve_not_found(self, api_client):
        response = api_client.get(f"/api/products/{MISSING_ID}")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Product not found"}

    def test_retrieve_non_numeric_id_is_not_found(self, api_client):
        response = api_client.get("/api/products/abc")
        assert response.status_code == 404
        assert response.json()["message"] == "Product not found"

    def test_retrieve_dotted_id_is_not_found(self, api_client, sample_product):
        response = api_client.get(f"/api/products/{sample_product.id}.5")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Product not found"}


# ===========================================================================
# CREATE
# ===========================================================================


class TestProductCreate:
    def test_create_success(self, api_client):
        payload = {
            "name": "New Product",
            "description": "Brand new",
            "price": 29.99,
            "quantity": 50,
        }
        response = api_client.post("/api/products", payload, format="json")
        body = response.json()
        assert response.status_code == 201
        assert body["success"] is True
        assert isinstance(body["data"]["id"], int)
        assert body["data"]["name"] == "New Product"
        assert body["data"]["price"] == 29.99
        assert Product.objects.filter(id=body["data"]["id"]).exists()

    def test_create_ignores_client_id(self, api_client, sample_product):
        payload = {"id": sample_product.id, "name": "Other", "price": 1}
        response = api_client.post("/api/products", payload, format="json")
        assert response.status_code == 201
        assert response.json()["data"]["id"] != sample_product.id
        assert Product.objects.count() == 2

    def test_create_defaults_optional_fields(self, api_client):
        payload = {"name": "Bare", "price": "3.50"}
        body = api_client.post("/api/products", payload, format="json").json()
        assert body["data"]["description"] == ""
        assert body["data"]["quantity"] == 0

    def test_create_missing_fields_returns_400(self, api_client):
        payload = {"name": "Incomplete"}
        response = api_client.post("/api/products", payload, format="json")
        body = response.json()
        assert response.status_code == 400
        assert body["success"] is False
        assert "price" in body["message"]
        assert Product.objects.count() == 0

    def test_create_blank_name_returns_400(self, api_client):
        payload = {"name": "   ", "price": "5.00"}
        response = api_client.post("/api/products", payload, format="json")
        assert response.status_code == 400
        assert "Name must not be blank" in response.json()["message"]

    def test_create_negative_price_returns_400(self, api_client):
        payload = {"name": "Bad Price", "price": "-5.00"}
        response = api_client.post("/api/products", payload, format="json")
        assert response.status_code == 400
        assert "Price cannot be negative" in response.json()["message"]

    def test_create_malformed_json_returns_400_envelope(self, api_client):
        response = api_client.post(
            "/api/products", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_create_quantity_above_integer_range_returns_400(self, api_client):
        payload = {"name": "Hoard", "price": "1.00", "quantity": 10**20}
        response = api_client.post("/api/products", payload, format="json")
        body = response.json()
        assert response.status_code == 400
        assert body["success"] is False
        assert "Quantity cannot exceed 2147483647" in body["message"]
        assert Product.objects.count() == 0

    def test_create_quantity_at_integer_limit(self, api_client):
        payload = {"name": "Bulk", "price": "1.00", "quantity": 2_147_483_647}
        response = api_client.post("/api/products", payload, format="json")
        assert response.status_code == 201
        assert response.json()["data"]["quantity"] == 2_147_483_647

    def test_create_boolean_quantity_returns_400(self, api_client):
        payload = {"name": "Flag", "price": "1.00", "quantity": True}
        response = api_client.post("/api/products", payload, format="json")
        assert response.status_code == 400
        assert "quantity" in response.json()["message"]
        assert Product.objects.count() == 0


# ===========================================================================
# UPDATE
# ===========================================================================


class TestProductUpdate:
    def test_put_update_success(self, api_client, sample_product):
        payload = {
            "name": "Widget PUT",
            "price": 25.00,
            "description": "Updated via PUT",
            "quantity": 200,
        }
        response = api_client.put(
            f"/api/products/{sample_product.id}", payload, format="json"
        )
        body = response.json()
        assert response.status_code == 200
        assert body["success"] is True
        assert body["data"]["id"] == sample_product.id
        assert body["data"]["name"] == "Widget PUT"
        sample_product.refresh_from_db()
        assert sample_product.quantity == 200
        assert sample_product.price == Decimal("25.00")

    def test_put_replaces_omitted_optional_fields(self, api_client, sample_product):
        payload = {"name": "Minimal", "price": 1}
        api_client.put(f"/api/products/{sample_product.id}", payload, format="json")
        sample_product.refresh_from_db()
        assert sample_product.description == ""
        assert sample_product.quantity == 0

    def test_put_not_found(self, api_client):
        payload = {"name": "Ghost", "price": 1}
        response = api_client.put(
            f"/api/products/{MISSING_ID}", payload, format="json"
        )
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "message": f"Product not found with id: {MISSING_ID}",
        }

    def test_put_invalid_payload_returns_400(self, api_client, sample_product):
        response = api_client.put(
            f"/api/products/{sample_product.id}", {"name": "No price"}, format="json"
        )
        assert response.status_code == 400
        sample_product.refresh_from_db()
        assert sample_product.name == "Widget Alpha"

    def test_put_invalid_payload_on_missing_id_returns_400(self, api_client):
        response = api_client.put(
            f"/api/products/{MISSING_ID}", {"name": "No price"}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["success"] is False
        assert "price" in response.json()["message"]

    def test_put_quantity_above_integer_range_returns_400(
        self, api_client, sample_product
    ):
        payload = {"name": "Widget", "price": 1, "quantity": 2**31}
        response = api_client.put(
            f"/api/products/{sample_product.id}", payload, format="json"
        )
        assert response.status_code == 400
        sample_product.refresh_from_db()
        assert sample_product.quantity == 100

    def test_patch_updates_only_supplied_fields(self, api_client, sample_product):
        response = api_client.patch(
            f"/api/products/{sample_product.id}", {"quantity": 7}, format="json"
        )
        body = response.json()
        assert response.status_code == 200
        assert body["data"]["quantity"] == 7
        assert body["data"]["name"] == "Widget Alpha"

    def test_patch_null_price_returns_400(self, api_client, sample_product):
        response = api_client.patch(
            f"/api/products/{sample_product.id}", {"price": None}, format="json"
        )
        assert response.status_code == 400

    def test_patch_invalid_payload_on_missing_id_returns_400(self, api_client):
        response = api_client.patch(
            f"/api/products/{MISSING_ID}", {"price": "-1"}, format="json"
        )
        assert response.status_code == 400
        assert "Price cannot be negative" in response.json()["message"]

    def test_patch_boolean_quantity_returns_400(self, api_client, sample_product):
        response = api_client.patch(
            f"/api/products/{sample_product.id}", {"quantity": False}, format="json"
        )
        assert response.status_code == 400
        sample_product.refresh_from_db()
        assert sample_product.quantity == 100

    def test_patch_not_found(self, api_client):
        response = api_client.patch(
            f"/api/products/{MISSING_ID}", {"name": "Ghost"}, format="json"
        )
        assert response.status_code == 404
        assert response.json()["success"] is False


# ===========================================================================
# DESTROY
# ===========================================================================


class TestProductDestroy:
    def test_destroy_success(self, api_client, sample_product):
        response = api_client.delete(f"/api/products/{sample_product.id}")
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Product deleted successfully",
        }
        assert not Product.objects.filter(id=sample_product.id).exists()

    def test_destroy_not_found(self, api_client):
        response = api_client.delete(f"/api/products/{MISSING_ID}")
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "message": f"Product not found with id: {MISSING_ID}",
        }

    def test_deleted_product_cannot_be_fetched(self, api_client, sample_product):
        api_client.delete(f"/api/products/{sample_product.id}")
        response = api_client.get(f"/api/products/{sample_product.id}")
        assert response.status_code == 404

    def test_second_delete_is_not_found(self, api_client, sample_product):
        api_client.delete(f"/api/products/{sample_product.id}")
        response = api_client.delete(f"/api/products/{sample_product.id}")
        assert response.status_code == 404


# ===========================================================================
# Cross-cutting
# ===========================================================================


class TestCors:
    def test_any_origin_is_allowed(self, api_client):
        response = api_client.get(
            "/api/products", HTTP_ORIGIN="http://frontend.example.com"
        )
        assert response["Access-Control-Allow-Origin"] == "*"


class TestSchema:
    def test_openapi_schema_lists_product_paths(self, api_client):
        response = api_client.get("/api/schema/")
        assert response.status_code == 200
        assert b"/api/products/{id}" in response.content
