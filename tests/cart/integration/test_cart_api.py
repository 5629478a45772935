"""Integration tests for the cart endpoints via TestClient."""

import pytest
from cart.api import router
from fastapi import FastAPI
from fastapi.testclient import TestClient
from shared.api.errors import register_exception_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(router)
    return TestClient(app)


@pytest.fixture()
def shopper(auth_headers):
    return auth_headers(user_id="user-001", role="user")


class TestGetCart:
    def test_empty_cart_with_totals(self, client, shopper):
        response = client.get("/api/cart", headers=shopper)
        assert response.status_code == 200

        body = response.json()
        assert body["message"] == "Cart retrieved successfully"
        assert body["cart"]["user"] == "user-001"
        assert body["cart"]["items"] == []
        assert body["totals"] == {"itemCount": 0, "totalQuantity": 0}

    def test_requires_authentication(self, client):
        assert client.get("/api/cart").status_code == 401

    def test_only_shoppers_have_carts(self, client, auth_headers):
        response = client.get("/api/cart", headers=auth_headers(role="seller"))
        assert response.status_code == 403


class TestAddItem:
    def test_add_and_sum(self, client, shopper):
        client.post("/api/cart/items", json={"productId": "p1", "qty": 2}, headers=shopper)
        response = client.post("/api/cart/items", json={"productId": "p1", "qty": 3}, headers=shopper)

        assert response.status_code == 200
        assert response.json()["message"] == "Item added to cart"
        assert response.json()["cart"]["items"] == [{"productId": "p1", "quantity": 5}]

        totals = client.get("/api/cart", headers=shopper).json()["totals"]
        assert totals == {"itemCount": 1, "totalQuantity": 5}

    @pytest.mark.parametrize("qty", [0, -3, 1.5, "two", None])
    def test_invalid_quantity(self, client, shopper, qty):
        response = client.post("/api/cart/items", json={"productId": "p1", "qty": qty}, headers=shopper)
        assert response.status_code == 400
        assert response.json()["message"] == "Quantity must be a positive integer"

    def test_product_id_is_required(self, client, shopper):
        response = client.post("/api/cart/items", json={"qty": 1}, headers=shopper)
        assert response.status_code == 400


class TestUpdateItem:
    def test_update_replaces_quantity(self, client, shopper):
        client.post("/api/cart/items", json={"productId": "p1", "qty": 2}, headers=shopper)
        response = client.patch("/api/cart/items/p1", json={"qty": 4}, headers=shopper)

        assert response.status_code == 200
        assert response.json()["message"] == "Item updated successfully"
        assert response.json()["cart"]["items"] == [{"productId": "p1", "quantity": 4}]

    def test_missing_item(self, client, shopper):
        client.get("/api/cart", headers=shopper)
        response = client.patch("/api/cart/items/p9", json={"qty": 1}, headers=shopper)
        assert response.status_code == 404
        assert response.json() == {"message": "Item not found in cart"}

    def test_missing_cart(self, client, auth_headers):
        response = client.patch("/api/cart/items/p1", json={"qty": 1}, headers=auth_headers(user_id="new-user"))
        assert response.status_code == 404
        assert response.json() == {"message": "Cart not found"}
