"""Integration tests for POST /orders/checkout via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from ordering.api.routes import order_router
from ordering.domain import ordering
from ordering.order.order import Order
from ordering.order.queries import all_orders
from payments.gateway.client import PaymentGatewayClient
from payments.gateway.fake_adapter import FakeProcessor
from protean import current_domain
from shared.http import bind_domains, register_error_handlers

BUYER = {"X-User-Id": "user-001"}
CART = [{"name": "Novel", "price": 10}, {"name": "Laptop", "price": 20}]


@pytest.fixture()
def processor():
    return FakeProcessor()


@pytest.fixture()
def client(processor):
    app = FastAPI()
    app.state.payment_gateway = PaymentGatewayClient(processor)
    bind_domains(app, {"/orders": ordering})
    app.include_router(order_router)
    register_error_handlers(app)
    return TestClient(app)


class TestCheckoutSuccess:
    def test_returns_placed_order(self, client, processor):
        response = client.post("/orders/checkout", json={"nonce": "tok", "cart": CART}, headers=BUYER)

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert body["order"]["status"] == "Not Processed"
        assert body["order"]["buyer_id"] == "user-001"
        assert body["order"]["payment"]["success"] is True
        assert body["order"]["payment"]["amount"] == 30
        assert [p["name"] for p in body["order"]["products"]] == ["Novel", "Laptop"]
        assert processor.sales[0]["amount"] == 30

    def test_order_is_persisted(self, client):
        response = client.post("/orders/checkout", json={"nonce": "tok", "cart": CART}, headers=BUYER)
        order_id = response.json()["order"]["id"]

        order = current_domain.repository_for(Order).get(order_id)
        assert order.payment.transaction_id == response.json()["order"]["payment"]["transaction_id"]


class TestCheckoutRejected:
    def test_empty_cart(self, client, processor):
        response = client.post("/orders/checkout", json={"nonce": "tok", "cart": []}, headers=BUYER)

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Cart is required and must not be empty"}
        assert processor.calls == []

    def test_missing_nonce(self, client, processor):
        response = client.post("/orders/checkout", json={"cart": CART}, headers=BUYER)

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Payment nonce is required"}
        assert processor.calls == []

    def test_non_json_body(self, client, processor):
        response = client.post(
            "/orders/checkout",
            content=b"not json",
            headers={**BUYER, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Payment nonce is required"
        assert processor.calls == []

    def test_negative_price(self, client, processor):
        response = client.post(
            "/orders/checkout", json={"nonce": "tok", "cart": [{"price": -5}]}, headers=BUYER
        )

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Error Processing Payment",
            "error": "Invalid price in cart item",
        }
        assert processor.calls == []
        assert all_orders() == []

    def test_price_too_large_for_float(self, client, processor):
        response = client.post(
            "/orders/checkout", json={"nonce": "tok", "cart": [{"name": "a", "price": 10**400}]}, headers=BUYER
        )

        assert response.status_code == 500
        assert response.json()["error"] == "Invalid price in cart item"
        assert processor.calls == []

    def test_declined_payment(self, client, processor):
        processor.configure(should_succeed=False, failure_reason="Do Not Honor")

        response = client.post("/orders/checkout", json={"nonce": "tok", "cart": CART}, headers=BUYER)

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Error Processing Payment",
            "error": "Do Not Honor",
        }
        assert all_orders() == []

    def test_requires_signed_in_user(self, client, processor):
        response = client.post("/orders/checkout", json={"nonce": "tok", "cart": CART})

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Unauthorized Access"}
        assert processor.calls == []
