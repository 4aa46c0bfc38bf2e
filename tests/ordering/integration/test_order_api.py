"""Integration tests for the order endpoints and the sales report."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from flowershop.api.ordering import router
from flowershop.flower.flower import Flower
from flowershop.order.order import Order
from flowershop.shared.http import register_validation_handler
from protean.integrations.fastapi import register_exception_handlers
from protean.utils.globals import current_domain

UNKNOWN_ID = "8e9fa0b1-0000-4000-8000-00000000000c"


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(router)
    register_exception_handlers(app)
    register_validation_handler(app)
    return TestClient(app)


@pytest.fixture()
def customer(create_customer):
    return create_customer()


def _order(client, customer_id, *items):
    return client.post(
        "/orders",
        json={
            "customer_id": customer_id,
            "items": [{"flower_id": flower_id, "quantity": quantity} for flower_id, quantity in items],
        },
    )


class TestPlaceOrderEndpoint:
    def test_place_order(self, client, customer, create_flower):
        rose = create_flower(name="Red Rose", price=19.99, stock_quantity=100)

        response = _order(client, customer.id, (rose.id, 3))
        assert response.status_code == 201
        data = response.json()
        assert data["total_amount"] == 59.97
        assert data["status"] == "Pending"
        assert data["items"][0]["price"] == 19.99

        assert current_domain.repository_for(Flower).get(rose.id).stock_quantity == 97

    def test_zero_quantity_returns_400(self, client, customer, create_flower):
        rose = create_flower()

        response = _order(client, customer.id, (rose.id, 0))
        assert response.status_code == 400
        assert current_domain.repository_for(Order).list_all() == []

    def test_empty_items_returns_400(self, client, customer):
        response = _order(client, customer.id)
        assert response.status_code == 400
        assert "cannot be empty" in response.json()["detail"]

    def test_insufficient_stock_returns_400(self, client, customer, create_flower):
        rose = create_flower(stock_quantity=2)

        response = _order(client, customer.id, (rose.id, 3))
        assert response.status_code == 400
        assert "Requested: 3, Available: 2" in response.json()["detail"]

    def test_unknown_customer_returns_404(self, client, create_flower):
        rose = create_flower()
        assert _order(client, UNKNOWN_ID, (rose.id, 1)).status_code == 404

    def test_unknown_flower_returns_404(self, client, customer):
        assert _order(client, customer.id, (UNKNOWN_ID, 1)).status_code == 404


class TestOrderQueries:
    def test_get_and_list(self, client, customer, create_flower):
        rose = create_flower()
        order_id = _order(client, customer.id, (rose.id, 1)).json()["id"]

        assert client.get(f"/orders/{order_id}").json()["id"] == order_id
        assert [o["id"] for o in client.get("/orders").json()] == [order_id]
        assert [o["id"] for o in client.get(f"/orders/customer/{customer.id}").json()] == [order_id]

    def test_unknown_order_returns_404(self, client):
        assert client.get(f"/orders/{UNKNOWN_ID}").status_code == 404

    def test_orders_of_customer_without_orders(self, client, customer):
        assert client.get(f"/orders/customer/{customer.id}").json() == []


class TestOrderStatusEndpoint:
    def test_update_status(self, client, customer, create_flower):
        rose = create_flower()
        order_id = _order(client, customer.id, (rose.id, 1)).json()["id"]

        response = client.patch(f"/orders/{order_id}/status", json={"status": "Confirmed"})
        assert response.status_code == 200
        assert response.json()["status"] == "Confirmed"
        assert response.json()["updated_at"] is not None

    def test_invalid_status_returns_400(self, client, customer, create_flower):
        rose = create_flower()
        order_id = _order(client, customer.id, (rose.id, 1)).json()["id"]

        assert client.patch(f"/orders/{order_id}/status", json={"status": "Lost"}).status_code == 400

    def test_unknown_order_returns_404(self, client):
        assert client.patch(f"/orders/{UNKNOWN_ID}/status", json={"status": "Confirmed"}).status_code == 404


class TestDeleteOrderEndpoint:
    def test_delete(self, client, customer, create_flower):
        rose = create_flower()
        order_id = _order(client, customer.id, (rose.id, 1)).json()["id"]

        assert client.delete(f"/orders/{order_id}").status_code == 200
        assert client.delete(f"/orders/{order_id}").status_code == 404


class TestSalesReportEndpoint:
    def test_pending_orders_not_counted(self, client, customer, create_flower):
        rose = create_flower()
        _order(client, customer.id, (rose.id, 1))

        response = client.get("/orders/reports/sales", params={"startDate": "2000-01-01", "endDate": "2100-12-31"})
        assert response.status_code == 200
        assert response.json()["total_orders"] == 0

    def test_delivered_order_counted(self, client, customer, create_flower):
        rose = create_flower(name="Red Rose", price=19.99)
        order_id = _order(client, customer.id, (rose.id, 3)).json()["id"]
        client.patch(f"/orders/{order_id}/status", json={"status": "Delivered"})

        report = client.get(
            "/orders/reports/sales", params={"startDate": "2000-01-01", "endDate": "2100-12-31"}
        ).json()
        assert report["total_orders"] == 1
        assert report["total_revenue"] == 59.97
        assert report["total_items_sold"] == 3
        assert report["top_flowers"][0]["flower_name"] == "Red Rose"
        assert len(report["daily_sales"]) == 1

    def test_end_before_start_returns_400(self, client):
        response = client.get("/orders/reports/sales", params={"startDate": "2024-03-31", "endDate": "2024-03-01"})
        assert response.status_code == 400

    def test_malformed_dates_return_400(self, client):
        response = client.get("/orders/reports/sales", params={"startDate": "31/03/2024", "endDate": "2024-04-01"})
        assert response.status_code == 400
