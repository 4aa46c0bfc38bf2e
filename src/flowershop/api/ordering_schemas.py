"""Pydantic request/response schemas for the Ordering API."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

# --- Request Schemas ---


class OrderItemRequest(BaseModel):
    flower_id: str
    quantity: int = Field(..., ge=1)


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "d4e5f6a7-b8c9-4123-9ef0-234567890123",
                    "items": [{"flower_id": "b2c3d4e5-f6a7-4901-bcde-f12345678901", "quantity": 3}],
                }
            ]
        }
    }

    customer_id: str
    items: list[OrderItemRequest]


class UpdateOrderStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "Delivered"}]}}

    status: str = Field(..., max_length=20)


# --- Response Schemas ---


class OrderItemResponse(BaseModel):
    id: str
    flower_id: str
    quantity: int
    price: float


class OrderResponse(BaseModel):
    id: str
    customer_id: str
    items: list[OrderItemResponse]
    total_amount: float
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_order(cls, order) -> OrderResponse:
        return cls(
            id=str(order.id),
            customer_id=str(order.customer_id),
            items=[
                OrderItemResponse(
                    id=str(item.id),
                    flower_id=str(item.flower_id),
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in order.items
            ],
            total_amount=order.total_amount,
            status=order.status,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class FlowerSalesResponse(BaseModel):
    flower_id: str
    flower_name: str
    quantity_sold: int
    revenue: float


class DailySalesResponse(BaseModel):
    day: date
    orders_count: int
    revenue: float


class SalesReportResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "start_date": "2025-11-01",
                    "end_date": "2025-11-30",
                    "total_revenue": 59.97,
                    "total_orders": 1,
                    "total_items_sold": 3,
                    "top_flowers": [
                        {
                            "flower_id": "b2c3d4e5-f6a7-4901-bcde-f12345678901",
                            "flower_name": "Red Rose",
                            "quantity_sold": 3,
                            "revenue": 59.97,
                        }
                    ],
                    "daily_sales": [{"day": "2025-11-15", "orders_count": 1, "revenue": 59.97}],
                }
            ]
        }
    }

    start_date: date
    end_date: date
    total_revenue: float
    total_orders: int
    total_items_sold: int
    top_flowers: list[FlowerSalesResponse]
    daily_sales: list[DailySalesResponse]

    @classmethod
    def from_report(cls, report) -> SalesReportResponse:
        return cls(
            start_date=report.start_date,
            end_date=report.end_date,
            total_revenue=report.total_revenue,
            total_orders=report.total_orders,
            total_items_sold=report.total_items_sold,
            top_flowers=[FlowerSalesResponse(**vars(sales)) for sales in report.top_flowers],
            daily_sales=[DailySalesResponse(**vars(day)) for day in report.daily_sales],
        )
