"""FastAPI endpoints for orders and the sales report."""

import json
from datetime import date

from fastapi import APIRouter, Query
from protean.utils.globals import current_domain

from flowershop.api.ordering_schemas import (
    OrderResponse,
    PlaceOrderRequest,
    SalesReportResponse,
    UpdateOrderStatusRequest,
)
from flowershop.flower.flower import Flower
from flowershop.order.errors import OrderNotFound, order_unhandled
from flowershop.order.order import Order
from flowershop.order.placement import PlaceOrder
from flowershop.order.removal import DeleteOrder
from flowershop.order.status import UpdateOrderStatus
from flowershop.reports.sales import SalesReportHandler
from flowershop.shared.http import unwrap
from flowershop.shared.identifiers import parse_identifier
from flowershop.shared.processing import dispatch
from flowershop.shared.results import Failure, Success

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=list[OrderResponse])
async def list_orders() -> list[OrderResponse]:
    return [OrderResponse.from_order(order) for order in current_domain.repository_for(Order).list_all()]


@router.get("/reports/sales", response_model=SalesReportResponse)
async def sales_report(
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
) -> SalesReportResponse:
    handler = SalesReportHandler(
        orders=current_domain.repository_for(Order),
        flowers=current_domain.repository_for(Flower),
    )
    return SalesReportResponse.from_report(unwrap(handler.generate(start_date, end_date)))


@router.get("/customer/{customer_id}", response_model=list[OrderResponse])
async def list_customer_orders(customer_id: str) -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).by_customer(parse_identifier(customer_id, "customer_id"))
    return [OrderResponse.from_order(order) for order in orders]


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    order_id = parse_identifier(order_id, "order_id")
    order = current_domain.repository_for(Order).get_by_id(order_id)
    result = Success(order) if order is not None else Failure(OrderNotFound(order_id=order_id))
    return OrderResponse.from_order(unwrap(result))


@router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest) -> OrderResponse:
    command = PlaceOrder(
        customer_id=parse_identifier(body.customer_id, "customer_id"),
        items=json.dumps(
            [
                {"flower_id": parse_identifier(item.flower_id, "flower_id"), "quantity": item.quantity}
                for item in body.items
            ]
        ),
    )
    result = dispatch(command, on_unexpected=order_unhandled(None))
    return OrderResponse.from_order(unwrap(result))


@router.patch("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> OrderResponse:
    order_id = parse_identifier(order_id, "order_id")
    command = UpdateOrderStatus(order_id=order_id, status=body.status)
    result = dispatch(command, on_unexpected=order_unhandled(order_id))
    return OrderResponse.from_order(unwrap(result))


@router.delete("/{order_id}", response_model=OrderResponse)
async def delete_order(order_id: str) -> OrderResponse:
    order_id = parse_identifier(order_id, "order_id")
    result = dispatch(DeleteOrder(order_id=order_id), on_unexpected=order_unhandled(order_id))
    return OrderResponse.from_order(unwrap(result))
