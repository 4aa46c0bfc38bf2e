"""Order placement: command and handler.

Placement runs inside the command handler's unit of work: every check is
made before any stock is touched, and the decremented flowers are saved
together with the new order, so a failure at any point leaves stock as it
was.
"""

import json
from uuid import uuid4

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from flowershop.customer.customer import Customer
from flowershop.domain import flowershop
from flowershop.flower.flower import Flower
from flowershop.order.errors import (
    InsufficientStock,
    InvalidOrderQuantity,
    OrderCustomerNotFound,
    OrderEmpty,
    OrderFlowersNotFound,
)
from flowershop.order.order import Order
from flowershop.shared.results import Failure, Success
from flowershop.utils.logging import get_logger

logger = get_logger(__name__)


@flowershop.command(part_of="Order")
class PlaceOrder:
    customer_id: Identifier(required=True)
    items: Text(required=True)  # JSON: list of {flower_id, quantity}
    order_id: Identifier()


def _parse_lines(raw):
    items = json.loads(raw) if isinstance(raw, str) else raw
    return [(str(item["flower_id"]), int(item["quantity"])) for item in items or []]


@flowershop.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        order_id = str(command.order_id or uuid4())
        lines = _parse_lines(command.items)

        if not lines:
            return Failure(OrderEmpty(order_id=order_id))

        for flower_id, quantity in lines:
            if quantity < 1:
                return Failure(InvalidOrderQuantity(order_id=order_id, flower_id=flower_id, quantity=quantity))

        customer = current_domain.repository_for(Customer).get_by_id(command.customer_id)
        if customer is None:
            return Failure(OrderCustomerNotFound(order_id=order_id, customer_id=command.customer_id))

        requested = {}
        for flower_id, quantity in lines:
            requested[flower_id] = requested.get(flower_id, 0) + quantity

        flower_repo = current_domain.repository_for(Flower)
        flowers = {flower.id: flower for flower in flower_repo.get_by_ids(list(requested))}

        missing = tuple(flower_id for flower_id in requested if flower_id not in flowers)
        if missing:
            return Failure(OrderFlowersNotFound(order_id=order_id, missing_flower_ids=missing))

        for flower_id, quantity in requested.items():
            flower = flowers[flower_id]
            if flower.stock_quantity < quantity:
                return Failure(
                    InsufficientStock(
                        order_id=order_id,
                        flower_id=flower_id,
                        flower_name=flower.name,
                        requested=quantity,
                        available=flower.stock_quantity,
                    )
                )

        order_lines = []
        for flower_id, quantity in lines:
            flower = flowers[flower_id]
            flower.decrease_stock(quantity)
            order_lines.append((flower_id, quantity, flower.price))

        order = Order.place(customer_id=customer.id, lines=order_lines, order_id=order_id)

        for flower in flowers.values():
            flower_repo.add(flower)
        current_domain.repository_for(Order).add(order)

        logger.info(
            "order_placed",
            order_id=order.id,
            customer_id=customer.id,
            items=order.items_count,
            total_amount=order.total_amount,
        )
        return Success(order)
