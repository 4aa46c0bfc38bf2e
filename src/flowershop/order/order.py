"""Order aggregate with OrderItem entity.

An order is placed once with all of its lines. Each line captures the
flower's price at the time of ordering, and the total is computed from those
captured prices and never recalculated.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from flowershop.domain import flowershop
from flowershop.shared.money import line_total, sum_amounts, to_amount


class OrderStatus(Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


@flowershop.entity(part_of="Order")
class OrderItem:
    flower_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)
    price: Float(required=True, min_value=0.0)  # unit price when ordered

    @property
    def line_total(self):
        return to_amount(line_total(self.price, self.quantity))


@flowershop.aggregate
class Order:
    customer_id: Identifier(required=True)
    items: HasMany(OrderItem)
    total_amount: Float(required=True, min_value=0.0)
    status: String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def place(cls, customer_id, lines, order_id=None):
        """Create a pending order from ``(flower_id, quantity, unit_price)`` lines."""
        from flowershop.order.events import OrderPlaced

        if not lines:
            raise ValidationError({"items": ["Order must contain at least one item"]})

        items = [OrderItem(flower_id=flower_id, quantity=quantity, price=price) for flower_id, quantity, price in lines]
        total = sum_amounts(line_total(price, quantity) for _, quantity, price in lines)
        now = datetime.now(UTC)

        attributes = {
            "customer_id": customer_id,
            "items": items,
            "total_amount": total,
            "status": OrderStatus.PENDING.value,
            "created_at": now,
        }
        if order_id is not None:
            attributes["id"] = order_id
        order = cls(**attributes)

        order.raise_(
            OrderPlaced(
                order_id=order.id,
                customer_id=customer_id,
                items=json.dumps(
                    [{"flower_id": str(i.flower_id), "quantity": i.quantity, "price": i.price} for i in items]
                ),
                total_amount=total,
                created_at=now,
            )
        )
        return order

    @property
    def items_count(self):
        return sum(item.quantity for item in self.items)

    def change_status(self, status):
        from flowershop.order.events import OrderStatusChanged

        new_status = OrderStatus(status)
        previous = self.status
        self.status = new_status.value
        self.updated_at = datetime.now(UTC)

        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                previous_status=previous,
                new_status=new_status.value,
                changed_at=self.updated_at,
            )
        )
