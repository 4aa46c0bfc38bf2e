"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from flowershop.domain import flowershop


@flowershop.event(part_of="Order")
class OrderPlaced:
    """A customer placed an order and stock was taken off the ordered flowers."""

    __version__ = 1

    order_id: Identifier(required=True)
    customer_id: Identifier(required=True)
    items: Text(required=True)  # JSON: list of {flower_id, quantity, price}
    total_amount: Float(required=True)
    created_at: DateTime(required=True)


@flowershop.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id: Identifier(required=True)
    previous_status: String(required=True)
    new_status: String(required=True)
    changed_at: DateTime(required=True)
