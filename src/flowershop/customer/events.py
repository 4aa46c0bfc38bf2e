"""Domain events for the Customer aggregate."""

from protean.fields import DateTime, Identifier, String

from flowershop.domain import flowershop


@flowershop.event(part_of="Customer")
class CustomerRegistered:
    """A new customer was registered with the shop."""

    __version__ = 1

    customer_id: Identifier(required=True)
    email: String(required=True)
    first_name: String(required=True)
    last_name: String(required=True)
    registered_at: DateTime(required=True)


@flowershop.event(part_of="Customer")
class CustomerDetailsUpdated:
    __version__ = 1

    customer_id: Identifier(required=True)
    email: String(required=True)
    first_name: String(required=True)
    last_name: String(required=True)
