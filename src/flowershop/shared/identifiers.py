"""Typed identifiers for the flower shop aggregates and entities."""

from typing import NewType
from uuid import UUID

from protean.exceptions import ValidationError

CategoryId = NewType("CategoryId", str)
FlowerId = NewType("FlowerId", str)
FlowerImageId = NewType("FlowerImageId", str)
CustomerId = NewType("CustomerId", str)
OrderId = NewType("OrderId", str)
OrderItemId = NewType("OrderItemId", str)


def parse_identifier(value: str, field: str = "id") -> str:
    """Normalise an identifier received from the outside world.

    Malformed values and the all-zero UUID are rejected.
    """
    try:
        parsed = UUID(str(value))
    except ValueError:
        raise ValidationError({field: [f"'{value}' is not a valid identifier"]}) from None

    if parsed.int == 0:
        raise ValidationError({field: ["Identifier cannot be empty"]})

    return str(parsed)
