"""Domain events for the Category aggregate."""

from protean.fields import DateTime, Identifier, String

from flowershop.domain import flowershop


@flowershop.event(part_of="Category")
class CategoryCreated:
    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    created_at: DateTime(required=True)


@flowershop.event(part_of="Category")
class CategoryRenamed:
    __version__ = 1

    category_id: Identifier(required=True)
    previous_name: String(required=True)
    name: String(required=True)
