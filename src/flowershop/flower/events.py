"""Domain events for the Flower aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from flowershop.domain import flowershop


@flowershop.event(part_of="Flower")
class FlowerAdded:
    """A new flower was added to the catalogue."""

    __version__ = 1

    flower_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    stock_quantity: Integer(required=True)
    category_ids: String()  # comma separated
    created_at: DateTime(required=True)


@flowershop.event(part_of="Flower")
class FlowerDetailsUpdated:
    __version__ = 1

    flower_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    stock_quantity: Integer(required=True)


@flowershop.event(part_of="Flower")
class FlowerCategoriesReassigned:
    __version__ = 1

    flower_id: Identifier(required=True)
    category_ids: String()  # comma separated


@flowershop.event(part_of="Flower")
class FlowerStockDecreased:
    """Stock was taken off a flower by an order."""

    __version__ = 1

    flower_id: Identifier(required=True)
    quantity: Integer(required=True)
    previous_quantity: Integer(required=True)
    new_quantity: Integer(required=True)


@flowershop.event(part_of="Flower")
class FlowerImageAdded:
    __version__ = 1

    flower_id: Identifier(required=True)
    image_id: Identifier(required=True)
    path: String(required=True)


@flowershop.event(part_of="Flower")
class FlowerImageRemoved:
    __version__ = 1

    flower_id: Identifier(required=True)
    image_id: Identifier(required=True)
