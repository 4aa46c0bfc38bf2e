"""Flower details update: command and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from flowershop.domain import flowershop
from flowershop.flower.creation import load_category_ids, missing_categories
from flowershop.flower.errors import (
    FlowerAlreadyExists,
    FlowerCategoriesNotFound,
    FlowerNotFound,
)
from flowershop.flower.flower import Flower
from flowershop.shared.results import Failure, Success


@flowershop.command(part_of="Flower")
class UpdateFlower:
    flower_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: String(max_length=1000)
    price: Float(required=True, min_value=0.01)
    stock_quantity: Integer(required=True, min_value=0)
    category_ids: Text(required=True)  # JSON: list of category ids


@flowershop.command_handler(part_of=Flower)
class UpdateFlowerHandler:
    @handle(UpdateFlower)
    def update_flower(self, command):
        repo = current_domain.repository_for(Flower)

        flower = repo.get_by_id(command.flower_id)
        if flower is None:
            return Failure(FlowerNotFound(flower_id=command.flower_id))

        namesake = repo.get_by_name(command.name)
        if namesake is not None and namesake.id != flower.id:
            return Failure(FlowerAlreadyExists(flower_id=namesake.id))

        category_ids = load_category_ids(command.category_ids)
        missing = missing_categories(category_ids)
        if missing:
            return Failure(FlowerCategoriesNotFound(flower_id=flower.id, missing_category_ids=missing))

        flower.assign_categories(category_ids)
        flower.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            stock_quantity=command.stock_quantity,
        )
        repo.add(flower)
        return Success(flower)
