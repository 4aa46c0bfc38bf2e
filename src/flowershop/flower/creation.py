"""Flower creation: command and handler."""

import json

from protean import handle
from protean.fields import Float, Integer, String, Text
from protean.utils.globals import current_domain

from flowershop.category.category import Category
from flowershop.domain import flowershop
from flowershop.flower.errors import FlowerAlreadyExists, FlowerCategoriesNotFound
from flowershop.flower.flower import Flower
from flowershop.shared.results import Failure, Success
from flowershop.utils.logging import get_logger

logger = get_logger(__name__)


@flowershop.command(part_of="Flower")
class CreateFlower:
    name: String(required=True, max_length=255)
    description: String(max_length=1000)
    price: Float(required=True, min_value=0.01)
    stock_quantity: Integer(required=True, min_value=0)
    category_ids: Text(required=True)  # JSON: list of category ids


def load_category_ids(raw):
    ids = json.loads(raw) if isinstance(raw, str) else raw
    return list(dict.fromkeys(str(category_id) for category_id in ids or []))


def missing_categories(category_ids):
    """Return the requested category ids that cannot be resolved, in request order."""
    found = {category.id for category in current_domain.repository_for(Category).get_by_ids(category_ids)}
    return tuple(category_id for category_id in category_ids if category_id not in found)


@flowershop.command_handler(part_of=Flower)
class CreateFlowerHandler:
    @handle(CreateFlower)
    def create_flower(self, command):
        repo = current_domain.repository_for(Flower)

        existing = repo.get_by_name(command.name)
        if existing is not None:
            return Failure(FlowerAlreadyExists(flower_id=existing.id))

        category_ids = load_category_ids(command.category_ids)
        flower = Flower.create(
            name=command.name,
            description=command.description,
            price=command.price,
            stock_quantity=command.stock_quantity,
            category_ids=category_ids,
        )

        missing = missing_categories(category_ids)
        if missing:
            return Failure(FlowerCategoriesNotFound(flower_id=flower.id, missing_category_ids=missing))

        repo.add(flower)

        logger.info("flower_created", flower_id=flower.id, name=flower.name, categories=len(category_ids))
        return Success(flower)
