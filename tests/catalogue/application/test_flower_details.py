"""Application tests for updating flower details and categories."""

import json

from flowershop.flower.details import UpdateFlower
from flowershop.flower.errors import FlowerAlreadyExists, FlowerCategoriesNotFound, FlowerNotFound
from flowershop.flower.flower import Flower
from protean.utils.globals import current_domain


def _update(flower_id, category_ids, **overrides):
    fields = {"name": "Red Rose", "price": 17.5, "stock_quantity": 80}
    fields.update(overrides)
    command = UpdateFlower(flower_id=flower_id, category_ids=json.dumps(category_ids), **fields)
    return current_domain.process(command, asynchronous=False)


class TestUpdateFlowerHandler:
    def test_update_fields(self, create_category, create_flower):
        roses = create_category(name="Roses")
        flower = create_flower(category_ids=[roses.id])

        result = _update(flower.id, [roses.id], description="In season")
        assert result.ok

        stored = current_domain.repository_for(Flower).get(flower.id)
        assert stored.price == 17.5
        assert stored.stock_quantity == 80
        assert stored.description == "In season"
        assert stored.updated_at is not None

    def test_categories_are_replaced(self, create_category, create_flower):
        first = create_category(name="Roses")
        second = create_category(name="Gifts")
        flower = create_flower(category_ids=[first.id])

        _update(flower.id, [second.id])

        stored = current_domain.repository_for(Flower).get(flower.id)
        assert stored.category_ids == [second.id]

    def test_unknown_flower(self, create_category):
        roses = create_category(name="Roses")
        result = _update("7d1c2b3a-0000-4000-8000-000000000002", [roses.id])
        assert isinstance(result.error, FlowerNotFound)

    def test_unknown_category_leaves_flower_untouched(self, create_category, create_flower):
        roses = create_category(name="Roses")
        flower = create_flower(category_ids=[roses.id])

        result = _update(flower.id, ["7d1c2b3a-0000-4000-8000-000000000003"], price=1.0)
        assert isinstance(result.error, FlowerCategoriesNotFound)
        assert result.error.flower_id == flower.id

        stored = current_domain.repository_for(Flower).get(flower.id)
        assert stored.price == 19.99
        assert stored.category_ids == [roses.id]

    def test_rename_onto_other_flower_is_conflict(self, create_category, create_flower):
        roses = create_category(name="Roses")
        create_flower(name="Red Rose", category_ids=[roses.id])
        tulip = create_flower(name="Tulip", category_ids=[roses.id])

        result = _update(tulip.id, [roses.id], name="Red Rose")
        assert isinstance(result.error, FlowerAlreadyExists)
