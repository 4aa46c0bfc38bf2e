"""Application tests for flower creation."""

import json

import pytest
from flowershop.flower.creation import CreateFlower
from flowershop.flower.errors import FlowerAlreadyExists, FlowerCategoriesNotFound
from flowershop.flower.flower import Flower
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

MISSING_CATEGORY = "9f1c2b3a-0000-4000-8000-000000000001"


def _create(category_ids, **overrides):
    fields = {"name": "Red Rose", "price": 19.99, "stock_quantity": 100}
    fields.update(overrides)
    command = CreateFlower(category_ids=json.dumps(category_ids), **fields)
    return current_domain.process(command, asynchronous=False)


class TestCreateFlowerHandler:
    def test_create_flower_with_categories(self, create_category):
        roses = create_category(name="Roses")
        gifts = create_category(name="Gifts")

        result = _create([roses.id, gifts.id])
        assert result.ok

        flower = current_domain.repository_for(Flower).get(result.value.id)
        assert set(flower.category_ids) == {roses.id, gifts.id}
        assert flower.stock_quantity == 100
        assert flower.updated_at is None

    def test_duplicate_name_is_conflict(self, create_category):
        roses = create_category(name="Roses")
        first = _create([roses.id])

        result = _create([roses.id])
        assert isinstance(result.error, FlowerAlreadyExists)
        assert result.error.flower_id == first.value.id
        assert len(current_domain.repository_for(Flower).list_all()) == 1

    def test_unknown_category_fails_without_persisting(self, create_category):
        roses = create_category(name="Roses")

        result = _create([roses.id, MISSING_CATEGORY])
        assert isinstance(result.error, FlowerCategoriesNotFound)
        assert result.error.missing_category_ids == (MISSING_CATEGORY,)
        assert result.error.message == f"One or more categories not found for flower {result.error.flower_id}"
        assert current_domain.repository_for(Flower).list_all() == []

    def test_invalid_price_rejected(self, create_category):
        roses = create_category(name="Roses")
        with pytest.raises(ValidationError):
            _create([roses.id], price=0)
