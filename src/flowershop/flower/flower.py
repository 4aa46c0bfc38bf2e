"""Flower aggregate root with CategoryFlower and FlowerImage entities."""

from datetime import UTC, datetime
from pathlib import PurePath

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from flowershop.domain import flowershop


@flowershop.entity(part_of="Flower")
class CategoryFlower:
    """Association between a flower and one of its categories."""

    category_id: Identifier(required=True)


@flowershop.entity(part_of="Flower")
class FlowerImage:
    """An uploaded picture of a flower.

    The file itself lives in the file store under ``image_path``; only the
    original file name is kept here so the extension can be recovered.
    """

    original_name: String(required=True, max_length=255)


@flowershop.aggregate
class Flower:
    """A flower offered for sale.

    Stock can only go down through ``decrease_stock``, which refuses to take
    it below zero.
    """

    name: String(required=True, max_length=255, unique=True)
    description: String(max_length=1000)
    price: Float(required=True, min_value=0.01)
    stock_quantity: Integer(required=True, min_value=0)
    categories: HasMany(CategoryFlower)
    images: HasMany(FlowerImage)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(cls, name, price, stock_quantity, description=None, category_ids=None):
        from flowershop.flower.events import FlowerAdded

        now = datetime.now(UTC)
        category_ids = list(dict.fromkeys(category_ids or []))

        flower = cls(
            name=name,
            description=description,
            price=price,
            stock_quantity=stock_quantity,
            categories=[CategoryFlower(category_id=category_id) for category_id in category_ids],
            created_at=now,
        )
        flower.raise_(
            FlowerAdded(
                flower_id=flower.id,
                name=name,
                price=price,
                stock_quantity=stock_quantity,
                category_ids=",".join(category_ids),
                created_at=now,
            )
        )
        return flower

    @property
    def category_ids(self):
        return [link.category_id for link in self.categories]

    def update_details(self, name, description, price, stock_quantity):
        from flowershop.flower.events import FlowerDetailsUpdated

        self.name = name
        self.description = description
        self.price = price
        self.stock_quantity = stock_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            FlowerDetailsUpdated(
                flower_id=self.id,
                name=name,
                price=price,
                stock_quantity=stock_quantity,
            )
        )

    def assign_categories(self, category_ids):
        """Replace every category link with links to `category_ids`."""
        from flowershop.flower.events import FlowerCategoriesReassigned

        category_ids = list(dict.fromkeys(category_ids))

        if self.categories:
            self.remove_categories(list(self.categories))
        self.add_categories([CategoryFlower(category_id=category_id) for category_id in category_ids])
        self.updated_at = datetime.now(UTC)

        self.raise_(
            FlowerCategoriesReassigned(
                flower_id=self.id,
                category_ids=",".join(category_ids),
            )
        )

    def decrease_stock(self, quantity):
        from flowershop.flower.events import FlowerStockDecreased

        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if quantity > self.stock_quantity:
            raise ValidationError(
                {
                    "stock_quantity": [
                        f"Insufficient stock for flower '{self.name}': "
                        f"requested {quantity}, available {self.stock_quantity}"
                    ]
                }
            )

        previous = self.stock_quantity
        self.stock_quantity = previous - quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            FlowerStockDecreased(
                flower_id=self.id,
                quantity=quantity,
                previous_quantity=previous,
                new_quantity=self.stock_quantity,
            )
        )

    def add_image(self, original_name):
        from flowershop.flower.events import FlowerImageAdded

        image = FlowerImage(original_name=original_name)
        self.add_images(image)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            FlowerImageAdded(
                flower_id=self.id,
                image_id=image.id,
                path=self.image_path(image),
            )
        )
        return image

    def find_image(self, image_id):
        return next((image for image in self.images if image.id == image_id), None)

    def remove_image(self, image_id):
        from flowershop.flower.events import FlowerImageRemoved

        image = self.find_image(image_id)
        if image is None:
            raise ValidationError({"images": [f"Image {image_id} not found"]})

        self.remove_images(image)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            FlowerImageRemoved(
                flower_id=self.id,
                image_id=image_id,
            )
        )
        return image

    def image_path(self, image):
        return f"{self.id}/{image.id}{PurePath(image.original_name).suffix}"
