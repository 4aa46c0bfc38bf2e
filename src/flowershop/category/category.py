"""Category aggregate root for grouping flowers."""

from datetime import UTC, datetime

from protean.fields import DateTime, String

from flowershop.domain import flowershop


@flowershop.aggregate
class Category:
    """A named grouping of flowers, such as "Roses" or "Wedding Bouquets".

    Flowers reference categories through their own association records, so a
    category knows nothing about the flowers filed under it.
    """

    name: String(required=True, max_length=100, unique=True)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(cls, name):
        from flowershop.category.events import CategoryCreated

        now = datetime.now(UTC)
        category = cls(name=name, created_at=now)
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                created_at=now,
            )
        )
        return category

    def rename(self, name):
        from flowershop.category.events import CategoryRenamed

        previous_name = self.name
        self.name = name
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CategoryRenamed(
                category_id=self.id,
                previous_name=previous_name,
                name=name,
            )
        )
