"""Repository for the Category aggregate."""

from flowershop.category.category import Category
from flowershop.domain import flowershop
from flowershop.shared.identifiers import CategoryId
from flowershop.shared.queries import fetch_all


@flowershop.repository(part_of=Category)
class CategoryRepository:
    """Explicit, eager queries over categories."""

    def get_by_id(self, category_id: CategoryId) -> Category | None:
        return self._dao.query.filter(id=category_id).all().first

    def get_by_ids(self, category_ids: list[CategoryId]) -> list[Category]:
        if not category_ids:
            return []
        return fetch_all(self._dao.query.filter(id__in=list(category_ids)))

    def get_by_name(self, name: str) -> Category | None:
        return self._dao.query.filter(name=name).all().first

    def list_all(self) -> list[Category]:
        return fetch_all(self._dao.query.order_by("name"))

    def remove(self, category: Category) -> None:
        self._dao.delete(category)
