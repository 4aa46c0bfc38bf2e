"""Repository for the Flower aggregate."""

from protean.utils.globals import current_domain

from flowershop.domain import flowershop
from flowershop.flower.flower import CategoryFlower, Flower
from flowershop.shared.identifiers import CategoryId, FlowerId
from flowershop.shared.queries import fetch_all


@flowershop.repository(part_of=Flower)
class FlowerRepository:
    """Explicit, eager queries over flowers.

    Every method returns fully loaded aggregates, category links and images
    included.
    """

    def get_by_id(self, flower_id: FlowerId) -> Flower | None:
        return self._dao.query.filter(id=flower_id).all().first

    def get_by_ids(self, flower_ids: list[FlowerId]) -> list[Flower]:
        if not flower_ids:
            return []
        return fetch_all(self._dao.query.filter(id__in=list(flower_ids)))

    def get_by_name(self, name: str) -> Flower | None:
        return self._dao.query.filter(name=name).all().first

    def list_all(self) -> list[Flower]:
        return fetch_all(self._dao.query.order_by("name"))

    def by_category(self, category_id: CategoryId) -> list[Flower]:
        """Flowers linked to `category_id`, found through the category link records."""
        links = current_domain.repository_for(CategoryFlower)._dao.query.filter(category_id=category_id)
        flower_ids = list(dict.fromkeys(link.flower_id for link in fetch_all(links)))
        return sorted(self.get_by_ids(flower_ids), key=lambda flower: flower.name)

    def remove(self, flower: Flower) -> None:
        """Delete a flower along with its category links and image records.

        Works on a freshly loaded copy so `flower` stays intact for the caller.
        """
        stored = self.get_by_id(flower.id)
        if stored is None:
            return

        if stored.categories:
            stored.remove_categories(list(stored.categories))
        if stored.images:
            stored.remove_images(list(stored.images))
        self.add(stored)

        self._dao.delete(stored)
