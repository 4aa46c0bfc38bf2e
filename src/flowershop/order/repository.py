"""Repository for the Order aggregate."""

from datetime import datetime

from flowershop.domain import flowershop
from flowershop.order.order import Order, OrderStatus
from flowershop.shared.identifiers import CustomerId, OrderId
from flowershop.shared.queries import fetch_all


@flowershop.repository(part_of=Order)
class OrderRepository:
    """Explicit, eager queries over orders, line items included."""

    def get_by_id(self, order_id: OrderId) -> Order | None:
        return self._dao.query.filter(id=order_id).all().first

    def list_all(self) -> list[Order]:
        return fetch_all(self._dao.query.order_by("-created_at"))

    def by_customer(self, customer_id: CustomerId) -> list[Order]:
        return fetch_all(self._dao.query.filter(customer_id=customer_id).order_by("-created_at"))

    def delivered_between(self, start: datetime, end: datetime) -> list[Order]:
        """Delivered orders created within ``[start, end]``."""
        query = self._dao.query.filter(
            status=OrderStatus.DELIVERED.value,
            created_at__gte=start,
            created_at__lte=end,
        ).order_by("created_at")
        return fetch_all(query)

    def remove(self, order: Order) -> None:
        stored = self.get_by_id(order.id)
        if stored is None:
            return

        if stored.items:
            stored.remove_items(list(stored.items))
        self.add(stored)

        self._dao.delete(stored)
