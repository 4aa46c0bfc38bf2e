"""Repository for the Customer aggregate."""

from flowershop.customer.customer import Customer
from flowershop.domain import flowershop
from flowershop.shared.identifiers import CustomerId
from flowershop.shared.queries import fetch_all


@flowershop.repository(part_of=Customer)
class CustomerRepository:
    def get_by_id(self, customer_id: CustomerId) -> Customer | None:
        return self._dao.query.filter(id=customer_id).all().first

    def get_by_email(self, email: str) -> Customer | None:
        return self._dao.query.filter(email=email).all().first

    def list_all(self) -> list[Customer]:
        return fetch_all(self._dao.query.order_by("last_name"))

    def remove(self, customer: Customer) -> None:
        self._dao.delete(customer)
