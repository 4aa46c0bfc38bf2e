"""Failures reported by the customer handlers."""

from dataclasses import dataclass

from flowershop.shared.results import DomainError, ErrorKind


@dataclass(frozen=True)
class CustomerError(DomainError):
    customer_id: str


@dataclass(frozen=True)
class CustomerAlreadyExists(CustomerError):
    email: str

    kind = ErrorKind.CONFLICT

    @property
    def message(self):
        return f"Customer already exists with email '{self.email}'"


@dataclass(frozen=True)
class CustomerNotFound(CustomerError):
    kind = ErrorKind.NOT_FOUND

    @property
    def message(self):
        return f"Customer not found under id {self.customer_id}"


@dataclass(frozen=True)
class CustomerHasOrders(CustomerError):
    order_count: int

    kind = ErrorKind.CONFLICT

    @property
    def message(self):
        return f"Customer {self.customer_id} still has {self.order_count} order(s)"


@dataclass(frozen=True)
class CustomerUnhandled(CustomerError):
    cause: Exception | None = None

    kind = ErrorKind.UNEXPECTED

    @property
    def message(self):
        return "Unexpected error occurred"


def customer_unhandled(customer_id):
    def build(exc):
        return CustomerUnhandled(customer_id=customer_id, cause=exc)

    return build
