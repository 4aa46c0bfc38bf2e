"""Failures reported by the order handlers and the sales report."""

from dataclasses import dataclass
from datetime import date

from flowershop.shared.results import DomainError, ErrorKind


@dataclass(frozen=True)
class OrderError(DomainError):
    order_id: str


@dataclass(frozen=True)
class OrderNotFound(OrderError):
    kind = ErrorKind.NOT_FOUND

    @property
    def message(self):
        return f"Order not found under id {self.order_id}"


@dataclass(frozen=True)
class OrderCustomerNotFound(OrderError):
    customer_id: str

    kind = ErrorKind.NOT_FOUND

    @property
    def message(self):
        return f"Customer not found for order {self.order_id}"


@dataclass(frozen=True)
class OrderFlowersNotFound(OrderError):
    missing_flower_ids: tuple[str, ...] = ()

    kind = ErrorKind.NOT_FOUND

    @property
    def message(self):
        return f"One or more flowers not found for order {self.order_id}"


@dataclass(frozen=True)
class OrderEmpty(OrderError):
    kind = ErrorKind.VALIDATION

    @property
    def message(self):
        return f"Order {self.order_id} cannot be empty"


@dataclass(frozen=True)
class InvalidOrderQuantity(OrderError):
    flower_id: str
    quantity: int

    kind = ErrorKind.VALIDATION

    @property
    def message(self):
        return f"Quantity for flower {self.flower_id} must be at least 1, got {self.quantity}"


@dataclass(frozen=True)
class InsufficientStock(OrderError):
    flower_id: str
    flower_name: str
    requested: int
    available: int

    kind = ErrorKind.VALIDATION

    @property
    def message(self):
        return (
            f"Insufficient stock for flower '{self.flower_name}' (ID: {self.flower_id}). "
            f"Requested: {self.requested}, Available: {self.available}"
        )


@dataclass(frozen=True)
class InvalidOrderStatus(OrderError):
    status: str

    kind = ErrorKind.VALIDATION

    @property
    def message(self):
        return f"'{self.status}' is not a valid order status"


@dataclass(frozen=True)
class OrderUnhandled(OrderError):
    cause: Exception | None = None

    kind = ErrorKind.UNEXPECTED

    @property
    def message(self):
        return "Unexpected error occurred"


@dataclass(frozen=True)
class InvalidReportRange(DomainError):
    start_date: date
    end_date: date

    kind = ErrorKind.VALIDATION

    @property
    def message(self):
        return f"End date {self.end_date} is before start date {self.start_date}"


def order_unhandled(order_id):
    def build(exc):
        return OrderUnhandled(order_id=order_id, cause=exc)

    return build
