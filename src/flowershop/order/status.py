"""Order status changes: command and handler.

Any status of ``OrderStatus`` may follow any other; the value must match one
of the enumeration's values exactly.
"""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from flowershop.domain import flowershop
from flowershop.order.errors import InvalidOrderStatus, OrderNotFound
from flowershop.order.order import Order, OrderStatus
from flowershop.shared.results import Failure, Success

_STATUS_VALUES = {status.value for status in OrderStatus}


@flowershop.command(part_of="Order")
class UpdateOrderStatus:
    order_id: Identifier(required=True)
    status: String(required=True, max_length=20)


@flowershop.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(Order)

        order = repo.get_by_id(command.order_id)
        if order is None:
            return Failure(OrderNotFound(order_id=command.order_id))

        if command.status not in _STATUS_VALUES:
            return Failure(InvalidOrderStatus(order_id=order.id, status=command.status))

        order.change_status(command.status)
        repo.add(order)
        return Success(order)
