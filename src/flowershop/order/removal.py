"""Order removal: command and handler. Stock is not given back."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from flowershop.domain import flowershop
from flowershop.order.errors import OrderNotFound
from flowershop.order.order import Order
from flowershop.shared.results import Failure, Success
from flowershop.utils.logging import get_logger

logger = get_logger(__name__)


@flowershop.command(part_of="Order")
class DeleteOrder:
    order_id: Identifier(required=True)


@flowershop.command_handler(part_of=Order)
class DeleteOrderHandler:
    @handle(DeleteOrder)
    def delete_order(self, command):
        repo = current_domain.repository_for(Order)

        order = repo.get_by_id(command.order_id)
        if order is None:
            return Failure(OrderNotFound(order_id=command.order_id))

        repo.remove(order)

        logger.info("order_deleted", order_id=order.id)
        return Success(order)
