"""Customer management: commands and handlers."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from flowershop.customer.customer import Customer
from flowershop.customer.errors import CustomerAlreadyExists, CustomerHasOrders, CustomerNotFound
from flowershop.domain import flowershop
from flowershop.shared.results import Failure, Success
from flowershop.utils.logging import get_logger

logger = get_logger(__name__)


@flowershop.command(part_of="Customer")
class CreateCustomer:
    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    email: String(required=True, max_length=255)
    phone: String(required=True, max_length=20)
    address: String(required=True, max_length=500)


@flowershop.command(part_of="Customer")
class UpdateCustomer:
    customer_id: Identifier(required=True)
    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    email: String(required=True, max_length=255)
    phone: String(required=True, max_length=20)
    address: String(required=True, max_length=500)


@flowershop.command(part_of="Customer")
class DeleteCustomer:
    customer_id: Identifier(required=True)


@flowershop.command_handler(part_of=Customer)
class ManageCustomerHandler:
    @handle(CreateCustomer)
    def create_customer(self, command):
        repo = current_domain.repository_for(Customer)

        existing = repo.get_by_email(command.email)
        if existing is not None:
            return Failure(CustomerAlreadyExists(customer_id=existing.id, email=command.email))

        customer = Customer.register(
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
            phone=command.phone,
            address=command.address,
        )
        repo.add(customer)

        logger.info("customer_registered", customer_id=customer.id)
        return Success(customer)

    @handle(UpdateCustomer)
    def update_customer(self, command):
        repo = current_domain.repository_for(Customer)

        customer = repo.get_by_id(command.customer_id)
        if customer is None:
            return Failure(CustomerNotFound(customer_id=command.customer_id))

        namesake = repo.get_by_email(command.email)
        if namesake is not None and namesake.id != customer.id:
            return Failure(CustomerAlreadyExists(customer_id=namesake.id, email=command.email))

        customer.update_details(
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
            phone=command.phone,
            address=command.address,
        )
        repo.add(customer)
        return Success(customer)

    @handle(DeleteCustomer)
    def delete_customer(self, command):
        from flowershop.order.order import Order

        repo = current_domain.repository_for(Customer)

        customer = repo.get_by_id(command.customer_id)
        if customer is None:
            return Failure(CustomerNotFound(customer_id=command.customer_id))

        orders = current_domain.repository_for(Order).by_customer(customer.id)
        if orders:
            return Failure(CustomerHasOrders(customer_id=customer.id, order_count=len(orders)))

        repo.remove(customer)

        logger.info("customer_deleted", customer_id=customer.id)
        return Success(customer)
