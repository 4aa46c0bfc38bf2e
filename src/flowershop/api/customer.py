"""FastAPI endpoints for customers."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from flowershop.api.customer_schemas import CustomerDetailsRequest, CustomerResponse
from flowershop.customer.customer import Customer
from flowershop.customer.errors import CustomerNotFound, customer_unhandled
from flowershop.customer.management import CreateCustomer, DeleteCustomer, UpdateCustomer
from flowershop.shared.http import unwrap
from flowershop.shared.identifiers import parse_identifier
from flowershop.shared.processing import dispatch
from flowershop.shared.results import Failure, Success

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=list[CustomerResponse])
async def list_customers() -> list[CustomerResponse]:
    customers = current_domain.repository_for(Customer).list_all()
    return [CustomerResponse.from_customer(customer) for customer in customers]


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: str) -> CustomerResponse:
    customer_id = parse_identifier(customer_id, "customer_id")
    customer = current_domain.repository_for(Customer).get_by_id(customer_id)
    result = Success(customer) if customer is not None else Failure(CustomerNotFound(customer_id=customer_id))
    return CustomerResponse.from_customer(unwrap(result))


@router.post("", status_code=201, response_model=CustomerResponse)
async def create_customer(body: CustomerDetailsRequest) -> CustomerResponse:
    command = CreateCustomer(**body.model_dump())
    result = dispatch(command, on_unexpected=customer_unhandled(None))
    return CustomerResponse.from_customer(unwrap(result))


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(customer_id: str, body: CustomerDetailsRequest) -> CustomerResponse:
    customer_id = parse_identifier(customer_id, "customer_id")
    command = UpdateCustomer(customer_id=customer_id, **body.model_dump())
    result = dispatch(command, on_unexpected=customer_unhandled(customer_id))
    return CustomerResponse.from_customer(unwrap(result))


@router.delete("/{customer_id}", response_model=CustomerResponse)
async def delete_customer(customer_id: str) -> CustomerResponse:
    customer_id = parse_identifier(customer_id, "customer_id")
    result = dispatch(DeleteCustomer(customer_id=customer_id), on_unexpected=customer_unhandled(customer_id))
    return CustomerResponse.from_customer(unwrap(result))
