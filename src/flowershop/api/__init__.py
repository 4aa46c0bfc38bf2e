"""HTTP routers for the flower shop."""

from flowershop.api.catalogue import category_router, flower_router
from flowershop.api.customer import router as customer_router
from flowershop.api.ordering import router as order_router

__all__ = ["category_router", "flower_router", "customer_router", "order_router"]
