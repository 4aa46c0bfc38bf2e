"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from flowershop.flower.flower import Flower
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def flowers():
    """Flowers created during the scenario, keyed by name."""
    return {}


@pytest.fixture()
def outcome():
    """Container for the result of the last placement."""
    return {"result": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a registered customer", target_fixture="customer")
def registered_customer(create_customer):
    return create_customer()


@given(parsers.cfparse('a flower "{name}" priced {price:f} with {stock:d} in stock'))
def flower_in_stock(create_flower, flowers, name, price, stock):
    flowers[name] = create_flower(name=name, price=price, stock_quantity=stock)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('"{name}" has {stock:d} in stock'))
def flower_has_stock(flowers, name, stock):
    assert current_domain.repository_for(Flower).get(flowers[name].id).stock_quantity == stock
