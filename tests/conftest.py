import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the configuration overlay before the domain is imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def _flowershop_domain(request):
    """Initialize the flowershop domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from flowershop.domain import flowershop

    flowershop.init()
    return flowershop


@pytest.fixture(scope="session", autouse=True)
def setup_db(_flowershop_domain):
    from flowershop.utils.db import drop_db, setup_db

    setup_db(_flowershop_domain)

    yield

    drop_db(_flowershop_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_flowershop_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _flowershop_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture(autouse=True)
def storage_root(tmp_path, monkeypatch):
    """Point the image file store at a per-test directory."""
    root = tmp_path / "storage"
    monkeypatch.setenv("FLOWERSHOP_STORAGE_ROOT", str(root))
    return root


# ---------------------------------------------------------------------------
# Factories shared across contexts
# ---------------------------------------------------------------------------
def _succeeded(result):
    assert result.ok, getattr(result, "error", None)
    return result.value


@pytest.fixture()
def create_category():
    from flowershop.category.management import CreateCategory
    from protean.utils.globals import current_domain

    def _create(name="Roses"):
        return _succeeded(current_domain.process(CreateCategory(name=name), asynchronous=False))

    return _create


@pytest.fixture()
def create_flower(create_category):
    import json

    from flowershop.flower.creation import CreateFlower
    from protean.utils.globals import current_domain

    def _create(name="Red Rose", price=19.99, stock_quantity=100, description=None, category_ids=None):
        if category_ids is None:
            category_ids = [create_category(name=f"{name} Category").id]
        command = CreateFlower(
            name=name,
            description=description,
            price=price,
            stock_quantity=stock_quantity,
            category_ids=json.dumps(category_ids),
        )
        return _succeeded(current_domain.process(command, asynchronous=False))

    return _create


@pytest.fixture()
def create_customer():
    from flowershop.customer.management import CreateCustomer
    from protean.utils.globals import current_domain

    def _create(email="olena@example.com", **overrides):
        details = {
            "first_name": "Olena",
            "last_name": "Kovalenko",
            "email": email,
            "phone": "+380501234567",
            "address": "12 Khreshchatyk St, Kyiv",
        }
        details.update(overrides)
        return _succeeded(current_domain.process(CreateCustomer(**details), asynchronous=False))

    return _create


@pytest.fixture()
def place_order():
    """Place an order and return the handler's result (success or failure)."""
    import json

    from flowershop.order.placement import PlaceOrder
    from protean.utils.globals import current_domain

    def _place(customer_id, items):
        command = PlaceOrder(
            customer_id=customer_id,
            items=json.dumps([{"flower_id": flower_id, "quantity": quantity} for flower_id, quantity in items]),
        )
        return current_domain.process(command, asynchronous=False)

    return _place
