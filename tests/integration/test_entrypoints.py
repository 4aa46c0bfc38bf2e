"""Tests for the HTTP application and the database management CLI."""

import importlib
import os
import subprocess
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from flowershop.domain import flowershop


@pytest.fixture()
def initialized_domain(monkeypatch):
    """The session fixture has already initialized the domain."""
    monkeypatch.setattr(flowershop, "init", lambda: None)
    return flowershop


class TestApplication:
    @pytest.fixture()
    def client(self, initialized_domain):
        app_module = importlib.import_module("app")
        return TestClient(app_module.app)

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "domain": "flowershop"}

    def test_routers_are_mounted(self, client):
        assert client.get("/categories").status_code == 200
        assert client.get("/flowers").status_code == 200
        assert client.get("/customers").status_code == 200
        assert client.get("/orders").status_code == 200

    def test_malformed_identifier_returns_400(self, client):
        assert client.get("/flowers/not-a-uuid").status_code == 400


class TestManageCli:
    @pytest.fixture()
    def calls(self, initialized_domain, monkeypatch):
        import flowershop.utils.db as db

        recorded = []
        monkeypatch.setattr(db, "setup_db", lambda domain: recorded.append(("setup", domain.name)))
        monkeypatch.setattr(db, "drop_db", lambda domain: recorded.append(("drop", domain.name)))
        return recorded

    def test_setup_db(self, calls):
        manage = importlib.import_module("manage")
        manage.main(["setup-db"])
        assert calls == [("setup", "flowershop")]

    def test_drop_db(self, calls):
        manage = importlib.import_module("manage")
        manage.main(["drop-db"])
        assert calls == [("drop", "flowershop")]

    def test_command_is_required(self, calls):
        manage = importlib.import_module("manage")
        with pytest.raises(SystemExit):
            manage.main([])


_FRESH_APP_SCRIPT = """
from fastapi.testclient import TestClient

from app import app

client = TestClient(app)
category = client.post("/categories", json={"name": "Roses"})
assert category.status_code == 201, category.text

flower = client.post(
    "/flowers",
    json={
        "name": "Red Rose",
        "description": "Long-stemmed",
        "price": 19.99,
        "stock_quantity": 10,
        "category_ids": [category.json()["id"]],
    },
)
assert flower.status_code == 201, flower.text
assert client.get("/flowers").status_code == 200
assert client.get("/orders").status_code == 200
print("ok")
"""


def test_fresh_process_serves_catalogue(tmp_path):
    """Importing the app on its own registers every domain element before use."""
    src = Path(__file__).resolve().parents[2] / "src"
    env = {
        **os.environ,
        "PYTHONPATH": str(src),
        "PROTEAN_ENV": "test",
        "FLOWERSHOP_STORAGE_ROOT": str(tmp_path / "storage"),
    }

    completed = subprocess.run(
        [sys.executable, "-c", _FRESH_APP_SCRIPT],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
        timeout=120,
    )

    assert completed.returncode == 0, completed.stderr
    assert completed.stdout.strip().endswith("ok")


@pytest.mark.parametrize(
    "aggregate_path, repository_path",
    [
        ("flowershop.category.category:Category", "flowershop.category.repository:CategoryRepository"),
        ("flowershop.flower.flower:Flower", "flowershop.flower.repository:FlowerRepository"),
        ("flowershop.customer.customer:Customer", "flowershop.customer.repository:CustomerRepository"),
        ("flowershop.order.order:Order", "flowershop.order.repository:OrderRepository"),
    ],
)
def test_custom_repositories_are_registered(aggregate_path, repository_path):
    from protean.utils.globals import current_domain

    def _load(path):
        module, name = path.split(":")
        return getattr(importlib.import_module(module), name)

    assert isinstance(current_domain.repository_for(_load(aggregate_path)), _load(repository_path))
