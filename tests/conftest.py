"""
Pytest fixtures for the POS service.

The store is replaced by an in-memory Motor-compatible client so services and
routes run their real queries without a MongoDB server.
"""

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.config.mongodb import mongodb


@pytest.fixture
def db():
    client = AsyncMongoMockClient()
    mongodb.client = client
    mongodb.db = client["pos_test"]
    yield mongodb.db
    mongodb.client = None
    mongodb.db = None


@pytest.fixture
def client(db):
    # Startup hooks are not run; the fixture above already wired the store
    from main import app

    return TestClient(app)


@pytest.fixture
def make_product():
    counter = {"n": 0}

    def _make(price, name=None, code=None):
        counter["n"] += 1
        n = counter["n"]
        return {
            "id": f"prod-{n}",
            "code": code or f"P{n:03d}",
            "name": name or f"Product {n}",
            "price": price,
        }

    return _make
