import os

# Settings are read at import time; point them at SQLite before the app loads
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from product_api.core.config import Settings
from product_api.core.db import Database
from product_api.main import create_app

FRONTEND_URL = "http://localhost:5173"
API_URL = "http://localhost:4000"


def memory_database() -> Database:
    return Database(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        FRONTEND_URL=FRONTEND_URL,
        API_URL=API_URL,
        LOG_LEVEL="INFO",
    )


@pytest.fixture
def database():
    db = memory_database()
    yield db
    db.dispose()


@pytest.fixture
def client(settings, database):
    app = create_app(settings, database)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_product(client):
    def _make(name="Monitor", price=300, **extra):
        response = client.post("/api/products", json={"name": name, "price": price, **extra})
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make
