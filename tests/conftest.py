import os

os.environ.setdefault("ENV_MODE", "development")
os.environ["SEED_DATA"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.main import app
from app.services import reset_services
from app.services.store import reset_stores


@pytest.fixture(autouse=True)
def fresh_stores():
    reset_stores()
    reset_services()
    yield
    reset_stores()
    reset_services()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seeded(monkeypatch):
    monkeypatch.setenv("SEED_DATA", "true")
    get_settings.cache_clear()
    reset_stores()
    reset_services()
    yield
    get_settings.cache_clear()


@pytest.fixture
def dish_payload():
    return {
        "name": "Pasta",
        "description": "x",
        "price": 12,
        "image_url": "u",
    }


@pytest.fixture
def order_payload():
    return {
        "deliverTo": "A",
        "mobileNumber": "555",
        "dishes": [
            {
                "id": "d351db2b49b69679504652ea1cf38241",
                "name": "Dolcelatte and fig crostini",
                "price": 19,
                "quantity": 2,
            }
        ],
    }
