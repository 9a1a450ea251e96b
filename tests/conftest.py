import os

import pytest
from fastapi.testclient import TestClient

os.environ.pop("ORDERS_DATA_PATH", None)  # testes começam com Store vazio

from app.ids import CounterIdGenerator  # noqa: E402
from app.main import create_app  # noqa: E402
from app.orders import OrderService  # noqa: E402
from app.store import OrderStore  # noqa: E402


def order_body(**overrides) -> dict:
    data = {
        "deliverTo": "123 Main",
        "mobileNumber": "555-0100",
        "dishes": [{"id": "d1", "quantity": 2}],
    }
    data.update(overrides)
    return data


@pytest.fixture
def store() -> OrderStore:
    return OrderStore()


@pytest.fixture
def service(store) -> OrderService:
    return OrderService(store, CounterIdGenerator("ord-"))


@pytest.fixture
def client(service) -> TestClient:
    return TestClient(create_app(service))
