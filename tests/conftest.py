"""
Record Shop - Test Configuration and Fixtures
"""
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from recordshop.api.app import app
from recordshop.api.state import AppState, get_state
from recordshop.client.api_client import RecordShopClient
from recordshop.client.session import SessionStorage
from recordshop.core.auth_directory import AuthDirectory
from recordshop.core.record_store import create_store


@pytest.fixture
def state() -> AppState:
    """Fresh seeded store per test, roles advisory only"""
    return AppState(store=create_store(), directory=AuthDirectory(), enforce_roles=False)


@pytest.fixture
def enforced_state() -> AppState:
    """Fresh seeded store with role checks on mutating endpoints"""
    return AppState(store=create_store(), directory=AuthDirectory(), enforce_roles=True)


@pytest_asyncio.fixture
async def client(state: AppState) -> AsyncGenerator[AsyncClient, None]:
    """Async API client bound to the test state"""
    app.dependency_overrides[get_state] = lambda: state
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def enforced_client(enforced_state: AppState) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_state] = lambda: enforced_state
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def http(state: AppState) -> Generator[TestClient, None, None]:
    """Synchronous httpx client for the staff client tests"""
    app.dependency_overrides[get_state] = lambda: state
    with TestClient(app) as tc:
        yield tc
    app.dependency_overrides.clear()


@pytest.fixture
def storage(tmp_path) -> SessionStorage:
    return SessionStorage(tmp_path / "session.json")


@pytest.fixture
def shop(http: TestClient, storage: SessionStorage) -> RecordShopClient:
    return RecordShopClient(http=http, storage=storage)


@pytest.fixture
def record_payload() -> dict:
    return {
        "title": "X",
        "artist": "Y",
        "format": "CD",
        "genre": "Pop",
        "releaseYear": 2020,
        "price": 9.99,
        "stockQty": 3,
        "customerId": "123A",
        "customerFirstName": "Ann",
        "customerLastName": "Lee",
        "customerContact": "12345678",
        "customerEmail": "ann@example.com",
    }
