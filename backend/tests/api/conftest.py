"""API test fixtures: FastAPI app wired to the in-memory test database.

Invariants:
    - get_db dependency overridden to use the test engine via DatabaseSessionManager
    - db_manager swapped for the readiness probe and restored afterwards
"""

import pytest
from httpx import ASGITransport, AsyncClient

from book_catalog.infrastructure.database import get_db, DatabaseSessionManager
import book_catalog.infrastructure.database as db_module
from book_catalog.main import app


@pytest.fixture
async def test_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(test_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def dune(client):
    """A book created through the API."""
    res = await client.post("/books", json={
        "title": "Dune", "author": "Frank Herbert", "publishedYear": 1965,
    })
    assert res.status_code == 201
    return res.json()
