"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database (root conftest)
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine
    - fake_client swaps the repository for FakeProductRepository (no DB at all)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Overrides cleared after every test: app is a module-level singleton
"""

import pytest
from httpx import ASGITransport, AsyncClient

from product_api.api.routes.products import get_product_repository
from product_api.infrastructure.database import get_db, DatabaseSessionManager
from product_api.models.product import Product as ProductRow
import product_api.infrastructure.database as db_module
from product_api.main import app
from tests.fakes import FakeProductRepository


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def fake_repository():
    return FakeProductRepository()


@pytest.fixture
async def fake_client(fake_repository):
    """FastAPI test client backed by FakeProductRepository."""
    app.dependency_overrides[get_product_repository] = lambda: fake_repository

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def add_product(test_session_factory):
    """Insert a row directly, bypassing the API (returns the assigned id)."""
    async def _add(name: str, quantity: int, price: float) -> int:
        async with test_session_factory() as session:
            row = ProductRow(name=name, quantity=quantity, price=price)
            session.add(row)
            await session.commit()
            return row.id

    return _add
