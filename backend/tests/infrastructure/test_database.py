"""DatabaseSessionManager — rollback + BackendError mapping and readiness check."""

import pytest
from sqlalchemy import text

from product_api.core.errors import BackendError
from product_api.infrastructure import database
from product_api.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.dispose()


async def test_health_check_succeeds_on_reachable_database(manager):
    assert await manager.health_check() is True


async def test_operational_error_maps_to_backend_error(manager):
    with pytest.raises(BackendError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM missing_table"))
    assert exc_info.value.http_status == 500
    assert exc_info.value.operation == "execute"


async def test_non_database_errors_pass_through(manager):
    with pytest.raises(ValueError):
        async with manager.session():
            raise ValueError("not a db error")


async def test_get_db_requires_initialization(monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)
    with pytest.raises(RuntimeError):
        async for _ in database.get_db():
            pass


async def test_init_and_close_db(monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)
    manager = database.init_db("sqlite+aiosqlite:///:memory:", pool_size=5)
    assert database.db_manager is manager
    await database.close_db()
    assert database.db_manager is None
