"""Root conftest — shared test configuration and in-memory database fixtures.

Invariants:
    - Environment defaults set before any product_api import reads settings
    - Every test using test_engine gets a fresh in-memory SQLite schema

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for a single table
"""

import os

# Ensure tests never reach a real database through settings defaults
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from product_api.db.base import Base  # noqa: E402
from product_api.db.session import create_schema  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    await create_schema(engine)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session
