"""Schema Bootstrap — creates tables from Base.metadata outside of Alembic.

Invariants:
    - Same metadata Alembic migrates (all models imported via product_api.models)
    - Meant for test fixtures and throwaway local SQLite databases

Design Decisions:
    - Separate from infrastructure/database.py: request sessions never create schema
"""

from sqlalchemy.ext.asyncio import AsyncEngine

import product_api.models  # noqa: F401
from product_api.db.base import Base


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables known to Base.metadata."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
