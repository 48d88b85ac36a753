"""Product Repository — SQLAlchemy implementation of the ProductRepository Protocol.

Invariants:
    - Every caller value reaches the store as a bound parameter (SQLAlchemy
      expressions only, no string-built SQL)
    - Each operation is a single statement committed on its own
    - Every SQLAlchemyError is rolled back, logged, and returned as Failure;
      nothing raises past this class for store errors
    - update/delete report NotFound when zero rows matched the id

Design Decisions:
    - Core update()/delete() statements over load-then-mutate: one atomic
      statement, rowcount gives the rows-affected signal directly
    - synchronize_session=False: each request owns a fresh session, so there is
      no identity map to keep in sync
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.core.domain_types import ProductId, StoreOperation
from product_api.core.outcomes import (
    Failure, Found, NotFound, Outcome, from_rows_affected,
)
from product_api.core.product import Product, ProductDraft
from product_api.models.product import Product as ProductRow

logger = logging.getLogger(__name__)


class SqlProductRepository:
    """Product persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def fetch_by_id(self, product_id: ProductId) -> Outcome[Product]:
        try:
            result = await self.db.execute(
                select(ProductRow).where(ProductRow.id == product_id),
            )
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            return await self._failure(StoreOperation.FETCH_BY_ID, e, product_id)
        if row is None:
            return NotFound()
        return Found(row.to_value())

    async def fetch_all(self) -> Outcome[list[Product]]:
        try:
            result = await self.db.execute(
                select(ProductRow).order_by(ProductRow.id),
            )
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            return await self._failure(StoreOperation.FETCH_ALL, e)
        return Found([row.to_value() for row in rows])

    async def insert(self, draft: ProductDraft) -> Outcome[Product]:
        row = ProductRow(
            name=draft.name, quantity=draft.quantity, price=draft.price,
        )
        try:
            self.db.add(row)
            await self.db.commit()
        except SQLAlchemyError as e:
            return await self._failure(StoreOperation.INSERT, e)
        logger.info(
            f"Product {row.id} created",
            extra={"product_id": row.id, "operation": StoreOperation.INSERT.value},
        )
        return Found(draft.with_id(ProductId(row.id)))

    async def update_by_id(
        self, product_id: ProductId, draft: ProductDraft,
    ) -> Outcome[Product]:
        statement = (
            update(ProductRow)
            .where(ProductRow.id == product_id)
            .values(name=draft.name, quantity=draft.quantity, price=draft.price)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.db.execute(statement)
            await self.db.commit()
        except SQLAlchemyError as e:
            return await self._failure(StoreOperation.UPDATE_BY_ID, e, product_id)
        if result.rowcount:
            logger.info(
                f"Product {product_id} updated",
                extra={
                    "product_id": product_id,
                    "operation": StoreOperation.UPDATE_BY_ID.value,
                },
            )
        return from_rows_affected(result.rowcount, draft.with_id(product_id))

    async def delete_by_id(self, product_id: ProductId) -> Outcome[ProductId]:
        statement = (
            delete(ProductRow)
            .where(ProductRow.id == product_id)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.db.execute(statement)
            await self.db.commit()
        except SQLAlchemyError as e:
            return await self._failure(StoreOperation.DELETE_BY_ID, e, product_id)
        if result.rowcount:
            logger.info(
                f"Product {product_id} deleted",
                extra={
                    "product_id": product_id,
                    "operation": StoreOperation.DELETE_BY_ID.value,
                },
            )
        return from_rows_affected(result.rowcount, product_id)

    async def _failure(
        self,
        operation: StoreOperation,
        exc: SQLAlchemyError,
        product_id: ProductId | None = None,
    ) -> Failure:
        """Roll back the session and report the store error as a Failure."""
        await self.db.rollback()
        logger.error(
            f"DB {operation.value} failed: {exc}",
            extra={"product_id": product_id, "operation": operation.value},
        )
        return Failure(operation, str(exc))
