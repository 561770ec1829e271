"""Shared helpers for owner-scoped table repositories."""

from datetime import UTC, datetime
from typing import Any, ClassVar
from uuid import UUID

import structlog
from sqlalchemy import Table, and_, delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import StorageException

logger = structlog.get_logger(__name__)


class OwnedRepository:
    """
    CRUD on a table partitioned by ``owner_id``.

    Every statement is scoped to a single owner. Database errors are rolled
    back and surfaced as StorageException.
    """

    table: ClassVar[Table]
    order_by: ClassVar[tuple[str, ...]] = ()

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session."""
        self.db = db

    async def _execute(self, stmt: Any) -> Any:
        try:
            return await self.db.execute(stmt)
        except SQLAlchemyError as e:
            await self._fail(e)

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._fail(e)

    async def _fail(self, error: SQLAlchemyError) -> None:
        await self.db.rollback()
        logger.error("storage_error", table=self.table.name, error=str(error))
        raise StorageException() from error

    def _scoped(self, owner_id: UUID, record_id: UUID) -> Any:
        return and_(self.table.c.owner_id == owner_id, self.table.c.id == record_id)

    def _ordering(self) -> list[Any]:
        return [self.table.c[column] for column in self.order_by]

    async def get(self, owner_id: UUID, record_id: UUID) -> dict | None:
        """Point lookup by id within the owner's partition."""
        result = await self._execute(select(self.table).where(self._scoped(owner_id, record_id)))
        row = result.mappings().first()
        return dict(row) if row else None

    async def list_all(self, owner_id: UUID) -> list[dict]:
        """All records of the owner, in the repository's default order."""
        stmt = (
            select(self.table)
            .where(self.table.c.owner_id == owner_id)
            .order_by(*self._ordering())
        )
        result = await self._execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    async def create(self, owner_id: UUID, values: dict[str, Any]) -> dict:
        """Insert a record and return it with generated fields."""
        stmt = insert(self.table).values(owner_id=owner_id, **values).returning(self.table)
        result = await self._execute(stmt)
        row = result.mappings().one()
        await self._commit()
        return dict(row)

    async def update(self, owner_id: UUID, record_id: UUID, values: dict[str, Any]) -> dict | None:
        """Merge ``values`` into a record. Returns None if it does not exist."""
        return await self._update_where(self._scoped(owner_id, record_id), values)

    async def delete(self, owner_id: UUID, record_id: UUID) -> bool:
        """Delete a record. Returns False if it did not exist."""
        stmt = (
            delete(self.table)
            .where(self._scoped(owner_id, record_id))
            .returning(self.table.c.id)
        )
        result = await self._execute(stmt)
        deleted = result.first() is not None
        await self._commit()
        return deleted

    async def _update_where(self, condition: Any, values: dict[str, Any]) -> dict | None:
        if "updated_at" in self.table.c:
            values = {**values, "updated_at": datetime.now(UTC)}

        stmt = update(self.table).where(condition).values(**values).returning(self.table)
        result = await self._execute(stmt)
        row = result.mappings().first()
        await self._commit()
        return dict(row) if row else None
