"""Account storage."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

import structlog
from sqlalchemy import insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import StorageException
from app.models.accounts import accounts

logger = structlog.get_logger(__name__)


class AccountRepository:
    """Accounts are global rows, not owner-scoped."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session."""
        self.db = db

    async def _execute(self, stmt: Any, commit: bool = False) -> Any:
        try:
            result = await self.db.execute(stmt)
            if commit:
                await self.db.commit()
            return result
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("storage_error", table="accounts", error=str(e))
            raise StorageException() from e

    async def get_by_id(self, account_id: UUID) -> dict | None:
        """Get account by internal id."""
        result = await self._execute(select(accounts).where(accounts.c.id == account_id))
        row = result.mappings().first()
        return dict(row) if row else None

    async def get_by_firebase_uid(self, firebase_uid: str) -> dict | None:
        """Get account by Firebase uid."""
        result = await self._execute(
            select(accounts).where(accounts.c.firebase_uid == firebase_uid)
        )
        row = result.mappings().first()
        return dict(row) if row else None

    async def create(self, values: dict[str, Any]) -> dict:
        """Create an account."""
        now = datetime.now(UTC)
        result = await self._execute(
            insert(accounts).values(last_login_at=now, **values).returning(accounts),
            commit=True,
        )
        return dict(result.mappings().one())

    async def touch_login(self, account_id: UUID, values: dict[str, Any]) -> dict | None:
        """Record a login and refresh the profile fields mirrored from Firebase."""
        now = datetime.now(UTC)
        result = await self._execute(
            update(accounts)
            .where(accounts.c.id == account_id)
            .values(last_login_at=now, updated_at=now, **values)
            .returning(accounts),
            commit=True,
        )
        row = result.mappings().first()
        return dict(row) if row else None
