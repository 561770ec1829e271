"""Ledger storage."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import and_, select

from app.models.ledger import ledger_entries
from app.repositories.base import OwnedRepository


class LedgerRepository(OwnedRepository):
    """Cash-flow entries of one owner, newest first."""

    table = ledger_entries

    async def list_between(
        self,
        owner_id: UUID,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[dict]:
        """Entries created in [start, end), newest first. Open bounds are allowed."""
        conditions = [ledger_entries.c.owner_id == owner_id]
        if start is not None:
            conditions.append(ledger_entries.c.created_at >= start)
        if end is not None:
            conditions.append(ledger_entries.c.created_at < end)

        stmt = (
            select(ledger_entries)
            .where(and_(*conditions))
            .order_by(ledger_entries.c.created_at.desc())
        )
        result = await self._execute(stmt)
        return [dict(row) for row in result.mappings().all()]
