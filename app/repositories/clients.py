"""Client roster storage."""

from uuid import UUID

from sqlalchemy import and_, select

from app.models.clients import clients
from app.repositories.base import OwnedRepository


class ClientRepository(OwnedRepository):
    """Clients of one owner."""

    table = clients
    order_by = ("name",)

    async def search(self, owner_id: UUID, term: str) -> list[dict]:
        """Clients whose name contains ``term`` (case-insensitive), by name."""
        stmt = (
            select(clients)
            .where(
                and_(
                    clients.c.owner_id == owner_id,
                    clients.c.name.icontains(term, autoescape=True),
                )
            )
            .order_by(clients.c.name)
        )
        result = await self._execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    async def list_recent(self, owner_id: UUID, limit: int) -> list[dict]:
        """Most recently updated clients first."""
        stmt = (
            select(clients)
            .where(clients.c.owner_id == owner_id)
            .order_by(clients.c.updated_at.desc())
            .limit(limit)
        )
        result = await self._execute(stmt)
        return [dict(row) for row in result.mappings().all()]
