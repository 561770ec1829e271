"""Business settings storage (one document per owner)."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert

from app.models.business_settings import business_settings
from app.repositories.base import OwnedRepository


class BusinessSettingsRepository(OwnedRepository):
    """Settings keyed by owner id."""

    table = business_settings

    async def get_for_owner(self, owner_id: UUID) -> dict | None:
        """Stored settings, or None if the owner never saved any."""
        result = await self._execute(
            select(business_settings).where(business_settings.c.owner_id == owner_id)
        )
        row = result.mappings().first()
        return dict(row) if row else None

    async def upsert(self, owner_id: UUID, values: dict[str, Any]) -> dict:
        """Insert or merge the provided fields into the owner's settings."""
        values = {**values, "updated_at": datetime.now(UTC)}
        stmt = (
            insert(business_settings)
            .values(owner_id=owner_id, **values)
            .on_conflict_do_update(index_elements=[business_settings.c.owner_id], set_=values)
            .returning(business_settings)
        )
        result = await self._execute(stmt)
        row = result.mappings().one()
        await self._commit()
        return dict(row)
