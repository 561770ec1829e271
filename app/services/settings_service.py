"""Business settings service."""

import secrets
from uuid import UUID

import structlog

from app.config import settings as app_settings
from app.core.exceptions import NotFoundException
from app.core.redis_client import CacheManager
from app.repositories.business_settings import BusinessSettingsRepository
from app.schemas.business_settings import (
    BlockedPeriod,
    BlockedPeriodCreate,
    BusinessSettingsResponse,
    BusinessSettingsUpdate,
)

logger = structlog.get_logger(__name__)


class SettingsService:
    """Per-owner business settings, cached in Redis."""

    def __init__(self, repository: BusinessSettingsRepository, cache: CacheManager | None = None):
        """Initialize service with repository and optional cache manager."""
        self.repository = repository
        self.cache = cache

    @staticmethod
    def _cache_key(owner_id: UUID) -> str:
        return f"settings:{owner_id}"

    def _invalidate(self, owner_id: UUID) -> None:
        if self.cache:
            self.cache.delete(self._cache_key(owner_id))

    async def _load(self, owner_id: UUID) -> BusinessSettingsResponse:
        row = await self.repository.get_for_owner(owner_id)
        if row is None:
            return BusinessSettingsResponse()
        return BusinessSettingsResponse.model_validate(row)

    async def get_settings(self, owner_id: UUID) -> BusinessSettingsResponse:
        """
        Get the owner's settings, or defaults when nothing was saved.

        Args:
            owner_id: Account owning the settings

        Returns:
            Business settings
        """
        if self.cache:
            cached = self.cache.get_json(self._cache_key(owner_id))
            if cached:
                return BusinessSettingsResponse.model_validate(cached)

        result = await self._load(owner_id)

        if self.cache:
            self.cache.set_json(
                self._cache_key(owner_id),
                result.model_dump(mode="json"),
                ttl=app_settings.settings_cache_ttl,
            )

        return result

    async def update_settings(
        self, owner_id: UUID, data: BusinessSettingsUpdate
    ) -> BusinessSettingsResponse:
        """Merge the provided fields into the owner's settings."""
        values = data.model_dump(exclude_unset=True, exclude_none=True)
        row = await self.repository.upsert(owner_id, values)
        self._invalidate(owner_id)

        logger.info("settings_updated", owner_id=str(owner_id), fields=sorted(values))
        return BusinessSettingsResponse.model_validate(row)

    async def add_blocked_period(
        self, owner_id: UUID, data: BlockedPeriodCreate
    ) -> BusinessSettingsResponse:
        """
        Block a time range on a day.

        Periods are kept sorted by day and start time.
        """
        current = await self._load(owner_id)
        period = BlockedPeriod(id=secrets.token_hex(4), **data.model_dump())
        periods = sorted([*current.blocked_periods, period], key=lambda p: (p.day, p.start))

        row = await self.repository.upsert(
            owner_id, {"blocked_periods": [p.model_dump(mode="json") for p in periods]}
        )
        self._invalidate(owner_id)

        logger.info(
            "blocked_period_added",
            owner_id=str(owner_id),
            period_id=period.id,
            day=period.day.isoformat(),
        )
        return BusinessSettingsResponse.model_validate(row)

    async def remove_blocked_period(
        self, owner_id: UUID, period_id: str
    ) -> BusinessSettingsResponse:
        """
        Remove a blocked period.

        Raises:
            NotFoundException: If no period has this id
        """
        current = await self._load(owner_id)
        remaining = [p for p in current.blocked_periods if p.id != period_id]
        if len(remaining) == len(current.blocked_periods):
            raise NotFoundException("Blocked period not found")

        row = await self.repository.upsert(
            owner_id, {"blocked_periods": [p.model_dump(mode="json") for p in remaining]}
        )
        self._invalidate(owner_id)

        logger.info("blocked_period_removed", owner_id=str(owner_id), period_id=period_id)
        return BusinessSettingsResponse.model_validate(row)
