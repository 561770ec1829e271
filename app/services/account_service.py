"""Account service for business logic."""

from uuid import UUID

from app.config import settings
from app.core.redis_client import CacheManager
from app.repositories.accounts import AccountRepository
from app.schemas.accounts import AccountCreate


class AccountService:
    """Service for account operations."""

    def __init__(self, repository: AccountRepository, cache: CacheManager | None = None):
        """Initialize service with repository and optional cache manager."""
        self.repository = repository
        self.cache = cache

    @staticmethod
    def _get_account_cache_key(account_id: UUID | str) -> str:
        """Generate cache key for account."""
        return f"account:{account_id}"

    def _invalidate(self, account_id: UUID | str) -> None:
        if self.cache:
            self.cache.delete(self._get_account_cache_key(account_id))

    async def get_account_by_id(self, account_id: UUID) -> dict | None:
        """Get account by ID, from cache when possible."""
        if self.cache:
            cached = self.cache.get_json(self._get_account_cache_key(account_id))
            if cached:
                return cached

        account = await self.repository.get_by_id(account_id)

        if account and self.cache:
            self.cache.set_json(
                self._get_account_cache_key(account_id),
                account,
                ttl=settings.account_cache_ttl,
            )

        return account

    async def get_or_create_account(self, data: AccountCreate) -> dict:
        """
        Get the account of a Firebase identity, creating it on first login.

        Profile fields mirrored from Firebase are refreshed on every login.
        """
        profile = data.model_dump(exclude={"firebase_uid"})
        existing = await self.repository.get_by_firebase_uid(data.firebase_uid)

        if existing is None:
            return await self.repository.create(data.model_dump())

        account = await self.repository.touch_login(existing["id"], profile)
        self._invalidate(existing["id"])
        return account or existing
