"""Authentication service for Firebase and JWT."""

from uuid import UUID

from app.config import settings
from app.core.exceptions import UnauthorizedException
from app.core.firebase import verify_firebase_token
from app.core.redis_client import CacheManager
from app.core.security import (
    create_access_token,
    create_refresh_token,
    decode_refresh_token,
)
from app.schemas.accounts import AccountCreate
from app.schemas.auth import Token
from app.services.account_service import AccountService

BLACKLIST_PREFIX = "blacklist:"


class AuthService:
    """Authentication service for handling Firebase and JWT operations."""

    def __init__(self, accounts: AccountService, cache_manager: CacheManager):
        """Initialize auth service with account service and cache manager."""
        self.accounts = accounts
        self.cache = cache_manager

    async def verify_firebase_id_token(self, id_token: str) -> dict:
        """
        Verify Firebase ID token and extract its claims.

        Raises:
            UnauthorizedException: If token verification fails
        """
        try:
            return await verify_firebase_token(id_token)
        except ValueError as e:
            raise UnauthorizedException(str(e))

    async def handle_firebase_login(self, firebase_token_data: dict) -> tuple[dict, Token]:
        """
        Get or create the account of a verified Firebase identity and issue tokens.

        Args:
            firebase_token_data: Decoded Firebase token

        Returns:
            Tuple of (account dict, token pair)
        """
        firebase_uid = firebase_token_data.get("uid")
        if not firebase_uid:
            raise UnauthorizedException("Firebase token has no uid")

        account = await self.accounts.get_or_create_account(
            AccountCreate(
                firebase_uid=firebase_uid,
                email=firebase_token_data.get("email"),
                display_name=firebase_token_data.get("name"),
                photo_url=firebase_token_data.get("picture"),
            )
        )

        if not account.get("is_active", True):
            raise UnauthorizedException("Account is deactivated")

        return account, self.create_tokens(str(account["id"]))

    def create_tokens(self, account_id: str) -> Token:
        """Create access and refresh tokens for an account."""
        return Token(
            access_token=create_access_token(data={"sub": account_id}),
            refresh_token=create_refresh_token(data={"sub": account_id}),
            token_type="bearer",
        )

    async def refresh_access_token(self, refresh_token: str) -> Token:
        """
        Create a new token pair from a refresh token.

        The account must still exist and be active.

        Raises:
            UnauthorizedException: If the refresh token is invalid or revoked,
                or the account is missing or deactivated
        """
        payload = decode_refresh_token(refresh_token)
        if payload is None or payload.get("sub") is None:
            raise UnauthorizedException("Invalid refresh token")

        if self.cache.exists(f"{BLACKLIST_PREFIX}{refresh_token}"):
            raise UnauthorizedException("Token has been revoked")

        try:
            account_id = UUID(payload["sub"])
        except ValueError:
            raise UnauthorizedException("Invalid refresh token")

        account = await self.accounts.get_account_by_id(account_id)
        if account is None:
            raise UnauthorizedException("Account not found")
        if not account.get("is_active", True):
            raise UnauthorizedException("Account is deactivated")

        return self.create_tokens(str(account_id))

    def revoke_token(self, token: str, ttl: int | None = None) -> None:
        """Revoke a refresh token by adding it to the blacklist until it expires."""
        if ttl is None:
            ttl = settings.refresh_token_expire_days * 86400
        self.cache.set(f"{BLACKLIST_PREFIX}{token}", "1", ttl=ttl)
