"""FastAPI dependencies."""

from typing import Annotated
from uuid import UUID

import redis
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.redis_client import CacheManager, get_redis_client
from app.core.security import decode_access_token
from app.database import get_db
from app.repositories import (
    AccountRepository,
    AppointmentRepository,
    BusinessSettingsRepository,
    ClientRepository,
    LedgerRepository,
    ServiceRepository,
)
from app.services.account_service import AccountService
from app.services.appointment_service import AppointmentService
from app.services.auth_service import AuthService
from app.services.catalog_service import CatalogService
from app.services.client_service import ClientService
from app.services.dashboard_service import DashboardService
from app.services.ledger_service import LedgerService
from app.services.settings_service import SettingsService

# Security
security = HTTPBearer()


def _credentials_error(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_account_id(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
) -> UUID:
    """
    Extract and validate the account ID from the JWT access token.

    Args:
        credentials: Bearer token credentials

    Returns:
        Account ID from token

    Raises:
        HTTPException: If token is invalid or expired
    """
    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise _credentials_error()

    account_id = payload.get("sub")
    if account_id is None or not isinstance(account_id, str):
        raise _credentials_error()

    try:
        return UUID(account_id)
    except ValueError:
        raise _credentials_error("Invalid account ID format")


def get_cache_manager(
    redis_client: Annotated[redis.Redis, Depends(get_redis_client)],
) -> CacheManager:
    """Cache manager bound to the shared Redis client."""
    return CacheManager(redis_client)


# Type aliases for dependency injection
DatabaseSession = Annotated[AsyncSession, Depends(get_db)]
TokenAccountId = Annotated[UUID, Depends(get_current_account_id)]
CacheManagerDep = Annotated[CacheManager, Depends(get_cache_manager)]


def get_account_service(db: DatabaseSession, cache: CacheManagerDep) -> AccountService:
    return AccountService(AccountRepository(db), cache)


def get_auth_service(
    accounts: Annotated[AccountService, Depends(get_account_service)],
    cache: CacheManagerDep,
) -> AuthService:
    return AuthService(accounts, cache)


async def get_current_account(
    account_id: TokenAccountId,
    accounts: Annotated[AccountService, Depends(get_account_service)],
) -> dict:
    """
    Get the current account.

    Raises:
        HTTPException: If the account does not exist or is inactive
    """
    account = await accounts.get_account_by_id(account_id)

    if not account:
        raise _credentials_error("Account not found")

    if not account["is_active"]:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is deactivated",
        )

    return account


async def get_active_account_id(
    account: Annotated[dict, Depends(get_current_account)],
) -> UUID:
    """Owner id of the authenticated, active account."""
    return UUID(str(account["id"]))


CurrentAccountId = Annotated[UUID, Depends(get_active_account_id)]


def get_settings_service(db: DatabaseSession, cache: CacheManagerDep) -> SettingsService:
    return SettingsService(BusinessSettingsRepository(db), cache)


def get_catalog_service(db: DatabaseSession, cache: CacheManagerDep) -> CatalogService:
    return CatalogService(ServiceRepository(db), cache)


def get_client_service(db: DatabaseSession) -> ClientService:
    return ClientService(ClientRepository(db))


def get_ledger_service(db: DatabaseSession) -> LedgerService:
    return LedgerService(LedgerRepository(db))


def get_appointment_service(
    db: DatabaseSession,
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
    business_settings: Annotated[SettingsService, Depends(get_settings_service)],
) -> AppointmentService:
    return AppointmentService(AppointmentRepository(db), catalog, business_settings)


def get_dashboard_service(
    ledger: Annotated[LedgerService, Depends(get_ledger_service)],
    appointments: Annotated[AppointmentService, Depends(get_appointment_service)],
    clients: Annotated[ClientService, Depends(get_client_service)],
) -> DashboardService:
    return DashboardService(ledger, appointments, clients)


CurrentAccount = Annotated[dict, Depends(get_current_account)]
AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
SettingsServiceDep = Annotated[SettingsService, Depends(get_settings_service)]
CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
ClientServiceDep = Annotated[ClientService, Depends(get_client_service)]
LedgerServiceDep = Annotated[LedgerService, Depends(get_ledger_service)]
AppointmentServiceDep = Annotated[AppointmentService, Depends(get_appointment_service)]
DashboardServiceDep = Annotated[DashboardService, Depends(get_dashboard_service)]
