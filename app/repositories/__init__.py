"""Storage repositories (SQLAlchemy Core, owner-scoped)."""

from app.repositories.accounts import AccountRepository
from app.repositories.appointments import AppointmentRepository
from app.repositories.business_settings import BusinessSettingsRepository
from app.repositories.clients import ClientRepository
from app.repositories.ledger import LedgerRepository
from app.repositories.services import ServiceRepository

__all__ = [
    "AccountRepository",
    "AppointmentRepository",
    "BusinessSettingsRepository",
    "ClientRepository",
    "LedgerRepository",
    "ServiceRepository",
]
