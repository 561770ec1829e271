"""Database models."""

from app.models.accounts import accounts
from app.models.accounts import metadata as accounts_metadata
from app.models.appointments import appointments
from app.models.appointments import metadata as appointments_metadata
from app.models.business_settings import business_settings
from app.models.business_settings import metadata as business_settings_metadata
from app.models.clients import clients
from app.models.clients import metadata as clients_metadata
from app.models.ledger import ledger_entries
from app.models.ledger import metadata as ledger_metadata
from app.models.services import metadata as services_metadata
from app.models.services import services

# Alembic target metadata
all_metadata = [
    accounts_metadata,
    appointments_metadata,
    business_settings_metadata,
    clients_metadata,
    ledger_metadata,
    services_metadata,
]

__all__ = [
    "accounts",
    "all_metadata",
    "appointments",
    "business_settings",
    "clients",
    "ledger_entries",
    "services",
]
