"""API v1 router configuration."""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    accounts,
    appointments,
    auth,
    clients,
    dashboard,
    health,
    ledger,
    services,
    settings,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["Health"])
api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(accounts.router, prefix="/accounts", tags=["Accounts"])
api_router.include_router(appointments.router, prefix="/appointments", tags=["Appointments"])
api_router.include_router(services.router, prefix="/services", tags=["Services"])
api_router.include_router(clients.router, prefix="/clients", tags=["Clients"])
api_router.include_router(ledger.router, prefix="/ledger", tags=["Ledger"])
api_router.include_router(settings.router, prefix="/settings", tags=["Settings"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
