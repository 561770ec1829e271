"""Dashboard schemas."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, field_serializer

from app.schemas.clients import ClientResponse


class DashboardKpis(BaseModel):
    """Headline numbers for the current day and month."""

    income_today: Decimal
    revenue_month: Decimal
    cash_balance_month: Decimal
    completed_today: int

    @field_serializer("income_today", "revenue_month", "cash_balance_month", when_used="json")
    def serialize_decimal(self, value: Decimal) -> float:
        """Serialize Decimal to float for JSON."""
        return float(value)


class MonthlyRevenue(BaseModel):
    """Inbound total for one calendar month."""

    month: str  # YYYY-MM
    amount: Decimal

    @field_serializer("amount", when_used="json")
    def serialize_decimal(self, value: Decimal) -> float:
        """Serialize Decimal to float for JSON."""
        return float(value)


class RecentAppointment(BaseModel):
    """Completed appointment summary."""

    id: UUID
    client_name: str
    service_name: str
    completed_at: datetime

    model_config = {"from_attributes": True}


class DashboardResponse(BaseModel):
    """Dashboard response schema."""

    kpis: DashboardKpis
    monthly_revenue: list[MonthlyRevenue]
    recent_appointments: list[RecentAppointment]
    recent_clients: list[ClientResponse]
