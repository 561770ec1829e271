"""Ledger schemas for request/response validation."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field, field_serializer


class LedgerDirection(str, Enum):
    """Cash flow direction."""

    IN = "in"
    OUT = "out"


class LedgerCategory(str, Enum):
    """Ledger entry categories."""

    SERVICE = "service"
    PRODUCT = "product"
    CHEMICAL = "chemical"
    NAILS = "nails"


class LedgerEntryCreate(BaseModel):
    """Schema for a manual ledger entry."""

    amount: Decimal = Field(..., gt=0, decimal_places=2)
    direction: LedgerDirection = LedgerDirection.IN
    category: LedgerCategory = LedgerCategory.SERVICE
    note: str = Field(default="", max_length=500)


class LedgerEntryResponse(BaseModel):
    """Ledger entry response schema."""

    id: UUID
    amount: Decimal
    direction: LedgerDirection
    category: LedgerCategory
    note: str = ""
    appointment_id: UUID | None = None
    service_id: UUID | None = None
    client_name: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}

    @field_serializer("amount", when_used="json")
    def serialize_decimal(self, value: Decimal) -> float:
        """Serialize Decimal to float for JSON."""
        return float(value)


class LedgerSummary(BaseModel):
    """Net totals (in minus out) for the current day, month and year."""

    day: Decimal
    month: Decimal
    year: Decimal

    @field_serializer("day", "month", "year", when_used="json")
    def serialize_decimal(self, value: Decimal) -> float:
        """Serialize Decimal to float for JSON."""
        return float(value)
