"""Appointment schemas for request/response validation."""

from datetime import date, datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel

from app.schemas.ledger import LedgerEntryResponse

# Durations offered when booking, in minutes
ALLOWED_DURATIONS = (30, 60, 90)


class AppointmentCreate(BaseModel):
    """
    Schema for creating a new appointment.

    Only types are checked here; field rules are applied by the service in a
    fixed order so the first failing rule is the one reported.
    """

    client_name: str = ""
    phone: str = ""
    service_id: UUID | None = None
    duration_minutes: int | None = None
    appointment_date: date
    start_time: str


class AppointmentUpdate(BaseModel):
    """Schema for editing a pending appointment. Omitted fields keep their value."""

    client_name: str | None = None
    phone: str | None = None
    service_id: UUID | None = None
    duration_minutes: int | None = None
    appointment_date: date | None = None
    start_time: str | None = None


class AppointmentResponse(BaseModel):
    """Schema for appointment response."""

    id: UUID
    client_name: str
    phone: str
    service_id: UUID
    service_name: str
    duration_minutes: int
    appointment_date: date
    start_time: str
    end_time: str
    completed: bool
    completed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class AppointmentCompletionResponse(BaseModel):
    """Completed appointment together with the ledger entry it produced."""

    appointment: AppointmentResponse
    ledger_entry: LedgerEntryResponse


class SlotStatus(str, Enum):
    """Occupancy of a grid slot."""

    FREE = "free"
    OCCUPIED = "occupied"
    BLOCKED = "blocked"


class DaySlot(BaseModel):
    """One bookable start time of the day grid."""

    time: str
    status: SlotStatus
    appointment: AppointmentResponse | None = None


class DayAgendaResponse(BaseModel):
    """Day grid with occupancy, plus the day's appointments by start time."""

    day: date
    opening_time: str
    closing_time: str
    slot_minutes: int
    slots: list[DaySlot]
    appointments: list[AppointmentResponse]
