"""Appointment service for business logic."""

from datetime import UTC, date, datetime, time
from typing import Any
from uuid import UUID

import structlog

from app.core.exceptions import (
    AlreadyCompletedException,
    ImmutableRecordException,
    InvalidPriceException,
    NotFoundException,
    ServiceNotFoundException,
    SlotConflictException,
    ValidationException,
)
from app.repositories.appointments import AppointmentRepository
from app.scheduling import (
    Interval,
    RejectionReason,
    can_place,
    format_time_of_day,
    generate_slots,
    parse_time_of_day,
)
from app.scheduling.slots import MINUTES_PER_DAY, minutes_since_midnight, time_from_minutes
from app.schemas.appointments import (
    ALLOWED_DURATIONS,
    AppointmentCompletionResponse,
    AppointmentCreate,
    AppointmentResponse,
    AppointmentUpdate,
    DayAgendaResponse,
    DaySlot,
    SlotStatus,
)
from app.schemas.business_settings import BusinessSettingsResponse
from app.schemas.ledger import LedgerCategory, LedgerDirection, LedgerEntryResponse
from app.services.catalog_service import CatalogService
from app.services.settings_service import SettingsService

logger = structlog.get_logger(__name__)

# Fields a client may set on create or edit
EDITABLE_FIELDS = (
    "client_name",
    "phone",
    "service_id",
    "duration_minutes",
    "appointment_date",
    "start_time",
)


def day_grid(config: BusinessSettingsResponse) -> tuple[time, ...]:
    """Slot grid for the owner's opening hours."""
    return generate_slots(
        parse_time_of_day(config.opening_time),
        parse_time_of_day(config.closing_time),
        config.slot_minutes,
    )


def appointment_interval(appointment: AppointmentResponse | dict) -> Interval:
    if isinstance(appointment, dict):
        start, end = appointment["start_time"], appointment["end_time"]
    else:
        start, end = appointment.start_time, appointment.end_time
    return Interval.from_bounds(parse_time_of_day(start), parse_time_of_day(end))


def blocked_intervals(config: BusinessSettingsResponse, day: date) -> list[tuple[str, Interval]]:
    return [
        (
            period.id,
            Interval.from_bounds(parse_time_of_day(period.start), parse_time_of_day(period.end)),
        )
        for period in config.blocked_on(day)
    ]


class AppointmentService:
    """Service for managing appointments."""

    def __init__(
        self,
        repository: AppointmentRepository,
        catalog: CatalogService,
        business_settings: SettingsService,
    ):
        """Initialize service with its storage and collaborating services."""
        self.repository = repository
        self.catalog = catalog
        self.business_settings = business_settings

    async def _get_row(self, owner_id: UUID, appointment_id: UUID) -> dict:
        row = await self.repository.get(owner_id, appointment_id)
        if row is None:
            raise NotFoundException("Appointment not found")
        return row

    async def _validate(
        self,
        owner_id: UUID,
        fields: dict[str, Any],
        exclude: UUID | None = None,
    ) -> dict[str, Any]:
        """
        Check a candidate appointment and build the values to store.

        Rules are checked in a fixed order and the first failing one is
        raised. Placement is evaluated against a fresh read of the day.

        Raises:
            ValidationException: If a field rule fails
            SlotConflictException: If the range overlaps another appointment
                or a blocked period
        """
        client_name = (fields.get("client_name") or "").strip()
        if not client_name:
            raise ValidationException("Client name is required")

        phone = (fields.get("phone") or "").strip()
        if not phone:
            raise ValidationException("Phone is required")

        service_id = fields.get("service_id")
        service = await self.catalog.find_service(owner_id, service_id) if service_id else None
        if service is None:
            raise ValidationException("Select a valid service")

        duration = fields.get("duration_minutes")
        if duration not in ALLOWED_DURATIONS:
            raise ValidationException(
                f"Duration must be one of {', '.join(str(d) for d in ALLOWED_DURATIONS)} minutes"
            )

        day: date | None = fields.get("appointment_date")
        if day is None:
            raise ValidationException("Appointment date is required")

        config = await self.business_settings.get_settings(owner_id)
        try:
            start = parse_time_of_day(fields.get("start_time") or "")
        except ValueError:
            raise ValidationException("Start time must use the HH:MM format")
        if start not in day_grid(config):
            raise ValidationException("Start time is not an available slot")

        candidate = Interval.from_start(start, duration)
        if candidate.end >= MINUTES_PER_DAY:
            raise ValidationException("Appointment must end on the same day")

        existing = await self.repository.list_for_day(owner_id, day)
        placement = can_place(
            candidate,
            [(row["id"], appointment_interval(row)) for row in existing],
            blocked=blocked_intervals(config, day),
            exclude=exclude,
        )
        if not placement.accepted:
            logger.info(
                "slot_conflict",
                owner_id=str(owner_id),
                day=day.isoformat(),
                start_time=format_time_of_day(start),
                reason=placement.reason.value,
                conflicts=[str(c) for c in placement.conflicts],
            )
            if placement.reason == RejectionReason.BLOCKED:
                raise SlotConflictException("Time slot is blocked")
            raise SlotConflictException("Time slot is not available, another appointment overlaps")

        return {
            "client_name": client_name,
            "phone": phone,
            "service_id": service.id,
            "service_name": service.name,
            "duration_minutes": duration,
            "appointment_date": day,
            "start_time": format_time_of_day(start),
            "end_time": format_time_of_day(time_from_minutes(candidate.end)),
        }

    async def create_appointment(
        self, owner_id: UUID, data: AppointmentCreate
    ) -> AppointmentResponse:
        """
        Book an appointment.

        Args:
            owner_id: Account owning the agenda
            data: Appointment creation data

        Returns:
            Created appointment, not completed
        """
        values = await self._validate(owner_id, data.model_dump())
        row = await self.repository.create(owner_id, {**values, "completed": False})

        logger.info(
            "appointment_created",
            owner_id=str(owner_id),
            appointment_id=str(row["id"]),
            day=values["appointment_date"].isoformat(),
            start_time=values["start_time"],
        )
        return AppointmentResponse.model_validate(row)

    async def update_appointment(
        self,
        owner_id: UUID,
        appointment_id: UUID,
        data: AppointmentUpdate,
    ) -> AppointmentResponse:
        """
        Edit a pending appointment in place.

        The merged record goes through the same checks as a new booking,
        ignoring the appointment's own current slot.

        Raises:
            NotFoundException: If appointment not found
            ImmutableRecordException: If the appointment is completed
        """
        stored = await self._get_row(owner_id, appointment_id)
        if stored["completed"]:
            raise ImmutableRecordException()

        merged = {field: stored[field] for field in EDITABLE_FIELDS}
        merged.update(data.model_dump(exclude_unset=True))

        values = await self._validate(owner_id, merged, exclude=appointment_id)
        row = await self.repository.update_pending(owner_id, appointment_id, values)
        if row is None:
            if await self.repository.get(owner_id, appointment_id) is None:
                raise NotFoundException("Appointment not found")
            raise ImmutableRecordException()

        logger.info("appointment_updated", owner_id=str(owner_id), appointment_id=str(appointment_id))
        return AppointmentResponse.model_validate(row)

    async def delete_appointment(self, owner_id: UUID, appointment_id: UUID) -> None:
        """
        Delete an appointment, completed or not.

        Ledger entries produced by a completion are kept.

        Raises:
            NotFoundException: If appointment not found
        """
        if not await self.repository.delete(owner_id, appointment_id):
            raise NotFoundException("Appointment not found")
        logger.info("appointment_deleted", owner_id=str(owner_id), appointment_id=str(appointment_id))

    async def get_appointment(self, owner_id: UUID, appointment_id: UUID) -> AppointmentResponse:
        """
        Get appointment by ID.

        Raises:
            NotFoundException: If appointment not found
        """
        return AppointmentResponse.model_validate(await self._get_row(owner_id, appointment_id))

    async def list_for_day(self, owner_id: UUID, day: date) -> list[AppointmentResponse]:
        """Appointments of a day ordered by start time."""
        rows = await self.repository.list_for_day(owner_id, day)
        return [AppointmentResponse.model_validate(row) for row in rows]

    async def list_completed(
        self, owner_id: UUID, limit: int | None = None, since: datetime | None = None
    ) -> list[AppointmentResponse]:
        rows = await self.repository.list_completed(owner_id, limit, since)
        return [AppointmentResponse.model_validate(row) for row in rows]

    async def get_day_agenda(self, owner_id: UUID, day: date) -> DayAgendaResponse:
        """
        Build the day grid with the occupancy of every slot.

        A slot is occupied when an appointment interval covers it and blocked
        when a blocked period covers it. The grid is empty when the opening
        time is after the closing time.
        """
        config = await self.business_settings.get_settings(owner_id)
        day_appointments = await self.list_for_day(owner_id, day)
        blocked = [interval for _, interval in blocked_intervals(config, day)]

        by_start = {a.start_time: a for a in day_appointments}
        intervals = [appointment_interval(a) for a in day_appointments]

        slots = []
        for slot in day_grid(config):
            label = format_time_of_day(slot)
            minute = minutes_since_midnight(slot)
            if any(i.start <= minute < i.end for i in intervals):
                status = SlotStatus.OCCUPIED
            elif any(b.start <= minute < b.end for b in blocked):
                status = SlotStatus.BLOCKED
            else:
                status = SlotStatus.FREE
            slots.append(DaySlot(time=label, status=status, appointment=by_start.get(label)))

        return DayAgendaResponse(
            day=day,
            opening_time=config.opening_time,
            closing_time=config.closing_time,
            slot_minutes=config.slot_minutes,
            slots=slots,
            appointments=day_appointments,
        )

    async def complete_appointment(
        self, owner_id: UUID, appointment_id: UUID
    ) -> AppointmentCompletionResponse:
        """
        Mark an appointment as done and record its revenue.

        Creates exactly one inbound ledger entry priced from the service at
        completion time. Rejections leave both records untouched.

        Raises:
            NotFoundException: If appointment not found
            AlreadyCompletedException: If it was completed before
            ServiceNotFoundException: If its service no longer exists
            InvalidPriceException: If the service price is not positive
        """
        stored = await self._get_row(owner_id, appointment_id)
        if stored["completed"]:
            raise AlreadyCompletedException()

        service = await self.catalog.find_service(owner_id, stored["service_id"])
        if service is None:
            raise ServiceNotFoundException()
        if service.price is None or service.price <= 0:
            raise InvalidPriceException()

        ledger_values = {
            "amount": service.price,
            "direction": LedgerDirection.IN.value,
            "category": LedgerCategory.SERVICE.value,
            "appointment_id": appointment_id,
            "service_id": service.id,
            "client_name": stored["client_name"],
        }
        result = await self.repository.complete(
            owner_id, appointment_id, ledger_values, completed_at=datetime.now(UTC)
        )
        if result is None:
            raise AlreadyCompletedException()

        appointment, entry = result
        logger.info(
            "appointment_completed",
            owner_id=str(owner_id),
            appointment_id=str(appointment_id),
            ledger_entry_id=str(entry["id"]),
            amount=str(service.price),
        )
        return AppointmentCompletionResponse(
            appointment=AppointmentResponse.model_validate(appointment),
            ledger_entry=LedgerEntryResponse.model_validate(entry),
        )
