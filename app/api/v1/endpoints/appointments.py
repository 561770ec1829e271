"""Appointment endpoints."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Query, status

from app.dependencies import AppointmentServiceDep, CurrentAccountId
from app.schemas.appointments import (
    AppointmentCompletionResponse,
    AppointmentCreate,
    AppointmentResponse,
    AppointmentUpdate,
    DayAgendaResponse,
)

router = APIRouter()


@router.post(
    "/",
    response_model=AppointmentResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Appointments"],
    summary="Book an appointment",
)
async def create_appointment(
    data: AppointmentCreate,
    account_id: CurrentAccountId,
    service: AppointmentServiceDep,
) -> AppointmentResponse:
    """
    Book an appointment on a free slot of the day grid.

    Returns 422 when a field rule fails and 409 when the range overlaps
    another appointment or a blocked period.
    """
    return await service.create_appointment(account_id, data)


@router.get(
    "/",
    response_model=list[AppointmentResponse],
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="List appointments of a day",
)
async def list_appointments(
    account_id: CurrentAccountId,
    service: AppointmentServiceDep,
    day: date = Query(..., alias="date"),
) -> list[AppointmentResponse]:
    """List the appointments of a day ordered by start time."""
    return await service.list_for_day(account_id, day)


@router.get(
    "/agenda",
    response_model=DayAgendaResponse,
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="Day agenda",
)
async def get_day_agenda(
    account_id: CurrentAccountId,
    service: AppointmentServiceDep,
    day: date = Query(..., alias="date"),
) -> DayAgendaResponse:
    """
    Get the slot grid of a day with the occupancy of every slot.

    Args:
        account_id: Authenticated account
        service: Appointment service
        day: Calendar day (YYYY-MM-DD)

    Returns:
        Grid slots (free, occupied or blocked) and the day's appointments
    """
    return await service.get_day_agenda(account_id, day)


@router.get(
    "/{appointment_id}",
    response_model=AppointmentResponse,
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="Get appointment by ID",
)
async def get_appointment(
    appointment_id: UUID,
    account_id: CurrentAccountId,
    service: AppointmentServiceDep,
) -> AppointmentResponse:
    return await service.get_appointment(account_id, appointment_id)


@router.put(
    "/{appointment_id}",
    response_model=AppointmentResponse,
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="Edit appointment",
)
async def update_appointment(
    appointment_id: UUID,
    data: AppointmentUpdate,
    account_id: CurrentAccountId,
    service: AppointmentServiceDep,
) -> AppointmentResponse:
    """
    Edit a pending appointment.

    Completed appointments cannot be edited (409).
    """
    return await service.update_appointment(account_id, appointment_id, data)


@router.delete(
    "/{appointment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["Appointments"],
    summary="Delete appointment",
)
async def delete_appointment(
    appointment_id: UUID,
    account_id: CurrentAccountId,
    service: AppointmentServiceDep,
) -> None:
    """Delete an appointment, completed or not."""
    await service.delete_appointment(account_id, appointment_id)


@router.post(
    "/{appointment_id}/complete",
    response_model=AppointmentCompletionResponse,
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="Complete appointment",
)
async def complete_appointment(
    appointment_id: UUID,
    account_id: CurrentAccountId,
    service: AppointmentServiceDep,
) -> AppointmentCompletionResponse:
    """
    Mark an appointment as done and record its revenue in the ledger.

    Args:
        appointment_id: Appointment ID
        account_id: Authenticated account
        service: Appointment service

    Returns:
        Completed appointment and the ledger entry it produced
    """
    return await service.complete_appointment(account_id, appointment_id)
