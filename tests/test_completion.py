"""Tests for completing appointments and the ledger entry they produce."""

from datetime import date
from decimal import Decimal
from uuid import UUID, uuid4

import pytest
from httpx import AsyncClient

from app.core.exceptions import (
    AlreadyCompletedException,
    ImmutableRecordException,
    InvalidPriceException,
    NotFoundException,
    ServiceNotFoundException,
)
from app.schemas.appointments import AppointmentCreate, AppointmentUpdate
from app.schemas.ledger import LedgerCategory, LedgerDirection
from app.services.appointment_service import AppointmentService

DAY = date(2026, 3, 10)


async def book(service: AppointmentService, owner_id: UUID, service_id: UUID, start="09:00"):
    return await service.create_appointment(
        owner_id,
        AppointmentCreate(
            client_name="Ana",
            phone="1234",
            service_id=service_id,
            duration_minutes=30,
            appointment_date=DAY,
            start_time=start,
        ),
    )


@pytest.mark.asyncio
async def test_completion_records_one_inbound_entry(
    appointment_service: AppointmentService, owner_id: UUID, store
):
    coloring = await store.services.create(
        owner_id, {"name": "Coloring", "duration_minutes": 90, "price": Decimal("150.00")}
    )
    appointment = await book(appointment_service, owner_id, coloring["id"])

    result = await appointment_service.complete_appointment(owner_id, appointment.id)

    assert result.appointment.completed is True
    assert result.appointment.completed_at is not None
    assert result.ledger_entry.amount == Decimal("150.00")
    assert result.ledger_entry.direction == LedgerDirection.IN
    assert result.ledger_entry.category == LedgerCategory.SERVICE
    assert result.ledger_entry.appointment_id == appointment.id
    assert result.ledger_entry.service_id == coloring["id"]
    assert result.ledger_entry.client_name == "Ana"
    assert result.ledger_entry.created_at == result.appointment.completed_at
    assert len(store.ledger.records) == 1


@pytest.mark.asyncio
async def test_completed_appointment_cannot_be_edited(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict
):
    appointment = await book(appointment_service, owner_id, haircut["id"])
    await appointment_service.complete_appointment(owner_id, appointment.id)

    with pytest.raises(ImmutableRecordException):
        await appointment_service.update_appointment(
            owner_id, appointment.id, AppointmentUpdate(client_name="Bia")
        )


@pytest.mark.asyncio
async def test_zero_price_is_rejected_without_side_effects(
    appointment_service: AppointmentService, owner_id: UUID, free_service: dict, store
):
    appointment = await book(appointment_service, owner_id, free_service["id"])

    with pytest.raises(InvalidPriceException):
        await appointment_service.complete_appointment(owner_id, appointment.id)

    assert store.ledger.records == {}
    stored = await appointment_service.get_appointment(owner_id, appointment.id)
    assert stored.completed is False


@pytest.mark.asyncio
async def test_second_completion_is_rejected(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict, store
):
    appointment = await book(appointment_service, owner_id, haircut["id"])
    await appointment_service.complete_appointment(owner_id, appointment.id)

    with pytest.raises(AlreadyCompletedException):
        await appointment_service.complete_appointment(owner_id, appointment.id)

    assert len(store.ledger.records) == 1


@pytest.mark.asyncio
async def test_completion_uses_the_current_price(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict, store
):
    appointment = await book(appointment_service, owner_id, haircut["id"])
    await store.services.update(owner_id, haircut["id"], {"price": Decimal("65.00")})

    result = await appointment_service.complete_appointment(owner_id, appointment.id)

    assert result.ledger_entry.amount == Decimal("65.00")


@pytest.mark.asyncio
async def test_completion_requires_the_service(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict, store
):
    appointment = await book(appointment_service, owner_id, haircut["id"])
    await store.services.delete(owner_id, haircut["id"])

    with pytest.raises(ServiceNotFoundException):
        await appointment_service.complete_appointment(owner_id, appointment.id)

    assert store.ledger.records == {}


@pytest.mark.asyncio
async def test_completing_unknown_appointment(
    appointment_service: AppointmentService, owner_id: UUID
):
    with pytest.raises(NotFoundException):
        await appointment_service.complete_appointment(owner_id, uuid4())


@pytest.mark.asyncio
async def test_complete_endpoint(
    client: AsyncClient, auth_headers: dict, appointment_service, owner_id: UUID, haircut: dict
) -> None:
    appointment = await book(appointment_service, owner_id, haircut["id"])

    response = await client.post(
        f"/api/v1/appointments/{appointment.id}/complete", headers=auth_headers
    )

    assert response.status_code == 200
    data = response.json()
    assert data["appointment"]["completed"] is True
    assert data["ledger_entry"]["amount"] == 50.0
    assert data["ledger_entry"]["direction"] == "in"
    assert data["ledger_entry"]["category"] == "service"

    again = await client.post(
        f"/api/v1/appointments/{appointment.id}/complete", headers=auth_headers
    )
    assert again.status_code == 409
    assert again.json()["error"] == "AlreadyCompletedException"


@pytest.mark.asyncio
async def test_complete_endpoint_errors(
    client: AsyncClient,
    auth_headers: dict,
    appointment_service,
    owner_id: UUID,
    free_service: dict,
) -> None:
    missing = await client.post(f"/api/v1/appointments/{uuid4()}/complete", headers=auth_headers)
    assert missing.status_code == 404

    appointment = await book(appointment_service, owner_id, free_service["id"])
    unpriced = await client.post(
        f"/api/v1/appointments/{appointment.id}/complete", headers=auth_headers
    )
    assert unpriced.status_code == 422
    assert unpriced.json()["error"] == "InvalidPriceException"
