"""Tests for booking, editing and deleting appointments."""

from datetime import date
from uuid import UUID, uuid4

import pytest
from httpx import AsyncClient

from app.core.exceptions import (
    ImmutableRecordException,
    NotFoundException,
    SlotConflictException,
    StorageException,
    ValidationException,
)
from app.schemas.appointments import AppointmentCreate, AppointmentUpdate, SlotStatus
from app.schemas.business_settings import BlockedPeriodCreate, BusinessSettingsUpdate
from app.services.appointment_service import AppointmentService

DAY = date(2026, 3, 10)


def booking(service_id: UUID | None, start: str = "09:00", duration: int | None = 60, **extra):
    data = {
        "client_name": "Ana Souza",
        "phone": "+55 11 99999-0000",
        "service_id": service_id,
        "duration_minutes": duration,
        "appointment_date": DAY,
        "start_time": start,
    }
    data.update(extra)
    return AppointmentCreate(**data)


@pytest.mark.asyncio
async def test_create_appointment_derives_end_time(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict
):
    created = await appointment_service.create_appointment(owner_id, booking(haircut["id"]))

    assert created.start_time == "09:00"
    assert created.end_time == "10:00"
    assert created.completed is False
    assert created.completed_at is None
    assert created.service_name == "Haircut"


@pytest.mark.asyncio
async def test_overlapping_booking_is_rejected(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict, store
):
    await appointment_service.create_appointment(owner_id, booking(haircut["id"], "09:00", 60))

    with pytest.raises(SlotConflictException):
        await appointment_service.create_appointment(owner_id, booking(haircut["id"], "09:30", 30))

    assert len(store.appointments.records) == 1


@pytest.mark.asyncio
async def test_back_to_back_booking_is_accepted(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict
):
    await appointment_service.create_appointment(owner_id, booking(haircut["id"], "09:00", 60))
    second = await appointment_service.create_appointment(
        owner_id, booking(haircut["id"], "10:00", 30)
    )

    assert second.end_time == "10:30"


@pytest.mark.asyncio
async def test_same_slot_on_another_day_is_accepted(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict
):
    await appointment_service.create_appointment(owner_id, booking(haircut["id"]))
    other_day = await appointment_service.create_appointment(
        owner_id, booking(haircut["id"], appointment_date=date(2026, 3, 11))
    )

    assert other_day.appointment_date == date(2026, 3, 11)


@pytest.mark.asyncio
async def test_completed_appointments_still_occupy_their_slot(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict
):
    first = await appointment_service.create_appointment(owner_id, booking(haircut["id"]))
    await appointment_service.complete_appointment(owner_id, first.id)

    with pytest.raises(SlotConflictException):
        await appointment_service.create_appointment(owner_id, booking(haircut["id"], "09:00", 30))


@pytest.mark.asyncio
async def test_other_owners_do_not_conflict(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict, store
):
    other_owner = uuid4()
    other_service = await store.services.create(other_owner, {"name": "Nails", "price": 30})

    await appointment_service.create_appointment(owner_id, booking(haircut["id"]))
    created = await appointment_service.create_appointment(
        other_owner, booking(other_service["id"])
    )

    assert created.start_time == "09:00"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"client_name": "   "}, "Client name is required"),
        ({"phone": ""}, "Phone is required"),
        ({"service_id": None}, "Select a valid service"),
        ({"duration_minutes": 45}, "Duration must be one of 30, 60, 90 minutes"),
        ({"duration_minutes": None}, "Duration must be one of 30, 60, 90 minutes"),
        ({"start_time": "09:15"}, "Start time is not an available slot"),
        ({"start_time": "21:00"}, "Start time is not an available slot"),
        ({"start_time": "9h"}, "Start time must use the HH:MM format"),
    ],
)
async def test_field_rules(
    appointment_service: AppointmentService,
    owner_id: UUID,
    haircut: dict,
    overrides: dict,
    message: str,
):
    data = booking(haircut["id"]).model_dump()
    data.update(overrides)

    with pytest.raises(ValidationException) as exc_info:
        await appointment_service.create_appointment(owner_id, AppointmentCreate(**data))

    assert exc_info.value.message == message


@pytest.mark.asyncio
async def test_unknown_service_is_a_validation_error(
    appointment_service: AppointmentService, owner_id: UUID
):
    with pytest.raises(ValidationException):
        await appointment_service.create_appointment(owner_id, booking(uuid4()))


@pytest.mark.asyncio
async def test_first_failing_rule_wins(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict
):
    await appointment_service.create_appointment(owner_id, booking(haircut["id"]))

    # Blank phone and an overlapping slot: the phone rule comes first
    with pytest.raises(ValidationException) as exc_info:
        await appointment_service.create_appointment(owner_id, booking(haircut["id"], phone=" "))

    assert exc_info.value.message == "Phone is required"


@pytest.mark.asyncio
async def test_names_and_phone_are_trimmed(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict
):
    created = await appointment_service.create_appointment(
        owner_id, booking(haircut["id"], client_name="  Ana  ", phone=" 1234 ")
    )

    assert created.client_name == "Ana"
    assert created.phone == "1234"


@pytest.mark.asyncio
async def test_booking_must_end_before_midnight(
    appointment_service: AppointmentService,
    settings_service,
    owner_id: UUID,
    haircut: dict,
):
    await settings_service.update_settings(
        owner_id, BusinessSettingsUpdate(opening_time="22:00", closing_time="23:30")
    )

    with pytest.raises(ValidationException):
        await appointment_service.create_appointment(owner_id, booking(haircut["id"], "23:30", 60))


@pytest.mark.asyncio
async def test_blocked_period_rejects_booking(
    appointment_service: AppointmentService,
    settings_service,
    owner_id: UUID,
    haircut: dict,
):
    await settings_service.add_blocked_period(
        owner_id, BlockedPeriodCreate(day=DAY, start="12:00", end="13:00")
    )

    with pytest.raises(SlotConflictException) as exc_info:
        await appointment_service.create_appointment(owner_id, booking(haircut["id"], "11:30", 60))
    assert exc_info.value.message == "Time slot is blocked"

    allowed = await appointment_service.create_appointment(
        owner_id, booking(haircut["id"], "13:00", 30)
    )
    assert allowed.start_time == "13:00"


@pytest.mark.asyncio
async def test_blocked_period_on_another_day_is_ignored(
    appointment_service: AppointmentService,
    settings_service,
    owner_id: UUID,
    haircut: dict,
):
    await settings_service.add_blocked_period(
        owner_id, BlockedPeriodCreate(day=date(2026, 3, 11), start="08:00", end="20:00")
    )

    created = await appointment_service.create_appointment(owner_id, booking(haircut["id"]))
    assert created.appointment_date == DAY


@pytest.mark.asyncio
async def test_edit_ignores_its_own_slot(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict
):
    created = await appointment_service.create_appointment(owner_id, booking(haircut["id"]))

    updated = await appointment_service.update_appointment(
        owner_id, created.id, AppointmentUpdate(start_time="09:30")
    )

    assert updated.id == created.id
    assert updated.start_time == "09:30"
    assert updated.end_time == "10:30"


@pytest.mark.asyncio
async def test_edit_into_another_appointment_is_rejected(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict
):
    await appointment_service.create_appointment(owner_id, booking(haircut["id"], "09:00", 60))
    second = await appointment_service.create_appointment(
        owner_id, booking(haircut["id"], "10:00", 30)
    )

    with pytest.raises(SlotConflictException):
        await appointment_service.update_appointment(
            owner_id, second.id, AppointmentUpdate(duration_minutes=30, start_time="09:30")
        )


@pytest.mark.asyncio
async def test_edit_moves_appointment_to_another_day(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict
):
    created = await appointment_service.create_appointment(owner_id, booking(haircut["id"]))

    moved = await appointment_service.update_appointment(
        owner_id, created.id, AppointmentUpdate(appointment_date=date(2026, 3, 12))
    )

    assert moved.appointment_date == date(2026, 3, 12)
    assert await appointment_service.list_for_day(owner_id, DAY) == []


@pytest.mark.asyncio
async def test_edit_resnapshots_service_name(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict, store
):
    created = await appointment_service.create_appointment(owner_id, booking(haircut["id"]))
    coloring = await store.services.create(owner_id, {"name": "Coloring", "price": 120})

    updated = await appointment_service.update_appointment(
        owner_id, created.id, AppointmentUpdate(service_id=coloring["id"])
    )

    assert updated.service_name == "Coloring"


@pytest.mark.asyncio
async def test_renaming_service_keeps_booked_name(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict, store
):
    created = await appointment_service.create_appointment(owner_id, booking(haircut["id"]))
    await store.services.update(owner_id, haircut["id"], {"name": "Premium Haircut"})

    fetched = await appointment_service.get_appointment(owner_id, created.id)

    assert fetched.service_name == "Haircut"


@pytest.mark.asyncio
async def test_completed_appointment_cannot_be_edited(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict
):
    created = await appointment_service.create_appointment(owner_id, booking(haircut["id"]))
    await appointment_service.complete_appointment(owner_id, created.id)

    with pytest.raises(ImmutableRecordException):
        await appointment_service.update_appointment(
            owner_id, created.id, AppointmentUpdate(client_name="Someone else")
        )


@pytest.mark.asyncio
async def test_edit_of_appointment_deleted_meanwhile_is_not_found(
    appointment_service: AppointmentService,
    owner_id: UUID,
    haircut: dict,
    store,
    monkeypatch,
):
    created = await appointment_service.create_appointment(owner_id, booking(haircut["id"]))

    async def deleted_before_write(owner, appointment_id, values):
        await store.appointments.delete(owner, appointment_id)
        return None

    monkeypatch.setattr(store.appointments, "update_pending", deleted_before_write)

    with pytest.raises(NotFoundException):
        await appointment_service.update_appointment(
            owner_id, created.id, AppointmentUpdate(client_name="Someone else")
        )


@pytest.mark.asyncio
async def test_edit_of_appointment_completed_meanwhile_is_immutable(
    appointment_service: AppointmentService,
    owner_id: UUID,
    haircut: dict,
    store,
    monkeypatch,
):
    created = await appointment_service.create_appointment(owner_id, booking(haircut["id"]))
    original_update = store.appointments.update_pending

    async def completed_before_write(owner, appointment_id, values):
        store.appointments.records[appointment_id]["completed"] = True
        return await original_update(owner, appointment_id, values)

    monkeypatch.setattr(store.appointments, "update_pending", completed_before_write)

    with pytest.raises(ImmutableRecordException):
        await appointment_service.update_appointment(
            owner_id, created.id, AppointmentUpdate(client_name="Someone else")
        )
    assert store.appointments.records[created.id]["client_name"] == "Ana Souza"


@pytest.mark.asyncio
async def test_completed_appointment_can_be_deleted(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict, store
):
    created = await appointment_service.create_appointment(owner_id, booking(haircut["id"]))
    await appointment_service.complete_appointment(owner_id, created.id)

    await appointment_service.delete_appointment(owner_id, created.id)

    assert store.appointments.records == {}
    assert len(store.ledger.records) == 1


@pytest.mark.asyncio
async def test_delete_missing_appointment(appointment_service: AppointmentService, owner_id: UUID):
    with pytest.raises(NotFoundException):
        await appointment_service.delete_appointment(owner_id, uuid4())


@pytest.mark.asyncio
async def test_storage_failure_surfaces_as_storage_exception(
    appointment_service: AppointmentService, owner_id: UUID, haircut: dict, store
):
    store.appointments.fail_with = StorageException()

    with pytest.raises(StorageException):
        await appointment_service.create_appointment(owner_id, booking(haircut["id"]))


@pytest.mark.asyncio
async def test_day_agenda_marks_occupied_and_blocked_slots(
    appointment_service: AppointmentService,
    settings_service,
    owner_id: UUID,
    haircut: dict,
):
    await appointment_service.create_appointment(owner_id, booking(haircut["id"], "09:00", 60))
    await settings_service.add_blocked_period(
        owner_id, BlockedPeriodCreate(day=DAY, start="12:00", end="13:00")
    )

    agenda = await appointment_service.get_day_agenda(owner_id, DAY)
    by_time = {slot.time: slot for slot in agenda.slots}

    assert len(agenda.slots) == 25
    assert by_time["09:00"].status == SlotStatus.OCCUPIED
    assert by_time["09:00"].appointment is not None
    assert by_time["09:30"].status == SlotStatus.OCCUPIED
    assert by_time["09:30"].appointment is None
    assert by_time["10:00"].status == SlotStatus.FREE
    assert by_time["12:00"].status == SlotStatus.BLOCKED
    assert by_time["12:30"].status == SlotStatus.BLOCKED
    assert by_time["13:00"].status == SlotStatus.FREE
    assert [a.start_time for a in agenda.appointments] == ["09:00"]


@pytest.mark.asyncio
async def test_day_agenda_is_empty_when_opening_after_closing(
    appointment_service: AppointmentService, settings_service, owner_id: UUID
):
    await settings_service.update_settings(
        owner_id, BusinessSettingsUpdate(opening_time="20:00", closing_time="08:00")
    )

    agenda = await appointment_service.get_day_agenda(owner_id, DAY)

    assert agenda.slots == []


@pytest.mark.asyncio
async def test_custom_opening_hours_shape_the_grid(
    appointment_service: AppointmentService, settings_service, owner_id: UUID, haircut: dict
):
    await settings_service.update_settings(
        owner_id, BusinessSettingsUpdate(opening_time="10:00", closing_time="12:00")
    )

    agenda = await appointment_service.get_day_agenda(owner_id, DAY)
    assert [s.time for s in agenda.slots] == ["10:00", "10:30", "11:00", "11:30", "12:00"]

    with pytest.raises(ValidationException):
        await appointment_service.create_appointment(owner_id, booking(haircut["id"], "09:00"))


# Endpoints


@pytest.mark.asyncio
async def test_create_appointment_endpoint(
    client: AsyncClient, auth_headers: dict, haircut: dict
) -> None:
    response = await client.post(
        "/api/v1/appointments/",
        json={
            "client_name": "Ana",
            "phone": "1234",
            "service_id": str(haircut["id"]),
            "duration_minutes": 60,
            "appointment_date": DAY.isoformat(),
            "start_time": "09:00",
        },
        headers=auth_headers,
    )

    assert response.status_code == 201
    data = response.json()
    assert data["end_time"] == "10:00"
    assert data["completed"] is False
    assert data["service_name"] == "Haircut"


@pytest.mark.asyncio
async def test_conflict_endpoint_returns_409(
    client: AsyncClient,
    auth_headers: dict,
    haircut: dict,
    appointment_service: AppointmentService,
    owner_id: UUID,
) -> None:
    await appointment_service.create_appointment(owner_id, booking(haircut["id"]))

    response = await client.post(
        "/api/v1/appointments/",
        json={
            "client_name": "Bia",
            "phone": "5678",
            "service_id": str(haircut["id"]),
            "duration_minutes": 30,
            "appointment_date": DAY.isoformat(),
            "start_time": "09:30",
        },
        headers=auth_headers,
    )

    assert response.status_code == 409
    assert response.json()["error"] == "SlotConflictException"


@pytest.mark.asyncio
async def test_validation_endpoint_returns_422(
    client: AsyncClient, auth_headers: dict, haircut: dict
) -> None:
    response = await client.post(
        "/api/v1/appointments/",
        json={
            "client_name": "",
            "phone": "1234",
            "service_id": str(haircut["id"]),
            "duration_minutes": 60,
            "appointment_date": DAY.isoformat(),
            "start_time": "09:00",
        },
        headers=auth_headers,
    )

    assert response.status_code == 422
    assert response.json()["error"] == "ValidationException"
    assert response.json()["message"] == "Client name is required"


@pytest.mark.asyncio
async def test_list_and_agenda_endpoints(
    client: AsyncClient,
    auth_headers: dict,
    haircut: dict,
    appointment_service: AppointmentService,
    owner_id: UUID,
) -> None:
    await appointment_service.create_appointment(owner_id, booking(haircut["id"], "10:00", 30))
    await appointment_service.create_appointment(owner_id, booking(haircut["id"], "08:00", 30))

    listed = await client.get(
        "/api/v1/appointments/", params={"date": DAY.isoformat()}, headers=auth_headers
    )
    assert listed.status_code == 200
    assert [a["start_time"] for a in listed.json()] == ["08:00", "10:00"]

    agenda = await client.get(
        "/api/v1/appointments/agenda", params={"date": DAY.isoformat()}, headers=auth_headers
    )
    assert agenda.status_code == 200
    data = agenda.json()
    assert data["day"] == DAY.isoformat()
    assert data["slots"][0] == {
        "time": "08:00",
        "status": "occupied",
        "appointment": data["appointments"][0],
    }


@pytest.mark.asyncio
async def test_edit_and_delete_endpoints(
    client: AsyncClient,
    auth_headers: dict,
    haircut: dict,
    appointment_service: AppointmentService,
    owner_id: UUID,
) -> None:
    created = await appointment_service.create_appointment(owner_id, booking(haircut["id"]))

    updated = await client.put(
        f"/api/v1/appointments/{created.id}",
        json={"start_time": "11:00"},
        headers=auth_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["start_time"] == "11:00"

    deleted = await client.delete(f"/api/v1/appointments/{created.id}", headers=auth_headers)
    assert deleted.status_code == 204

    missing = await client.get(f"/api/v1/appointments/{created.id}", headers=auth_headers)
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_storage_failure_endpoint_returns_503(
    client: AsyncClient, auth_headers: dict, store
) -> None:
    store.appointments.fail_with = StorageException()

    response = await client.get(
        "/api/v1/appointments/", params={"date": DAY.isoformat()}, headers=auth_headers
    )

    assert response.status_code == 503
    assert response.json()["error"] == "StorageException"


@pytest.mark.asyncio
async def test_appointments_require_authentication(client: AsyncClient) -> None:
    response = await client.get("/api/v1/appointments/", params={"date": DAY.isoformat()})

    assert response.status_code in (401, 403)