"""Appointment storage."""

from datetime import UTC, date, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import and_, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from app.models.appointments import appointments
from app.models.ledger import ledger_entries
from app.repositories.base import OwnedRepository


class AppointmentRepository(OwnedRepository):
    """Appointments of one owner, plus the transactional completion write."""

    table = appointments
    order_by = ("appointment_date", "start_time")

    async def list_for_day(self, owner_id: UUID, day: date) -> list[dict]:
        """Appointments on ``day`` ordered by start time."""
        stmt = (
            select(appointments)
            .where(
                and_(
                    appointments.c.owner_id == owner_id,
                    appointments.c.appointment_date == day,
                )
            )
            .order_by(appointments.c.start_time)
        )
        result = await self._execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    async def list_completed(
        self, owner_id: UUID, limit: int | None = None, since: datetime | None = None
    ) -> list[dict]:
        """Completed appointments, most recently completed first."""
        conditions = [
            appointments.c.owner_id == owner_id,
            appointments.c.completed.is_(True),
        ]
        if since is not None:
            conditions.append(appointments.c.completed_at >= since)

        stmt = (
            select(appointments)
            .where(and_(*conditions))
            .order_by(appointments.c.completed_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    async def update_pending(
        self, owner_id: UUID, appointment_id: UUID, values: dict[str, Any]
    ) -> dict | None:
        """Update an appointment only while it is not completed."""
        condition = and_(
            self._scoped(owner_id, appointment_id),
            appointments.c.completed.is_(False),
        )
        return await self._update_where(condition, values)

    async def complete(
        self,
        owner_id: UUID,
        appointment_id: UUID,
        ledger_values: dict[str, Any],
        completed_at: datetime,
    ) -> tuple[dict, dict] | None:
        """
        Mark an appointment completed and record its ledger entry atomically.

        Both writes share one transaction. The appointment update only
        matches a pending row, so a concurrent completion finds nothing to
        update and the whole transaction is rolled back.

        Returns:
            (appointment, ledger entry), or None if the appointment was not
            pending anymore
        """
        try:
            result = await self.db.execute(
                update(appointments)
                .where(
                    and_(
                        self._scoped(owner_id, appointment_id),
                        appointments.c.completed.is_(False),
                    )
                )
                .values(completed=True, completed_at=completed_at, updated_at=datetime.now(UTC))
                .returning(appointments)
            )
            appointment = result.mappings().first()
            if appointment is None:
                await self.db.rollback()
                return None

            result = await self.db.execute(
                insert(ledger_entries)
                .values(owner_id=owner_id, created_at=completed_at, **ledger_values)
                .returning(ledger_entries)
            )
            entry = result.mappings().one()
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._fail(e)

        return dict(appointment), dict(entry)
