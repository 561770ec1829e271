"""Appointments table model using SQLAlchemy Core."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID, VARCHAR

metadata = MetaData()

appointments = Table(
    "appointments",
    metadata,
    Column(
        "id",
        UUID(as_uuid=True),
        primary_key=True,
        server_default=text("gen_random_uuid()"),
    ),
    # Ownership / references
    Column("owner_id", UUID(as_uuid=True), nullable=False),
    Column("service_id", UUID(as_uuid=True), nullable=False),
    # Client contact (free text, not linked to the clients roster)
    Column("client_name", Text, nullable=False),
    Column("phone", VARCHAR(30), nullable=False),
    # Snapshot field (copied from the service at write time)
    Column("service_name", Text, nullable=False),
    # Slot
    Column("appointment_date", Date, nullable=False),
    Column("start_time", VARCHAR(5), nullable=False),
    Column("end_time", VARCHAR(5), nullable=False),
    Column("duration_minutes", Integer, nullable=False),
    # Completion
    Column("completed", Boolean, nullable=False, server_default=text("false")),
    Column("completed_at", TIMESTAMP(timezone=True), nullable=True),
    # Audit fields
    Column("created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")),
    Column("updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")),
    # Constraints
    CheckConstraint(
        "duration_minutes IN (30, 60, 90)",
        name="appointments_duration_check",
    ),
    CheckConstraint(
        "completed = (completed_at IS NOT NULL)",
        name="appointments_completed_at_check",
    ),
    Index("idx_appointments_owner_date", "owner_id", "appointment_date", "start_time"),
)
