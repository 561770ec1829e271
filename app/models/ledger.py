"""Ledger (cash-flow) table model using SQLAlchemy Core."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Index,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import UUID

metadata = MetaData()

ledger_entries = Table(
    "ledger_entries",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default=text("gen_random_uuid()")),
    Column("owner_id", UUID(as_uuid=True), nullable=False),
    Column("amount", Numeric(10, 2), nullable=False),
    Column("direction", String(3), nullable=False),
    Column("category", String(20), nullable=False),
    Column("note", Text, nullable=False, server_default=text("''")),
    # Back-references, set only for entries produced by completing an appointment
    Column("appointment_id", UUID(as_uuid=True), nullable=True),
    Column("service_id", UUID(as_uuid=True), nullable=True),
    Column("client_name", Text, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    CheckConstraint("amount > 0", name="ledger_entries_amount_check"),
    CheckConstraint("direction IN ('in', 'out')", name="ledger_entries_direction_check"),
    CheckConstraint(
        "category IN ('service', 'product', 'chemical', 'nails')",
        name="ledger_entries_category_check",
    ),
    Index("idx_ledger_entries_owner_created", "owner_id", "created_at"),
    # At most one entry per completed appointment
    Index(
        "uq_ledger_entries_appointment_id",
        "appointment_id",
        unique=True,
        postgresql_where=text("appointment_id IS NOT NULL"),
    ),
)
