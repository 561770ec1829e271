"""Business settings table model using SQLAlchemy Core."""

from sqlalchemy import Column, DateTime, Integer, MetaData, String, Table, Text, text
from sqlalchemy.dialects.postgresql import JSONB, UUID

metadata = MetaData()

# One row per account
business_settings = Table(
    "business_settings",
    metadata,
    Column("owner_id", UUID(as_uuid=True), primary_key=True),
    Column("business_name", Text, nullable=False, server_default=text("''")),
    Column("opening_time", String(5), nullable=False, server_default=text("'08:00'")),
    Column("closing_time", String(5), nullable=False, server_default=text("'20:00'")),
    Column("slot_minutes", Integer, nullable=False, server_default=text("30")),
    # Example: [{"id": "k3j2h1a", "day": "2026-03-10", "start": "13:00", "end": "14:00"}]
    Column("blocked_periods", JSONB, nullable=False, server_default=text("'[]'::jsonb")),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
)
