"""Client roster table model using SQLAlchemy Core."""

from sqlalchemy import Column, DateTime, MetaData, String, Table, Text, text
from sqlalchemy.dialects.postgresql import UUID

metadata = MetaData()

clients = Table(
    "clients",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default=text("gen_random_uuid()")),
    Column("owner_id", UUID(as_uuid=True), nullable=False, index=True),
    Column("name", Text, nullable=False),
    Column("phone", String(30), nullable=False, server_default=text("''")),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
)
