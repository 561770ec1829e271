"""Account model definition using SQLAlchemy Core."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    MetaData,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import UUID

metadata = MetaData()

# One row per studio owner; the id is the partition key of every other table
accounts = Table(
    "accounts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default=text("gen_random_uuid()")),
    # Firebase identity (SOURCE OF TRUTH)
    Column("firebase_uid", Text, nullable=False, unique=True, index=True),
    # Mirrored from Firebase
    Column("email", Text, nullable=True, index=True),
    Column("display_name", Text),
    Column("photo_url", Text),
    # Account state
    Column("is_active", Boolean, nullable=False, server_default=text("true")),
    # Audit
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    Column("last_login_at", DateTime(timezone=True)),
)
