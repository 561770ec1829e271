"""Create appointments table

Revision ID: 003
Revises: 002
Create Date: 2026-10-19 09:20:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create appointments table."""
    op.create_table(
        "appointments",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), nullable=False),
        # No foreign key: the appointment outlives catalog changes through
        # its service_name snapshot
        sa.Column("service_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("client_name", sa.Text(), nullable=False),
        sa.Column("phone", sa.VARCHAR(30), nullable=False),
        sa.Column("service_name", sa.Text(), nullable=False),
        sa.Column("appointment_date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.VARCHAR(5), nullable=False),
        sa.Column("end_time", sa.VARCHAR(5), nullable=False),
        sa.Column("duration_minutes", sa.Integer(), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("completed_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint("duration_minutes IN (30, 60, 90)", name="appointments_duration_check"),
        sa.CheckConstraint(
            "completed = (completed_at IS NOT NULL)",
            name="appointments_completed_at_check",
        ),
    )

    op.create_index(
        "idx_appointments_owner_date",
        "appointments",
        ["owner_id", "appointment_date", "start_time"],
    )


def downgrade() -> None:
    """Drop appointments table."""
    op.drop_index("idx_appointments_owner_date", table_name="appointments")
    op.drop_table("appointments")
