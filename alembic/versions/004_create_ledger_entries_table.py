"""Create ledger_entries table

Revision ID: 004
Revises: 003
Create Date: 2026-10-19 09:30:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create ledger_entries table."""
    op.create_table(
        "ledger_entries",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("direction", sa.String(3), nullable=False),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("note", sa.Text(), nullable=False, server_default=sa.text("''")),
        # Entries survive deletion of the appointment or service they came from
        sa.Column("appointment_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("service_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("client_name", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint("amount > 0", name="ledger_entries_amount_check"),
        sa.CheckConstraint("direction IN ('in', 'out')", name="ledger_entries_direction_check"),
        sa.CheckConstraint(
            "category IN ('service', 'product', 'chemical', 'nails')",
            name="ledger_entries_category_check",
        ),
    )

    op.create_index(
        "idx_ledger_entries_owner_created", "ledger_entries", ["owner_id", "created_at"]
    )
    op.create_index(
        "uq_ledger_entries_appointment_id",
        "ledger_entries",
        ["appointment_id"],
        unique=True,
        postgresql_where=sa.text("appointment_id IS NOT NULL"),
    )


def downgrade() -> None:
    """Drop ledger_entries table."""
    op.drop_index("uq_ledger_entries_appointment_id", table_name="ledger_entries")
    op.drop_index("idx_ledger_entries_owner_created", table_name="ledger_entries")
    op.drop_table("ledger_entries")
