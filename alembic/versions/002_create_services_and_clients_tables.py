"""Create services and clients tables

Revision ID: 002
Revises: 001
Create Date: 2026-10-19 09:10:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def upgrade() -> None:
    """Create service catalog and client roster."""
    op.create_table(
        "services",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("duration_minutes", sa.Integer(), nullable=False, server_default=sa.text("30")),
        sa.Column("price", sa.Numeric(10, 2), nullable=False, server_default=sa.text("0")),
        *_audit_columns(),
        sa.CheckConstraint("price >= 0", name="services_price_check"),
        sa.CheckConstraint("duration_minutes > 0", name="services_duration_check"),
    )
    op.create_index("ix_services_owner_id", "services", ["owner_id"])

    op.create_table(
        "clients",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("phone", sa.String(30), nullable=False, server_default=sa.text("''")),
        *_audit_columns(),
    )
    op.create_index("ix_clients_owner_id", "clients", ["owner_id"])


def downgrade() -> None:
    """Drop service catalog and client roster."""
    op.drop_index("ix_clients_owner_id", table_name="clients")
    op.drop_table("clients")
    op.drop_index("ix_services_owner_id", table_name="services")
    op.drop_table("services")
