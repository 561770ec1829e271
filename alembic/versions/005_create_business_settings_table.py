"""Create business_settings table

Revision ID: 005
Revises: 004
Create Date: 2026-10-19 09:40:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "005"
down_revision: Union[str, None] = "004"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create business_settings table (one row per account)."""
    op.create_table(
        "business_settings",
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("business_name", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column("opening_time", sa.String(5), nullable=False, server_default=sa.text("'08:00'")),
        sa.Column("closing_time", sa.String(5), nullable=False, server_default=sa.text("'20:00'")),
        sa.Column("slot_minutes", sa.Integer(), nullable=False, server_default=sa.text("30")),
        sa.Column(
            "blocked_periods",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    )


def downgrade() -> None:
    """Drop business_settings table."""
    op.drop_table("business_settings")
