"""create_gifts

Revision ID: 8c2e4b7a1d05
Revises: 3f1a6c2d9b7e
Create Date: 2026-10-19 14:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "8c2e4b7a1d05"
down_revision: Union[str, Sequence[str], None] = "3f1a6c2d9b7e"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create gift suggestions and their event links."""
    op.create_table(
        "gifts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.Uuid(),
            nullable=False,
            comment="FK to users table (who wants the gift)",
        ),
        sa.Column("title", sa.String(length=255), nullable=False, comment="Gift title"),
        sa.Column(
            "urls",
            postgresql.JSONB(astext_type=sa.Text()),
            nullable=False,
            comment="Purchase links, in the order given",
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_gifts_user_id", "gifts", ["user_id"])

    op.create_table(
        "event_gifts",
        sa.Column("gift_id", sa.Uuid(), nullable=False),
        sa.Column("event_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["gift_id"], ["gifts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("gift_id", "event_id"),
    )
    op.create_index("ix_event_gifts_event_id", "event_gifts", ["event_id"])


def downgrade() -> None:
    """Drop gift tables."""
    op.drop_index("ix_event_gifts_event_id", table_name="event_gifts")
    op.drop_table("event_gifts")
    op.drop_index("ix_gifts_user_id", table_name="gifts")
    op.drop_table("gifts")
