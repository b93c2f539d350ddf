"""create_events_and_supply_ledger

Revision ID: 3f1a6c2d9b7e
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1a6c2d9b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_and_timestamps(mutable: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]
    if mutable:
        columns.append(
            sa.Column(
                "updated_at",
                sa.DateTime(timezone=True),
                server_default=sa.text("now()"),
                nullable=False,
            )
        )
    return columns


def upgrade() -> None:
    """Create users, groups, events, participants, matches and the supply ledger."""
    op.create_table(
        "users",
        *_id_and_timestamps(),
        sa.Column("name", sa.String(length=255), nullable=False, comment="Display name"),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Login email (unique)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "groups",
        *_id_and_timestamps(),
        sa.Column(
            "owner_id",
            sa.Uuid(),
            nullable=False,
            comment="FK to users table (group administrator)",
        ),
        sa.Column("name", sa.String(length=255), nullable=False, comment="Group name"),
        sa.Column(
            "description", sa.Text(), nullable=True, comment="Optional group description"
        ),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_groups_owner_id", "groups", ["owner_id"])

    op.create_table(
        "events",
        *_id_and_timestamps(),
        sa.Column("title", sa.String(length=255), nullable=False, comment="Event title"),
        sa.Column(
            "event_date",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="When the event takes place",
        ),
        sa.Column(
            "owner_id",
            sa.Uuid(),
            nullable=False,
            comment="FK to users table (event owner)",
        ),
        sa.Column(
            "event_type",
            sa.String(length=32),
            nullable=False,
            comment="Event type (regular, secret_friend, registry, potluck)",
        ),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_events_event_date", "events", ["event_date"])
    op.create_index("ix_events_owner_id", "events", ["owner_id"])

    op.create_table(
        "group_events",
        sa.Column("group_id", sa.Uuid(), nullable=False),
        sa.Column("event_id", sa.Uuid(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["group_id"], ["groups.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("group_id", "event_id"),
    )
    op.create_index("ix_group_events_event_id", "group_events", ["event_id"])

    op.create_table(
        "event_participants",
        *_id_and_timestamps(mutable=False),
        sa.Column("event_id", sa.Uuid(), nullable=False, comment="FK to events table"),
        sa.Column("user_id", sa.Uuid(), nullable=False, comment="FK to users table"),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "event_id", "user_id", name="uq_event_participants_event_user"
        ),
    )
    op.create_index(
        "ix_event_participants_event_id", "event_participants", ["event_id"]
    )
    op.create_index("ix_event_participants_user_id", "event_participants", ["user_id"])

    op.create_table(
        "matches",
        *_id_and_timestamps(mutable=False),
        sa.Column(
            "group_id",
            sa.Uuid(),
            nullable=False,
            comment="FK to groups table (scope of the draw)",
        ),
        sa.Column(
            "giver_id", sa.Uuid(), nullable=False, comment="User who gives the gift"
        ),
        sa.Column(
            "receiver_id",
            sa.Uuid(),
            nullable=False,
            comment="User who receives the gift",
        ),
        sa.ForeignKeyConstraint(["group_id"], ["groups.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["giver_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["receiver_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("group_id", "giver_id", name="uq_matches_group_giver"),
    )
    op.create_index("ix_matches_group_id", "matches", ["group_id"])
    op.create_index("ix_matches_receiver_id", "matches", ["receiver_id"])

    op.create_table(
        "event_supplies",
        *_id_and_timestamps(),
        sa.Column("event_id", sa.Uuid(), nullable=False, comment="FK to events table"),
        sa.Column(
            "item_name", sa.String(length=255), nullable=False, comment="What is needed"
        ),
        sa.Column(
            "quantity_needed", sa.Integer(), nullable=False, comment="Units needed (>= 1)"
        ),
        sa.Column("unit", sa.String(length=50), nullable=False, comment="Unit of measure"),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "image_url",
            sa.String(length=2048),
            nullable=True,
            comment="Picture of the item",
        ),
        sa.Column(
            "url",
            sa.String(length=2048),
            nullable=True,
            comment="Related link (store page, recipe)",
        ),
        sa.CheckConstraint("quantity_needed >= 1", name="ck_event_supplies_quantity"),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_event_supplies_event_id", "event_supplies", ["event_id"])

    op.create_table(
        "supply_contributions",
        *_id_and_timestamps(),
        sa.Column(
            "supply_id",
            sa.Uuid(),
            nullable=False,
            comment="FK to event_supplies table",
        ),
        sa.Column(
            "user_id",
            sa.Uuid(),
            nullable=False,
            comment="FK to users table (contributor)",
        ),
        sa.Column(
            "quantity_committed",
            sa.Integer(),
            nullable=False,
            comment="Pledged units (>= 1)",
        ),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.CheckConstraint(
            "quantity_committed >= 1", name="ck_supply_contributions_quantity"
        ),
        sa.ForeignKeyConstraint(
            ["supply_id"], ["event_supplies.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_supply_contributions_supply_id", "supply_contributions", ["supply_id"]
    )
    op.create_index(
        "ix_supply_contributions_user_id", "supply_contributions", ["user_id"]
    )


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table("supply_contributions")
    op.drop_table("event_supplies")
    op.drop_table("matches")
    op.drop_table("event_participants")
    op.drop_table("group_events")
    op.drop_table("events")
    op.drop_table("groups")
    op.drop_table("users")
