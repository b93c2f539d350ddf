"""Group database model and the group/event association table."""

from uuid import UUID

from sqlalchemy import Column, ForeignKey, Integer, String, Table, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from giftcircle.infrastructure.persistence.base import BaseModel, BaseMutableModel


class GroupModel(BaseMutableModel):
    """Group model (managed by the groups service, read here).

    Fields:
        owner_id: FK to users; the owner administers attached events
        name: Group name
        description: Optional description
    """

    __tablename__ = "groups"

    owner_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to users table (group administrator)",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Group name",
    )

    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Optional group description",
    )


# Association between groups and events. position keeps the order given at
# event creation; position 0 is the primary group.
group_events = Table(
    "group_events",
    BaseModel.metadata,
    Column(
        "group_id",
        Uuid,
        ForeignKey("groups.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "event_id",
        Uuid,
        ForeignKey("events.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
    Column("position", Integer, nullable=False, default=0),
)
