"""Event database model."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from giftcircle.infrastructure.persistence.base import BaseMutableModel


class EventModel(BaseMutableModel):
    """Event model.

    Fields:
        title: Event title
        event_date: When the event takes place
        owner_id: FK to users (creator)
        event_type: Lowercase EventType value, immutable after creation

    Groups are linked through the group_events association table.
    """

    __tablename__ = "events"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Event title",
    )

    event_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="When the event takes place",
    )

    owner_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to users table (event owner)",
    )

    event_type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default="regular",
        comment="Event type (regular, secret_friend, registry, potluck)",
    )
