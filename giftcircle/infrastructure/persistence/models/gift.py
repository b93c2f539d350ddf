"""Gift suggestion database model and the gift/event association table."""

from uuid import UUID

from sqlalchemy import Column, ForeignKey, String, Table, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from giftcircle.infrastructure.persistence.base import BaseModel


class GiftModel(BaseModel):
    """Gift a user would like to receive (immutable).

    Fields:
        user_id: FK to users; whose wish this is
        title: What the user would like
        urls: Purchase links as a JSON array of strings
    """

    __tablename__ = "gifts"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to users table (who wants the gift)",
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Gift title",
    )

    urls: Mapped[list[str]] = mapped_column(
        JSONB,
        nullable=False,
        default=list,
        comment="Purchase links, in the order given",
    )


# A gift can be suggested for several events at once.
event_gifts = Table(
    "event_gifts",
    BaseModel.metadata,
    Column(
        "gift_id",
        Uuid,
        ForeignKey("gifts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "event_id",
        Uuid,
        ForeignKey("events.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)
