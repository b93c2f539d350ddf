"""Event supply database model."""

from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from giftcircle.infrastructure.persistence.base import BaseMutableModel


class SupplyModel(BaseMutableModel):
    """Item an event needs, with the required quantity.

    Deleted together with its event (ON DELETE CASCADE).
    """

    __tablename__ = "event_supplies"
    __table_args__ = (
        CheckConstraint("quantity_needed >= 1", name="ck_event_supplies_quantity"),
    )

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to events table",
    )

    item_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="What is needed",
    )

    quantity_needed: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Units needed (>= 1)",
    )

    unit: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Unit of measure",
    )

    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    image_url: Mapped[str | None] = mapped_column(
        String(2048),
        nullable=True,
        comment="Picture of the item",
    )

    url: Mapped[str | None] = mapped_column(
        String(2048),
        nullable=True,
        comment="Related link (store page, recipe)",
    )
