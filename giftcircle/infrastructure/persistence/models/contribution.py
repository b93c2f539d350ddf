"""Supply contribution database model."""

from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from giftcircle.infrastructure.persistence.base import BaseMutableModel


class ContributionModel(BaseMutableModel):
    """Quantity a user pledges toward a supply.

    Deleted together with its supply (ON DELETE CASCADE).
    """

    __tablename__ = "supply_contributions"
    __table_args__ = (
        CheckConstraint(
            "quantity_committed >= 1", name="ck_supply_contributions_quantity"
        ),
    )

    supply_id: Mapped[UUID] = mapped_column(
        ForeignKey("event_supplies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to event_supplies table",
    )

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to users table (contributor)",
    )

    quantity_committed: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Pledged units (>= 1)",
    )

    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
