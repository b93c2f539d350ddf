"""Secret-friend match database model."""

from uuid import UUID

from sqlalchemy import ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from giftcircle.infrastructure.persistence.base import BaseModel


class MatchModel(BaseModel):
    """Giver to receiver assignment within a group (immutable).

    Constraints:
        - uq_matches_group_giver: a giver gets one receiver per group, which
          also rejects a second concurrent draw for the same group
    """

    __tablename__ = "matches"
    __table_args__ = (
        UniqueConstraint("group_id", "giver_id", name="uq_matches_group_giver"),
    )

    group_id: Mapped[UUID] = mapped_column(
        ForeignKey("groups.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to groups table (scope of the draw)",
    )

    giver_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="User who gives the gift",
    )

    receiver_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who receives the gift",
    )
