"""User database model.

Users are registered by the identity service; this service reads them to
resolve display names and to validate participant lists.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from giftcircle.infrastructure.persistence.base import BaseMutableModel


class UserModel(BaseMutableModel):
    """User model (read-only here).

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at / updated_at: Timestamps (from BaseMutableModel)
        name: Display name
        email: Unique login email
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Login email (unique)",
    )
