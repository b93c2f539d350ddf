"""Base model and mixins for all database entities.

This module provides:
- BaseModel: Base class for ALL models (provides id, created_at)
- TimestampMixin: Internal mixin that adds updated_at
- BaseMutableModel: Base for models that can be updated (combines above)

Domain entities do NOT inherit from these; repositories map between them.

Architecture:
    BaseModel (id, created_at)
        ├── BaseMutableModel (+ updated_at via TimestampMixin)
        │   ├── EventModel
        │   ├── SupplyModel
        │   └── ContributionModel
        │
        ├── ParticipantModel (immutable)
        └── MatchModel (immutable)
"""

from datetime import datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
    - id: UUID primary key (time-ordered UUIDv7 when not supplied)
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Adds an updated_at column maintained by the database.

    Use through BaseMutableModel rather than directly.
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models.

    Provides id, created_at (from BaseModel) and updated_at (from
    TimestampMixin) with the mixin order fixed in one place.
    """

    __abstract__ = True
