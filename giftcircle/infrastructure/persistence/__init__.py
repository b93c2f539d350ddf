"""Persistence adapters (SQLAlchemy async)."""

from giftcircle.infrastructure.persistence.base import BaseModel, BaseMutableModel
from giftcircle.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "BaseMutableModel", "Database"]
