"""Infrastructure errors package."""

from giftcircle.infrastructure.errors.infrastructure_error import (
    CacheError,
    DatabaseError,
    ExternalServiceError,
    InfrastructureError,
)

__all__ = [
    "CacheError",
    "DatabaseError",
    "ExternalServiceError",
    "InfrastructureError",
]
