"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (database,
cache, message broker).

Architecture:
- Infrastructure catches exceptions and maps them to DomainError subclasses
- Infrastructure errors inherit from DomainError (not Exception)
- InfrastructureErrorCode records the internal failure kind
"""

from dataclasses import dataclass
from typing import Any

from giftcircle.core.errors import DomainError
from giftcircle.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode (maps from InfrastructureErrorCode).
        message: Human-readable message.
        infrastructure_code: Original infrastructure error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DatabaseError(InfrastructureError):
    """Failure on the authoritative store (wraps SQLAlchemy exceptions)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Cache failure (wraps Redis exceptions); callers fail open."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class ExternalServiceError(InfrastructureError):
    """External service failure (message broker).

    Attributes:
        service_name: Name of the external service.
    """

    service_name: str
