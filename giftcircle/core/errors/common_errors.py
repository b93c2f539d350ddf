"""Common error classes used across all layers.

Error Types:
- ValidationError: Malformed input or violated business rule
- NotFoundError: Missing event, supply, contribution, user or group
- ConflictError: Duplicate or state conflict
- AuthenticationError: Missing or invalid identity
- AuthorizationError: Caller is not owner/admin/participant/contributor

Usage:
    from giftcircle.core.errors import ValidationError
    from giftcircle.core.enums import ErrorCode
    from giftcircle.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_QUANTITY,
        message="Quantity must be at least 1",
        field="quantity_committed",
    ))
"""

from dataclasses import dataclass

from giftcircle.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation or business rule failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        retryable: True when repeating the same request may succeed.
        details: Additional context.
    """

    field: str | None = None
    retryable: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Event, Supply, etc.).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate, state conflict).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has the conflict.
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (missing, invalid or expired token)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (no permission).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        required_permission: Role the caller was expected to hold.
        details: Additional context.
    """

    required_permission: str | None = None
