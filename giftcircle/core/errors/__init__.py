"""Core errors package.

Usage:
    from giftcircle.core.errors import DomainError, ValidationError, NotFoundError
"""

from giftcircle.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from giftcircle.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
]
