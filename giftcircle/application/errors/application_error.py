"""Application layer error types.

Handlers return DomainError subclasses inside Failure. The presentation
layer converts them with ApplicationError.from_domain_error() before
building RFC 7807 responses.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
    persistence_failure: Wrap an unexpected storage exception
"""

from dataclasses import dataclass
from enum import Enum

from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from giftcircle.infrastructure.enums import InfrastructureErrorCode
from giftcircle.infrastructure.errors import DatabaseError


class ApplicationErrorCode(Enum):
    """Application-level error codes (one per HTTP status family)."""

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_VALIDATION_FAILED = "query_validation_failed"
    QUERY_EXECUTION_FAILED = "query_execution_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    EXTERNAL_SERVICE_ERROR = "external_service_error"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code.
        message: Human-readable error message.
        domain_error: Original domain error, when there is one.
        details: Additional context as key-value pairs.
        retryable: True when repeating the same request may succeed.
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None
    retryable: bool = False

    @classmethod
    def from_domain_error(cls, error: DomainError) -> "ApplicationError":
        """Classify a domain error for the presentation layer.

        Validation and authorization failures map to distinct codes so
        clients can tell "fix the request" from "not allowed".
        """
        details = {"error_code": error.code.value}
        if error.details:
            details.update({k: str(v) for k, v in error.details.items()})

        match error:
            case ValidationError(field=field, retryable=retryable):
                if field:
                    details["field"] = field
                return cls(
                    code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                    message=error.message,
                    domain_error=error,
                    details=details,
                    retryable=retryable,
                )
            case NotFoundError():
                code = ApplicationErrorCode.NOT_FOUND
            case AuthorizationError():
                code = ApplicationErrorCode.FORBIDDEN
            case AuthenticationError():
                code = ApplicationErrorCode.UNAUTHORIZED
            case ConflictError():
                code = ApplicationErrorCode.CONFLICT
            case _:
                # Storage and other infrastructure failures: generic message only
                return cls(
                    code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    message="The operation could not be completed",
                    domain_error=error,
                    details={"error_code": error.code.value},
                    retryable=True,
                )

        return cls(
            code=code,
            message=error.message,
            domain_error=error,
            details=details,
        )


def persistence_failure(action: str, error: Exception) -> DatabaseError:
    """Wrap an unexpected exception raised by the authoritative store.

    Args:
        action: What was being done, e.g. "save contribution".
        error: The exception caught from the repository.
    """
    return DatabaseError(
        code=ErrorCode.PERSISTENCE_FAILED,
        message=f"Failed to {action}",
        infrastructure_code=InfrastructureErrorCode.DATABASE_ERROR,
        details={"error": str(error), "type": type(error).__name__},
    )
