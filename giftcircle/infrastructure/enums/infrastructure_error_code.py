"""Infrastructure-specific error codes.

Internal codes for tracking infrastructure failures. They are mapped to
domain ErrorCode values when errors flow into the domain layer.

Categories:
- Database errors (DATABASE_*)
- Cache errors (CACHE_*)
- External service errors (EXTERNAL_SERVICE_*)
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes."""

    # Database errors
    DATABASE_CONSTRAINT_VIOLATION = "database_constraint_violation"
    DATABASE_ERROR = "database_error"

    # Cache errors
    CACHE_CONNECTION_ERROR = "cache_connection_error"
    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"
    CACHE_DELETE_ERROR = "cache_delete_error"

    # External service errors
    EXTERNAL_SERVICE_UNAVAILABLE = "external_service_unavailable"
    EXTERNAL_SERVICE_ERROR = "external_service_error"
