"""Error response builder for RFC 7807 Problem Details.

Route handlers hand the DomainError of a Failure to from_domain_error(); it
is classified into an ApplicationError and rendered with the matching
status and title.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from giftcircle.application.errors import ApplicationError, ApplicationErrorCode
from giftcircle.core.config import settings
from giftcircle.core.errors import DomainError, ValidationError
from giftcircle.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_INTERNAL = (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")

# Application error code -> (HTTP status, problem title)
_RESPONSES: dict[ApplicationErrorCode, tuple[int, str]] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: (
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
    ),
    ApplicationErrorCode.QUERY_VALIDATION_FAILED: (
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
    ),
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Command Execution Failed",
    ),
    ApplicationErrorCode.QUERY_EXECUTION_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Query Execution Failed",
    ),
    ApplicationErrorCode.EXTERNAL_SERVICE_ERROR: (
        status.HTTP_502_BAD_GATEWAY,
        "External Service Error",
    ),
    ApplicationErrorCode.UNAUTHORIZED: (
        status.HTTP_401_UNAUTHORIZED,
        "Authentication Required",
    ),
    ApplicationErrorCode.FORBIDDEN: (status.HTTP_403_FORBIDDEN, "Access Denied"),
    ApplicationErrorCode.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ApplicationErrorCode.CONFLICT: (status.HTTP_409_CONFLICT, "Resource Conflict"),
}


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> if isinstance(result, Failure):
        ...     return ErrorResponseBuilder.from_domain_error(
        ...         error=result.error,
        ...         request=request,
        ...         trace_id=get_trace_id() or "",
        ...     )
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        return ErrorResponseBuilder.from_application_error(
            error=ApplicationError.from_domain_error(error),
            request=request,
            trace_id=trace_id,
        )

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Render an ApplicationError.

        Validation failures list the offending field under "errors";
        retryable failures carry "retryable": true.

        Args:
            error: Classified error.
            request: Current request (its path becomes "instance").
            trace_id: Request trace ID; omitted from the body when empty.
        """
        status_code, title = _RESPONSES.get(error.code, _INTERNAL)

        field_errors: list[ErrorDetail] | None = None
        if isinstance(error.domain_error, ValidationError):
            field_errors = [
                ErrorDetail(
                    field=error.domain_error.field or "unknown",
                    code=error.domain_error.code.value,
                    message=error.domain_error.message,
                )
            ]

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=title,
            status=status_code,
            detail=error.message,
            instance=request.url.path,
            errors=field_errors,
            retryable=error.retryable or None,
            trace_id=trace_id or None,
        )
        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )
