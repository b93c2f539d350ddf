"""Global exception handlers for the FastAPI application.

Route handlers turn Failure results into responses themselves (see
ErrorResponseBuilder). These handlers cover what escapes them, so every
error body the API returns has the RFC 7807 shape:

- Starlette/FastAPI HTTPException: auth dependencies, unknown routes (404),
  wrong methods (405)
- RequestValidationError: malformed path parameters and bodies (422)
- Any other exception: logged with the trace ID, answered with a bare 500
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from giftcircle.core.config import settings
from giftcircle.core.container import get_logger
from giftcircle.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_TITLES: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
    503: ("Service Unavailable", "service-unavailable"),
}


def _problem(
    request: Request,
    status_code: int,
    detail: str,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    title, slug = _TITLES.get(status_code, ("Error", "error"))
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        errors=errors or None,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


def _field_name(loc: tuple[int | str, ...]) -> str:
    """("body", "quantity_needed") -> "quantity_needed"; ("path", "event_id") -> "event_id"."""
    parts = loc[1:] if len(loc) > 1 else loc
    return ".".join(str(part) for part in parts) or "unknown"


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """HTTPException (FastAPI or Starlette) as Problem Details.

    Headers such as WWW-Authenticate are passed through.
    """
    assert isinstance(exc, StarletteHTTPException)
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _problem(request, exc.status_code, detail, headers=exc.headers)


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Request validation failure as a 422 with one entry per invalid field.

    Example body for POST /api/v1/supplies/{id}/contributions with
    quantity_committed=0:
        {"status": 422, "title": "Validation Failed", "errors": [
            {"field": "quantity_committed", "code": "greater_than_equal", ...}]}
    """
    assert isinstance(exc, RequestValidationError)
    errors = [
        ErrorDetail(
            field=_field_name(tuple(error.get("loc", ()))),
            code=error.get("type", "validation_error"),
            message=error.get("msg", "Validation failed"),
        )
        for error in exc.errors()
    ]
    return _problem(
        request,
        422,
        "Request validation failed. Check 'errors' for details.",
        errors=errors,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected exception and answer 500 without internal details."""
    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=getattr(request.state, "trace_id", None),
        request_path=request.url.path,
        request_method=request.method,
    )
    return _problem(
        request,
        500,
        "An unexpected error occurred. Please contact support with the trace ID.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
