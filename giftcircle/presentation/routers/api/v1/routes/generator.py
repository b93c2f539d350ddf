"""Route generator for the API Route Registry.

Turns RouteMetadata entries into FastAPI routes when the v1 router is built.
Besides the route itself, the generator owns two cross-cutting concerns:

- Auth: AUTHENTICATED routes get Depends(get_current_user) attached as a
  route dependency, so a handler cannot forget it.
- OpenAPI errors: every documented error is rendered with the RFC 7807
  ProblemDetails schema. Authenticated routes always document 401, and
  every route documents the 422 raised by request validation.

Usage:
    v1_router = APIRouter(prefix=settings.api_v1_prefix)
    register_routes_from_registry(v1_router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter, Depends

from giftcircle.presentation.routers.api.middleware.auth_dependencies import (
    get_current_user,
)
from giftcircle.presentation.routers.api.v1.errors.problem_details import (
    ProblemDetails,
)
from giftcircle.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    ErrorSpec,
    RouteMetadata,
)

_UNAUTHENTICATED = ErrorSpec(status=401, description="Missing or invalid bearer token")
_UNPROCESSABLE = ErrorSpec(status=422, description="Request validation failed")


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Add one FastAPI route per registry entry.

    Args:
        router: Router to register on (normally the v1 router).
        registry: Entries to register, in catalog order.
    """
    for entry in registry:
        router.add_api_route(
            path=entry.path,
            endpoint=entry.handler,
            methods=[entry.method.value],
            response_model=entry.response_model,
            status_code=entry.status_code,
            tags=list(entry.tags),
            summary=entry.summary,
            description=entry.description,
            operation_id=entry.operation_id,
            responses=_problem_responses(entry),
            dependencies=_auth_dependencies(entry),
            deprecated=entry.deprecated,
        )


def _auth_dependencies(entry: RouteMetadata) -> list[Any]:
    """Route-level dependencies for the entry's auth policy.

    Raises:
        ValueError: For an auth level the generator does not know (fail closed).
    """
    match entry.auth_policy.level:
        case AuthLevel.PUBLIC:
            return []
        case AuthLevel.AUTHENTICATED:
            return [Depends(get_current_user)]
        case level:
            raise ValueError(f"Unknown auth level for {entry.operation_id}: {level}")


def _problem_responses(entry: RouteMetadata) -> dict[int | str, dict[str, Any]]:
    """OpenAPI error responses, each described by ProblemDetails."""
    specs = list(entry.errors or [])
    if entry.auth_policy.level == AuthLevel.AUTHENTICATED:
        specs.append(_UNAUTHENTICATED)
    specs.append(_UNPROCESSABLE)

    responses: dict[int | str, dict[str, Any]] = {}
    for spec in specs:
        # First description wins when a status is listed twice
        responses.setdefault(
            spec.status,
            {"model": ProblemDetails, "description": spec.description},
        )
    return responses
