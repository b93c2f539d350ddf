"""Route metadata types for the API Route Registry.

The registry is the single catalog of v1 routes: FastAPI routes, auth
dependencies and OpenAPI error documentation are generated from it.
Entries check their own consistency when constructed, so a malformed
catalog fails at import time instead of serving a half-documented route.

Core types:
    RouteMetadata: One catalog entry (method, path, handler, auth, docs)
    HTTPMethod: HTTP methods used by the API
    AuthPolicy / AuthLevel: Who may call the route
    ErrorSpec: One documented error status
    IdempotencyLevel: HTTP idempotency classification
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class AuthLevel(str, Enum):
    """Authentication levels for routes.

    Attributes:
        PUBLIC: Anyone may call the route
        AUTHENTICATED: A valid bearer token is required
    """

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True, kw_only=True)
class AuthPolicy:
    """Authentication policy for a route.

    Attributes:
        level: Authentication level.
        rationale: Why the route may be public; required for PUBLIC.
    """

    level: AuthLevel
    rationale: str | None = None


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification.

    Attributes:
        SAFE: No side effects (GET)
        IDEMPOTENT: Repeating the request leaves the same state (DELETE)
        NON_IDEMPOTENT: Each request may change state again (POST, PATCH)
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


# Levels each method may declare; PATCH can go either way.
_ALLOWED_IDEMPOTENCY: dict[HTTPMethod, frozenset[IdempotencyLevel]] = {
    HTTPMethod.GET: frozenset({IdempotencyLevel.SAFE}),
    HTTPMethod.POST: frozenset({IdempotencyLevel.NON_IDEMPOTENT}),
    HTTPMethod.PATCH: frozenset(
        {IdempotencyLevel.IDEMPOTENT, IdempotencyLevel.NON_IDEMPOTENT}
    ),
    HTTPMethod.DELETE: frozenset({IdempotencyLevel.IDEMPOTENT}),
}


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Documented error response, e.g. ErrorSpec(status=404, description="Event not found")."""

    status: int
    description: str


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """One entry of the route catalog.

    Attributes:
        method: HTTP method.
        path: Path relative to the version prefix, starting with "/".
        handler: Async endpoint function.
        resource: Resource the route belongs to (e.g., "supplies").
        tags: OpenAPI tags.
        summary: Short OpenAPI summary.
        description: Longer OpenAPI description.
        operation_id: Unique OpenAPI operation ID.
        response_model: Success body model; None for 204 routes.
        status_code: Success status.
        errors: Route-specific error statuses (401 and 422 are added by the
            generator).
        idempotency: Idempotency level, consistent with the method.
        auth_policy: Who may call the route.
        deprecated: Mark the operation deprecated in OpenAPI.

    Raises:
        ValueError: If the entry is internally inconsistent.
    """

    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    resource: str
    tags: Sequence[str]

    summary: str
    description: str | None = None
    operation_id: str | None = None

    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    idempotency: IdempotencyLevel
    auth_policy: AuthPolicy

    deprecated: bool = False

    def __post_init__(self) -> None:
        name = self.operation_id or f"{self.method.value} {self.path}"

        if not self.path.startswith("/"):
            raise ValueError(f"{name}: path must start with '/'")
        if self.idempotency not in _ALLOWED_IDEMPOTENCY[self.method]:
            raise ValueError(
                f"{name}: {self.method.value} cannot be {self.idempotency.value}"
            )
        if self.status_code == 204 and self.response_model is not None:
            raise ValueError(f"{name}: a 204 route has no response body")
        if self.auth_policy.level == AuthLevel.PUBLIC and not self.auth_policy.rationale:
            raise ValueError(f"{name}: public routes need a rationale")
