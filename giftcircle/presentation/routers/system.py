"""System router for non-versioned application endpoints.

Lightweight, side-effect free endpoints for load balancers and basic
diagnostics.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from giftcircle.core.config import settings
from giftcircle.core.container import get_cache, get_database
from giftcircle.core.result import Success

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check."""
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """Health check endpoint for monitoring and load balancers.

    The database is required; the cache only degrades the service.

    Returns:
        200 with {"status": "healthy" | "degraded", ...} when the database
        answers, 503 with {"status": "unhealthy", ...} otherwise.
    """
    database_ok = await get_database().check_connection()
    cache_ok = isinstance(await get_cache().ping(), Success)

    if not database_ok:
        overall = "unhealthy"
    elif not cache_ok:
        overall = "degraded"
    else:
        overall = "healthy"

    return JSONResponse(
        status_code=(
            status.HTTP_200_OK if database_ok else status.HTTP_503_SERVICE_UNAVAILABLE
        ),
        content={
            "status": overall,
            "database": "up" if database_ok else "down",
            "cache": "up" if cache_ok else "down",
        },
    )
