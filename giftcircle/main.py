"""
Main FastAPI application entry point.

Wires the versioned API, the system endpoints, trace middleware and RFC 7807
exception handlers. The lifespan starts the cache invalidation subscriber
and, on shutdown, waits for pending invalidation publishes before closing
connections.
"""

import asyncio
import contextlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from giftcircle.core.config import settings
from giftcircle.core.container import (
    get_cache_coordinator,
    get_database,
    get_invalidation_subscriber,
    get_logger,
    get_redis_client,
)
from giftcircle.presentation.routers import system_router
from giftcircle.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
)
from giftcircle.presentation.routers.api.v1 import v1_router
from giftcircle.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: subscribe to cache invalidations from other instances
    - Shutdown: stop the subscriber, drain pending publishes, close pools

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    subscriber_task = asyncio.create_task(get_invalidation_subscriber().run())
    logger.info("application_started", environment=settings.environment.value)

    yield

    subscriber_task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await subscriber_task

    await get_cache_coordinator().drain()
    await get_database().close()
    await get_redis_client().aclose()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Gift-giving events: secret-friend draws and shared supply lists",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Request correlation
app.add_middleware(TraceMiddleware)

# RFC 7807 error responses
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
