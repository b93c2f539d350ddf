# mypy: disable-error-code="arg-type"
"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Redis client (shared by cache and pub/sub)
- Cache, cache keys and the cache coordinator
- Invalidation publisher and subscriber
- Database (PostgreSQL)
- Token verification (JWT)
- Match engine
- Logging (structlog console)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from giftcircle.core.config import settings
from giftcircle.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from giftcircle.application.services.cache_coordinator import CacheCoordinator
    from giftcircle.domain.protocols.cache_protocol import CacheProtocol
    from giftcircle.domain.protocols.logger_protocol import LoggerProtocol
    from giftcircle.domain.protocols.message_publisher_protocol import (
        MessagePublisherProtocol,
    )
    from giftcircle.domain.services.match_engine import MatchEngine
    from giftcircle.infrastructure.cache.cache_keys import CacheKeys
    from giftcircle.infrastructure.messaging.invalidation_subscriber import (
        CacheInvalidationSubscriber,
    )
    from giftcircle.infrastructure.security.jwt_service import JWTService


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_redis_client() -> "Redis":
    """Get the shared async Redis client (app-scoped).

    One connection pool serves the cache, the publisher and the subscriber.
    """
    from redis.asyncio import ConnectionPool, Redis

    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=50,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
        socket_keepalive=True,
    )
    return Redis(connection_pool=pool)


@lru_cache()
def get_cache() -> "CacheProtocol":
    """Get cache client singleton (app-scoped).

    Returns:
        RedisAdapter implementing CacheProtocol.
    """
    from giftcircle.infrastructure.cache.redis_adapter import RedisAdapter

    return RedisAdapter(redis_client=get_redis_client())  # type: ignore[return-value]


@lru_cache()
def get_cache_keys() -> "CacheKeys":
    """Get cache key builder with the configured prefix."""
    from giftcircle.infrastructure.cache.cache_keys import CacheKeys

    return CacheKeys(prefix=settings.cache_key_prefix)


@lru_cache()
def get_message_publisher() -> "MessagePublisherProtocol":
    """Get invalidation message publisher (Redis pub/sub)."""
    from giftcircle.infrastructure.messaging.redis_publisher import (
        RedisMessagePublisher,
    )

    return RedisMessagePublisher(redis_client=get_redis_client())


@lru_cache()
def get_cache_coordinator() -> "CacheCoordinator":
    """Get cache coordinator singleton (app-scoped).

    App-scoped so background invalidation publishes outlive the request
    that scheduled them and can be drained at shutdown.
    """
    from giftcircle.application.services.cache_coordinator import CacheCoordinator

    return CacheCoordinator(
        cache=get_cache(),
        publisher=get_message_publisher(),
        logger=get_logger(),
        topic=settings.invalidation_topic,
        ttl_seconds=settings.supplies_cache_ttl_seconds,
        max_attempts=settings.invalidation_max_attempts,
        base_delay_seconds=settings.invalidation_base_delay_seconds,
    )


@lru_cache()
def get_invalidation_subscriber() -> "CacheInvalidationSubscriber":
    """Get the subscriber that applies invalidations from other instances."""
    from giftcircle.infrastructure.messaging.invalidation_subscriber import (
        CacheInvalidationSubscriber,
    )

    return CacheInvalidationSubscriber(
        redis_client=get_redis_client(),
        cache=get_cache(),
        topic=settings.invalidation_topic,
    )


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_token_service() -> "JWTService":
    """Get JWT verification service singleton (app-scoped)."""
    from giftcircle.infrastructure.security.jwt_service import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        algorithm=settings.algorithm,
    )


@lru_cache()
def get_match_engine() -> "MatchEngine":
    """Get match engine with the OS-backed random source."""
    from giftcircle.domain.services.match_engine import MatchEngine

    return MatchEngine(max_attempts=settings.draw_max_shuffle_attempts)


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: human-readable console output
    - testing/ci/production: JSON lines
    """
    from giftcircle.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.

    Usage:
        session: AsyncSession = Depends(get_db_session)
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
