"""Cache coordinator.

Serves read aggregates cache-aside and keeps other cache namespaces
approximately fresh with best-effort invalidation messages.

Read path (get_or_load):
    1. Try the cache; a hit is returned as is.
    2. On a miss or a cache error, run the loader against the
       authoritative store.
    3. Try to store the loaded value with a TTL and return it whether or
       not the write worked.

Write path (invalidate / invalidate_pattern), called after the mutation
has committed:
    1. Delete the local key, or every local key matching the pattern.
    2. Publish {key | pattern, eventId, timestamp} in a background task, retrying up
       to max_attempts with delays of base * 2**(attempt - 1). After the
       last attempt the message is logged and dropped.

Staleness is bounded by the cache TTL, not by delivery. Cache and broker
failures are logged and never reach the caller.
"""

import asyncio
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from giftcircle.core.errors import DomainError
from giftcircle.core.result import Failure, Result, Success
from giftcircle.domain.protocols.cache_protocol import CacheProtocol
from giftcircle.domain.protocols.logger_protocol import LoggerProtocol
from giftcircle.domain.protocols.message_publisher_protocol import (
    MessagePublisherProtocol,
)

Sleep = Callable[[float], Awaitable[Any]]
Clock = Callable[[], datetime]


class CacheCoordinator:
    """Cache-aside reads and best-effort invalidation publishing.

    Dependencies (injected via constructor):
        - CacheProtocol: Local cache
        - MessagePublisherProtocol: Invalidation transport
        - LoggerProtocol: Structured logging

    Args:
        topic: Channel that carries invalidation messages.
        ttl_seconds: Default TTL of populated entries.
        max_attempts: Publish attempts per message (>= 1).
        base_delay_seconds: Backoff base.
        sleep: Awaitable delay, replaceable in tests.
        clock: UTC clock for message timestamps.
    """

    def __init__(
        self,
        cache: CacheProtocol,
        publisher: MessagePublisherProtocol,
        logger: LoggerProtocol,
        *,
        topic: str,
        ttl_seconds: int,
        max_attempts: int = 3,
        base_delay_seconds: float = 0.1,
        sleep: Sleep = asyncio.sleep,
        clock: Clock = lambda: datetime.now(UTC),
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._cache = cache
        self._publisher = publisher
        self._logger = logger
        self._topic = topic
        self._ttl_seconds = ttl_seconds
        self._max_attempts = max_attempts
        self._base_delay = base_delay_seconds
        self._sleep = sleep
        self._clock = clock
        self._pending: set[asyncio.Task[bool]] = set()

    async def get_or_load(
        self,
        key: str,
        loader: Callable[[], Awaitable[Result[Any, DomainError]]],
        *,
        ttl_seconds: int | None = None,
    ) -> Result[Any, DomainError]:
        """Return the cached value for key, or load and cache it.

        Args:
            key: Cache key.
            loader: Computes the value from the authoritative store. Its
                Success value must be JSON-serializable.
            ttl_seconds: Overrides the default TTL.

        Returns:
            Success with the cached or loaded value. A loader Failure is
            returned unchanged; cache failures never are.
        """
        match await self._cache.get_json(key):
            case Success(value=cached) if cached is not None:
                self._logger.debug("cache_hit", key=key)
                return Success(value=cached)
            case Failure(error=error):
                self._logger.warning("cache_read_failed", key=key, reason=error.message)
            case _:
                self._logger.debug("cache_miss", key=key)

        loaded = await loader()
        if isinstance(loaded, Failure):
            return loaded

        await self.store(key, loaded.value, ttl_seconds=ttl_seconds)
        return loaded

    async def store(
        self, key: str, value: Any, *, ttl_seconds: int | None = None
    ) -> bool:
        """Write value under key, replacing whatever is there.

        Returns:
            True if the cache accepted the write. A failed write is logged.
        """
        ttl = ttl_seconds if ttl_seconds is not None else self._ttl_seconds
        stored = await self._cache.set_json(key, value, ttl=ttl)
        if isinstance(stored, Failure):
            self._logger.warning(
                "cache_write_failed", key=key, reason=stored.error.message
            )
            return False
        return True

    async def invalidate(self, key: str, *, event_id: UUID) -> None:
        """Drop key locally and announce it to other cache namespaces.

        Returns once the local delete has been attempted; publishing runs in
        the background. Never raises for cache or broker failures.
        """
        deleted = await self._cache.delete(key)
        if isinstance(deleted, Failure):
            self._logger.warning(
                "cache_delete_failed", key=key, reason=deleted.error.message
            )

        self._announce({"key": key}, event_id)

    async def invalidate_pattern(self, pattern: str, *, event_id: UUID) -> None:
        """Drop every key matching a glob pattern locally and announce it.

        Used where one write affects a family of keys, e.g. the per-user
        gift lists of an event.
        """
        deleted = await self._cache.delete_pattern(pattern)
        if isinstance(deleted, Failure):
            self._logger.warning(
                "cache_delete_failed", key=pattern, reason=deleted.error.message
            )

        self._announce({"pattern": pattern}, event_id)

    def _announce(self, target: dict[str, str], event_id: UUID) -> None:
        payload = {
            **target,
            "eventId": str(event_id),
            "timestamp": self._clock().isoformat(),
        }
        task = asyncio.create_task(self.publish_invalidation(payload))
        self._pending.add(task)
        task.add_done_callback(self._on_publish_done)

    async def publish_invalidation(self, payload: dict[str, Any]) -> bool:
        """Publish one invalidation message with bounded retries.

        Returns:
            True if the broker accepted the message, False if it was dropped.
        """
        for attempt in range(1, self._max_attempts + 1):
            result = await self._publisher.publish(self._topic, payload)
            if isinstance(result, Success):
                return True

            self._logger.warning(
                "invalidation_publish_failed",
                key=payload.get("key") or payload.get("pattern"),
                attempt=attempt,
                max_attempts=self._max_attempts,
                reason=result.error.message,
            )
            if attempt < self._max_attempts:
                delay = self._base_delay * 2 ** (attempt - 1)
                self._logger.debug(
                    "invalidation_publish_retry", attempt=attempt, delay_seconds=delay
                )
                await self._sleep(delay)

        self._logger.error(
            "invalidation_dropped",
            key=payload.get("key") or payload.get("pattern"),
            attempts=self._max_attempts,
        )
        return False

    @property
    def pending_count(self) -> int:
        """Number of invalidation messages still being published."""
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for every background publish (shutdown and tests)."""
        while self._pending:
            await asyncio.wait(set(self._pending))

    def _on_publish_done(self, task: asyncio.Task[bool]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if isinstance(error, Exception):
            self._logger.error("invalidation_publish_crashed", error=error)
