"""Cache invalidation subscriber.

Listens on the invalidation channel and removes the named entries from this
instance's cache. Message bodies are the ones CacheCoordinator publishes:

    {"key": "giftcircle:event:supplies:<id>", "eventId": "<id>", "timestamp": "..."}

or a pattern form for bulk removal:

    {"pattern": "giftcircle:event:supplies:*"}

Malformed messages are logged and skipped; a cache failure while deleting is
logged and the loop keeps running.
"""

import asyncio
import json
import logging
from typing import Any

from redis.asyncio import Redis
from redis.asyncio.client import PubSub
from redis.exceptions import RedisError

from giftcircle.core.result import Failure
from giftcircle.domain.protocols.cache_protocol import CacheProtocol


class CacheInvalidationSubscriber:
    """Apply invalidation messages received over Redis pub/sub.

    Attributes:
        _redis: Async Redis client used for the subscription.
        _cache: Cache whose entries are removed.
        _topic: Channel name.
        _logger: Logger instance.
    """

    def __init__(
        self,
        redis_client: "Redis[bytes]",  # type: ignore[type-arg]
        cache: CacheProtocol,
        topic: str,
        logger: logging.Logger | None = None,
    ) -> None:
        self._redis = redis_client
        self._cache = cache
        self._topic = topic
        self._logger = logger or logging.getLogger(__name__)

    async def run(self) -> None:
        """Consume the channel until cancelled or the connection drops."""
        pubsub: PubSub = self._redis.pubsub()

        try:
            await pubsub.subscribe(self._topic)
            self._logger.debug(
                "Subscribed to invalidation channel",
                extra={"topic": self._topic},
            )

            async for message in pubsub.listen():
                if message["type"] != "message":
                    continue
                await self.handle_message(message["data"])

        except RedisError as e:
            self._logger.error(
                "Redis error in invalidation subscription",
                extra={
                    "topic": self._topic,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
        except asyncio.CancelledError:
            self._logger.debug(
                "Invalidation subscription cancelled",
                extra={"topic": self._topic},
            )
            raise
        finally:
            try:
                await pubsub.unsubscribe(self._topic)
                await pubsub.aclose()  # type: ignore[no-untyped-call]
            except Exception as e:
                self._logger.warning(
                    "Error cleaning up invalidation subscription",
                    extra={"error": str(e)},
                )

    async def handle_message(self, data: bytes | str) -> bool:
        """Apply one invalidation message.

        Returns:
            True if the message was well-formed and applied, False otherwise.
        """
        try:
            body: Any = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            self._logger.warning(
                "Failed to parse invalidation message",
                extra={"error": str(e)},
            )
            return False

        if not isinstance(body, dict):
            self._logger.warning(
                "Invalid invalidation message",
                extra={"reason": "body is not an object"},
            )
            return False

        key = body.get("key")
        pattern = body.get("pattern")

        if isinstance(key, str) and key:
            result = await self._cache.delete(key)
            target = key
        elif isinstance(pattern, str) and pattern:
            result = await self._cache.delete_pattern(pattern)
            target = pattern
        else:
            self._logger.warning(
                "Invalid invalidation message",
                extra={"reason": "missing key or pattern"},
            )
            return False

        if isinstance(result, Failure):
            self._logger.warning(
                "Cache invalidation failed",
                extra={"target": target, "error": result.error.message},
            )
            return False

        self._logger.debug("Cache invalidated", extra={"target": target})
        return True
