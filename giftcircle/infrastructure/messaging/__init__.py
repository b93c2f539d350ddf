"""Message transport adapters (Redis pub/sub)."""

from giftcircle.infrastructure.messaging.invalidation_subscriber import (
    CacheInvalidationSubscriber,
)
from giftcircle.infrastructure.messaging.redis_publisher import RedisMessagePublisher

__all__ = ["CacheInvalidationSubscriber", "RedisMessagePublisher"]
