"""Cache adapters."""

from giftcircle.infrastructure.cache.cache_keys import CacheKeys
from giftcircle.infrastructure.cache.redis_adapter import RedisAdapter

__all__ = ["CacheKeys", "RedisAdapter"]
