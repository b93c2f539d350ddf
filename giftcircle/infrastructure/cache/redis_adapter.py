"""Redis adapter implementing CacheProtocol.

Wraps the async Redis client and maps every Redis failure to a CacheError
inside a Failure, so callers can fail open.

Architecture:
- Implements CacheProtocol without inheritance (structural typing)
- Maps Redis exceptions to CacheError with an InfrastructureErrorCode
- Returns Result types for all operations
"""

import json
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from giftcircle.core.enums import ErrorCode
from giftcircle.core.result import Failure, Result, Success
from giftcircle.infrastructure.enums import InfrastructureErrorCode
from giftcircle.infrastructure.errors import CacheError

_DELETE_BATCH_SIZE = 500


class RedisAdapter:
    """Redis implementation of CacheProtocol.

    Note: Does NOT inherit from CacheProtocol (uses structural typing).

    Attributes:
        _redis: Async Redis client instance.
    """

    def __init__(self, redis_client: Redis) -> None:
        """Initialize Redis adapter.

        Args:
            redis_client: Async Redis client instance.
        """
        self._redis = redis_client

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Get a raw string value.

        Returns:
            Result with value if found, None if not found, or CacheError.
        """
        try:
            value = await self._redis.get(key)
        except RedisError as e:
            return _failure(
                InfrastructureErrorCode.CACHE_GET_ERROR,
                f"Failed to get key '{key}' from cache",
                key=key,
                error=e,
            )
        if value is None:
            return Success(value=None)
        decoded = value.decode("utf-8") if isinstance(value, bytes) else value
        return Success(value=decoded)

    async def get_json(self, key: str) -> Result[Any | None, CacheError]:
        """Get and decode a JSON value.

        Returns:
            Result with decoded value if found, None if not found, or CacheError.
            A corrupt entry is reported as CacheError.
        """
        match await self.get(key):
            case Success(value=None):
                return Success(value=None)
            case Success(value=raw):
                try:
                    return Success(value=json.loads(raw))
                except json.JSONDecodeError as e:
                    return _failure(
                        InfrastructureErrorCode.CACHE_GET_ERROR,
                        f"Failed to parse JSON for key '{key}'",
                        key=key,
                        error=e,
                    )
            case Failure(error=err):
                return Failure(error=err)
            case _:
                # Unreachable but needed for type checker
                return Success(value=None)

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Set a raw string value.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl: Time to live in seconds (None = no expiration).
        """
        try:
            if ttl is not None:
                await self._redis.setex(key, ttl, value)
            else:
                await self._redis.set(key, value)
        except RedisError as e:
            return _failure(
                InfrastructureErrorCode.CACHE_SET_ERROR,
                f"Failed to set key '{key}' in cache",
                key=key,
                error=e,
            )
        return Success(value=None)

    async def set_json(
        self,
        key: str,
        value: Any,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Serialize a value to JSON and store it."""
        try:
            serialized = json.dumps(value)
        except (TypeError, ValueError) as e:
            return _failure(
                InfrastructureErrorCode.CACHE_SET_ERROR,
                f"Failed to serialize value for key '{key}'",
                key=key,
                error=e,
            )
        return await self.set(key, serialized, ttl)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        """Delete a key.

        Returns:
            Result with True if deleted, False if key didn't exist, or CacheError.
        """
        try:
            deleted_count = await self._redis.delete(key)
        except RedisError as e:
            return _failure(
                InfrastructureErrorCode.CACHE_DELETE_ERROR,
                f"Failed to delete key '{key}' from cache",
                key=key,
                error=e,
            )
        return Success(value=deleted_count > 0)

    async def delete_pattern(self, pattern: str) -> Result[int, CacheError]:
        """Delete every key matching a glob-style pattern.

        Uses SCAN (never KEYS) and deletes in batches.

        Returns:
            Result with number of keys deleted, or CacheError.
        """
        deleted = 0
        batch: list[Any] = []
        try:
            async for key in self._redis.scan_iter(match=pattern):
                batch.append(key)
                if len(batch) >= _DELETE_BATCH_SIZE:
                    deleted += await self._redis.delete(*batch)
                    batch.clear()
            if batch:
                deleted += await self._redis.delete(*batch)
        except RedisError as e:
            return _failure(
                InfrastructureErrorCode.CACHE_DELETE_ERROR,
                f"Failed to delete keys matching '{pattern}'",
                key=pattern,
                error=e,
            )
        return Success(value=deleted)

    async def ping(self) -> Result[bool, CacheError]:
        """Check Redis connectivity (health check)."""
        try:
            await self._redis.ping()  # type: ignore[misc]
        except RedisError as e:
            return _failure(
                InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                "Redis health check failed",
                error=e,
            )
        return Success(value=True)


def _failure(
    infrastructure_code: InfrastructureErrorCode,
    message: str,
    *,
    error: Exception,
    key: str | None = None,
) -> Failure[CacheError]:
    details: dict[str, Any] = {"error": str(error), "type": type(error).__name__}
    if key is not None:
        details["key"] = key
    return Failure(
        error=CacheError(
            code=ErrorCode.CACHE_UNAVAILABLE,
            infrastructure_code=infrastructure_code,
            message=message,
            details=details,
        )
    )
