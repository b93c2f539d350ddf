"""Cache protocol for domain layer.

Defines the key-value cache the service needs, without knowing about any
specific implementation. Every operation is independently fallible and
returns a Result; callers decide how to degrade.

Architecture:
- Protocol-based (structural typing)
- All operations return Result types
- Fail-open: cache failures must never break the authoritative path
"""

from typing import Any, Protocol

from giftcircle.core.errors import DomainError
from giftcircle.core.result import Result


class CacheProtocol(Protocol):
    """Cache protocol - what the service needs from a cache.

    Infrastructure adapters implement this without inheritance.
    """

    async def get_json(self, key: str) -> Result[Any | None, DomainError]:
        """Get a JSON value from cache.

        Args:
            key: Cache key.

        Returns:
            Result with the decoded value if found, None on a miss, or CacheError.

        Example:
            result = await cache.get_json("giftcircle:event:supplies:123")
            match result:
                case Success(value=None):
                    # Cache miss
                    pass
                case Success(value=data):
                    return data
                case Failure(error=error):
                    # Fail open
                    logger.warning("cache_read_failed", error=error.message)
        """
        ...

    async def set_json(
        self,
        key: str,
        value: Any,
        ttl: int | None = None,
    ) -> Result[None, DomainError]:
        """Serialize a value to JSON and store it.

        Args:
            key: Cache key.
            value: JSON-serializable value.
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with None on success, or CacheError.
        """
        ...

    async def delete(self, key: str) -> Result[bool, DomainError]:
        """Delete a key.

        Args:
            key: Cache key to delete.

        Returns:
            Result with True if deleted, False if the key did not exist, or CacheError.
        """
        ...

    async def delete_pattern(self, pattern: str) -> Result[int, DomainError]:
        """Delete all keys matching a glob-style pattern.

        Args:
            pattern: Glob-style pattern (e.g., "giftcircle:gifts:event:123:*").

        Returns:
            Result with number of keys deleted, or CacheError.
        """
        ...

    async def ping(self) -> Result[bool, DomainError]:
        """Check cache connectivity (health check).

        Returns:
            Result with True if reachable, or CacheError.
        """
        ...
