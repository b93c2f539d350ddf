"""Cache key construction utilities.

All keys follow the pattern: {prefix}:{domain}:{resource}:{id}

Usage:
    from giftcircle.core.config import settings
    from giftcircle.infrastructure.cache.cache_keys import CacheKeys

    keys = CacheKeys(prefix=settings.cache_key_prefix)
    key = keys.event_supplies(event_id)
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class CacheKeys:
    """Centralized cache key construction.

    Attributes:
        prefix: Cache key prefix (typically "giftcircle").

    Example:
        keys = CacheKeys(prefix="giftcircle")
        keys.event_supplies(event_id)  # "giftcircle:event:supplies:{event_id}"
        keys.event_gifts(event_id, user_id)  # per-viewer gift list
    """

    prefix: str

    def event_supplies(self, event_id: UUID) -> str:
        """Supplies-with-progress aggregate of an event.

        Pattern: {prefix}:event:supplies:{event_id}
        """
        return f"{self.prefix}:event:supplies:{event_id}"

    def event_gifts(self, event_id: UUID, user_id: UUID) -> str:
        """Gift list of an event as seen by one user.

        Pattern: {prefix}:gifts:event:{event_id}:user:{user_id}
        """
        return f"{self.prefix}:gifts:event:{event_id}:user:{user_id}"

    def event_gifts_pattern(self, event_id: UUID) -> str:
        """Glob matching every user's gift list of an event."""
        return f"{self.prefix}:gifts:event:{event_id}:user:*"
