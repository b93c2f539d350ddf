"""Application services."""

from giftcircle.application.services.cache_coordinator import CacheCoordinator

__all__ = ["CacheCoordinator"]
