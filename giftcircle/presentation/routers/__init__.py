"""External-facing routers that are not part of the versioned API."""

from giftcircle.presentation.routers.system import system_router

__all__ = ["system_router"]
