"""API v1 routers.

All routes are generated from the Route Metadata Registry at startup
(routes/registry.py is the complete catalog).

Resources:
    /api/v1/events                                 - Events
    /api/v1/groups/{group_id}/events               - Events of a group
    /api/v1/events/{event_id}/participants         - Participant list
    /api/v1/events/{event_id}/draws                - Secret-friend draw
    /api/v1/events/{event_id}/supplies             - Supply list
    /api/v1/supplies/{supply_id}                   - Single supply
    /api/v1/supplies/{supply_id}/contributions     - Pledges for a supply
    /api/v1/contributions/{contribution_id}        - Single pledge
    /api/v1/gifts                                  - Gift suggestions
    /api/v1/events/{event_id}/gifts                - Gifts visible to the caller
"""

from fastapi import APIRouter

from giftcircle.core.config import settings
from giftcircle.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from giftcircle.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

v1_router = APIRouter(prefix=settings.api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]
