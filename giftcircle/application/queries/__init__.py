"""Queries (CQRS read operations)."""

from giftcircle.application.queries.event_queries import (
    ListGroupEvents,
    ListUserEvents,
)
from giftcircle.application.queries.gift_queries import ListEventGifts
from giftcircle.application.queries.supply_queries import (
    GetEventSupplies,
    ListSupplyContributions,
)

__all__ = [
    "GetEventSupplies",
    "ListEventGifts",
    "ListGroupEvents",
    "ListSupplyContributions",
    "ListUserEvents",
]
