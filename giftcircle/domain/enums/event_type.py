"""Event type enumeration.

The type is fixed when an event is created and decides which features the
event supports:
- SECRET_FRIEND: participants and a one-time secret-friend draw
- REGISTRY, POTLUCK: shared supply list with contributions
- REGULAR: plain gathering, no extra features
"""

from enum import Enum


class EventType(str, Enum):
    """Kind of event."""

    REGULAR = "regular"
    SECRET_FRIEND = "secret_friend"
    REGISTRY = "registry"
    POTLUCK = "potluck"

    @classmethod
    def supply_types(cls) -> frozenset["EventType"]:
        """Event types that carry a supply ledger."""
        return frozenset({cls.REGISTRY, cls.POTLUCK})

    @property
    def supports_supplies(self) -> bool:
        """True if events of this type keep a supply list."""
        return self in EventType.supply_types()
