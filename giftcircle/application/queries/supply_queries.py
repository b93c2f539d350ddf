"""Supply queries (CQRS read operations). Queries never change state."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetEventSupplies:
    """Supplies of an event with committed totals and fulfillment.

    Served through the cache-aside path.
    """

    event_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListSupplyContributions:
    """Contributions pledged toward a supply, oldest first."""

    supply_id: UUID
