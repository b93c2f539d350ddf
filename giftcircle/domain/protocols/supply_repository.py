"""SupplyRepository protocol for event supply items.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from giftcircle.domain.entities.supply import Supply


class SupplyRepository(Protocol):
    """Supply persistence port.

    Methods:
        find_by_id: Retrieve a supply, optionally locking its row
        find_by_event: All supplies of an event
        save: Create or update a supply
        delete: Remove a supply and, by cascade, its contributions
    """

    async def find_by_id(
        self, supply_id: UUID, *, for_update: bool = False
    ) -> Supply | None:
        """Find supply by ID.

        Args:
            supply_id: Supply identifier.
            for_update: Lock the row until the current transaction ends.
                Contribution writes use this to serialize the
                read-validate-write sequence per supply.

        Returns:
            Supply if found, None otherwise.
        """
        ...

    async def find_by_event(self, event_id: UUID) -> list[Supply]:
        """List supplies of an event in creation order."""
        ...

    async def save(self, supply: Supply) -> None:
        """Create or update a supply."""
        ...

    async def delete(self, supply_id: UUID) -> None:
        """Delete a supply; its contributions are removed by cascade."""
        ...
