"""ContributionRepository protocol for supply contributions.

Port (interface) for hexagonal architecture.
"""

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from giftcircle.domain.entities.contribution import Contribution


class ContributionRepository(Protocol):
    """Contribution persistence port.

    Methods:
        find_by_id: Retrieve a contribution
        list_by_supply: Contributions with contributor names
        sum_committed: Total pledged toward a supply
        totals_by_supply: Pledged totals for many supplies at once
        save: Create or update a contribution
        delete: Remove a contribution
    """

    async def find_by_id(self, contribution_id: UUID) -> Contribution | None:
        """Find contribution by ID."""
        ...

    async def list_by_supply(self, supply_id: UUID) -> list[Contribution]:
        """List contributions of a supply in creation order, with user names."""
        ...

    async def sum_committed(
        self, supply_id: UUID, *, exclude_id: UUID | None = None
    ) -> int:
        """Sum quantity_committed over a supply's contributions.

        Args:
            supply_id: Supply identifier.
            exclude_id: Contribution to leave out (the one being edited).

        Returns:
            Total committed units (0 when there are none).
        """
        ...

    async def totals_by_supply(self, supply_ids: Sequence[UUID]) -> dict[UUID, int]:
        """Committed totals keyed by supply ID (supplies without pledges omitted)."""
        ...

    async def save(self, contribution: Contribution) -> None:
        """Create or update a contribution."""
        ...

    async def delete(self, contribution_id: UUID) -> None:
        """Delete a contribution."""
        ...
