"""GiftRepository protocol for gift suggestions.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from giftcircle.domain.entities.gift import Gift


class GiftRepository(Protocol):
    """Gift suggestion persistence port.

    Methods:
        save: Store a gift with its event links
        list_by_event: Gifts attached to an event, optionally of one user
    """

    async def save(self, gift: Gift) -> None:
        """Create a gift and link it to every event in gift.event_ids."""
        ...

    async def list_by_event(
        self, event_id: UUID, *, user_id: UUID | None = None
    ) -> list[Gift]:
        """List gifts attached to an event, oldest first.

        Args:
            event_id: Event identifier.
            user_id: When set, only gifts suggested by this user.

        Returns:
            Gifts with user names loaded.
        """
        ...
