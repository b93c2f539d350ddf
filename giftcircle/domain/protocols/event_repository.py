"""EventRepository protocol for event persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from giftcircle.domain.entities.event import Event


class EventRepository(Protocol):
    """Event repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve event by ID, with its groups
        find_by_ids: Retrieve several events at once
        find_by_owner: Retrieve events created by a user
        find_by_group: Retrieve events attached to a group
        save: Create event with its group links
    """

    async def find_by_id(self, event_id: UUID) -> Event | None:
        """Find event by ID.

        Args:
            event_id: Event identifier.

        Returns:
            Event with owner, type and groups loaded, or None if not found.
        """
        ...

    async def find_by_ids(self, event_ids: Sequence[UUID]) -> list[Event]:
        """Find every existing event among event_ids, in no particular order."""
        ...

    async def find_by_owner(self, owner_id: UUID) -> list[Event]:
        """Find events created by a user, most recent event date first."""
        ...

    async def find_by_group(self, group_id: UUID) -> list[Event]:
        """Find events attached to a group, most recent event date first."""
        ...

    async def save(self, event: Event) -> None:
        """Create or update an event.

        Args:
            event: Event entity; its groups must already exist.
        """
        ...
