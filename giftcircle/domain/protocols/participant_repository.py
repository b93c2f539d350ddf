"""ParticipantRepository protocol for event participant registrations.

Port (interface) for hexagonal architecture.
"""

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from giftcircle.domain.entities.participant import EventParticipant


class ParticipantRepository(Protocol):
    """Participant directory port.

    Methods:
        add_batch: Register users for an event, optionally replacing prior list
        exists: Check a single (event, user) registration
        list_by_event: Registered participants with display names
    """

    async def add_batch(
        self,
        event_id: UUID,
        user_ids: Sequence[UUID],
        *,
        replace_existing: bool = False,
    ) -> None:
        """Register users for an event in one transaction.

        Args:
            event_id: Event identifier.
            user_ids: Distinct user IDs to register.
            replace_existing: Remove every prior registration first.
        """
        ...

    async def exists(self, event_id: UUID, user_id: UUID) -> bool:
        """Check whether the user is registered for the event."""
        ...

    async def list_by_event(self, event_id: UUID) -> list[EventParticipant]:
        """List registrations with user names, in registration order."""
        ...
