"""Event commands (CQRS write operations).

Commands are immutable dataclasses named with imperative verbs. They carry
the acting user's ID; authorization happens in the handlers.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from giftcircle.domain.enums import EventType


@dataclass(frozen=True, kw_only=True)
class CreateEvent:
    """Create an event attached to one or more groups.

    Attributes:
        title: Event title.
        event_date: When the event takes place.
        owner_id: Creating user (becomes the owner).
        group_ids: Groups to attach, primary group first.
        event_type: Kind of event (immutable afterwards).
    """

    title: str
    event_date: datetime
    owner_id: UUID
    group_ids: list[UUID]
    event_type: EventType = EventType.REGULAR


@dataclass(frozen=True, kw_only=True)
class AddEventParticipants:
    """Replace the participant list of an event.

    The owner is always re-registered, whether listed or not.

    Attributes:
        event_id: Target event.
        owner_id: Acting user (must own the event).
        participant_ids: Users to register; duplicates are ignored.
    """

    event_id: UUID
    owner_id: UUID
    participant_ids: list[UUID] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class DrawSecretFriend:
    """Run the secret-friend draw for an event.

    Attributes:
        event_id: Secret-friend event.
        requester_id: Acting user (must own the event).
    """

    event_id: UUID
    requester_id: UUID
