"""Event participant entity.

A participant registration links a user to an event. The pair
(event_id, user_id) is unique; the event owner is always registered.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class EventParticipant:
    """Registered participant of an event.

    Attributes:
        id: Registration identifier.
        event_id: Event the user takes part in.
        user_id: Participating user.
        user_name: Display name of the user, when loaded.
        created_at: Registration timestamp.
    """

    id: UUID
    event_id: UUID
    user_id: UUID
    user_name: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
