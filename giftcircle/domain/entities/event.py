"""Event domain entity.

Represents a shared social event: a secret-friend exchange, a gift registry,
a potluck or a plain gathering. An event has a single owner and is attached
to one or more groups.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Type is immutable after creation
    - Group list order is significant: the first group is the primary group
      and scopes secret-friend matches

Usage:
    from uuid_extensions import uuid7
    from giftcircle.domain.entities import Event, Group
    from giftcircle.domain.enums import EventType

    event = Event(
        id=uuid7(),
        title="Office Secret Friend",
        event_date=datetime(2026, 12, 20, tzinfo=UTC),
        owner_id=owner_id,
        event_type=EventType.SECRET_FRIEND,
        groups=[group],
    )
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from giftcircle.domain.entities.group import Group
from giftcircle.domain.enums.event_type import EventType


@dataclass
class Event:
    """Shared social event.

    Attributes:
        id: Unique event identifier.
        title: Event title.
        event_date: When the event takes place.
        owner_id: User who created the event.
        event_type: Kind of event (immutable).
        groups: Groups the event is attached to, primary group first.
        owner_name: Display name of the owner, when loaded.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.

    Example:
        >>> event.is_owned_by(owner_id)
        True
        >>> event.primary_group.id == group.id
        True
    """

    id: UUID
    title: str
    event_date: datetime
    owner_id: UUID
    event_type: EventType = EventType.REGULAR
    groups: list[Group] = field(default_factory=list)
    owner_name: str | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate event after initialization.

        Raises:
            ValueError: If the title is blank.
        """
        if not self.title or not self.title.strip():
            raise ValueError("Event title cannot be empty")

    def is_owned_by(self, user_id: UUID) -> bool:
        """Check whether the user created this event."""
        return self.owner_id == user_id

    def is_group_admin(self, user_id: UUID) -> bool:
        """Check whether the user owns any group the event is attached to."""
        return any(group.owner_id == user_id for group in self.groups)

    @property
    def primary_group(self) -> Group | None:
        """Group that scopes secret-friend matches, if any."""
        return self.groups[0] if self.groups else None
