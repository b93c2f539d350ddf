"""Gift suggestion entity.

A gift is a wish a user registers for one or more events: a title and the
links where it can be bought. In a secret-friend event the giver reads the
suggestions of the person they drew.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class Gift:
    """Gift suggestion attached to events.

    Attributes:
        id: Gift identifier.
        user_id: User who wants the gift.
        title: What the user would like.
        urls: Purchase links, in the order given.
        event_ids: Events the suggestion is attached to.
        user_name: Display name of the user, when loaded.
        created_at: Record creation timestamp.
    """

    id: UUID
    user_id: UUID
    title: str
    urls: list[str] = field(default_factory=list)
    event_ids: list[UUID] = field(default_factory=list)
    user_name: str | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
