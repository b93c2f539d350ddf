"""Gift suggestion commands (CQRS write operations)."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateGift:
    """Suggest a gift for one or more events.

    Attributes:
        user_id: Authenticated user; the gift is theirs.
        title: What the user would like.
        urls: Purchase links.
        event_ids: Events to attach the suggestion to (at least one).
    """

    user_id: UUID
    title: str
    event_ids: list[UUID]
    urls: list[str] = field(default_factory=list)
