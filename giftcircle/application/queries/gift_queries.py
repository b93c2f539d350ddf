"""Gift queries (CQRS read operations). Queries never change state."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListEventGifts:
    """Gift suggestions of an event as seen by one user.

    In a secret-friend event the user only sees the suggestions of the
    participant they drew. Served through the cache-aside path, per user.
    """

    event_id: UUID
    user_id: UUID
