"""Secret-friend match entity.

A match assigns a giver to a receiver inside a draw scope (the event's
primary group). Matches are append-only: they are created once by a draw and
never updated.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class Match:
    """Giver to receiver assignment.

    Attributes:
        id: Match identifier.
        group_id: Draw scope.
        giver_id: User who gives the gift.
        receiver_id: User who receives the gift.
        created_at: When the draw produced this match.
    """

    id: UUID
    group_id: UUID
    giver_id: UUID
    receiver_id: UUID
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Reject self-matches.

        Raises:
            ValueError: If giver and receiver are the same user.
        """
        if self.giver_id == self.receiver_id:
            raise ValueError("A participant cannot be matched with themselves")
