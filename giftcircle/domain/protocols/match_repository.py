"""MatchRepository protocol for secret-friend matches.

Matches are append-only. The storage layer enforces one match per
(group_id, giver_id), which makes concurrent draws for the same scope fail
instead of writing duplicate pairs.
"""

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from giftcircle.core.errors import DomainError
from giftcircle.core.result import Result
from giftcircle.domain.entities.match import Match
from giftcircle.domain.entities.user import User


class MatchRepository(Protocol):
    """Match persistence port."""

    async def exists_for_participants(
        self, group_id: UUID, user_ids: Sequence[UUID]
    ) -> bool:
        """Check whether any of the users already gives or receives in the scope."""
        ...

    async def find_receiver(
        self, group_ids: Sequence[UUID], giver_id: UUID
    ) -> User | None:
        """Return who the giver drew in any of the groups, or None before a draw."""
        ...

    async def save_all(self, matches: Sequence[Match]) -> Result[None, DomainError]:
        """Persist all matches of a draw atomically.

        Returns:
            Success(None) when every match was written.
            Failure(ConflictError) when the scope already holds matches.
        """
        ...
