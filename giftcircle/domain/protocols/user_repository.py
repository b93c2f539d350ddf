"""UserRepository protocol (read-only lookups of collaborator-owned users)."""

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from giftcircle.domain.entities.user import User


class UserRepository(Protocol):
    """User lookup port."""

    async def find_by_ids(self, user_ids: Sequence[UUID]) -> list[User]:
        """Return the users that exist among the given IDs (order not guaranteed)."""
        ...
