"""GroupRepository protocol (read-only lookups of collaborator-owned groups)."""

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from giftcircle.domain.entities.group import Group


class GroupRepository(Protocol):
    """Group lookup port."""

    async def find_by_ids(self, group_ids: Sequence[UUID]) -> list[Group]:
        """Return the groups that exist among the given IDs (order not guaranteed)."""
        ...
