"""GroupRepository - read access to groups."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from giftcircle.domain.entities.group import Group
from giftcircle.infrastructure.persistence.models.group import GroupModel


class GroupRepository:
    """SQLAlchemy implementation of GroupRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_ids(self, group_ids: Sequence[UUID]) -> list[Group]:
        """Find groups by ID.

        Returns:
            Groups found, in the order of group_ids. Unknown IDs are skipped.
        """
        if not group_ids:
            return []
        stmt = select(GroupModel).where(GroupModel.id.in_(group_ids))
        result = await self.session.execute(stmt)
        by_id = {model.id: self._to_domain(model) for model in result.scalars().all()}
        return [by_id[group_id] for group_id in group_ids if group_id in by_id]

    def _to_domain(self, model: GroupModel) -> Group:
        return Group(
            id=model.id,
            owner_id=model.owner_id,
            name=model.name,
            description=model.description,
        )
