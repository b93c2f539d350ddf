"""UserRepository - read access to users owned by the identity service."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from giftcircle.domain.entities.user import User
from giftcircle.infrastructure.persistence.models.user import UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_ids(self, user_ids: Sequence[UUID]) -> list[User]:
        """Find users by ID. Unknown IDs are skipped."""
        if not user_ids:
            return []
        stmt = select(UserModel.id, UserModel.name).where(UserModel.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [User(id=user_id, name=name) for user_id, name in result.all()]
