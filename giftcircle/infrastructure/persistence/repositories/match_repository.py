"""MatchRepository - SQLAlchemy implementation of MatchRepository protocol."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import exists, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import ConflictError, DomainError
from giftcircle.core.result import Failure, Result, Success
from giftcircle.domain.entities.match import Match
from giftcircle.domain.entities.user import User
from giftcircle.infrastructure.persistence.models.match import MatchModel
from giftcircle.infrastructure.persistence.models.user import UserModel


class MatchRepository:
    """SQLAlchemy implementation of MatchRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def exists_for_participants(
        self, group_id: UUID, user_ids: Sequence[UUID]
    ) -> bool:
        """Check whether any user already gives or receives within the group."""
        if not user_ids:
            return False
        stmt = select(
            exists().where(
                MatchModel.group_id == group_id,
                or_(
                    MatchModel.giver_id.in_(user_ids),
                    MatchModel.receiver_id.in_(user_ids),
                ),
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def find_receiver(
        self, group_ids: Sequence[UUID], giver_id: UUID
    ) -> User | None:
        """Who the giver drew in any of the groups, None before a draw."""
        if not group_ids:
            return None
        stmt = (
            select(UserModel.id, UserModel.name)
            .join(MatchModel, MatchModel.receiver_id == UserModel.id)
            .where(MatchModel.giver_id == giver_id, MatchModel.group_id.in_(group_ids))
            .order_by(MatchModel.created_at)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        return User(id=row.id, name=row.name)

    async def save_all(self, matches: Sequence[Match]) -> Result[None, DomainError]:
        """Insert every match of a draw in one commit.

        Returns:
            Success(None), or Failure(ConflictError) when the unique
            (group_id, giver_id) constraint rejects the batch because another
            draw got there first. Nothing is written in that case.
        """
        self.session.add_all(self._to_model(match) for match in matches)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return Failure(
                error=ConflictError(
                    code=ErrorCode.RESOURCE_CONFLICT,
                    message="Matches already exist for this group",
                    resource_type="match",
                    conflicting_field="giver_id",
                )
            )
        return Success(value=None)

    def _to_model(self, entity: Match) -> MatchModel:
        return MatchModel(
            id=entity.id,
            group_id=entity.group_id,
            giver_id=entity.giver_id,
            receiver_id=entity.receiver_id,
            created_at=entity.created_at,
        )
