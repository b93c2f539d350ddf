"""ParticipantRepository - SQLAlchemy implementation of ParticipantRepository protocol."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

from giftcircle.domain.entities.participant import EventParticipant
from giftcircle.infrastructure.persistence.models.participant import ParticipantModel
from giftcircle.infrastructure.persistence.models.user import UserModel


class ParticipantRepository:
    """SQLAlchemy implementation of ParticipantRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add_batch(
        self,
        event_id: UUID,
        user_ids: Sequence[UUID],
        *,
        replace_existing: bool = False,
    ) -> None:
        """Register users for an event in a single commit.

        Args:
            event_id: Event identifier.
            user_ids: Distinct user IDs to register.
            replace_existing: Remove every prior registration first.
        """
        if replace_existing:
            await self.session.execute(
                delete(ParticipantModel).where(ParticipantModel.event_id == event_id)
            )

        self.session.add_all(
            ParticipantModel(id=uuid7(), event_id=event_id, user_id=user_id)
            for user_id in user_ids
        )
        await self.session.commit()

    async def exists(self, event_id: UUID, user_id: UUID) -> bool:
        stmt = select(
            exists().where(
                ParticipantModel.event_id == event_id,
                ParticipantModel.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def list_by_event(self, event_id: UUID) -> list[EventParticipant]:
        """List registrations with user names, in registration order."""
        stmt = (
            select(ParticipantModel, UserModel.name)
            .outerjoin(UserModel, UserModel.id == ParticipantModel.user_id)
            .where(ParticipantModel.event_id == event_id)
            .order_by(ParticipantModel.created_at, ParticipantModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model, name) for model, name in result.all()]

    def _to_domain(
        self, model: ParticipantModel, user_name: str | None
    ) -> EventParticipant:
        return EventParticipant(
            id=model.id,
            event_id=model.event_id,
            user_id=model.user_id,
            user_name=user_name,
            created_at=model.created_at,
        )
