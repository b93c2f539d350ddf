"""GiftRepository - SQLAlchemy implementation of GiftRepository protocol."""

from collections import defaultdict
from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from giftcircle.domain.entities.gift import Gift
from giftcircle.infrastructure.persistence.models.gift import GiftModel, event_gifts
from giftcircle.infrastructure.persistence.models.user import UserModel


class GiftRepository:
    """SQLAlchemy implementation of GiftRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, gift: Gift) -> None:
        """Insert the gift and its event links in one commit."""
        self.session.add(self._to_model(gift))
        await self.session.flush()
        if gift.event_ids:
            await self.session.execute(
                insert(event_gifts),
                [{"gift_id": gift.id, "event_id": eid} for eid in gift.event_ids],
            )
        await self.session.commit()

    async def list_by_event(
        self, event_id: UUID, *, user_id: UUID | None = None
    ) -> list[Gift]:
        """List gifts attached to an event, oldest first, with user names."""
        stmt = (
            select(GiftModel, UserModel.name)
            .join(event_gifts, event_gifts.c.gift_id == GiftModel.id)
            .outerjoin(UserModel, UserModel.id == GiftModel.user_id)
            .where(event_gifts.c.event_id == event_id)
            .order_by(GiftModel.created_at, GiftModel.id)
        )
        if user_id is not None:
            stmt = stmt.where(GiftModel.user_id == user_id)
        result = await self.session.execute(stmt)
        rows = result.all()
        links = await self._events_for([model.id for model, _ in rows])
        return [
            self._to_domain(model, name, links.get(model.id, []))
            for model, name in rows
        ]

    async def _events_for(self, gift_ids: Sequence[UUID]) -> dict[UUID, list[UUID]]:
        if not gift_ids:
            return {}
        stmt = select(event_gifts.c.gift_id, event_gifts.c.event_id).where(
            event_gifts.c.gift_id.in_(gift_ids)
        )
        result = await self.session.execute(stmt)
        grouped: dict[UUID, list[UUID]] = defaultdict(list)
        for gift_id, event_id in result.all():
            grouped[gift_id].append(event_id)
        return grouped

    # =========================================================================
    # Entity <-> Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(
        self, model: GiftModel, user_name: str | None, event_ids: list[UUID]
    ) -> Gift:
        return Gift(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            urls=list(model.urls or []),
            event_ids=event_ids,
            user_name=user_name,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Gift) -> GiftModel:
        return GiftModel(
            id=entity.id,
            user_id=entity.user_id,
            title=entity.title,
            urls=list(entity.urls),
            created_at=entity.created_at,
        )
