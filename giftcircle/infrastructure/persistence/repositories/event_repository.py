"""EventRepository - SQLAlchemy implementation of EventRepository protocol.

Adapter for hexagonal architecture. Maps between domain Event entities and
EventModel rows plus their group_events links.
"""

from collections import defaultdict
from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import Select, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from giftcircle.domain.entities.event import Event
from giftcircle.domain.entities.group import Group
from giftcircle.domain.enums.event_type import EventType
from giftcircle.infrastructure.persistence.models.event import EventModel
from giftcircle.infrastructure.persistence.models.group import (
    GroupModel,
    group_events,
)
from giftcircle.infrastructure.persistence.models.user import UserModel


class EventRepository:
    """SQLAlchemy implementation of EventRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, event_id: UUID) -> Event | None:
        """Find event by ID with owner name and ordered groups.

        Returns:
            Domain Event if found, None otherwise.
        """
        events = await self._fetch(self._base_query().where(EventModel.id == event_id))
        return events[0] if events else None

    async def find_by_ids(self, event_ids: Sequence[UUID]) -> list[Event]:
        """Find the existing events among event_ids."""
        if not event_ids:
            return []
        return await self._fetch(self._base_query().where(EventModel.id.in_(event_ids)))

    async def find_by_owner(self, owner_id: UUID) -> list[Event]:
        """Find events created by a user, most recent event date first."""
        stmt = (
            self._base_query()
            .where(EventModel.owner_id == owner_id)
            .order_by(EventModel.event_date.desc())
        )
        return await self._fetch(stmt)

    async def find_by_group(self, group_id: UUID) -> list[Event]:
        """Find events attached to a group, most recent event date first.

        Each returned event carries all of its groups, not only the
        requested one.
        """
        stmt = (
            self._base_query()
            .join(group_events, group_events.c.event_id == EventModel.id)
            .where(group_events.c.group_id == group_id)
            .order_by(EventModel.event_date.desc())
        )
        return await self._fetch(stmt)

    async def save(self, event: Event) -> None:
        """Create or update an event.

        Group links are written only on creation; an event's groups do not
        change afterwards.
        """
        stmt = select(EventModel).where(EventModel.id == event.id)
        result = await self.session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self.session.add(self._to_model(event))
            await self.session.flush()
            if event.groups:
                await self.session.execute(
                    insert(group_events),
                    [
                        {"group_id": group.id, "event_id": event.id, "position": i}
                        for i, group in enumerate(event.groups)
                    ],
                )
        else:
            existing.title = event.title
            existing.event_date = event.event_date

        await self.session.commit()

    # =========================================================================
    # Query helpers
    # =========================================================================

    def _base_query(self) -> Select[tuple[EventModel, str | None]]:
        return select(EventModel, UserModel.name).outerjoin(
            UserModel, UserModel.id == EventModel.owner_id
        )

    async def _fetch(self, stmt: Select[tuple[EventModel, str | None]]) -> list[Event]:
        result = await self.session.execute(stmt)
        rows = result.all()
        groups = await self._groups_for([model.id for model, _ in rows])
        return [
            self._to_domain(model, owner_name, groups.get(model.id, []))
            for model, owner_name in rows
        ]

    async def _groups_for(self, event_ids: Sequence[UUID]) -> dict[UUID, list[Group]]:
        """Load groups of many events at once, in link order."""
        if not event_ids:
            return {}
        stmt = (
            select(group_events.c.event_id, GroupModel)
            .join(GroupModel, GroupModel.id == group_events.c.group_id)
            .where(group_events.c.event_id.in_(event_ids))
            .order_by(group_events.c.event_id, group_events.c.position)
        )
        result = await self.session.execute(stmt)
        grouped: dict[UUID, list[Group]] = defaultdict(list)
        for event_id, group_model in result.all():
            grouped[event_id].append(
                Group(
                    id=group_model.id,
                    owner_id=group_model.owner_id,
                    name=group_model.name,
                    description=group_model.description,
                )
            )
        return grouped

    # =========================================================================
    # Entity <-> Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(
        self, model: EventModel, owner_name: str | None, groups: list[Group]
    ) -> Event:
        return Event(
            id=model.id,
            title=model.title,
            event_date=model.event_date,
            owner_id=model.owner_id,
            event_type=EventType(model.event_type),
            groups=groups,
            owner_name=owner_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Event) -> EventModel:
        return EventModel(
            id=entity.id,
            title=entity.title,
            event_date=entity.event_date,
            owner_id=entity.owner_id,
            event_type=entity.event_type.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
