"""Event listing query handlers.

Handlers:
    ListUserEventsHandler  - events created by a user
    ListGroupEventsHandler - events attached to a group

Both return EventSummary DTOs with every group of each event.
"""

from giftcircle.application.dtos import EventSummary
from giftcircle.application.queries.event_queries import (
    ListGroupEvents,
    ListUserEvents,
)
from giftcircle.core.errors import DomainError
from giftcircle.core.result import Result, Success
from giftcircle.domain.protocols.event_repository import EventRepository


class ListUserEventsHandler:
    """Handler for ListUserEvents query."""

    def __init__(self, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    async def handle(
        self, query: ListUserEvents
    ) -> Result[list[EventSummary], DomainError]:
        events = await self._event_repo.find_by_owner(query.user_id)
        return Success(value=[EventSummary.from_entity(e) for e in events])


class ListGroupEventsHandler:
    """Handler for ListGroupEvents query."""

    def __init__(self, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    async def handle(
        self, query: ListGroupEvents
    ) -> Result[list[EventSummary], DomainError]:
        events = await self._event_repo.find_by_group(query.group_id)
        return Success(value=[EventSummary.from_entity(e) for e in events])
