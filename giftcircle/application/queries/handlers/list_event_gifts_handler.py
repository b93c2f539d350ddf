"""ListEventGifts query handler.

Gift suggestions of an event, filtered by who is asking:

    - secret-friend events: only the suggestions of the participant the
      viewer drew, looked up through the viewer's match in one of the
      event's groups. Before the draw the viewer has nobody to see.
    - every other event type: all suggestions attached to the event.

Results are cached per viewer under
{prefix}:gifts:event:{event_id}:user:{user_id}. Creating a gift and running
a draw invalidate every viewer's entry of the event. Failures (unknown
event, no group, no match) are never cached.
"""

from typing import Any
from uuid import UUID

from giftcircle.application.commands.handlers.supply_handlers import event_not_found
from giftcircle.application.dtos import EventGiftsResult, GiftInfo, UserRef
from giftcircle.application.queries.gift_queries import ListEventGifts
from giftcircle.application.services.cache_coordinator import CacheCoordinator
from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import AuthorizationError, DomainError, ValidationError
from giftcircle.core.result import Failure, Result, Success
from giftcircle.domain.enums import EventType
from giftcircle.domain.protocols.event_repository import EventRepository
from giftcircle.domain.protocols.gift_repository import GiftRepository
from giftcircle.domain.protocols.match_repository import MatchRepository
from giftcircle.infrastructure.cache.cache_keys import CacheKeys


class ListEventGiftsHandler:
    """Handler for ListEventGifts query.

    Dependencies (injected via constructor):
        - EventRepository: Event with its groups
        - MatchRepository: The viewer's drawn receiver
        - GiftRepository: Gifts attached to the event
        - CacheCoordinator: Cache-aside read path
        - CacheKeys: Cache key construction
    """

    def __init__(
        self,
        event_repo: EventRepository,
        match_repo: MatchRepository,
        gift_repo: GiftRepository,
        coordinator: CacheCoordinator,
        cache_keys: CacheKeys,
    ) -> None:
        self._event_repo = event_repo
        self._match_repo = match_repo
        self._gift_repo = gift_repo
        self._coordinator = coordinator
        self._cache_keys = cache_keys

    async def handle(
        self, query: ListEventGifts
    ) -> Result[EventGiftsResult, DomainError]:
        """Handle ListEventGifts query.

        Returns:
            Success(EventGiftsResult): Visible suggestions, oldest first.
            Failure(NotFoundError): Event not found.
            Failure(ValidationError): Secret-friend event without a group.
            Failure(AuthorizationError): Viewer has not been matched yet.
        """
        key = self._cache_keys.event_gifts(query.event_id, query.user_id)

        async def load() -> Result[dict[str, Any], DomainError]:
            return await self._load(query.event_id, query.user_id)

        match await self._coordinator.get_or_load(key, load):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=data):
                pass

        try:
            return Success(value=EventGiftsResult.from_cache(data))
        except (KeyError, TypeError, ValueError):
            # Entry written by an incompatible version; replace it.
            match await self._load(query.event_id, query.user_id):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=fresh):
                    await self._coordinator.store(key, fresh)
                    return Success(value=EventGiftsResult.from_cache(fresh))

    async def _load(
        self, event_id: UUID, user_id: UUID
    ) -> Result[dict[str, Any], DomainError]:
        event = await self._event_repo.find_by_id(event_id)
        if event is None:
            return Failure(error=event_not_found(event_id))

        receiver: UserRef | None = None
        owner_filter: UUID | None = None
        if event.event_type is EventType.SECRET_FRIEND:
            if not event.groups:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.GIFT_EVENT_HAS_NO_GROUP,
                        message="Event has no group, so no gifts can be listed",
                    )
                )
            drawn = await self._match_repo.find_receiver(
                [group.id for group in event.groups], user_id
            )
            if drawn is None:
                return Failure(
                    error=AuthorizationError(
                        code=ErrorCode.GIFT_RECEIVER_NOT_DRAWN,
                        message="You have no secret friend assigned in this event",
                        required_permission="matched_giver",
                    )
                )
            receiver = UserRef(id=drawn.id, name=drawn.name)
            owner_filter = drawn.id

        gifts = await self._gift_repo.list_by_event(event.id, user_id=owner_filter)
        return Success(
            value=EventGiftsResult(
                event_id=event.id,
                event_title=event.title,
                event_type=event.event_type.value,
                receiver=receiver,
                gifts=[GiftInfo.from_entity(gift) for gift in gifts],
            ).to_cache()
        )
