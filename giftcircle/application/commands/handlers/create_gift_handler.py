"""CreateGift command handler.

Stores a gift suggestion and attaches it to every requested event. The
whole request is rejected when any event is missing or refuses the
suggestion, so a gift is never attached to only part of the list.

After the gift is stored, the per-user gift lists of every affected event
are invalidated.
"""

from uuid_extensions import uuid7

from giftcircle.application.commands.gift_commands import CreateGift
from giftcircle.application.dtos import GiftResult
from giftcircle.application.errors import persistence_failure
from giftcircle.application.services.cache_coordinator import CacheCoordinator
from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import DomainError, NotFoundError, ValidationError
from giftcircle.core.result import Failure, Result, Success
from giftcircle.domain.entities import Gift
from giftcircle.domain.policies import can_suggest_gift
from giftcircle.domain.protocols.event_repository import EventRepository
from giftcircle.domain.protocols.gift_repository import GiftRepository
from giftcircle.domain.protocols.logger_protocol import LoggerProtocol
from giftcircle.domain.protocols.participant_repository import (
    ParticipantRepository,
)
from giftcircle.domain.protocols.user_repository import UserRepository
from giftcircle.infrastructure.cache.cache_keys import CacheKeys


class CreateGiftHandler:
    """Handler for CreateGift command.

    Dependencies (injected via constructor):
        - GiftRepository: Gift storage
        - EventRepository: Target events
        - ParticipantRepository: Secret-friend participation checks
        - UserRepository: Display name of the suggesting user
        - CacheCoordinator: Invalidation of cached gift lists
        - CacheKeys: Cache key construction
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        gift_repo: GiftRepository,
        event_repo: EventRepository,
        participant_repo: ParticipantRepository,
        user_repo: UserRepository,
        coordinator: CacheCoordinator,
        cache_keys: CacheKeys,
        logger: LoggerProtocol,
    ) -> None:
        self._gift_repo = gift_repo
        self._event_repo = event_repo
        self._participant_repo = participant_repo
        self._user_repo = user_repo
        self._coordinator = coordinator
        self._cache_keys = cache_keys
        self._logger = logger

    async def handle(self, cmd: CreateGift) -> Result[GiftResult, DomainError]:
        """Handle CreateGift command.

        Returns:
            Success(GiftResult): Stored gift with the events it was attached to.
            Failure(DomainError): Blank title, no events, unknown user or
                event, caller not allowed on one of the events, or storage
                failure.
        """
        if not cmd.title or not cmd.title.strip():
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_INPUT,
                    message="Gift title cannot be empty",
                    field="title",
                )
            )

        event_ids = list(dict.fromkeys(cmd.event_ids))
        if not event_ids:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_INPUT,
                    message="At least one event is required",
                    field="event_ids",
                )
            )

        users = await self._user_repo.find_by_ids([cmd.user_id])
        if not users:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                    resource_id=str(cmd.user_id),
                )
            )

        events = await self._event_repo.find_by_ids(event_ids)
        found = {event.id: event for event in events}
        missing = [str(event_id) for event_id in event_ids if event_id not in found]
        if missing:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.EVENT_NOT_FOUND,
                    message="One or more events were not found",
                    resource_type="Event",
                    resource_id=",".join(missing),
                )
            )
        events = [found[event_id] for event_id in event_ids]

        for event in events:
            is_participant = await self._participant_repo.exists(event.id, cmd.user_id)
            decision = can_suggest_gift(
                event, cmd.user_id, is_participant=is_participant
            )
            if not decision.allowed:
                return Failure(error=decision.to_error())

        gift = Gift(
            id=uuid7(),
            user_id=cmd.user_id,
            title=cmd.title.strip(),
            urls=list(cmd.urls),
            event_ids=event_ids,
            user_name=users[0].name,
        )

        try:
            await self._gift_repo.save(gift)
        except Exception as e:
            return Failure(error=persistence_failure("create gift", e))

        for event in events:
            await self._coordinator.invalidate_pattern(
                self._cache_keys.event_gifts_pattern(event.id), event_id=event.id
            )

        self._logger.info(
            "gift_created",
            gift_id=str(gift.id),
            user_id=str(cmd.user_id),
            event_count=len(events),
        )
        return Success(value=GiftResult.from_entity(gift, users[0].name, events))
