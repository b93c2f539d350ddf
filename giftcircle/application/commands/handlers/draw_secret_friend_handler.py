"""DrawSecretFriend command handler.

Runs the secret-friend draw for an event and records one match per
participant under the event's primary group.

Preconditions, checked in this order, each with its own failure:
    1. Event exists                          -> NotFoundError
    2. Event is a secret-friend event        -> ValidationError
    3. Requester owns the event              -> AuthorizationError
    4. Event has at least one group          -> ValidationError
    5. Enough distinct participants          -> ValidationError
    6. Even participant count                -> ValidationError
    7. Nobody in the pool is already matched -> ValidationError

Steps 5 and 6 fail before anything is written. Step 7 is repeated by the
database: matches are unique per (group_id, giver_id), so a concurrent
second draw loses at commit time and reports the same error as step 7.

A successful draw invalidates every cached gift list of the event.
"""

from uuid import UUID

from uuid_extensions import uuid7

from giftcircle.application.commands.event_commands import DrawSecretFriend
from giftcircle.application.dtos import DrawResult, MatchPair, UserRef
from giftcircle.application.errors import persistence_failure
from giftcircle.application.services.cache_coordinator import CacheCoordinator
from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import DomainError, NotFoundError, ValidationError
from giftcircle.core.result import Failure, Result, Success
from giftcircle.domain.entities import Match
from giftcircle.domain.enums import EventType
from giftcircle.domain.policies import can_draw
from giftcircle.domain.protocols.event_repository import EventRepository
from giftcircle.domain.protocols.logger_protocol import LoggerProtocol
from giftcircle.domain.protocols.match_repository import MatchRepository
from giftcircle.domain.protocols.participant_repository import (
    ParticipantRepository,
)
from giftcircle.domain.services.match_engine import MatchEngine, check_draw_pool
from giftcircle.infrastructure.cache.cache_keys import CacheKeys


def _already_drawn() -> ValidationError:
    return ValidationError(
        code=ErrorCode.DRAW_ALREADY_PERFORMED,
        message="The secret friend draw has already been performed for this event",
    )


class DrawSecretFriendHandler:
    """Handler for DrawSecretFriend command.

    Dependencies (injected via constructor):
        - EventRepository: Event lookup with groups
        - ParticipantRepository: Registered participants with names
        - MatchRepository: Existing-match check and atomic insert
        - MatchEngine: Derangement generator
        - CacheCoordinator: Invalidation of cached gift lists
        - CacheKeys: Cache key construction
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        event_repo: EventRepository,
        participant_repo: ParticipantRepository,
        match_repo: MatchRepository,
        match_engine: MatchEngine,
        coordinator: CacheCoordinator,
        cache_keys: CacheKeys,
        logger: LoggerProtocol,
        min_participants: int = 4,
    ) -> None:
        self._event_repo = event_repo
        self._participant_repo = participant_repo
        self._match_repo = match_repo
        self._engine = match_engine
        self._coordinator = coordinator
        self._cache_keys = cache_keys
        self._logger = logger
        self._min_participants = min_participants

    async def handle(self, cmd: DrawSecretFriend) -> Result[DrawResult, DomainError]:
        """Handle DrawSecretFriend command.

        Returns:
            Success(DrawResult): One {giver, receiver} pair per participant.
            Failure(DomainError): First precondition that failed, a
                retryable error if no assignment was found, or a storage
                failure.
        """
        event = await self._event_repo.find_by_id(cmd.event_id)
        if event is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.EVENT_NOT_FOUND,
                    message="Event not found",
                    resource_type="Event",
                    resource_id=str(cmd.event_id),
                )
            )

        if event.event_type != EventType.SECRET_FRIEND:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_EVENT_TYPE,
                    message="The draw is only available for secret friend events",
                    field="event_type",
                )
            )

        decision = can_draw(event, cmd.requester_id)
        if not decision.allowed:
            return Failure(error=decision.to_error())

        group = event.primary_group
        if group is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.DRAW_EVENT_HAS_NO_GROUP,
                    message="The event must be attached to a group to run the draw",
                    field="groups",
                )
            )

        # The owner always takes part, registered or not.
        names: dict[UUID, str] = {}
        for participant in await self._participant_repo.list_by_event(event.id):
            names.setdefault(participant.user_id, participant.user_name or "")
        names.setdefault(event.owner_id, event.owner_name or "")
        pool = list(names)

        pool_check = check_draw_pool(len(pool), self._min_participants)
        if isinstance(pool_check, Failure):
            return pool_check

        if await self._match_repo.exists_for_participants(group.id, pool):
            return Failure(error=_already_drawn())

        match self._engine.derange(pool):
            case Failure(error=error):
                self._logger.warning(
                    "draw_attempts_exhausted",
                    event_id=str(event.id),
                    participants=len(pool),
                )
                return Failure(error=error)
            case Success(value=pairings):
                pass

        matches = [
            Match(
                id=uuid7(),
                group_id=group.id,
                giver_id=pairing.giver_id,
                receiver_id=pairing.receiver_id,
            )
            for pairing in pairings
        ]

        try:
            saved = await self._match_repo.save_all(matches)
        except Exception as e:
            return Failure(error=persistence_failure("save matches", e))

        if isinstance(saved, Failure):
            return Failure(error=_already_drawn())

        await self._coordinator.invalidate_pattern(
            self._cache_keys.event_gifts_pattern(event.id), event_id=event.id
        )

        self._logger.info(
            "secret_friend_drawn",
            event_id=str(event.id),
            group_id=str(group.id),
            pairs=len(matches),
        )

        return Success(
            value=DrawResult(
                event_id=event.id,
                event_title=event.title,
                matches=[
                    MatchPair(
                        giver=UserRef(id=p.giver_id, name=names[p.giver_id]),
                        receiver=UserRef(id=p.receiver_id, name=names[p.receiver_id]),
                    )
                    for p in pairings
                ],
            )
        )
