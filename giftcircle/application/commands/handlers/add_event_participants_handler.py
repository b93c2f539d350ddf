"""AddEventParticipants command handler.

Replaces the participant list of an event and re-registers the owner.
"""

from uuid import UUID

from giftcircle.application.commands.event_commands import AddEventParticipants
from giftcircle.application.dtos import EventParticipantsResult, ParticipantResult
from giftcircle.application.errors import persistence_failure
from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import DomainError, NotFoundError
from giftcircle.core.result import Failure, Result, Success
from giftcircle.domain.policies import can_manage_participants
from giftcircle.domain.protocols.event_repository import EventRepository
from giftcircle.domain.protocols.participant_repository import (
    ParticipantRepository,
)
from giftcircle.domain.protocols.user_repository import UserRepository


class AddEventParticipantsHandler:
    """Handler for AddEventParticipants command.

    Dependencies (injected via constructor):
        - EventRepository: Event lookup
        - UserRepository: Checks that every listed user exists
        - ParticipantRepository: Replaces registrations in one commit
    """

    def __init__(
        self,
        event_repo: EventRepository,
        user_repo: UserRepository,
        participant_repo: ParticipantRepository,
    ) -> None:
        self._event_repo = event_repo
        self._user_repo = user_repo
        self._participant_repo = participant_repo

    async def handle(
        self, cmd: AddEventParticipants
    ) -> Result[EventParticipantsResult, DomainError]:
        """Handle AddEventParticipants command.

        Returns:
            Success(EventParticipantsResult): Registered participants, owner included.
            Failure(DomainError): Event or user not found, caller not the
                owner, or storage failure.
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

        decision = can_manage_participants(event, cmd.owner_id)
        if not decision.allowed:
            return Failure(error=decision.to_error())

        # dict keeps first-seen order while dropping duplicates
        user_ids: list[UUID] = list(dict.fromkeys([*cmd.participant_ids, event.owner_id]))

        found = {user.id for user in await self._user_repo.find_by_ids(user_ids)}
        missing = [user_id for user_id in user_ids if user_id not in found]
        if missing:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="One or more users were not found",
                    resource_type="User",
                    resource_id=",".join(str(user_id) for user_id in missing),
                )
            )

        try:
            await self._participant_repo.add_batch(
                event.id, user_ids, replace_existing=True
            )
        except Exception as e:
            return Failure(error=persistence_failure("register participants", e))

        participants = await self._participant_repo.list_by_event(event.id)
        return Success(
            value=EventParticipantsResult(
                event_id=event.id,
                participants=[
                    ParticipantResult(
                        id=p.id, name=p.user_name or "", user_id=p.user_id
                    )
                    for p in participants
                ],
            )
        )
