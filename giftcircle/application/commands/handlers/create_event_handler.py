"""CreateEvent command handler."""

from uuid_extensions import uuid7

from giftcircle.application.commands.event_commands import CreateEvent
from giftcircle.application.dtos import EventSummary
from giftcircle.application.errors import persistence_failure
from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import DomainError, NotFoundError, ValidationError
from giftcircle.core.result import Failure, Result, Success
from giftcircle.domain.entities import Event
from giftcircle.domain.protocols.event_repository import EventRepository
from giftcircle.domain.protocols.group_repository import GroupRepository
from giftcircle.domain.protocols.user_repository import UserRepository


class CreateEventHandler:
    """Handler for CreateEvent command.

    Every requested group must exist; the first one becomes the primary
    group that scopes secret-friend matches.
    """

    def __init__(
        self,
        event_repo: EventRepository,
        group_repo: GroupRepository,
        user_repo: UserRepository,
    ) -> None:
        self._event_repo = event_repo
        self._group_repo = group_repo
        self._user_repo = user_repo

    async def handle(self, cmd: CreateEvent) -> Result[EventSummary, DomainError]:
        if not cmd.title or not cmd.title.strip():
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_INPUT,
                    message="Event title cannot be empty",
                    field="title",
                )
            )

        group_ids = list(dict.fromkeys(cmd.group_ids))
        if not group_ids:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_INPUT,
                    message="At least one group is required",
                    field="group_ids",
                )
            )

        owners = await self._user_repo.find_by_ids([cmd.owner_id])
        if not owners:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                    resource_id=str(cmd.owner_id),
                )
            )

        groups = await self._group_repo.find_by_ids(group_ids)
        found = {group.id: group for group in groups}
        missing = [str(group_id) for group_id in group_ids if group_id not in found]
        if missing:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.GROUP_NOT_FOUND,
                    message="One or more groups were not found",
                    resource_type="Group",
                    resource_id=",".join(missing),
                )
            )

        event = Event(
            id=uuid7(),
            title=cmd.title.strip(),
            event_date=cmd.event_date,
            owner_id=cmd.owner_id,
            event_type=cmd.event_type,
            groups=[found[group_id] for group_id in group_ids],
            owner_name=owners[0].name,
        )

        try:
            await self._event_repo.save(event)
        except Exception as e:
            return Failure(error=persistence_failure("create event", e))

        return Success(value=EventSummary.from_entity(event))
