"""Event handler dependency factories.

Request-scoped handler instances for event operations:
- CreateEvent, AddEventParticipants, DrawSecretFriend (commands)
- ListUserEvents, ListGroupEvents (queries)

Repositories come from the repository factories; FastAPI resolves
get_db_session once per request, so they all share one session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from giftcircle.core.config import settings
from giftcircle.core.container.infrastructure import (
    get_cache_coordinator,
    get_cache_keys,
    get_logger,
    get_match_engine,
)
from giftcircle.core.container.repositories import (
    get_event_repository,
    get_group_repository,
    get_match_repository,
    get_participant_repository,
    get_user_repository,
)
from giftcircle.domain.protocols import (
    EventRepository,
    GroupRepository,
    MatchRepository,
    ParticipantRepository,
    UserRepository,
)

if TYPE_CHECKING:
    from giftcircle.application.commands.handlers.add_event_participants_handler import (
        AddEventParticipantsHandler,
    )
    from giftcircle.application.commands.handlers.create_event_handler import (
        CreateEventHandler,
    )
    from giftcircle.application.commands.handlers.draw_secret_friend_handler import (
        DrawSecretFriendHandler,
    )
    from giftcircle.application.queries.handlers.list_events_handler import (
        ListGroupEventsHandler,
        ListUserEventsHandler,
    )


# ============================================================================
# Event Command Handler Factories (Request-Scoped)
# ============================================================================


async def get_create_event_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    group_repo: GroupRepository = Depends(get_group_repository),
    user_repo: UserRepository = Depends(get_user_repository),
) -> "CreateEventHandler":
    from giftcircle.application.commands.handlers.create_event_handler import (
        CreateEventHandler,
    )

    return CreateEventHandler(
        event_repo=event_repo, group_repo=group_repo, user_repo=user_repo
    )


async def get_add_event_participants_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    participant_repo: ParticipantRepository = Depends(get_participant_repository),
) -> "AddEventParticipantsHandler":
    from giftcircle.application.commands.handlers.add_event_participants_handler import (
        AddEventParticipantsHandler,
    )

    return AddEventParticipantsHandler(
        event_repo=event_repo,
        user_repo=user_repo,
        participant_repo=participant_repo,
    )


async def get_draw_secret_friend_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    participant_repo: ParticipantRepository = Depends(get_participant_repository),
    match_repo: MatchRepository = Depends(get_match_repository),
) -> "DrawSecretFriendHandler":
    """Get DrawSecretFriend command handler (request-scoped).

    Combines the request's repositories with the app-scoped MatchEngine,
    CacheCoordinator and logger, and the configured minimum participant
    count.
    """
    from giftcircle.application.commands.handlers.draw_secret_friend_handler import (
        DrawSecretFriendHandler,
    )

    return DrawSecretFriendHandler(
        event_repo=event_repo,
        participant_repo=participant_repo,
        match_repo=match_repo,
        match_engine=get_match_engine(),
        coordinator=get_cache_coordinator(),
        cache_keys=get_cache_keys(),
        logger=get_logger(),
        min_participants=settings.draw_min_participants,
    )


# ============================================================================
# Event Query Handler Factories (Request-Scoped)
# ============================================================================


async def get_list_user_events_handler(
    event_repo: EventRepository = Depends(get_event_repository),
) -> "ListUserEventsHandler":
    from giftcircle.application.queries.handlers.list_events_handler import (
        ListUserEventsHandler,
    )

    return ListUserEventsHandler(event_repo=event_repo)


async def get_list_group_events_handler(
    event_repo: EventRepository = Depends(get_event_repository),
) -> "ListGroupEventsHandler":
    from giftcircle.application.queries.handlers.list_events_handler import (
        ListGroupEventsHandler,
    )

    return ListGroupEventsHandler(event_repo=event_repo)
