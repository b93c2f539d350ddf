"""Gift suggestion handler dependency factories.

Request-scoped handler instances for CreateGift and ListEventGifts. Both
share the app-scoped CacheCoordinator: the list is served cache-aside per
viewer and creation invalidates every viewer's entry of the affected events.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from giftcircle.core.container.infrastructure import (
    get_cache_coordinator,
    get_cache_keys,
    get_logger,
)
from giftcircle.core.container.repositories import (
    get_event_repository,
    get_gift_repository,
    get_match_repository,
    get_participant_repository,
    get_user_repository,
)
from giftcircle.domain.protocols import (
    EventRepository,
    GiftRepository,
    MatchRepository,
    ParticipantRepository,
    UserRepository,
)

if TYPE_CHECKING:
    from giftcircle.application.commands.handlers.create_gift_handler import (
        CreateGiftHandler,
    )
    from giftcircle.application.queries.handlers.list_event_gifts_handler import (
        ListEventGiftsHandler,
    )


async def get_create_gift_handler(
    gift_repo: GiftRepository = Depends(get_gift_repository),
    event_repo: EventRepository = Depends(get_event_repository),
    participant_repo: ParticipantRepository = Depends(get_participant_repository),
    user_repo: UserRepository = Depends(get_user_repository),
) -> "CreateGiftHandler":
    from giftcircle.application.commands.handlers.create_gift_handler import (
        CreateGiftHandler,
    )

    return CreateGiftHandler(
        gift_repo=gift_repo,
        event_repo=event_repo,
        participant_repo=participant_repo,
        user_repo=user_repo,
        coordinator=get_cache_coordinator(),
        cache_keys=get_cache_keys(),
        logger=get_logger(),
    )


async def get_list_event_gifts_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    match_repo: MatchRepository = Depends(get_match_repository),
    gift_repo: GiftRepository = Depends(get_gift_repository),
) -> "ListEventGiftsHandler":
    """Get ListEventGifts query handler (request-scoped).

    Repositories are only hit on a cache miss for the requesting user.
    """
    from giftcircle.application.queries.handlers.list_event_gifts_handler import (
        ListEventGiftsHandler,
    )

    return ListEventGiftsHandler(
        event_repo=event_repo,
        match_repo=match_repo,
        gift_repo=gift_repo,
        coordinator=get_cache_coordinator(),
        cache_keys=get_cache_keys(),
    )
