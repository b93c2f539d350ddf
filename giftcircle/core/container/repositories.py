"""Repository dependency factories.

Request-scoped repository instances. Every repository in a request shares
the request's session, so a supply row lock taken by one repository is
released by another repository's commit.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from giftcircle.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from giftcircle.infrastructure.persistence.repositories import (
        ContributionRepository,
        EventRepository,
        GiftRepository,
        GroupRepository,
        MatchRepository,
        ParticipantRepository,
        SupplyRepository,
        UserRepository,
    )


async def get_event_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "EventRepository":
    from giftcircle.infrastructure.persistence.repositories import EventRepository

    return EventRepository(session=session)


async def get_gift_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "GiftRepository":
    from giftcircle.infrastructure.persistence.repositories import GiftRepository

    return GiftRepository(session=session)


async def get_group_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "GroupRepository":
    from giftcircle.infrastructure.persistence.repositories import GroupRepository

    return GroupRepository(session=session)


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    from giftcircle.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_participant_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ParticipantRepository":
    from giftcircle.infrastructure.persistence.repositories import (
        ParticipantRepository,
    )

    return ParticipantRepository(session=session)


async def get_match_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "MatchRepository":
    from giftcircle.infrastructure.persistence.repositories import MatchRepository

    return MatchRepository(session=session)


async def get_supply_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "SupplyRepository":
    from giftcircle.infrastructure.persistence.repositories import SupplyRepository

    return SupplyRepository(session=session)


async def get_contribution_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ContributionRepository":
    from giftcircle.infrastructure.persistence.repositories import (
        ContributionRepository,
    )

    return ContributionRepository(session=session)
