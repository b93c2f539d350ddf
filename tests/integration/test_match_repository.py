"""Integration tests for MatchRepository.

Tests cover:
- exists_for_participants (giver or receiver side, scoped to the group)
- save_all rejects a batch that repeats a giver, writing nothing
- find_receiver before and after a draw
"""

import pytest
import pytest_asyncio
from uuid_extensions import uuid7

from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import ConflictError
from giftcircle.core.result import Failure, Success
from giftcircle.domain.entities.match import Match
from giftcircle.infrastructure.persistence.repositories.match_repository import (
    MatchRepository,
)
from tests.integration.conftest import create_group_in_db, create_user_in_db


def create_test_match(group_id, giver_id, receiver_id) -> Match:
    return Match(
        id=uuid7(), group_id=group_id, giver_id=giver_id, receiver_id=receiver_id
    )


@pytest_asyncio.fixture
async def family(test_database):
    """A group and three members, returned as (group_id, [ana, bruno, carla])."""
    async with test_database.get_session() as session:
        members = [
            await create_user_in_db(session, name=name)
            for name in ("Ana", "Bruno", "Carla")
        ]
        group_id = await create_group_in_db(session, owner_id=members[0])
    return group_id, members


@pytest.mark.integration
class TestExistsForParticipants:
    @pytest.mark.asyncio
    async def test_false_before_any_draw(self, test_database, family):
        group_id, members = family

        async with test_database.get_session() as session:
            exists = await MatchRepository(session=session).exists_for_participants(
                group_id, members
            )

        assert exists is False

    @pytest.mark.asyncio
    async def test_true_when_user_is_only_a_receiver(self, test_database, family):
        # Arrange
        group_id, (ana, bruno, carla) = family
        async with test_database.get_session() as session:
            await MatchRepository(session=session).save_all(
                [create_test_match(group_id, ana, bruno)]
            )

        # Act
        async with test_database.get_session() as session:
            repo = MatchRepository(session=session)
            bruno_matched = await repo.exists_for_participants(group_id, [bruno])
            carla_matched = await repo.exists_for_participants(group_id, [carla])

        # Assert
        assert bruno_matched is True
        assert carla_matched is False

    @pytest.mark.asyncio
    async def test_matches_in_another_group_do_not_count(self, test_database, family):
        # Arrange
        group_id, (ana, bruno, _) = family
        async with test_database.get_session() as session:
            other_group_id = await create_group_in_db(session, ana, name="Work")
            await MatchRepository(session=session).save_all(
                [create_test_match(other_group_id, ana, bruno)]
            )

        # Act
        async with test_database.get_session() as session:
            exists = await MatchRepository(session=session).exists_for_participants(
                group_id, [ana, bruno]
            )

        # Assert
        assert exists is False

    @pytest.mark.asyncio
    async def test_empty_user_list_is_false(self, test_database, family):
        group_id, _ = family

        async with test_database.get_session() as session:
            exists = await MatchRepository(session=session).exists_for_participants(
                group_id, []
            )

        assert exists is False


@pytest.mark.integration
class TestSaveAll:
    @pytest.mark.asyncio
    async def test_saves_whole_draw(self, test_database, family):
        # Arrange
        group_id, (ana, bruno, carla) = family
        draw = [
            create_test_match(group_id, ana, bruno),
            create_test_match(group_id, bruno, carla),
            create_test_match(group_id, carla, ana),
        ]

        # Act
        async with test_database.get_session() as session:
            result = await MatchRepository(session=session).save_all(draw)

        # Assert
        assert isinstance(result, Success)
        async with test_database.get_session() as session:
            receiver = await MatchRepository(session=session).find_receiver(
                [group_id], carla
            )
        assert receiver is not None
        assert receiver.id == ana
        assert receiver.name == "Ana"

    @pytest.mark.asyncio
    async def test_repeated_giver_returns_conflict_and_writes_nothing(
        self, test_database, family
    ):
        # Arrange
        group_id, (ana, bruno, carla) = family
        async with test_database.get_session() as session:
            await MatchRepository(session=session).save_all(
                [create_test_match(group_id, ana, bruno)]
            )

        # Act
        async with test_database.get_session() as session:
            result = await MatchRepository(session=session).save_all(
                [
                    create_test_match(group_id, bruno, carla),
                    create_test_match(group_id, ana, carla),
                ]
            )

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.RESOURCE_CONFLICT
        assert result.error.conflicting_field == "giver_id"
        async with test_database.get_session() as session:
            repo = MatchRepository(session=session)
            assert await repo.find_receiver([group_id], bruno) is None
            ana_receiver = await repo.find_receiver([group_id], ana)
        assert ana_receiver is not None
        assert ana_receiver.id == bruno


@pytest.mark.integration
class TestFindReceiver:
    @pytest.mark.asyncio
    async def test_none_before_draw(self, test_database, family):
        group_id, (ana, _, _) = family

        async with test_database.get_session() as session:
            receiver = await MatchRepository(session=session).find_receiver(
                [group_id], ana
            )

        assert receiver is None

    @pytest.mark.asyncio
    async def test_no_groups_is_none(self, test_database, family):
        _, (ana, _, _) = family

        async with test_database.get_session() as session:
            receiver = await MatchRepository(session=session).find_receiver([], ana)

        assert receiver is None
