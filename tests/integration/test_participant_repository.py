"""Integration tests for ParticipantRepository.

Tests cover:
- add_batch appends registrations
- add_batch(replace_existing=True) swaps the whole list
- exists
"""

import pytest

from giftcircle.domain.enums import EventType
from giftcircle.infrastructure.persistence.repositories.participant_repository import (
    ParticipantRepository,
)
from tests.integration.conftest import create_event_in_db, create_user_in_db


@pytest.mark.integration
class TestAddBatch:
    @pytest.mark.asyncio
    async def test_registers_users_in_order(self, test_database, two_users):
        # Arrange
        ana_id, bruno_id = two_users
        async with test_database.get_session() as session:
            event_id = await create_event_in_db(session, ana_id)

        # Act
        async with test_database.get_session() as session:
            await ParticipantRepository(session=session).add_batch(
                event_id, [ana_id, bruno_id]
            )

        # Assert
        async with test_database.get_session() as session:
            participants = await ParticipantRepository(session=session).list_by_event(
                event_id
            )
        assert {p.user_id for p in participants} == {ana_id, bruno_id}
        assert {p.user_name for p in participants} == {"Ana", "Bruno"}

    @pytest.mark.asyncio
    async def test_replace_existing_swaps_the_list(self, test_database, two_users):
        # Arrange
        ana_id, bruno_id = two_users
        async with test_database.get_session() as session:
            carla_id = await create_user_in_db(session, name="Carla")
            event_id = await create_event_in_db(
                session, ana_id, event_type=EventType.SECRET_FRIEND
            )
            await ParticipantRepository(session=session).add_batch(
                event_id, [ana_id, bruno_id]
            )

        # Act
        async with test_database.get_session() as session:
            await ParticipantRepository(session=session).add_batch(
                event_id, [ana_id, carla_id], replace_existing=True
            )

        # Assert
        async with test_database.get_session() as session:
            repo = ParticipantRepository(session=session)
            participants = await repo.list_by_event(event_id)
            bruno_registered = await repo.exists(event_id, bruno_id)
        assert sorted(p.user_id for p in participants) == sorted([ana_id, carla_id])
        assert bruno_registered is False

    @pytest.mark.asyncio
    async def test_replace_leaves_other_events_alone(self, test_database, two_users):
        # Arrange
        ana_id, bruno_id = two_users
        async with test_database.get_session() as session:
            first_event = await create_event_in_db(session, ana_id, title="Dinner")
            second_event = await create_event_in_db(session, ana_id, title="Picnic")
            repo = ParticipantRepository(session=session)
            await repo.add_batch(first_event, [ana_id, bruno_id])
            await repo.add_batch(second_event, [bruno_id])

        # Act
        async with test_database.get_session() as session:
            await ParticipantRepository(session=session).add_batch(
                first_event, [ana_id], replace_existing=True
            )

        # Assert
        async with test_database.get_session() as session:
            assert await ParticipantRepository(session=session).exists(
                second_event, bruno_id
            )
