"""Integration tests for ContributionRepository aggregates.

Tests cover:
- sum_committed with and without an excluded contribution
- totals_by_supply for many supplies in one query
- list_by_supply joins the contributor's name
"""

import pytest
import pytest_asyncio
from uuid_extensions import uuid7

from giftcircle.domain.entities.contribution import Contribution
from giftcircle.domain.entities.supply import Supply
from giftcircle.domain.enums import EventType
from giftcircle.infrastructure.persistence.repositories.contribution_repository import (
    ContributionRepository,
)
from giftcircle.infrastructure.persistence.repositories.supply_repository import (
    SupplyRepository,
)
from tests.integration.conftest import create_event_in_db


@pytest_asyncio.fixture
async def pledged_supplies(test_database, two_users):
    """Soda with pledges of 3 (Ana) and 4 (Bruno); Chips with none.

    Returns:
        tuple: (soda_id, chips_id, {user_id: contribution_id} for soda).
    """
    ana_id, bruno_id = two_users
    async with test_database.get_session() as session:
        event_id = await create_event_in_db(
            session, ana_id, event_type=EventType.POTLUCK
        )
        soda = Supply(
            id=uuid7(),
            event_id=event_id,
            item_name="Soda",
            quantity_needed=10,
            unit="cans",
        )
        chips = Supply(
            id=uuid7(),
            event_id=event_id,
            item_name="Chips",
            quantity_needed=5,
            unit="bags",
        )
        supply_repo = SupplyRepository(session=session)
        await supply_repo.save(soda)
        await supply_repo.save(chips)

        contribution_repo = ContributionRepository(session=session)
        pledges = {}
        for user_id, quantity in [(ana_id, 3), (bruno_id, 4)]:
            contribution = Contribution(
                id=uuid7(),
                supply_id=soda.id,
                user_id=user_id,
                quantity_committed=quantity,
            )
            await contribution_repo.save(contribution)
            pledges[user_id] = contribution.id

    return soda.id, chips.id, pledges


@pytest.mark.integration
class TestSumCommitted:
    @pytest.mark.asyncio
    async def test_sums_every_pledge(self, test_database, pledged_supplies):
        soda_id, _, _ = pledged_supplies

        async with test_database.get_session() as session:
            total = await ContributionRepository(session=session).sum_committed(soda_id)

        assert total == 7

    @pytest.mark.asyncio
    async def test_excluded_pledge_is_left_out(
        self, test_database, two_users, pledged_supplies
    ):
        # Arrange
        ana_id, _ = two_users
        soda_id, _, pledges = pledged_supplies

        # Act
        async with test_database.get_session() as session:
            total = await ContributionRepository(session=session).sum_committed(
                soda_id, exclude_id=pledges[ana_id]
            )

        # Assert
        assert total == 4

    @pytest.mark.asyncio
    async def test_supply_without_pledges_sums_to_zero(
        self, test_database, pledged_supplies
    ):
        _, chips_id, _ = pledged_supplies

        async with test_database.get_session() as session:
            total = await ContributionRepository(session=session).sum_committed(chips_id)

        assert total == 0


@pytest.mark.integration
class TestTotalsBySupply:
    @pytest.mark.asyncio
    async def test_supplies_without_pledges_are_absent(
        self, test_database, pledged_supplies
    ):
        soda_id, chips_id, _ = pledged_supplies

        async with test_database.get_session() as session:
            totals = await ContributionRepository(session=session).totals_by_supply(
                [soda_id, chips_id]
            )

        assert totals == {soda_id: 7}

    @pytest.mark.asyncio
    async def test_empty_input_returns_empty_mapping(self, test_database):
        async with test_database.get_session() as session:
            totals = await ContributionRepository(session=session).totals_by_supply([])

        assert totals == {}


@pytest.mark.integration
class TestListBySupply:
    @pytest.mark.asyncio
    async def test_lists_in_creation_order_with_names(
        self, test_database, pledged_supplies
    ):
        soda_id, _, _ = pledged_supplies

        async with test_database.get_session() as session:
            contributions = await ContributionRepository(
                session=session
            ).list_by_supply(soda_id)

        assert [(c.user_name, c.quantity_committed) for c in contributions] == [
            ("Ana", 3),
            ("Bruno", 4),
        ]
