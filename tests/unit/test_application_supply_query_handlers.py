"""Unit tests for supply query handlers.

GetEventSuppliesHandler is exercised against a mocked CacheCoordinator so
hit, miss and malformed-entry paths can each be forced.
"""

from datetime import UTC, datetime
from typing import Any, cast
from unittest.mock import AsyncMock
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from giftcircle.application.queries.handlers.get_event_supplies_handler import (
    GetEventSuppliesHandler,
)
from giftcircle.application.queries.handlers.list_supply_contributions_handler import (
    ListSupplyContributionsHandler,
)
from giftcircle.application.queries.supply_queries import (
    GetEventSupplies,
    ListSupplyContributions,
)
from giftcircle.application.services.cache_coordinator import CacheCoordinator
from giftcircle.core.enums import ErrorCode
from giftcircle.core.result import Failure, Success
from giftcircle.domain.entities import Contribution, Supply
from giftcircle.domain.protocols.contribution_repository import (
    ContributionRepository,
)
from giftcircle.domain.protocols.supply_repository import SupplyRepository
from giftcircle.infrastructure.cache.cache_keys import CacheKeys

CREATED = datetime(2026, 10, 1, 12, 0, tzinfo=UTC)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def event_id() -> UUID:
    return cast(UUID, uuid7())


@pytest.fixture
def supplies(event_id) -> list[Supply]:
    return [
        Supply(
            id=cast(UUID, uuid7()),
            event_id=event_id,
            item_name="Soda",
            quantity_needed=10,
            unit="cans",
            created_at=CREATED,
            updated_at=CREATED,
        ),
        Supply(
            id=cast(UUID, uuid7()),
            event_id=event_id,
            item_name="Cake",
            quantity_needed=3,
            unit="units",
            image_url="https://example.com/cake.png",
            created_at=CREATED,
            updated_at=CREATED,
        ),
    ]


@pytest.fixture
def supply_repo(supplies):
    repo = AsyncMock(spec=SupplyRepository)
    repo.find_by_event.return_value = supplies
    repo.find_by_id.return_value = supplies[0]
    return repo


@pytest.fixture
def contribution_repo(supplies):
    repo = AsyncMock(spec=ContributionRepository)
    repo.totals_by_supply.return_value = {supplies[0].id: 12, supplies[1].id: 1}
    return repo


@pytest.fixture
def coordinator():
    coordinator = AsyncMock(spec=CacheCoordinator)

    async def pass_through(key: str, loader: Any, **kwargs: Any):
        return await loader()

    coordinator.get_or_load.side_effect = pass_through
    return coordinator


@pytest.fixture
def handler(supply_repo, contribution_repo, coordinator):
    return GetEventSuppliesHandler(
        supply_repo=supply_repo,
        contribution_repo=contribution_repo,
        coordinator=coordinator,
        cache_keys=CacheKeys(prefix="giftcircle"),
    )


# =============================================================================
# GetEventSuppliesHandler
# =============================================================================


@pytest.mark.unit
class TestGetEventSupplies:
    """Test the supplies-with-progress read."""

    async def test_miss_computes_progress(
        self, handler, coordinator, event_id, supplies
    ) -> None:
        # Act
        result = await handler.handle(GetEventSupplies(event_id=event_id))

        # Assert
        assert isinstance(result, Success)
        soda, cake = result.value
        assert soda.quantity_committed == 12
        assert soda.fulfillment_percentage == 120
        assert cake.quantity_committed == 1
        assert cake.fulfillment_percentage == 33
        assert cake.image_url == "https://example.com/cake.png"
        assert soda.created_at == CREATED
        assert coordinator.get_or_load.call_args.args[0] == (
            f"giftcircle:event:supplies:{event_id}"
        )

    async def test_supply_without_contributions_is_zero(
        self, handler, contribution_repo, event_id
    ) -> None:
        contribution_repo.totals_by_supply.return_value = {}

        result = await handler.handle(GetEventSupplies(event_id=event_id))

        assert isinstance(result, Success)
        assert [s.quantity_committed for s in result.value] == [0, 0]
        assert [s.fulfillment_percentage for s in result.value] == [0, 0]

    async def test_unknown_event_is_empty(
        self, handler, supply_repo, contribution_repo, event_id
    ) -> None:
        supply_repo.find_by_event.return_value = []
        contribution_repo.totals_by_supply.return_value = {}

        result = await handler.handle(GetEventSupplies(event_id=event_id))

        assert result == Success(value=[])

    async def test_hit_is_served_without_repositories(
        self, handler, coordinator, supply_repo, supplies, event_id
    ) -> None:
        cached = {
            "id": str(supplies[0].id),
            "event_id": str(event_id),
            "item_name": "Soda",
            "description": None,
            "quantity_needed": 10,
            "unit": "cans",
            "image_url": None,
            "url": None,
            "quantity_committed": 5,
            "fulfillment_percentage": 50,
            "created_at": CREATED.isoformat(),
            "updated_at": CREATED.isoformat(),
        }
        coordinator.get_or_load.side_effect = None
        coordinator.get_or_load.return_value = Success(value=[cached])

        result = await handler.handle(GetEventSupplies(event_id=event_id))

        assert isinstance(result, Success)
        assert result.value[0].id == supplies[0].id
        assert result.value[0].fulfillment_percentage == 50
        supply_repo.find_by_event.assert_not_called()

    async def test_malformed_entry_reads_through(
        self, handler, coordinator, supply_repo, event_id
    ) -> None:
        coordinator.get_or_load.side_effect = None
        coordinator.get_or_load.return_value = Success(value=[{"id": "not-a-uuid"}])

        result = await handler.handle(GetEventSupplies(event_id=event_id))

        assert isinstance(result, Success)
        assert [s.item_name for s in result.value] == ["Soda", "Cake"]
        supply_repo.find_by_event.assert_awaited_once_with(event_id)

    async def test_malformed_entry_is_replaced_in_cache(
        self, handler, coordinator, event_id, supplies
    ) -> None:
        coordinator.get_or_load.side_effect = None
        coordinator.get_or_load.return_value = Success(value=[{"id": "not-a-uuid"}])

        await handler.handle(GetEventSupplies(event_id=event_id))

        coordinator.store.assert_awaited_once()
        key, stored = coordinator.store.call_args.args
        assert key == f"giftcircle:event:supplies:{event_id}"
        assert [item["id"] for item in stored] == [str(s.id) for s in supplies]

    async def test_decodable_entry_is_not_rewritten(
        self, handler, coordinator, supplies, event_id
    ) -> None:
        await handler.handle(GetEventSupplies(event_id=event_id))

        coordinator.store.assert_not_called()


# =============================================================================
# ListSupplyContributionsHandler
# =============================================================================


@pytest.mark.unit
class TestListSupplyContributions:
    """Test listing pledges of a supply."""

    async def test_lists_contributions(
        self, supply_repo, contribution_repo, supplies
    ) -> None:
        contribution = Contribution(
            id=cast(UUID, uuid7()),
            supply_id=supplies[0].id,
            user_id=cast(UUID, uuid7()),
            quantity_committed=2,
            user_name="Bruno",
        )
        contribution_repo.list_by_supply.return_value = [contribution]
        handler = ListSupplyContributionsHandler(
            supply_repo=supply_repo, contribution_repo=contribution_repo
        )

        result = await handler.handle(ListSupplyContributions(supply_id=supplies[0].id))

        assert isinstance(result, Success)
        assert [c.user_name for c in result.value] == ["Bruno"]
        assert result.value[0].warning is None

    async def test_unknown_supply(self, supply_repo, contribution_repo) -> None:
        supply_repo.find_by_id.return_value = None
        handler = ListSupplyContributionsHandler(
            supply_repo=supply_repo, contribution_repo=contribution_repo
        )

        result = await handler.handle(
            ListSupplyContributions(supply_id=cast(UUID, uuid7()))
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SUPPLY_NOT_FOUND
        contribution_repo.list_by_supply.assert_not_called()
