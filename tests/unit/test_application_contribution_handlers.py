"""Unit tests for contribution command handlers.

Tests cover:
- Overcommit warning and rejection on create and update
- Row lock requested on the supply for cap checks
- Edited contribution excluded from the running total
- Contributor-only edits and removals
- Cache invalidation after successful writes
"""

from datetime import UTC, datetime
from typing import cast
from unittest.mock import AsyncMock
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from giftcircle.application.commands.handlers.contribution_handlers import (
    CreateContributionHandler,
    DeleteContributionHandler,
    UpdateContributionHandler,
)
from giftcircle.application.commands.supply_commands import (
    CreateContribution,
    DeleteContribution,
    UpdateContribution,
)
from giftcircle.application.services.cache_coordinator import CacheCoordinator
from giftcircle.core.enums import ErrorCode
from giftcircle.core.result import Failure, Success
from giftcircle.domain.entities import Contribution, Event, Supply
from giftcircle.domain.enums import EventType
from giftcircle.domain.protocols.contribution_repository import (
    ContributionRepository,
)
from giftcircle.domain.protocols.event_repository import EventRepository
from giftcircle.domain.protocols.participant_repository import (
    ParticipantRepository,
)
from giftcircle.domain.protocols.supply_repository import SupplyRepository
from giftcircle.infrastructure.cache.cache_keys import CacheKeys

CACHE_KEYS = CacheKeys(prefix="giftcircle")


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def owner_id() -> UUID:
    return cast(UUID, uuid7())


@pytest.fixture
def participant_id() -> UUID:
    return cast(UUID, uuid7())


@pytest.fixture
def event(owner_id) -> Event:
    return Event(
        id=cast(UUID, uuid7()),
        title="Baby shower",
        event_date=datetime(2026, 11, 8, tzinfo=UTC),
        owner_id=owner_id,
        event_type=EventType.REGISTRY,
    )


@pytest.fixture
def supply(event) -> Supply:
    return Supply(
        id=cast(UUID, uuid7()),
        event_id=event.id,
        item_name="Diapers",
        quantity_needed=10,
        unit="packs",
    )


@pytest.fixture
def contribution(supply, participant_id) -> Contribution:
    return Contribution(
        id=cast(UUID, uuid7()),
        supply_id=supply.id,
        user_id=participant_id,
        quantity_committed=4,
        notes="Size 2",
    )


@pytest.fixture
def supply_repo(supply):
    repo = AsyncMock(spec=SupplyRepository)
    repo.find_by_id.return_value = supply
    return repo


@pytest.fixture
def contribution_repo(contribution):
    repo = AsyncMock(spec=ContributionRepository)
    repo.find_by_id.return_value = contribution
    repo.sum_committed.return_value = 0
    return repo


@pytest.fixture
def event_repo(event):
    repo = AsyncMock(spec=EventRepository)
    repo.find_by_id.return_value = event
    return repo


@pytest.fixture
def participant_repo():
    repo = AsyncMock(spec=ParticipantRepository)
    repo.exists.return_value = True
    return repo


@pytest.fixture
def coordinator():
    return AsyncMock(spec=CacheCoordinator)


@pytest.fixture
def create_handler(
    supply_repo, contribution_repo, event_repo, participant_repo, coordinator
):
    return CreateContributionHandler(
        supply_repo=supply_repo,
        contribution_repo=contribution_repo,
        event_repo=event_repo,
        participant_repo=participant_repo,
        coordinator=coordinator,
        cache_keys=CACHE_KEYS,
    )


@pytest.fixture
def update_handler(supply_repo, contribution_repo, coordinator):
    return UpdateContributionHandler(
        supply_repo=supply_repo,
        contribution_repo=contribution_repo,
        coordinator=coordinator,
        cache_keys=CACHE_KEYS,
    )


@pytest.fixture
def delete_handler(supply_repo, contribution_repo, coordinator):
    return DeleteContributionHandler(
        supply_repo=supply_repo,
        contribution_repo=contribution_repo,
        coordinator=coordinator,
        cache_keys=CACHE_KEYS,
    )


# =============================================================================
# CreateContributionHandler
# =============================================================================


@pytest.mark.unit
class TestCreateContribution:
    """Test pledging toward a supply."""

    async def test_pledge_within_need(
        self,
        create_handler,
        supply,
        participant_id,
        supply_repo,
        contribution_repo,
        coordinator,
    ) -> None:
        # Act
        result = await create_handler.handle(
            CreateContribution(
                supply_id=supply.id, user_id=participant_id, quantity_committed=6
            )
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.quantity_committed == 6
        assert result.value.warning is None
        supply_repo.find_by_id.assert_awaited_once_with(supply.id, for_update=True)
        contribution_repo.save.assert_awaited_once()
        coordinator.invalidate.assert_awaited_once_with(
            CACHE_KEYS.event_supplies(supply.event_id), event_id=supply.event_id
        )

    async def test_pledge_up_to_cap_warns(
        self, create_handler, supply, participant_id, contribution_repo
    ) -> None:
        contribution_repo.sum_committed.return_value = 9

        result = await create_handler.handle(
            CreateContribution(
                supply_id=supply.id, user_id=participant_id, quantity_committed=3
            )
        )

        assert isinstance(result, Success)
        assert result.value.warning == (
            "Warning: the contribution exceeds the quantity needed. "
            "Total committed: 12 of 10 packs needed."
        )

    async def test_pledge_above_cap_is_rejected(
        self, create_handler, supply, participant_id, contribution_repo, coordinator
    ) -> None:
        contribution_repo.sum_committed.return_value = 9

        result = await create_handler.handle(
            CreateContribution(
                supply_id=supply.id, user_id=participant_id, quantity_committed=4
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CONTRIBUTION_LIMIT_EXCEEDED
        contribution_repo.save.assert_not_called()
        coordinator.invalidate.assert_not_called()

    async def test_non_participant_is_denied(
        self, create_handler, supply, participant_repo
    ) -> None:
        participant_repo.exists.return_value = False

        result = await create_handler.handle(
            CreateContribution(
                supply_id=supply.id, user_id=cast(UUID, uuid7()), quantity_committed=1
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PERMISSION_DENIED

    async def test_owner_needs_no_registration(
        self, create_handler, supply, owner_id, participant_repo
    ) -> None:
        result = await create_handler.handle(
            CreateContribution(supply_id=supply.id, user_id=owner_id, quantity_committed=1)
        )

        assert isinstance(result, Success)
        participant_repo.exists.assert_not_called()

    async def test_zero_quantity_is_rejected_before_lookup(
        self, create_handler, supply, participant_id, supply_repo
    ) -> None:
        result = await create_handler.handle(
            CreateContribution(
                supply_id=supply.id, user_id=participant_id, quantity_committed=0
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_QUANTITY
        supply_repo.find_by_id.assert_not_called()

    async def test_unknown_supply(
        self, create_handler, participant_id, supply_repo
    ) -> None:
        supply_repo.find_by_id.return_value = None

        result = await create_handler.handle(
            CreateContribution(
                supply_id=cast(UUID, uuid7()),
                user_id=participant_id,
                quantity_committed=1,
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SUPPLY_NOT_FOUND

    async def test_storage_failure_does_not_invalidate(
        self, create_handler, supply, participant_id, contribution_repo, coordinator
    ) -> None:
        contribution_repo.save.side_effect = RuntimeError("deadlock")

        result = await create_handler.handle(
            CreateContribution(
                supply_id=supply.id, user_id=participant_id, quantity_committed=1
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PERSISTENCE_FAILED
        coordinator.invalidate.assert_not_called()


# =============================================================================
# UpdateContributionHandler
# =============================================================================


@pytest.mark.unit
class TestUpdateContribution:
    """Test editing a pledge."""

    async def test_edit_excludes_own_previous_quantity(
        self,
        update_handler,
        contribution,
        participant_id,
        supply_repo,
        contribution_repo,
    ) -> None:
        """Others pledged 6; raising this pledge from 4 to 6 totals 12."""
        # Arrange
        contribution_repo.sum_committed.return_value = 6

        # Act
        result = await update_handler.handle(
            UpdateContribution(
                contribution_id=contribution.id,
                user_id=participant_id,
                quantity_committed=6,
            )
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.quantity_committed == 6
        assert result.value.notes == "Size 2"
        assert "Total committed: 12 of 10" in result.value.warning
        contribution_repo.sum_committed.assert_awaited_once_with(
            contribution.supply_id, exclude_id=contribution.id
        )
        supply_repo.find_by_id.assert_awaited_once_with(
            contribution.supply_id, for_update=True
        )

    async def test_edit_above_cap_is_rejected(
        self, update_handler, contribution, participant_id, contribution_repo
    ) -> None:
        contribution_repo.sum_committed.return_value = 6

        result = await update_handler.handle(
            UpdateContribution(
                contribution_id=contribution.id,
                user_id=participant_id,
                quantity_committed=7,
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CONTRIBUTION_LIMIT_EXCEEDED
        contribution_repo.save.assert_not_called()

    async def test_notes_only_edit_skips_cap_check(
        self,
        update_handler,
        contribution,
        participant_id,
        supply_repo,
        contribution_repo,
        coordinator,
    ) -> None:
        result = await update_handler.handle(
            UpdateContribution(
                contribution_id=contribution.id,
                user_id=participant_id,
                notes="Size 3",
            )
        )

        assert isinstance(result, Success)
        assert result.value.notes == "Size 3"
        assert result.value.quantity_committed == 4
        contribution_repo.sum_committed.assert_not_called()
        supply_repo.find_by_id.assert_awaited_once_with(
            contribution.supply_id, for_update=False
        )
        coordinator.invalidate.assert_awaited_once()

    async def test_only_contributor_may_edit(
        self, update_handler, contribution, owner_id
    ) -> None:
        result = await update_handler.handle(
            UpdateContribution(
                contribution_id=contribution.id, user_id=owner_id, notes="x"
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PERMISSION_DENIED

    async def test_unknown_contribution(
        self, update_handler, participant_id, contribution_repo
    ) -> None:
        contribution_repo.find_by_id.return_value = None

        result = await update_handler.handle(
            UpdateContribution(
                contribution_id=cast(UUID, uuid7()), user_id=participant_id
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CONTRIBUTION_NOT_FOUND


# =============================================================================
# DeleteContributionHandler
# =============================================================================


@pytest.mark.unit
class TestDeleteContribution:
    """Test withdrawing a pledge."""

    async def test_contributor_withdraws(
        self,
        delete_handler,
        contribution,
        participant_id,
        supply,
        contribution_repo,
        coordinator,
    ) -> None:
        result = await delete_handler.handle(
            DeleteContribution(contribution_id=contribution.id, user_id=participant_id)
        )

        assert result == Success(value=None)
        contribution_repo.delete.assert_awaited_once_with(contribution.id)
        coordinator.invalidate.assert_awaited_once_with(
            CACHE_KEYS.event_supplies(supply.event_id), event_id=supply.event_id
        )

    async def test_event_owner_cannot_withdraw_someone_elses_pledge(
        self, delete_handler, contribution, owner_id, contribution_repo
    ) -> None:
        result = await delete_handler.handle(
            DeleteContribution(contribution_id=contribution.id, user_id=owner_id)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PERMISSION_DENIED
        contribution_repo.delete.assert_not_called()
