"""GetEventSupplies query handler.

Returns each supply of an event with its committed total and fulfillment
percentage. Served cache-aside through CacheCoordinator under
{prefix}:event:supplies:{event_id}; supply and contribution writes
invalidate that key.

An unknown event simply has no supplies.
"""

from typing import Any
from uuid import UUID

from giftcircle.application.dtos import SupplyProgressResult
from giftcircle.application.queries.supply_queries import GetEventSupplies
from giftcircle.application.services.cache_coordinator import CacheCoordinator
from giftcircle.core.errors import DomainError
from giftcircle.core.result import Failure, Result, Success
from giftcircle.domain.protocols.contribution_repository import (
    ContributionRepository,
)
from giftcircle.domain.protocols.supply_repository import SupplyRepository
from giftcircle.domain.services.supply_ledger import fulfillment_percentage
from giftcircle.infrastructure.cache.cache_keys import CacheKeys


class GetEventSuppliesHandler:
    """Handler for GetEventSupplies query.

    Dependencies (injected via constructor):
        - SupplyRepository: Supplies of the event
        - ContributionRepository: Committed totals per supply
        - CacheCoordinator: Cache-aside read path
        - CacheKeys: Cache key construction
    """

    def __init__(
        self,
        supply_repo: SupplyRepository,
        contribution_repo: ContributionRepository,
        coordinator: CacheCoordinator,
        cache_keys: CacheKeys,
    ) -> None:
        self._supply_repo = supply_repo
        self._contribution_repo = contribution_repo
        self._coordinator = coordinator
        self._cache_keys = cache_keys

    async def handle(
        self, query: GetEventSupplies
    ) -> Result[list[SupplyProgressResult], DomainError]:
        """Handle GetEventSupplies query.

        Returns:
            Success(list[SupplyProgressResult]): Supplies in creation order.
        """
        key = self._cache_keys.event_supplies(query.event_id)

        async def load() -> Result[list[dict[str, Any]], DomainError]:
            return Success(value=await self._load(query.event_id))

        match await self._coordinator.get_or_load(key, load):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=items):
                pass

        try:
            return Success(value=[SupplyProgressResult.from_cache(i) for i in items])
        except (KeyError, TypeError, ValueError):
            # Entry written by an incompatible version; replace it.
            fresh = await self._load(query.event_id)
            await self._coordinator.store(key, fresh)
            return Success(value=[SupplyProgressResult.from_cache(i) for i in fresh])

    async def _load(self, event_id: UUID) -> list[dict[str, Any]]:
        supplies = await self._supply_repo.find_by_event(event_id)
        totals = await self._contribution_repo.totals_by_supply(
            [supply.id for supply in supplies]
        )
        return [
            SupplyProgressResult(
                id=supply.id,
                event_id=supply.event_id,
                item_name=supply.item_name,
                description=supply.description,
                quantity_needed=supply.quantity_needed,
                unit=supply.unit,
                image_url=supply.image_url,
                url=supply.url,
                quantity_committed=totals.get(supply.id, 0),
                fulfillment_percentage=fulfillment_percentage(
                    totals.get(supply.id, 0), supply.quantity_needed
                ),
                created_at=supply.created_at,
                updated_at=supply.updated_at,
            ).to_cache()
            for supply in supplies
        ]
