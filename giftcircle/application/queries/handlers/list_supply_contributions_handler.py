"""ListSupplyContributions query handler."""

from giftcircle.application.dtos import ContributionResult
from giftcircle.application.queries.supply_queries import ListSupplyContributions
from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import DomainError, NotFoundError
from giftcircle.core.result import Failure, Result, Success
from giftcircle.domain.protocols.contribution_repository import (
    ContributionRepository,
)
from giftcircle.domain.protocols.supply_repository import SupplyRepository


class ListSupplyContributionsHandler:
    """Handler for ListSupplyContributions query (oldest pledge first)."""

    def __init__(
        self,
        supply_repo: SupplyRepository,
        contribution_repo: ContributionRepository,
    ) -> None:
        self._supply_repo = supply_repo
        self._contribution_repo = contribution_repo

    async def handle(
        self, query: ListSupplyContributions
    ) -> Result[list[ContributionResult], DomainError]:
        supply = await self._supply_repo.find_by_id(query.supply_id)
        if supply is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.SUPPLY_NOT_FOUND,
                    message="Supply not found",
                    resource_type="Supply",
                    resource_id=str(query.supply_id),
                )
            )

        contributions = await self._contribution_repo.list_by_supply(supply.id)
        return Success(
            value=[ContributionResult.from_entity(c) for c in contributions]
        )
