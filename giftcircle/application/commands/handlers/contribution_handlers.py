"""Contribution command handlers.

Handlers:
    CreateContributionHandler - pledge a quantity toward a supply
    UpdateContributionHandler - change a pledge (contributor only)
    DeleteContributionHandler - withdraw a pledge (contributor only)

Overcommit threshold:
    The total pledged toward a supply may reach floor(needed * 1.2). A write
    that lands above `needed` but within the cap succeeds with a warning; one
    above the cap fails with a ValidationError.

    The read-validate-write sequence runs under a row lock on the supply
    (SELECT ... FOR UPDATE), so two concurrent pledges cannot jointly
    exceed the cap. The lock is released when the contribution commits, or
    when the request's session ends on a failure path.
"""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from giftcircle.application.commands.handlers.supply_handlers import (
    event_not_found,
    supply_not_found,
)
from giftcircle.application.commands.supply_commands import (
    CreateContribution,
    DeleteContribution,
    UpdateContribution,
)
from giftcircle.application.dtos import ContributionResult
from giftcircle.application.errors import persistence_failure
from giftcircle.application.services.cache_coordinator import CacheCoordinator
from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import DomainError, NotFoundError
from giftcircle.core.result import Failure, Result, Success
from giftcircle.domain.entities import Contribution
from giftcircle.domain.policies import can_contribute, can_modify_contribution
from giftcircle.domain.protocols.contribution_repository import (
    ContributionRepository,
)
from giftcircle.domain.protocols.event_repository import EventRepository
from giftcircle.domain.protocols.participant_repository import (
    ParticipantRepository,
)
from giftcircle.domain.protocols.supply_repository import SupplyRepository
from giftcircle.domain.services.supply_ledger import (
    check_commitment,
    validate_quantity,
)
from giftcircle.infrastructure.cache.cache_keys import CacheKeys


def _contribution_not_found(contribution_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.CONTRIBUTION_NOT_FOUND,
        message="Contribution not found",
        resource_type="Contribution",
        resource_id=str(contribution_id),
    )


class _ContributionLedger:
    """Dependencies shared by the contribution handlers."""

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

    async def _invalidate(self, event_id: UUID) -> None:
        await self._coordinator.invalidate(
            self._cache_keys.event_supplies(event_id), event_id=event_id
        )


class CreateContributionHandler(_ContributionLedger):
    """Handler for CreateContribution command.

    Dependencies (injected via constructor):
        - SupplyRepository: Supply lookup under row lock
        - ContributionRepository: Totals and persistence
        - EventRepository: Owning event (for the owner rule)
        - ParticipantRepository: Participant check
        - CacheCoordinator: Supplies aggregate invalidation
        - CacheKeys: Cache key construction
    """

    def __init__(
        self,
        supply_repo: SupplyRepository,
        contribution_repo: ContributionRepository,
        event_repo: EventRepository,
        participant_repo: ParticipantRepository,
        coordinator: CacheCoordinator,
        cache_keys: CacheKeys,
    ) -> None:
        super().__init__(supply_repo, contribution_repo, coordinator, cache_keys)
        self._event_repo = event_repo
        self._participant_repo = participant_repo

    async def handle(
        self, cmd: CreateContribution
    ) -> Result[ContributionResult, DomainError]:
        """Handle CreateContribution command.

        Returns:
            Success(ContributionResult): Created pledge, with a warning when
                the supply is now overcommitted within the cap.
            Failure(DomainError): Invalid quantity, supply or event not
                found, caller not owner/participant, cap exceeded, or
                storage failure.
        """
        quantity = validate_quantity(cmd.quantity_committed, "quantity_committed")
        if isinstance(quantity, Failure):
            return quantity

        supply = await self._supply_repo.find_by_id(cmd.supply_id, for_update=True)
        if supply is None:
            return Failure(error=supply_not_found(cmd.supply_id))

        event = await self._event_repo.find_by_id(supply.event_id)
        if event is None:
            return Failure(error=event_not_found(supply.event_id))

        is_participant = event.is_owned_by(cmd.user_id) or (
            await self._participant_repo.exists(event.id, cmd.user_id)
        )
        decision = can_contribute(event, cmd.user_id, is_participant=is_participant)
        if not decision.allowed:
            return Failure(error=decision.to_error())

        current_total = await self._contribution_repo.sum_committed(supply.id)
        match check_commitment(
            quantity_needed=supply.quantity_needed,
            current_total=current_total,
            requested=cmd.quantity_committed,
            unit=supply.unit,
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=commitment):
                pass

        contribution = Contribution(
            id=uuid7(),
            supply_id=supply.id,
            user_id=cmd.user_id,
            quantity_committed=cmd.quantity_committed,
            notes=cmd.notes,
        )

        try:
            await self._contribution_repo.save(contribution)
        except Exception as e:
            return Failure(error=persistence_failure("save contribution", e))

        await self._invalidate(supply.event_id)
        return Success(
            value=ContributionResult.from_entity(contribution, commitment.warning)
        )


class UpdateContributionHandler(_ContributionLedger):
    """Handler for UpdateContribution command.

    A quantity change is re-checked against the cap with the edited
    contribution left out of the current total.
    """

    async def handle(
        self, cmd: UpdateContribution
    ) -> Result[ContributionResult, DomainError]:
        if cmd.quantity_committed is not None:
            quantity = validate_quantity(cmd.quantity_committed, "quantity_committed")
            if isinstance(quantity, Failure):
                return quantity

        contribution = await self._contribution_repo.find_by_id(cmd.contribution_id)
        if contribution is None:
            return Failure(error=_contribution_not_found(cmd.contribution_id))

        decision = can_modify_contribution(contribution, cmd.user_id)
        if not decision.allowed:
            return Failure(error=decision.to_error())

        supply = await self._supply_repo.find_by_id(
            contribution.supply_id,
            for_update=cmd.quantity_committed is not None,
        )
        if supply is None:
            return Failure(error=supply_not_found(contribution.supply_id))

        warning: str | None = None
        updated = contribution
        if cmd.quantity_committed is not None:
            current_total = await self._contribution_repo.sum_committed(
                supply.id, exclude_id=contribution.id
            )
            match check_commitment(
                quantity_needed=supply.quantity_needed,
                current_total=current_total,
                requested=cmd.quantity_committed,
                unit=supply.unit,
            ):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=commitment):
                    warning = commitment.warning
            updated = replace(updated, quantity_committed=cmd.quantity_committed)

        if cmd.notes is not None:
            updated = replace(updated, notes=cmd.notes)
        updated = replace(updated, updated_at=datetime.now(UTC))

        try:
            await self._contribution_repo.save(updated)
        except Exception as e:
            return Failure(error=persistence_failure("update contribution", e))

        await self._invalidate(supply.event_id)
        return Success(value=ContributionResult.from_entity(updated, warning))


class DeleteContributionHandler(_ContributionLedger):
    """Handler for DeleteContribution command."""

    async def handle(self, cmd: DeleteContribution) -> Result[None, DomainError]:
        contribution = await self._contribution_repo.find_by_id(cmd.contribution_id)
        if contribution is None:
            return Failure(error=_contribution_not_found(cmd.contribution_id))

        decision = can_modify_contribution(contribution, cmd.user_id)
        if not decision.allowed:
            return Failure(error=decision.to_error())

        supply = await self._supply_repo.find_by_id(contribution.supply_id)
        if supply is None:
            return Failure(error=supply_not_found(contribution.supply_id))

        try:
            await self._contribution_repo.delete(contribution.id)
        except Exception as e:
            return Failure(error=persistence_failure("delete contribution", e))

        await self._invalidate(supply.event_id)
        return Success(value=None)
