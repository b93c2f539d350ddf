"""Supply command handlers.

Handlers:
    CreateSupplyHandler - add an item to a registry or potluck event
    UpdateSupplyHandler - change an item (PATCH semantics)
    DeleteSupplyHandler - remove an item and its contributions

Only the event owner or an admin of one of the event's groups may manage
supplies. Every successful write invalidates the event's supplies aggregate
after the write has committed.
"""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from giftcircle.application.commands.supply_commands import (
    CreateSupply,
    DeleteSupply,
    UpdateSupply,
)
from giftcircle.application.dtos import SupplyResult
from giftcircle.application.errors import persistence_failure
from giftcircle.application.services.cache_coordinator import CacheCoordinator
from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import DomainError, NotFoundError, ValidationError
from giftcircle.core.result import Failure, Result, Success
from giftcircle.domain.entities import Event, Supply
from giftcircle.domain.policies import can_manage_supplies
from giftcircle.domain.protocols.event_repository import EventRepository
from giftcircle.domain.protocols.supply_repository import SupplyRepository
from giftcircle.domain.services.supply_ledger import validate_quantity
from giftcircle.infrastructure.cache.cache_keys import CacheKeys


def event_not_found(event_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.EVENT_NOT_FOUND,
        message="Event not found",
        resource_type="Event",
        resource_id=str(event_id),
    )


def supply_not_found(supply_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.SUPPLY_NOT_FOUND,
        message="Supply not found",
        resource_type="Supply",
        resource_id=str(supply_id),
    )


def _require_text(value: str, field: str) -> Result[str, ValidationError]:
    if not value or not value.strip():
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_INPUT,
                message=f"{field} cannot be empty",
                field=field,
            )
        )
    return Success(value=value.strip())


class _SupplyManagement:
    """Shared lookup and authorization for supply writes."""

    def __init__(
        self,
        event_repo: EventRepository,
        supply_repo: SupplyRepository,
        coordinator: CacheCoordinator,
        cache_keys: CacheKeys,
    ) -> None:
        self._event_repo = event_repo
        self._supply_repo = supply_repo
        self._coordinator = coordinator
        self._cache_keys = cache_keys

    async def _authorized_event(
        self, event_id: UUID, user_id: UUID
    ) -> Result[Event, DomainError]:
        event = await self._event_repo.find_by_id(event_id)
        if event is None:
            return Failure(error=event_not_found(event_id))

        decision = can_manage_supplies(event, user_id)
        if not decision.allowed:
            return Failure(error=decision.to_error())
        return Success(value=event)

    async def _authorized_supply(
        self, supply_id: UUID, user_id: UUID
    ) -> Result[Supply, DomainError]:
        supply = await self._supply_repo.find_by_id(supply_id)
        if supply is None:
            return Failure(error=supply_not_found(supply_id))

        match await self._authorized_event(supply.event_id, user_id):
            case Failure(error=error):
                return Failure(error=error)
            case _:
                return Success(value=supply)

    async def _invalidate(self, event_id: UUID) -> None:
        await self._coordinator.invalidate(
            self._cache_keys.event_supplies(event_id), event_id=event_id
        )


class CreateSupplyHandler(_SupplyManagement):
    """Handler for CreateSupply command."""

    async def handle(self, cmd: CreateSupply) -> Result[SupplyResult, DomainError]:
        """Handle CreateSupply command.

        Returns:
            Success(SupplyResult): Created supply.
            Failure(DomainError): Invalid input, event not found, caller not
                owner/admin, event type without supplies, or storage failure.
        """
        for check in (
            validate_quantity(cmd.quantity_needed, "quantity_needed"),
            _require_text(cmd.item_name, "item_name"),
            _require_text(cmd.unit, "unit"),
        ):
            if isinstance(check, Failure):
                return check

        match await self._authorized_event(cmd.event_id, cmd.user_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=event):
                pass

        if not event.event_type.supports_supplies:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_EVENT_TYPE,
                    message="Supplies can only be added to registry or potluck events",
                    field="event_type",
                )
            )

        supply = Supply(
            id=uuid7(),
            event_id=event.id,
            item_name=cmd.item_name.strip(),
            quantity_needed=cmd.quantity_needed,
            unit=cmd.unit.strip(),
            description=cmd.description,
            image_url=cmd.image_url,
            url=cmd.url,
        )

        try:
            await self._supply_repo.save(supply)
        except Exception as e:
            return Failure(error=persistence_failure("create supply", e))

        await self._invalidate(event.id)
        return Success(value=SupplyResult.from_entity(supply))


class UpdateSupplyHandler(_SupplyManagement):
    """Handler for UpdateSupply command. Fields left as None are unchanged."""

    async def handle(self, cmd: UpdateSupply) -> Result[SupplyResult, DomainError]:
        checks: list[Result[object, ValidationError]] = []
        if cmd.quantity_needed is not None:
            checks.append(validate_quantity(cmd.quantity_needed, "quantity_needed"))
        if cmd.item_name is not None:
            checks.append(_require_text(cmd.item_name, "item_name"))
        if cmd.unit is not None:
            checks.append(_require_text(cmd.unit, "unit"))
        for check in checks:
            if isinstance(check, Failure):
                return check

        match await self._authorized_supply(cmd.supply_id, cmd.user_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=supply):
                pass

        changes = {
            name: value
            for name, value in (
                ("item_name", cmd.item_name and cmd.item_name.strip()),
                ("quantity_needed", cmd.quantity_needed),
                ("unit", cmd.unit and cmd.unit.strip()),
                ("description", cmd.description),
                ("image_url", cmd.image_url),
                ("url", cmd.url),
            )
            if value is not None
        }
        updated = replace(supply, **changes, updated_at=datetime.now(UTC))

        try:
            await self._supply_repo.save(updated)
        except Exception as e:
            return Failure(error=persistence_failure("update supply", e))

        await self._invalidate(updated.event_id)
        return Success(value=SupplyResult.from_entity(updated))


class DeleteSupplyHandler(_SupplyManagement):
    """Handler for DeleteSupply command.

    Contributions are removed by the database cascade.
    """

    async def handle(self, cmd: DeleteSupply) -> Result[None, DomainError]:
        match await self._authorized_supply(cmd.supply_id, cmd.user_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=supply):
                pass

        try:
            await self._supply_repo.delete(supply.id)
        except Exception as e:
            return Failure(error=persistence_failure("delete supply", e))

        await self._invalidate(supply.event_id)
        return Success(value=None)
