"""Supply ledger handler dependency factories.

Request-scoped handler instances for supplies and contributions. Every
handler shares the app-scoped CacheCoordinator and CacheKeys; repositories
share the request session, so a supply row lock taken while checking a
pledge is released by the commit that stores it.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from giftcircle.core.container.infrastructure import (
    get_cache_coordinator,
    get_cache_keys,
)
from giftcircle.core.container.repositories import (
    get_contribution_repository,
    get_event_repository,
    get_participant_repository,
    get_supply_repository,
)
from giftcircle.domain.protocols import (
    ContributionRepository,
    EventRepository,
    ParticipantRepository,
    SupplyRepository,
)

if TYPE_CHECKING:
    from giftcircle.application.commands.handlers.contribution_handlers import (
        CreateContributionHandler,
        DeleteContributionHandler,
        UpdateContributionHandler,
    )
    from giftcircle.application.commands.handlers.supply_handlers import (
        CreateSupplyHandler,
        DeleteSupplyHandler,
        UpdateSupplyHandler,
    )
    from giftcircle.application.queries.handlers.get_event_supplies_handler import (
        GetEventSuppliesHandler,
    )
    from giftcircle.application.queries.handlers.list_supply_contributions_handler import (
        ListSupplyContributionsHandler,
    )


# ============================================================================
# Supply Handler Factories (Request-Scoped)
# ============================================================================


async def get_create_supply_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    supply_repo: SupplyRepository = Depends(get_supply_repository),
) -> "CreateSupplyHandler":
    from giftcircle.application.commands.handlers.supply_handlers import (
        CreateSupplyHandler,
    )

    return CreateSupplyHandler(
        event_repo=event_repo,
        supply_repo=supply_repo,
        coordinator=get_cache_coordinator(),
        cache_keys=get_cache_keys(),
    )


async def get_update_supply_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    supply_repo: SupplyRepository = Depends(get_supply_repository),
) -> "UpdateSupplyHandler":
    from giftcircle.application.commands.handlers.supply_handlers import (
        UpdateSupplyHandler,
    )

    return UpdateSupplyHandler(
        event_repo=event_repo,
        supply_repo=supply_repo,
        coordinator=get_cache_coordinator(),
        cache_keys=get_cache_keys(),
    )


async def get_delete_supply_handler(
    event_repo: EventRepository = Depends(get_event_repository),
    supply_repo: SupplyRepository = Depends(get_supply_repository),
) -> "DeleteSupplyHandler":
    from giftcircle.application.commands.handlers.supply_handlers import (
        DeleteSupplyHandler,
    )

    return DeleteSupplyHandler(
        event_repo=event_repo,
        supply_repo=supply_repo,
        coordinator=get_cache_coordinator(),
        cache_keys=get_cache_keys(),
    )


async def get_event_supplies_handler(
    supply_repo: SupplyRepository = Depends(get_supply_repository),
    contribution_repo: ContributionRepository = Depends(get_contribution_repository),
) -> "GetEventSuppliesHandler":
    """Get GetEventSupplies query handler (request-scoped).

    Reads go through the CacheCoordinator; the repositories are only hit
    on a cache miss.
    """
    from giftcircle.application.queries.handlers.get_event_supplies_handler import (
        GetEventSuppliesHandler,
    )

    return GetEventSuppliesHandler(
        supply_repo=supply_repo,
        contribution_repo=contribution_repo,
        coordinator=get_cache_coordinator(),
        cache_keys=get_cache_keys(),
    )


# ============================================================================
# Contribution Handler Factories (Request-Scoped)
# ============================================================================


async def get_create_contribution_handler(
    supply_repo: SupplyRepository = Depends(get_supply_repository),
    contribution_repo: ContributionRepository = Depends(get_contribution_repository),
    event_repo: EventRepository = Depends(get_event_repository),
    participant_repo: ParticipantRepository = Depends(get_participant_repository),
) -> "CreateContributionHandler":
    from giftcircle.application.commands.handlers.contribution_handlers import (
        CreateContributionHandler,
    )

    return CreateContributionHandler(
        supply_repo=supply_repo,
        contribution_repo=contribution_repo,
        event_repo=event_repo,
        participant_repo=participant_repo,
        coordinator=get_cache_coordinator(),
        cache_keys=get_cache_keys(),
    )


async def get_update_contribution_handler(
    supply_repo: SupplyRepository = Depends(get_supply_repository),
    contribution_repo: ContributionRepository = Depends(get_contribution_repository),
) -> "UpdateContributionHandler":
    from giftcircle.application.commands.handlers.contribution_handlers import (
        UpdateContributionHandler,
    )

    return UpdateContributionHandler(
        supply_repo=supply_repo,
        contribution_repo=contribution_repo,
        coordinator=get_cache_coordinator(),
        cache_keys=get_cache_keys(),
    )


async def get_delete_contribution_handler(
    supply_repo: SupplyRepository = Depends(get_supply_repository),
    contribution_repo: ContributionRepository = Depends(get_contribution_repository),
) -> "DeleteContributionHandler":
    from giftcircle.application.commands.handlers.contribution_handlers import (
        DeleteContributionHandler,
    )

    return DeleteContributionHandler(
        supply_repo=supply_repo,
        contribution_repo=contribution_repo,
        coordinator=get_cache_coordinator(),
        cache_keys=get_cache_keys(),
    )


async def get_list_supply_contributions_handler(
    supply_repo: SupplyRepository = Depends(get_supply_repository),
    contribution_repo: ContributionRepository = Depends(get_contribution_repository),
) -> "ListSupplyContributionsHandler":
    from giftcircle.application.queries.handlers.list_supply_contributions_handler import (
        ListSupplyContributionsHandler,
    )

    return ListSupplyContributionsHandler(
        supply_repo=supply_repo,
        contribution_repo=contribution_repo,
    )
