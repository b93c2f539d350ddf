"""Container module - Centralized dependency injection.

Re-exports every factory so callers import from one place:

    from giftcircle.core.container import get_cache_coordinator, get_logger

Modules:
- infrastructure: App-scoped services (Redis, cache, db, logging, JWT)
- repositories: Request-scoped repository factories
- event_handlers: Event command/query handler factories
- supply_handlers: Supply ledger handler factories
- gift_handlers: Gift suggestion handler factories
"""

from giftcircle.core.container.event_handlers import (
    get_add_event_participants_handler,
    get_create_event_handler,
    get_draw_secret_friend_handler,
    get_list_group_events_handler,
    get_list_user_events_handler,
)
from giftcircle.core.container.gift_handlers import (
    get_create_gift_handler,
    get_list_event_gifts_handler,
)
from giftcircle.core.container.infrastructure import (
    get_cache,
    get_cache_coordinator,
    get_cache_keys,
    get_database,
    get_db_session,
    get_invalidation_subscriber,
    get_logger,
    get_match_engine,
    get_message_publisher,
    get_redis_client,
    get_token_service,
)
from giftcircle.core.container.repositories import (
    get_contribution_repository,
    get_event_repository,
    get_gift_repository,
    get_group_repository,
    get_match_repository,
    get_participant_repository,
    get_supply_repository,
    get_user_repository,
)
from giftcircle.core.container.supply_handlers import (
    get_create_contribution_handler,
    get_create_supply_handler,
    get_delete_contribution_handler,
    get_delete_supply_handler,
    get_event_supplies_handler,
    get_list_supply_contributions_handler,
    get_update_contribution_handler,
    get_update_supply_handler,
)

__all__ = [
    # Infrastructure
    "get_cache",
    "get_cache_coordinator",
    "get_cache_keys",
    "get_database",
    "get_db_session",
    "get_invalidation_subscriber",
    "get_logger",
    "get_match_engine",
    "get_message_publisher",
    "get_redis_client",
    "get_token_service",
    # Repositories
    "get_contribution_repository",
    "get_event_repository",
    "get_gift_repository",
    "get_group_repository",
    "get_match_repository",
    "get_participant_repository",
    "get_supply_repository",
    "get_user_repository",
    # Event handlers
    "get_add_event_participants_handler",
    "get_create_event_handler",
    "get_draw_secret_friend_handler",
    "get_list_group_events_handler",
    "get_list_user_events_handler",
    # Supply ledger handlers
    "get_create_contribution_handler",
    "get_create_supply_handler",
    "get_delete_contribution_handler",
    "get_delete_supply_handler",
    "get_event_supplies_handler",
    "get_list_supply_contributions_handler",
    "get_update_contribution_handler",
    "get_update_supply_handler",
    # Gift handlers
    "get_create_gift_handler",
    "get_list_event_gifts_handler",
]
