"""API Route Registry - Single Source of Truth for all v1 routes.

Each entry is a RouteMetadata instance; handlers reference functions from
the resource modules. Paths are relative to the v1 prefix.

Usage:
    router = APIRouter(prefix=settings.api_v1_prefix)
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from giftcircle.presentation.routers.api.v1.contributions import (
    create_contribution,
    delete_contribution,
    list_contributions,
    update_contribution,
)
from giftcircle.presentation.routers.api.v1.events import (
    create_draw,
    create_event,
    list_group_events,
    list_user_events,
    replace_participants,
)
from giftcircle.presentation.routers.api.v1.gifts import (
    create_gift,
    list_event_gifts,
)
from giftcircle.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from giftcircle.presentation.routers.api.v1.supplies import (
    create_supply,
    delete_supply,
    list_supplies,
    update_supply,
)
from giftcircle.schemas.event_schemas import (
    DrawResponse,
    EventListResponse,
    EventParticipantsResponse,
    EventResponse,
)
from giftcircle.schemas.gift_schemas import EventGiftsResponse, GiftResponse
from giftcircle.schemas.supply_schemas import (
    ContributionListResponse,
    ContributionResponse,
    SupplyListResponse,
    SupplyResponse,
)

_AUTHENTICATED = AuthPolicy(level=AuthLevel.AUTHENTICATED)

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Events Resource (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/events",
        handler=create_event,
        resource="events",
        tags=["Events"],
        summary="Create event",
        description="Create an event owned by the current user and attach it to groups.",
        operation_id="create_event",
        response_model=EventResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Validation error"),
            ErrorSpec(status=404, description="User or group not found"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events",
        handler=list_user_events,
        resource="events",
        tags=["Events"],
        summary="List my events",
        description="List events owned by the current user, most recent first.",
        operation_id="list_user_events",
        response_model=EventListResponse,
        status_code=200,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/groups/{group_id}/events",
        handler=list_group_events,
        resource="events",
        tags=["Events"],
        summary="List group events",
        description="List events attached to a group, most recent first.",
        operation_id="list_group_events",
        response_model=EventListResponse,
        status_code=200,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/events/{event_id}/participants",
        handler=replace_participants,
        resource="events",
        tags=["Events"],
        summary="Set participants",
        description="Replace the participant list. The owner is always included.",
        operation_id="replace_participants",
        response_model=EventParticipantsResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=403, description="Not the event owner"),
            ErrorSpec(status=404, description="Event or user not found"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/events/{event_id}/draws",
        handler=create_draw,
        resource="events",
        tags=["Events"],
        summary="Run secret-friend draw",
        description=(
            "Assign each participant a secret friend. Runs once per event; "
            "a retryable 400 means the shuffle budget ran out."
        ),
        operation_id="create_draw",
        response_model=DrawResponse,
        status_code=201,
        errors=[
            ErrorSpec(
                status=400,
                description="Wrong event type, bad participant count, or already drawn",
            ),
            ErrorSpec(status=403, description="Not the event owner"),
            ErrorSpec(status=404, description="Event not found"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    # =========================================================================
    # Supplies Resource (4 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/events/{event_id}/supplies",
        handler=create_supply,
        resource="supplies",
        tags=["Supplies"],
        summary="Create supply",
        description="Add a supply to a registry or potluck event.",
        operation_id="create_supply",
        response_model=SupplyResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Validation error or wrong event type"),
            ErrorSpec(status=403, description="Not the event owner or a group admin"),
            ErrorSpec(status=404, description="Event not found"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events/{event_id}/supplies",
        handler=list_supplies,
        resource="supplies",
        tags=["Supplies"],
        summary="List supplies",
        description="List supplies with committed totals and fulfillment percentage.",
        operation_id="list_supplies",
        response_model=SupplyListResponse,
        status_code=200,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/supplies/{supply_id}",
        handler=update_supply,
        resource="supplies",
        tags=["Supplies"],
        summary="Update supply",
        operation_id="update_supply",
        response_model=SupplyResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=400, description="Validation error"),
            ErrorSpec(status=403, description="Not the event owner or a group admin"),
            ErrorSpec(status=404, description="Supply not found"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/supplies/{supply_id}",
        handler=delete_supply,
        resource="supplies",
        tags=["Supplies"],
        summary="Delete supply",
        operation_id="delete_supply",
        response_model=None,
        status_code=204,
        errors=[
            ErrorSpec(status=403, description="Not the event owner or a group admin"),
            ErrorSpec(status=404, description="Supply not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    # =========================================================================
    # Contributions Resource (4 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/supplies/{supply_id}/contributions",
        handler=create_contribution,
        resource="contributions",
        tags=["Contributions"],
        summary="Create contribution",
        description="Pledge a quantity toward a supply (participants only).",
        operation_id="create_contribution",
        response_model=ContributionResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Invalid quantity or over-commitment"),
            ErrorSpec(status=403, description="Not an event participant"),
            ErrorSpec(status=404, description="Supply not found"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/supplies/{supply_id}/contributions",
        handler=list_contributions,
        resource="contributions",
        tags=["Contributions"],
        summary="List contributions",
        operation_id="list_contributions",
        response_model=ContributionListResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=404, description="Supply not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/contributions/{contribution_id}",
        handler=update_contribution,
        resource="contributions",
        tags=["Contributions"],
        summary="Update contribution",
        operation_id="update_contribution",
        response_model=ContributionResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=400, description="Invalid quantity or over-commitment"),
            ErrorSpec(status=403, description="Not the contributor"),
            ErrorSpec(status=404, description="Contribution not found"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/contributions/{contribution_id}",
        handler=delete_contribution,
        resource="contributions",
        tags=["Contributions"],
        summary="Delete contribution",
        operation_id="delete_contribution",
        response_model=None,
        status_code=204,
        errors=[
            ErrorSpec(status=403, description="Not the contributor"),
            ErrorSpec(status=404, description="Contribution not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    # =========================================================================
    # Gifts Resource (2 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/gifts",
        handler=create_gift,
        resource="gifts",
        tags=["Gifts"],
        summary="Create gift",
        description="Suggest a gift for one or more events of the current user.",
        operation_id="create_gift",
        response_model=GiftResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Validation error"),
            ErrorSpec(status=403, description="Not allowed to suggest for an event"),
            ErrorSpec(status=404, description="User or event not found"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events/{event_id}/gifts",
        handler=list_event_gifts,
        resource="gifts",
        tags=["Gifts"],
        summary="List event gifts",
        description=(
            "List gift suggestions of an event. In secret-friend events only the "
            "suggestions of the caller's drawn receiver are listed."
        ),
        operation_id="list_event_gifts",
        response_model=EventGiftsResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=400, description="Secret-friend event without a group"),
            ErrorSpec(status=403, description="No receiver drawn for the caller"),
            ErrorSpec(status=404, description="Event not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
]
