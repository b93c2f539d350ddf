"""Supplies resource handlers.

Handler functions for the supply list of an event.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    create_supply     - Add a supply to an event
    list_supplies     - List supplies with committed totals (cached)
    update_supply     - Partially update a supply
    delete_supply     - Remove a supply and its contributions
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from giftcircle.application.commands.handlers.supply_handlers import (
    CreateSupplyHandler,
    DeleteSupplyHandler,
    UpdateSupplyHandler,
)
from giftcircle.application.commands.supply_commands import (
    CreateSupply,
    DeleteSupply,
    UpdateSupply,
)
from giftcircle.application.queries.handlers.get_event_supplies_handler import (
    GetEventSuppliesHandler,
)
from giftcircle.application.queries.supply_queries import GetEventSupplies
from giftcircle.core.container import (
    get_create_supply_handler,
    get_delete_supply_handler,
    get_event_supplies_handler,
    get_update_supply_handler,
)
from giftcircle.core.result import Failure
from giftcircle.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
)
from giftcircle.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from giftcircle.presentation.routers.api.v1.errors import ErrorResponseBuilder
from giftcircle.schemas.supply_schemas import (
    CreateSupplyRequest,
    SupplyListResponse,
    SupplyResponse,
    UpdateSupplyRequest,
    url_or_none,
)


async def create_supply(
    request: Request,
    current_user: AuthenticatedUser,
    event_id: Annotated[UUID, Path(description="Event UUID")],
    data: CreateSupplyRequest,
    handler: CreateSupplyHandler = Depends(get_create_supply_handler),
) -> SupplyResponse | JSONResponse:
    """Add a supply to a registry or potluck event.

    POST /api/v1/events/{event_id}/supplies → 201 Created
    """
    command = CreateSupply(
        event_id=event_id,
        user_id=current_user.user_id,
        item_name=data.item_name,
        quantity_needed=data.quantity_needed,
        unit=data.unit,
        description=data.description,
        image_url=url_or_none(data.image_url),
        url=url_or_none(data.url),
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return SupplyResponse.from_dto(result.value)


async def list_supplies(
    request: Request,
    current_user: AuthenticatedUser,
    event_id: Annotated[UUID, Path(description="Event UUID")],
    handler: GetEventSuppliesHandler = Depends(get_event_supplies_handler),
) -> SupplyListResponse | JSONResponse:
    """List an event's supplies with committed totals.

    GET /api/v1/events/{event_id}/supplies → 200 OK

    Served from cache when possible. An unknown event yields an empty list.
    """
    result = await handler.handle(GetEventSupplies(event_id=event_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return SupplyListResponse.from_dto(result.value)


async def update_supply(
    request: Request,
    current_user: AuthenticatedUser,
    supply_id: Annotated[UUID, Path(description="Supply UUID")],
    data: UpdateSupplyRequest,
    handler: UpdateSupplyHandler = Depends(get_update_supply_handler),
) -> SupplyResponse | JSONResponse:
    """Partially update a supply.

    PATCH /api/v1/supplies/{supply_id} → 200 OK
    """
    command = UpdateSupply(
        supply_id=supply_id,
        user_id=current_user.user_id,
        item_name=data.item_name,
        quantity_needed=data.quantity_needed,
        unit=data.unit,
        description=data.description,
        image_url=url_or_none(data.image_url),
        url=url_or_none(data.url),
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return SupplyResponse.from_dto(result.value)


async def delete_supply(
    request: Request,
    current_user: AuthenticatedUser,
    supply_id: Annotated[UUID, Path(description="Supply UUID")],
    handler: DeleteSupplyHandler = Depends(get_delete_supply_handler),
) -> Response:
    """Delete a supply; its contributions are removed with it.

    DELETE /api/v1/supplies/{supply_id} → 204 No Content
    """
    command = DeleteSupply(supply_id=supply_id, user_id=current_user.user_id)
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
