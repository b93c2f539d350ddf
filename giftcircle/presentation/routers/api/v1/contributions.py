"""Contributions resource handlers.

Handler functions for pledges toward a supply.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    create_contribution  - Pledge a quantity toward a supply
    list_contributions   - List pledges for a supply
    update_contribution  - Change a pledge (contributor only)
    delete_contribution  - Withdraw a pledge (contributor only)
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

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
from giftcircle.application.queries.handlers.list_supply_contributions_handler import (
    ListSupplyContributionsHandler,
)
from giftcircle.application.queries.supply_queries import ListSupplyContributions
from giftcircle.core.container import (
    get_create_contribution_handler,
    get_delete_contribution_handler,
    get_list_supply_contributions_handler,
    get_update_contribution_handler,
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
    ContributionListResponse,
    ContributionResponse,
    CreateContributionRequest,
    UpdateContributionRequest,
)


async def create_contribution(
    request: Request,
    current_user: AuthenticatedUser,
    supply_id: Annotated[UUID, Path(description="Supply UUID")],
    data: CreateContributionRequest,
    handler: CreateContributionHandler = Depends(get_create_contribution_handler),
) -> ContributionResponse | JSONResponse:
    """Pledge a quantity toward a supply.

    POST /api/v1/supplies/{supply_id}/contributions → 201 Created

    The response carries a warning when the supply ends up over-committed
    within the allowed margin.
    """
    command = CreateContribution(
        supply_id=supply_id,
        user_id=current_user.user_id,
        quantity_committed=data.quantity_committed,
        notes=data.notes,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ContributionResponse.from_dto(result.value)


async def list_contributions(
    request: Request,
    current_user: AuthenticatedUser,
    supply_id: Annotated[UUID, Path(description="Supply UUID")],
    handler: ListSupplyContributionsHandler = Depends(
        get_list_supply_contributions_handler
    ),
) -> ContributionListResponse | JSONResponse:
    """List pledges for a supply.

    GET /api/v1/supplies/{supply_id}/contributions → 200 OK
    """
    result = await handler.handle(ListSupplyContributions(supply_id=supply_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ContributionListResponse.from_dto(result.value)


async def update_contribution(
    request: Request,
    current_user: AuthenticatedUser,
    contribution_id: Annotated[UUID, Path(description="Contribution UUID")],
    data: UpdateContributionRequest,
    handler: UpdateContributionHandler = Depends(get_update_contribution_handler),
) -> ContributionResponse | JSONResponse:
    """Change a pledge.

    PATCH /api/v1/contributions/{contribution_id} → 200 OK
    """
    command = UpdateContribution(
        contribution_id=contribution_id,
        user_id=current_user.user_id,
        quantity_committed=data.quantity_committed,
        notes=data.notes,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ContributionResponse.from_dto(result.value)


async def delete_contribution(
    request: Request,
    current_user: AuthenticatedUser,
    contribution_id: Annotated[UUID, Path(description="Contribution UUID")],
    handler: DeleteContributionHandler = Depends(get_delete_contribution_handler),
) -> Response:
    """Withdraw a pledge.

    DELETE /api/v1/contributions/{contribution_id} → 204 No Content
    """
    command = DeleteContribution(
        contribution_id=contribution_id, user_id=current_user.user_id
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
