"""Gifts resource handlers.

Handler functions for gift suggestions.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    create_gift       - Suggest a gift for one or more events
    list_event_gifts  - Suggestions visible to the caller (cached per user)
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from giftcircle.application.commands.gift_commands import CreateGift
from giftcircle.application.commands.handlers.create_gift_handler import (
    CreateGiftHandler,
)
from giftcircle.application.queries.gift_queries import ListEventGifts
from giftcircle.application.queries.handlers.list_event_gifts_handler import (
    ListEventGiftsHandler,
)
from giftcircle.core.container import (
    get_create_gift_handler,
    get_list_event_gifts_handler,
)
from giftcircle.core.result import Failure
from giftcircle.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
)
from giftcircle.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from giftcircle.presentation.routers.api.v1.errors import ErrorResponseBuilder
from giftcircle.schemas.gift_schemas import (
    CreateGiftRequest,
    EventGiftsResponse,
    GiftResponse,
)


async def create_gift(
    request: Request,
    current_user: AuthenticatedUser,
    data: CreateGiftRequest,
    handler: CreateGiftHandler = Depends(get_create_gift_handler),
) -> GiftResponse | JSONResponse:
    """Suggest a gift for the current user.

    POST /api/v1/gifts → 201 Created
    """
    command = CreateGift(
        user_id=current_user.user_id,
        title=data.title,
        urls=[str(url) for url in data.urls],
        event_ids=data.event_ids,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return GiftResponse.from_dto(result.value)


async def list_event_gifts(
    request: Request,
    current_user: AuthenticatedUser,
    event_id: Annotated[UUID, Path(description="Event UUID")],
    handler: ListEventGiftsHandler = Depends(get_list_event_gifts_handler),
) -> EventGiftsResponse | JSONResponse:
    """List the gift suggestions of an event the caller may see.

    GET /api/v1/events/{event_id}/gifts → 200 OK

    In a secret-friend event only the drawn receiver's suggestions are
    listed; before the draw the caller gets 403.
    """
    result = await handler.handle(
        ListEventGifts(event_id=event_id, user_id=current_user.user_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EventGiftsResponse.from_dto(result.value)
