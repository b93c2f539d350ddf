"""Events resource handlers.

Handler functions for event, participant and draw endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    create_event         - Create an event attached to groups
    list_user_events     - List events owned by the current user
    list_group_events    - List events attached to a group
    replace_participants - Replace the participant list of an event
    create_draw          - Run the secret-friend draw
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from giftcircle.application.commands.event_commands import (
    AddEventParticipants,
    CreateEvent,
    DrawSecretFriend,
)
from giftcircle.application.commands.handlers.add_event_participants_handler import (
    AddEventParticipantsHandler,
)
from giftcircle.application.commands.handlers.create_event_handler import (
    CreateEventHandler,
)
from giftcircle.application.commands.handlers.draw_secret_friend_handler import (
    DrawSecretFriendHandler,
)
from giftcircle.application.queries.event_queries import (
    ListGroupEvents,
    ListUserEvents,
)
from giftcircle.application.queries.handlers.list_events_handler import (
    ListGroupEventsHandler,
    ListUserEventsHandler,
)
from giftcircle.core.container import (
    get_add_event_participants_handler,
    get_create_event_handler,
    get_draw_secret_friend_handler,
    get_list_group_events_handler,
    get_list_user_events_handler,
)
from giftcircle.core.result import Failure
from giftcircle.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
)
from giftcircle.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from giftcircle.presentation.routers.api.v1.errors import ErrorResponseBuilder
from giftcircle.schemas.event_schemas import (
    AddParticipantsRequest,
    CreateEventRequest,
    DrawResponse,
    EventListResponse,
    EventParticipantsResponse,
    EventResponse,
)


async def create_event(
    request: Request,
    current_user: AuthenticatedUser,
    data: CreateEventRequest,
    handler: CreateEventHandler = Depends(get_create_event_handler),
) -> EventResponse | JSONResponse:
    """Create an event owned by the current user.

    POST /api/v1/events → 201 Created
    """
    command = CreateEvent(
        title=data.title,
        event_date=data.event_date,
        owner_id=current_user.user_id,
        group_ids=data.group_ids,
        event_type=data.event_type,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EventResponse.from_dto(result.value)


async def list_user_events(
    request: Request,
    current_user: AuthenticatedUser,
    handler: ListUserEventsHandler = Depends(get_list_user_events_handler),
) -> EventListResponse | JSONResponse:
    """List events owned by the current user, most recent first.

    GET /api/v1/events → 200 OK
    """
    result = await handler.handle(ListUserEvents(user_id=current_user.user_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EventListResponse.from_dto(result.value)


async def list_group_events(
    request: Request,
    current_user: AuthenticatedUser,
    group_id: Annotated[UUID, Path(description="Group UUID")],
    handler: ListGroupEventsHandler = Depends(get_list_group_events_handler),
) -> EventListResponse | JSONResponse:
    """List events attached to a group.

    GET /api/v1/groups/{group_id}/events → 200 OK
    """
    result = await handler.handle(ListGroupEvents(group_id=group_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EventListResponse.from_dto(result.value)


async def replace_participants(
    request: Request,
    current_user: AuthenticatedUser,
    event_id: Annotated[UUID, Path(description="Event UUID")],
    data: AddParticipantsRequest,
    handler: AddEventParticipantsHandler = Depends(
        get_add_event_participants_handler
    ),
) -> EventParticipantsResponse | JSONResponse:
    """Replace the participant list of an event (owner only).

    POST /api/v1/events/{event_id}/participants → 201 Created
    """
    command = AddEventParticipants(
        event_id=event_id,
        owner_id=current_user.user_id,
        participant_ids=data.participant_ids,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EventParticipantsResponse.from_dto(result.value)


async def create_draw(
    request: Request,
    current_user: AuthenticatedUser,
    event_id: Annotated[UUID, Path(description="Event UUID")],
    handler: DrawSecretFriendHandler = Depends(get_draw_secret_friend_handler),
) -> DrawResponse | JSONResponse:
    """Run the secret-friend draw for an event (owner only, once).

    POST /api/v1/events/{event_id}/draws → 201 Created

    A 400 with "retryable": true means the shuffle budget ran out and the
    same request may succeed.
    """
    command = DrawSecretFriend(event_id=event_id, requester_id=current_user.user_id)
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return DrawResponse.from_dto(result.value)
