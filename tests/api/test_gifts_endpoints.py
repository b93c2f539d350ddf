"""API tests for gift suggestion endpoints.

Tests the HTTP request/response cycle for:
- POST /api/v1/gifts
- GET /api/v1/events/{event_id}/gifts

Handlers are replaced with stubs via app.dependency_overrides.
"""

from datetime import UTC, datetime
from typing import Any, cast
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from giftcircle.application.dtos import (
    EventGiftsResult,
    GiftEventRef,
    GiftInfo,
    GiftResult,
    UserRef,
)
from giftcircle.core.container import (
    get_create_gift_handler,
    get_list_event_gifts_handler,
)
from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import AuthorizationError, NotFoundError
from giftcircle.core.result import Failure, Success
from giftcircle.main import app
from giftcircle.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)

NOW = datetime(2026, 10, 1, 12, 0, tzinfo=UTC)
EVENT_DATE = datetime(2026, 12, 20, 19, 0, tzinfo=UTC)


class StubHandler:
    def __init__(self, result: Any) -> None:
        self.result = result
        self.received: list[Any] = []

    async def handle(self, request: Any) -> Any:
        self.received.append(request)
        return self.result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def user_id() -> UUID:
    return cast(UUID, uuid7())


@pytest.fixture(autouse=True)
def override_auth(user_id):
    async def current_user() -> CurrentUser:
        return CurrentUser(user_id=user_id)

    app.dependency_overrides[get_current_user] = current_user
    yield
    app.dependency_overrides.pop(get_current_user, None)


@pytest.fixture
def override_handler():
    installed: list[Any] = []

    def install(factory: Any, result: Any) -> StubHandler:
        handler = StubHandler(result)
        app.dependency_overrides[factory] = lambda: handler
        installed.append(factory)
        return handler

    yield install
    for factory in installed:
        app.dependency_overrides.pop(factory, None)


@pytest.fixture
def client():
    return TestClient(app)


# =============================================================================
# Create
# =============================================================================


@pytest.mark.api
class TestCreateGift:
    """Tests for POST /api/v1/gifts."""

    def test_create_gift(self, client, override_handler, user_id):
        event_id = cast(UUID, uuid7())
        created = GiftResult(
            id=cast(UUID, uuid7()),
            title="Board game",
            urls=["https://shop.example/board-game"],
            user=UserRef(id=user_id, name="Ana"),
            events=[
                GiftEventRef(
                    id=event_id,
                    title="Christmas",
                    event_date=EVENT_DATE,
                    event_type="secret_friend",
                )
            ],
            created_at=NOW,
        )
        handler = override_handler(get_create_gift_handler, Success(value=created))

        response = client.post(
            "/api/v1/gifts",
            json={
                "title": "Board game",
                "urls": ["https://shop.example/board-game"],
                "event_ids": [str(event_id)],
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["user"] == {"id": str(user_id), "name": "Ana"}
        assert data["events"][0]["event_type"] == "secret_friend"
        command = handler.received[0]
        assert command.user_id == user_id
        assert command.urls == ["https://shop.example/board-game"]
        assert command.event_ids == [event_id]

    @pytest.mark.parametrize(
        "body",
        [
            {"title": "Book", "event_ids": []},
            {"title": "", "event_ids": [str(uuid7())]},
            {"title": "Book", "urls": ["not a url"], "event_ids": [str(uuid7())]},
            {"title": "Book", "event_ids": ["not-a-uuid"]},
        ],
    )
    def test_rejects_invalid_body(self, client, override_handler, body):
        handler = override_handler(get_create_gift_handler, Success(value=None))

        response = client.post("/api/v1/gifts", json=body)

        assert response.status_code == 422
        assert handler.received == []

    def test_not_a_participant(self, client, override_handler):
        override_handler(
            get_create_gift_handler,
            Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message="Only participants of 'Christmas' can suggest gifts",
                    required_permission="event_participant",
                )
            ),
        )

        response = client.post(
            "/api/v1/gifts", json={"title": "Book", "event_ids": [str(uuid7())]}
        )

        assert response.status_code == 403
        assert response.json()["detail"] == (
            "Only participants of 'Christmas' can suggest gifts"
        )

    def test_unknown_event(self, client, override_handler):
        missing = str(uuid7())
        override_handler(
            get_create_gift_handler,
            Failure(
                error=NotFoundError(
                    code=ErrorCode.EVENT_NOT_FOUND,
                    message="One or more events were not found",
                    resource_type="Event",
                    resource_id=missing,
                )
            ),
        )

        response = client.post(
            "/api/v1/gifts", json={"title": "Book", "event_ids": [missing]}
        )

        assert response.status_code == 404


# =============================================================================
# List
# =============================================================================


@pytest.mark.api
class TestListEventGifts:
    """Tests for GET /api/v1/events/{event_id}/gifts."""

    def test_secret_friend_view_names_the_receiver(
        self, client, override_handler, user_id
    ):
        event_id = cast(UUID, uuid7())
        receiver = UserRef(id=cast(UUID, uuid7()), name="Bruno")
        listing = EventGiftsResult(
            event_id=event_id,
            event_title="Christmas",
            event_type="secret_friend",
            receiver=receiver,
            gifts=[
                GiftInfo(
                    id=cast(UUID, uuid7()),
                    title="Scarf",
                    urls=[],
                    user_id=receiver.id,
                    user_name="Bruno",
                    created_at=NOW,
                )
            ],
        )
        handler = override_handler(get_list_event_gifts_handler, Success(value=listing))

        response = client.get(f"/api/v1/events/{event_id}/gifts")

        assert response.status_code == 200
        data = response.json()
        assert data["receiver"] == {"id": str(receiver.id), "name": "Bruno"}
        assert data["total_count"] == 1
        assert data["gifts"][0]["title"] == "Scarf"
        query = handler.received[0]
        assert query.event_id == event_id
        assert query.user_id == user_id

    def test_regular_event_has_no_receiver(self, client, override_handler):
        event_id = cast(UUID, uuid7())
        listing = EventGiftsResult(
            event_id=event_id,
            event_title="Birthday",
            event_type="regular",
            gifts=[],
        )
        override_handler(get_list_event_gifts_handler, Success(value=listing))

        response = client.get(f"/api/v1/events/{event_id}/gifts")

        assert response.status_code == 200
        assert response.json()["receiver"] is None
        assert response.json()["gifts"] == []

    def test_before_the_draw(self, client, override_handler):
        override_handler(
            get_list_event_gifts_handler,
            Failure(
                error=AuthorizationError(
                    code=ErrorCode.GIFT_RECEIVER_NOT_DRAWN,
                    message="You have no secret friend assigned in this event",
                    required_permission="matched_giver",
                )
            ),
        )

        response = client.get(f"/api/v1/events/{uuid7()}/gifts")

        assert response.status_code == 403
