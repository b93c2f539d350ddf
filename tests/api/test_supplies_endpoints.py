"""API tests for supply and contribution endpoints.

Tests the HTTP request/response cycle for:
- POST/GET /api/v1/events/{event_id}/supplies
- PATCH/DELETE /api/v1/supplies/{supply_id}
- POST/GET /api/v1/supplies/{supply_id}/contributions
- PATCH/DELETE /api/v1/contributions/{contribution_id}

Handlers are replaced with stubs via app.dependency_overrides.
"""

from datetime import UTC, datetime
from typing import Any, cast
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from giftcircle.application.dtos import (
    ContributionResult,
    SupplyProgressResult,
    SupplyResult,
)
from giftcircle.core.container import (
    get_create_contribution_handler,
    get_create_supply_handler,
    get_delete_contribution_handler,
    get_delete_supply_handler,
    get_event_supplies_handler,
    get_list_supply_contributions_handler,
    get_update_contribution_handler,
    get_update_supply_handler,
)
from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import AuthorizationError, NotFoundError, ValidationError
from giftcircle.core.result import Failure, Success
from giftcircle.main import app
from giftcircle.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)

NOW = datetime(2026, 10, 1, 12, 0, tzinfo=UTC)


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


def make_supply(event_id: UUID, **overrides: Any) -> SupplyResult:
    values: dict[str, Any] = {
        "id": cast(UUID, uuid7()),
        "event_id": event_id,
        "item_name": "Sparkling water",
        "quantity_needed": 10,
        "unit": "bottles",
        "description": None,
        "image_url": None,
        "url": None,
        "created_at": NOW,
        "updated_at": NOW,
    }
    values.update(overrides)
    return SupplyResult(**values)


def make_contribution(user_id: UUID, **overrides: Any) -> ContributionResult:
    values: dict[str, Any] = {
        "id": cast(UUID, uuid7()),
        "supply_id": cast(UUID, uuid7()),
        "user_id": user_id,
        "user_name": "Ana",
        "quantity_committed": 2,
        "notes": None,
        "created_at": NOW,
        "updated_at": NOW,
    }
    values.update(overrides)
    return ContributionResult(**values)


# =============================================================================
# Supplies
# =============================================================================


@pytest.mark.api
class TestSupplies:
    """Tests for supply endpoints."""

    def test_create_supply(self, client, override_handler, user_id):
        event_id = cast(UUID, uuid7())
        handler = override_handler(
            get_create_supply_handler,
            Success(value=make_supply(event_id, url="https://shop.example/water")),
        )

        response = client.post(
            f"/api/v1/events/{event_id}/supplies",
            json={
                "item_name": "Sparkling water",
                "quantity_needed": 10,
                "unit": "bottles",
                "url": "https://shop.example/water",
            },
        )

        assert response.status_code == 201
        assert response.json()["url"] == "https://shop.example/water"
        command = handler.received[0]
        assert command.event_id == event_id
        assert command.user_id == user_id
        assert command.url == "https://shop.example/water"
        assert command.image_url is None

    @pytest.mark.parametrize(
        "body",
        [
            {"item_name": "Water", "quantity_needed": 0, "unit": "bottles"},
            {"item_name": "", "quantity_needed": 1, "unit": "bottles"},
            {"item_name": "Water", "quantity_needed": 1, "unit": "bottles", "url": "nope"},
        ],
    )
    def test_create_supply_rejects_invalid_body(self, client, override_handler, body):
        handler = override_handler(get_create_supply_handler, Success(value=None))

        response = client.post(f"/api/v1/events/{uuid7()}/supplies", json=body)

        assert response.status_code == 422
        assert handler.received == []

    def test_create_supply_for_wrong_event_type(self, client, override_handler):
        override_handler(
            get_create_supply_handler,
            Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_EVENT_TYPE,
                    message="Supplies are only available for registry and potluck events",
                    field="event_type",
                )
            ),
        )

        response = client.post(
            f"/api/v1/events/{uuid7()}/supplies",
            json={"item_name": "Water", "quantity_needed": 1, "unit": "bottles"},
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "event_type"

    def test_list_supplies(self, client, override_handler):
        event_id = cast(UUID, uuid7())
        progress = SupplyProgressResult(
            id=cast(UUID, uuid7()),
            event_id=event_id,
            item_name="Sparkling water",
            description=None,
            quantity_needed=10,
            unit="bottles",
            image_url=None,
            url=None,
            quantity_committed=8,
            fulfillment_percentage=80,
            created_at=NOW,
            updated_at=NOW,
        )
        override_handler(get_event_supplies_handler, Success(value=[progress]))

        response = client.get(f"/api/v1/events/{event_id}/supplies")

        assert response.status_code == 200
        data = response.json()
        assert data["total_count"] == 1
        assert data["supplies"][0]["quantity_committed"] == 8
        assert data["supplies"][0]["fulfillment_percentage"] == 80

    def test_list_supplies_of_unknown_event_is_empty(self, client, override_handler):
        override_handler(get_event_supplies_handler, Success(value=[]))

        response = client.get(f"/api/v1/events/{uuid7()}/supplies")

        assert response.status_code == 200
        assert response.json() == {"supplies": [], "total_count": 0}

    def test_update_supply_passes_only_given_fields(
        self, client, override_handler, user_id
    ):
        supply = make_supply(cast(UUID, uuid7()), quantity_needed=12)
        handler = override_handler(get_update_supply_handler, Success(value=supply))

        response = client.patch(
            f"/api/v1/supplies/{supply.id}", json={"quantity_needed": 12}
        )

        assert response.status_code == 200
        assert response.json()["quantity_needed"] == 12
        command = handler.received[0]
        assert command.supply_id == supply.id
        assert command.quantity_needed == 12
        assert command.item_name is None

    def test_delete_supply(self, client, override_handler):
        override_handler(get_delete_supply_handler, Success(value=None))

        response = client.delete(f"/api/v1/supplies/{uuid7()}")

        assert response.status_code == 204
        assert response.content == b""

    def test_delete_supply_not_found(self, client, override_handler):
        supply_id = cast(UUID, uuid7())
        override_handler(
            get_delete_supply_handler,
            Failure(
                error=NotFoundError(
                    code=ErrorCode.SUPPLY_NOT_FOUND,
                    message="Supply not found",
                    resource_type="Supply",
                    resource_id=str(supply_id),
                )
            ),
        )

        response = client.delete(f"/api/v1/supplies/{supply_id}")

        assert response.status_code == 404
        assert response.json()["instance"] == f"/api/v1/supplies/{supply_id}"


# =============================================================================
# Contributions
# =============================================================================


@pytest.mark.api
class TestContributions:
    """Tests for contribution endpoints."""

    def test_create_contribution(self, client, override_handler, user_id):
        supply_id = cast(UUID, uuid7())
        handler = override_handler(
            get_create_contribution_handler,
            Success(value=make_contribution(user_id, supply_id=supply_id)),
        )

        response = client.post(
            f"/api/v1/supplies/{supply_id}/contributions",
            json={"quantity_committed": 2, "notes": "Cold ones"},
        )

        assert response.status_code == 201
        assert response.json()["warning"] is None
        command = handler.received[0]
        assert command.supply_id == supply_id
        assert command.notes == "Cold ones"

    def test_create_contribution_with_warning(self, client, override_handler, user_id):
        warning = (
            "Warning: the contribution exceeds the quantity needed. "
            "Total committed: 12 of 10 bottles needed."
        )
        override_handler(
            get_create_contribution_handler,
            Success(
                value=make_contribution(user_id, quantity_committed=4, warning=warning)
            ),
        )

        response = client.post(
            f"/api/v1/supplies/{uuid7()}/contributions",
            json={"quantity_committed": 4},
        )

        assert response.status_code == 201
        assert response.json()["warning"] == warning

    def test_create_contribution_over_limit(self, client, override_handler):
        message = (
            "Cannot commit 5 bottles. The event needs 10 and already has "
            "8 committed. Maximum allowed: 12."
        )
        override_handler(
            get_create_contribution_handler,
            Failure(
                error=ValidationError(
                    code=ErrorCode.CONTRIBUTION_LIMIT_EXCEEDED,
                    message=message,
                    field="quantity_committed",
                )
            ),
        )

        response = client.post(
            f"/api/v1/supplies/{uuid7()}/contributions",
            json={"quantity_committed": 5},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["detail"] == message
        assert data["errors"] == [
            {
                "field": "quantity_committed",
                "code": "contribution_limit_exceeded",
                "message": message,
            }
        ]

    def test_create_contribution_requires_positive_quantity(
        self, client, override_handler
    ):
        handler = override_handler(get_create_contribution_handler, Success(value=None))

        response = client.post(
            f"/api/v1/supplies/{uuid7()}/contributions",
            json={"quantity_committed": 0},
        )

        assert response.status_code == 422
        assert handler.received == []

    def test_list_contributions(self, client, override_handler, user_id):
        handler = override_handler(
            get_list_supply_contributions_handler,
            Success(value=[make_contribution(user_id), make_contribution(user_id)]),
        )
        supply_id = cast(UUID, uuid7())

        response = client.get(f"/api/v1/supplies/{supply_id}/contributions")

        assert response.status_code == 200
        assert response.json()["total_count"] == 2
        assert handler.received[0].supply_id == supply_id

    def test_update_contribution_by_other_user(self, client, override_handler):
        override_handler(
            get_update_contribution_handler,
            Failure(
                error=AuthorizationError(
                    code=ErrorCode.RESOURCE_NOT_OWNED,
                    message="Only the contributor can change this contribution",
                )
            ),
        )

        response = client.patch(
            f"/api/v1/contributions/{uuid7()}", json={"notes": "mine now"}
        )

        assert response.status_code == 403
        assert response.json()["title"] == "Access Denied"

    def test_update_contribution(self, client, override_handler, user_id):
        contribution = make_contribution(user_id, quantity_committed=3)
        handler = override_handler(
            get_update_contribution_handler, Success(value=contribution)
        )

        response = client.patch(
            f"/api/v1/contributions/{contribution.id}",
            json={"quantity_committed": 3},
        )

        assert response.status_code == 200
        assert response.json()["quantity_committed"] == 3
        assert handler.received[0].notes is None

    def test_delete_contribution(self, client, override_handler, user_id):
        handler = override_handler(get_delete_contribution_handler, Success(value=None))
        contribution_id = cast(UUID, uuid7())

        response = client.delete(f"/api/v1/contributions/{contribution_id}")

        assert response.status_code == 204
        assert handler.received[0].contribution_id == contribution_id
        assert handler.received[0].user_id == user_id
