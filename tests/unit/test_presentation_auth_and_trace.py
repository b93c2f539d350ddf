"""Unit tests for the bearer token dependency and the trace middleware."""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest
import structlog
from fastapi import FastAPI, HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from fastapi.testclient import TestClient

from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import AuthenticationError
from giftcircle.core.result import Failure, Success
from giftcircle.infrastructure.security import JWTService
from giftcircle.presentation.routers.api.middleware.auth_dependencies import (
    get_current_user,
)
from giftcircle.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)


def credentials(token: str = "token") -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def token_service(result) -> MagicMock:
    service = MagicMock(spec=JWTService)
    service.validate_access_token.return_value = result
    return service


# =============================================================================
# get_current_user
# =============================================================================


@pytest.mark.unit
class TestGetCurrentUser:
    async def test_subject_becomes_user_id(self) -> None:
        user_id = uuid4()
        service = token_service(Success(value={"sub": str(user_id)}))

        current = await get_current_user(credentials("abc"), service)

        assert current.user_id == user_id
        service.validate_access_token.assert_called_once_with("abc")

    async def test_invalid_token_raises_401(self) -> None:
        service = token_service(
            Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID, message="Token has expired"
                )
            )
        )

        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(credentials(), service)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Token has expired"
        assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}

    @pytest.mark.parametrize("payload", [{}, {"sub": "not-a-uuid"}])
    async def test_unusable_subject_raises_401(self, payload) -> None:
        service = token_service(Success(value=payload))

        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(credentials(), service)

        assert exc_info.value.detail == "Invalid token payload"


# =============================================================================
# TraceMiddleware
# =============================================================================


@pytest.fixture
def traced_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(TraceMiddleware)

    @app.get("/trace")
    async def trace() -> dict[str, str | None]:
        return {"trace_id": get_trace_id()}

    @app.get("/log-context")
    async def log_context() -> dict[str, str | None]:
        return {"trace_id": structlog.contextvars.get_contextvars().get("trace_id")}

    return app


@pytest.mark.unit
class TestTraceMiddleware:
    def test_incoming_trace_id_is_kept(self, traced_app) -> None:
        response = TestClient(traced_app).get(
            "/trace", headers={"X-Trace-Id": "abc-123"}
        )

        assert response.json() == {"trace_id": "abc-123"}
        assert response.headers["X-Trace-Id"] == "abc-123"

    def test_trace_id_is_generated(self, traced_app) -> None:
        response = TestClient(traced_app).get("/trace")

        generated = response.headers["X-Trace-Id"]
        assert generated
        assert response.json() == {"trace_id": generated}

    def test_no_trace_id_outside_requests(self) -> None:
        assert get_trace_id() is None

    def test_trace_id_is_bound_for_logging(self, traced_app) -> None:
        response = TestClient(traced_app).get(
            "/log-context", headers={"X-Trace-Id": "log-7"}
        )

        assert response.json() == {"trace_id": "log-7"}
