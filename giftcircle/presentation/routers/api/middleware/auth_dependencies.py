"""JWT authentication dependencies.

FastAPI dependencies for extracting and validating JWT bearer tokens.
Tokens are issued elsewhere; this service only verifies them and reads
the user ID from the 'sub' claim.

Usage:
    async def list_user_events(current_user: AuthenticatedUser, ...):
        query = ListUserEvents(user_id=current_user.user_id)
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from giftcircle.core.container import get_token_service
from giftcircle.core.result import Failure, Success
from giftcircle.infrastructure.security import JWTService

# auto_error=True returns 401 (403 on older FastAPI) if no token provided
bearer_scheme = HTTPBearer(auto_error=True)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated user information from JWT.

    Attributes:
        user_id: User's unique identifier (from JWT 'sub' claim).
    """

    user_id: UUID


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
    token_service: Annotated[JWTService, Depends(get_token_service)],
) -> CurrentUser:
    """Get current authenticated user from JWT token.

    Raises:
        HTTPException 401: If token is invalid, expired, or has no usable 'sub'.
    """
    match token_service.validate_access_token(credentials.credentials):
        case Success(value=payload):
            try:
                return CurrentUser(user_id=UUID(str(payload["sub"])))
            except (KeyError, ValueError) as e:
                raise _unauthorized("Invalid token payload") from e
        case Failure(error=error):
            raise _unauthorized(error.message)

    raise _unauthorized("Invalid token")


AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
