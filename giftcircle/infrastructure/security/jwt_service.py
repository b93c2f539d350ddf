"""JWT access token verification (adapter).

Tokens are issued by the identity service; this service only verifies them.

Architecture:
    - Stateless validation with PyJWT (no database lookup)
    - Returns Failure (not exceptions) for invalid tokens
    - Injected via dependency container
"""

from typing import Any

import jwt
from jwt.exceptions import InvalidTokenError

from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import AuthenticationError
from giftcircle.core.result import Failure, Result, Success


class JWTService:
    """Verify signed access tokens.

    Usage:
        from giftcircle.core.container import get_token_service

        result = get_token_service().validate_access_token(token)
        match result:
            case Success(value=claims):
                user_id = UUID(claims["sub"])
            case Failure(error=error):
                ...
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256") -> None:
        """Initialize JWT service.

        Args:
            secret_key: Shared HMAC secret. Must be at least 32 bytes.
            algorithm: Expected signing algorithm.

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = algorithm

    def validate_access_token(
        self, token: str
    ) -> Result[dict[str, Any], AuthenticationError]:
        """Validate signature and expiry, and require a subject claim.

        Args:
            token: Encoded JWT.

        Returns:
            Success with the decoded claims, or Failure(AuthenticationError).
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub"]},
            )
        except InvalidTokenError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Invalid or expired access token",
                )
            )

        return Success(value=payload)
