"""Security adapters."""

from giftcircle.infrastructure.security.jwt_service import JWTService

__all__ = ["JWTService"]
