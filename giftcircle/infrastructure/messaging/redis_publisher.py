"""Redis pub/sub publisher implementing MessagePublisherProtocol.

Architecture:
    - Implements MessagePublisherProtocol without inheritance (structural typing)
    - Fire-and-forget: Redis PUBLISH gives no delivery acknowledgment
    - Broker failures are returned as Failure, never raised, so the caller
      decides whether to retry
"""

import json
import logging
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import DomainError
from giftcircle.core.result import Failure, Result, Success
from giftcircle.infrastructure.enums import InfrastructureErrorCode
from giftcircle.infrastructure.errors import ExternalServiceError


class RedisMessagePublisher:
    """Redis implementation of MessagePublisherProtocol.

    Note: Does NOT inherit from MessagePublisherProtocol (uses structural typing).

    Attributes:
        _redis: Async Redis client instance.
        _logger: Logger instance.
    """

    def __init__(
        self,
        redis_client: "Redis[bytes]",  # type: ignore[type-arg]
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize Redis publisher.

        Args:
            redis_client: Async Redis client instance.
            logger: Optional logger (creates default if not provided).
        """
        self._redis = redis_client
        self._logger = logger or logging.getLogger(__name__)

    async def publish(
        self, topic: str, payload: dict[str, Any]
    ) -> Result[None, DomainError]:
        """Publish a JSON payload to a pub/sub channel.

        Args:
            topic: Channel name.
            payload: JSON-serializable message body.

        Returns:
            Success(None) if Redis accepted the message,
            Failure(ExternalServiceError) if the broker is unreachable.
        """
        try:
            message = json.dumps(payload)
        except (TypeError, ValueError) as e:
            return Failure(
                error=ExternalServiceError(
                    code=ErrorCode.INVALID_INPUT,
                    message=f"Payload for topic '{topic}' is not JSON-serializable",
                    service_name="redis",
                    infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_ERROR,
                    details={"topic": topic, "error": str(e)},
                )
            )

        try:
            receivers = await self._redis.publish(topic, message)
        except RedisError as e:
            self._logger.warning(
                "Failed to publish message",
                extra={
                    "topic": topic,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            return Failure(
                error=ExternalServiceError(
                    code=ErrorCode.MESSAGE_BROKER_UNAVAILABLE,
                    message=f"Message broker unavailable for topic '{topic}'",
                    service_name="redis",
                    infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_UNAVAILABLE,
                    details={"topic": topic, "error": str(e)},
                )
            )

        self._logger.debug(
            "Published message",
            extra={"topic": topic, "receivers": receivers},
        )
        return Success(value=None)
