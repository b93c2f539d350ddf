"""Message publisher protocol.

Port for the fire-and-forget message transport used for cache invalidation
signaling. The transport returns no delivery acknowledgment; a Success only
means the broker accepted the message.
"""

from typing import Any, Protocol

from giftcircle.core.errors import DomainError
from giftcircle.core.result import Result


class MessagePublisherProtocol(Protocol):
    """Publish JSON payloads to a named topic.

    Implementations return Failure (never raise) when the broker is
    unreachable so that callers can retry.
    """

    async def publish(
        self, topic: str, payload: dict[str, Any]
    ) -> Result[None, DomainError]:
        """Publish a payload.

        Args:
            topic: Channel/topic name (e.g., "cache.invalidate").
            payload: JSON-serializable message body.

        Returns:
            Success(None) if the broker accepted the message,
            Failure(ExternalServiceError) otherwise.
        """
        ...
