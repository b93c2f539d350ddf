"""Unit tests for CacheCoordinator.

Tests cover:
- Cache-aside reads (hit, miss, read error, write error, loader failure)
- Direct writes that replace an entry
- Invalidation by key or pattern: local delete, background publish, retries
- Broker outages never reaching the caller
"""

from datetime import UTC, datetime
from typing import cast
from unittest.mock import AsyncMock, call
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from giftcircle.application.services.cache_coordinator import CacheCoordinator
from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import NotFoundError
from giftcircle.core.result import Failure, Success
from giftcircle.domain.protocols.cache_protocol import CacheProtocol
from giftcircle.domain.protocols.message_publisher_protocol import (
    MessagePublisherProtocol,
)
from giftcircle.infrastructure.errors import CacheError, ExternalServiceError

NOW = datetime(2026, 10, 19, 9, 0, tzinfo=UTC)
KEY = "giftcircle:event:supplies:abc"
PATTERN = "giftcircle:gifts:event:abc:user:*"


def cache_failure() -> Failure[CacheError]:
    return Failure(
        error=CacheError(code=ErrorCode.CACHE_UNAVAILABLE, message="redis down")
    )


def broker_failure() -> Failure[ExternalServiceError]:
    return Failure(
        error=ExternalServiceError(
            code=ErrorCode.MESSAGE_BROKER_UNAVAILABLE,
            message="broker down",
            service_name="redis",
        )
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def cache():
    cache = AsyncMock(spec=CacheProtocol)
    cache.get_json.return_value = Success(value=None)
    cache.set_json.return_value = Success(value=None)
    cache.delete.return_value = Success(value=True)
    cache.delete_pattern.return_value = Success(value=2)
    return cache


@pytest.fixture
def publisher():
    publisher = AsyncMock(spec=MessagePublisherProtocol)
    publisher.publish.return_value = Success(value=None)
    return publisher


@pytest.fixture
def sleep():
    return AsyncMock()


@pytest.fixture
def coordinator(cache, publisher, mock_logger, sleep):
    return CacheCoordinator(
        cache=cache,
        publisher=publisher,
        logger=mock_logger,
        topic="cache.invalidate",
        ttl_seconds=7200,
        sleep=sleep,
        clock=lambda: NOW,
    )


@pytest.fixture
def event_id() -> UUID:
    return cast(UUID, uuid7())


# =============================================================================
# Read Path
# =============================================================================


@pytest.mark.unit
class TestGetOrLoad:
    """Test the cache-aside read path."""

    async def test_hit_skips_loader(self, coordinator, cache) -> None:
        cache.get_json.return_value = Success(value=[{"id": "1"}])
        loader = AsyncMock()

        result = await coordinator.get_or_load(KEY, loader)

        assert result == Success(value=[{"id": "1"}])
        loader.assert_not_called()
        cache.set_json.assert_not_called()

    async def test_empty_list_is_a_hit(self, coordinator, cache) -> None:
        cache.get_json.return_value = Success(value=[])
        loader = AsyncMock()

        result = await coordinator.get_or_load(KEY, loader)

        assert result == Success(value=[])
        loader.assert_not_called()

    async def test_miss_loads_and_stores_with_ttl(self, coordinator, cache) -> None:
        loader = AsyncMock(return_value=Success(value=[{"id": "2"}]))

        result = await coordinator.get_or_load(KEY, loader)

        assert result == Success(value=[{"id": "2"}])
        cache.set_json.assert_awaited_once_with(KEY, [{"id": "2"}], ttl=7200)

    async def test_ttl_override(self, coordinator, cache) -> None:
        loader = AsyncMock(return_value=Success(value={"a": 1}))

        await coordinator.get_or_load(KEY, loader, ttl_seconds=60)

        cache.set_json.assert_awaited_once_with(KEY, {"a": 1}, ttl=60)

    async def test_read_error_falls_through_to_loader(
        self, coordinator, cache, mock_logger
    ) -> None:
        cache.get_json.return_value = cache_failure()
        loader = AsyncMock(return_value=Success(value=[1]))

        result = await coordinator.get_or_load(KEY, loader)

        assert result == Success(value=[1])
        assert mock_logger.warning.call_args.args[0] == "cache_read_failed"

    async def test_write_error_still_returns_value(
        self, coordinator, cache, mock_logger
    ) -> None:
        cache.set_json.return_value = cache_failure()
        loader = AsyncMock(return_value=Success(value=[1]))

        result = await coordinator.get_or_load(KEY, loader)

        assert result == Success(value=[1])
        assert mock_logger.warning.call_args.args[0] == "cache_write_failed"

    async def test_loader_failure_is_returned_and_not_cached(
        self, coordinator, cache
    ) -> None:
        failure = Failure(
            error=NotFoundError(
                code=ErrorCode.EVENT_NOT_FOUND,
                message="Event not found",
                resource_type="Event",
                resource_id="x",
            )
        )
        loader = AsyncMock(return_value=failure)

        result = await coordinator.get_or_load(KEY, loader)

        assert result is failure
        cache.set_json.assert_not_called()


@pytest.mark.unit
class TestStore:
    """Test direct writes that replace an entry."""

    async def test_overwrites_with_default_ttl(self, coordinator, cache) -> None:
        stored = await coordinator.store(KEY, [{"id": "2"}])

        assert stored is True
        cache.set_json.assert_awaited_once_with(KEY, [{"id": "2"}], ttl=7200)

    async def test_write_error_is_logged_not_raised(
        self, coordinator, cache, mock_logger
    ) -> None:
        cache.set_json.return_value = cache_failure()

        stored = await coordinator.store(KEY, [], ttl_seconds=5)

        assert stored is False
        cache.set_json.assert_awaited_once_with(KEY, [], ttl=5)
        assert mock_logger.warning.call_args.args[0] == "cache_write_failed"


# =============================================================================
# Invalidation
# =============================================================================


@pytest.mark.unit
class TestInvalidate:
    """Test the invalidation path."""

    async def test_deletes_locally_and_publishes_in_background(
        self, coordinator, cache, publisher, event_id
    ) -> None:
        # Act
        await coordinator.invalidate(KEY, event_id=event_id)

        # Assert
        cache.delete.assert_awaited_once_with(KEY)
        assert coordinator.pending_count == 1

        await coordinator.drain()
        assert coordinator.pending_count == 0
        publisher.publish.assert_awaited_once_with(
            "cache.invalidate",
            {"key": KEY, "eventId": str(event_id), "timestamp": NOW.isoformat()},
        )

    async def test_broker_down_retries_then_drops(
        self, coordinator, cache, publisher, sleep, mock_logger, event_id
    ) -> None:
        """Three attempts with 0.1s and 0.2s between them; caller sees nothing."""
        # Arrange
        publisher.publish.return_value = broker_failure()

        # Act
        await coordinator.invalidate(KEY, event_id=event_id)
        await coordinator.drain()

        # Assert
        cache.delete.assert_awaited_once_with(KEY)
        assert publisher.publish.await_count == 3
        assert sleep.await_args_list == [call(0.1), call(0.2)]
        assert mock_logger.warning.call_count == 3
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.args[0] == "invalidation_dropped"

    async def test_recovers_on_second_attempt(
        self, coordinator, publisher, sleep
    ) -> None:
        publisher.publish.side_effect = [broker_failure(), Success(value=None)]

        delivered = await coordinator.publish_invalidation({"key": KEY})

        assert delivered is True
        assert publisher.publish.await_count == 2
        assert sleep.await_args_list == [call(0.1)]

    async def test_local_delete_failure_still_publishes(
        self, coordinator, cache, publisher, mock_logger, event_id
    ) -> None:
        cache.delete.return_value = cache_failure()

        await coordinator.invalidate(KEY, event_id=event_id)
        await coordinator.drain()

        assert mock_logger.warning.call_args_list[0].args[0] == "cache_delete_failed"
        publisher.publish.assert_awaited_once()

    async def test_crashing_publisher_is_logged(
        self, coordinator, publisher, mock_logger, event_id
    ) -> None:
        publisher.publish.side_effect = RuntimeError("boom")

        await coordinator.invalidate(KEY, event_id=event_id)
        await coordinator.drain()

        assert coordinator.pending_count == 0
        assert mock_logger.error.call_args.args[0] == "invalidation_publish_crashed"

    async def test_pattern_deletes_matching_keys_and_publishes_pattern(
        self, coordinator, cache, publisher, event_id
    ) -> None:
        await coordinator.invalidate_pattern(PATTERN, event_id=event_id)
        await coordinator.drain()

        cache.delete_pattern.assert_awaited_once_with(PATTERN)
        cache.delete.assert_not_called()
        publisher.publish.assert_awaited_once_with(
            "cache.invalidate",
            {
                "pattern": PATTERN,
                "eventId": str(event_id),
                "timestamp": NOW.isoformat(),
            },
        )

    async def test_pattern_delete_failure_still_publishes(
        self, coordinator, cache, publisher, mock_logger, event_id
    ) -> None:
        cache.delete_pattern.return_value = cache_failure()

        await coordinator.invalidate_pattern(PATTERN, event_id=event_id)
        await coordinator.drain()

        assert mock_logger.warning.call_args_list[0].args[0] == "cache_delete_failed"
        assert mock_logger.warning.call_args_list[0].kwargs["key"] == PATTERN
        publisher.publish.assert_awaited_once()

    async def test_single_attempt_never_sleeps(
        self, cache, publisher, mock_logger, sleep
    ) -> None:
        publisher.publish.return_value = broker_failure()
        coordinator = CacheCoordinator(
            cache=cache,
            publisher=publisher,
            logger=mock_logger,
            topic="t",
            ttl_seconds=1,
            max_attempts=1,
            sleep=sleep,
        )

        delivered = await coordinator.publish_invalidation({"key": KEY})

        assert delivered is False
        sleep.assert_not_called()

    def test_rejects_zero_attempts(self, cache, publisher, mock_logger) -> None:
        with pytest.raises(ValueError, match="max_attempts"):
            CacheCoordinator(
                cache=cache,
                publisher=publisher,
                logger=mock_logger,
                topic="t",
                ttl_seconds=1,
                max_attempts=0,
            )
