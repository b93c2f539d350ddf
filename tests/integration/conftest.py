"""Fixtures and helpers for repository integration tests.

Tables are created from BaseModel.metadata (the same models Alembic
migrates) and truncated before each test.
"""

from datetime import UTC, datetime, timedelta

import pytest
import pytest_asyncio
from sqlalchemy import text
from uuid_extensions import uuid7

from giftcircle.core.config import settings
from giftcircle.domain.entities.event import Event
from giftcircle.domain.entities.group import Group
from giftcircle.domain.enums import EventType
from giftcircle.infrastructure.persistence import models  # noqa: F401
from giftcircle.infrastructure.persistence.base import BaseModel
from giftcircle.infrastructure.persistence.database import Database
from giftcircle.infrastructure.persistence.repositories.event_repository import (
    EventRepository,
)


# =============================================================================
# Test Helpers
# =============================================================================


async def create_user_in_db(session, user_id=None, name="Ana", email=None):
    """Create a user in the database for FK constraint."""
    from giftcircle.infrastructure.persistence.models.user import UserModel

    user_id = user_id or uuid7()
    email = email or f"test_{user_id}@example.com"

    session.add(UserModel(id=user_id, name=name, email=email))
    await session.commit()
    return user_id


async def create_group_in_db(session, owner_id, group_id=None, name="Family"):
    """Create a group in the database for FK constraint."""
    from giftcircle.infrastructure.persistence.models.group import GroupModel

    group_id = group_id or uuid7()

    session.add(GroupModel(id=group_id, owner_id=owner_id, name=name))
    await session.commit()
    return group_id


async def create_event_in_db(
    session,
    owner_id,
    event_type=EventType.REGULAR,
    group_ids=(),
    title="Year-end party",
):
    """Create an event (and its group links) through EventRepository."""
    event = Event(
        id=uuid7(),
        title=title,
        event_date=datetime.now(UTC) + timedelta(days=30),
        owner_id=owner_id,
        event_type=event_type,
        groups=[
            Group(id=group_id, owner_id=owner_id, name="Family")
            for group_id in group_ids
        ],
    )
    await EventRepository(session=session).save(event)
    return event.id


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_database():
    """Fresh Database instance with every table present and empty.

    Skips the test when PostgreSQL cannot be reached.
    """
    db = Database(database_url=settings.database_url, echo=settings.db_echo)
    if not await db.check_connection():
        await db.close()
        pytest.skip("PostgreSQL is not reachable")

    async with db.engine.begin() as connection:
        await connection.run_sync(BaseModel.metadata.create_all)
        tables = ", ".join(
            table.name for table in BaseModel.metadata.sorted_tables
        )
        await connection.execute(text(f"TRUNCATE TABLE {tables} CASCADE"))

    yield db

    await db.close()


@pytest_asyncio.fixture
async def two_users(test_database):
    """Two users, returned as (ana_id, bruno_id)."""
    async with test_database.get_session() as session:
        ana_id = await create_user_in_db(session, name="Ana")
        bruno_id = await create_user_in_db(session, name="Bruno")
    return ana_id, bruno_id
