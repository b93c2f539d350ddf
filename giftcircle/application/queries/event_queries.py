"""Event queries (CQRS read operations). Queries never change state."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListUserEvents:
    """List events created by a user."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListGroupEvents:
    """List events attached to a group."""

    group_id: UUID
