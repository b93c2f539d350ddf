"""Group reference entity.

Groups are managed elsewhere. Events link to groups; the group owner acts as
an administrator for the events attached to the group, and the first attached
group scopes secret-friend matches.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class Group:
    """Read-only view of a gift-giving group.

    Attributes:
        id: Group identifier.
        owner_id: User who administers the group.
        name: Group name.
        description: Optional group description.
    """

    id: UUID
    owner_id: UUID
    name: str
    description: str | None = None
