"""User reference entity.

Users are owned by the identity collaborator. This service only needs an id
and a display name to label participants, contributors and match pairs.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class User:
    """Read-only view of a registered user.

    Attributes:
        id: User identifier.
        name: Display name.
    """

    id: UUID
    name: str
