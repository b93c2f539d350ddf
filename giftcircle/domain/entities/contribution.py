"""Supply contribution entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class Contribution:
    """Quantity a user pledged toward a supply.

    Attributes:
        id: Contribution identifier.
        supply_id: Supply the pledge counts toward.
        user_id: Contributor.
        quantity_committed: Pledged units.
        notes: Optional free text.
        user_name: Display name of the contributor, when loaded.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    supply_id: UUID
    user_id: UUID
    quantity_committed: int
    notes: str | None = None
    user_name: str | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_owned_by(self, user_id: UUID) -> bool:
        """Check whether the user made this pledge."""
        return self.user_id == user_id
