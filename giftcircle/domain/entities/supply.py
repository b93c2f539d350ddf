"""Supply item entity.

A supply is an item an event needs (drinks, plates, a registry gift) together
with the quantity required. Participants pledge contributions toward it.

Architecture:
    - Pure domain entity
    - quantity_needed is validated by the commands that create or update a
      supply; rows loaded from storage are taken as they are
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class Supply:
    """Item needed by an event.

    Attributes:
        id: Supply identifier.
        event_id: Owning event.
        item_name: What is needed.
        quantity_needed: How many units are needed.
        unit: Unit of measure ("bottles", "kg", "units").
        description: Optional details.
        image_url: Optional picture of the item.
        url: Optional link (store page, recipe).
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    event_id: UUID
    item_name: str
    quantity_needed: int
    unit: str
    description: str | None = None
    image_url: str | None = None
    url: str | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate supply after initialization.

        Raises:
            ValueError: If the item name or unit is blank.
        """
        if not self.item_name or not self.item_name.strip():
            raise ValueError("Supply item name cannot be empty")
        if not self.unit or not self.unit.strip():
            raise ValueError("Supply unit cannot be empty")
