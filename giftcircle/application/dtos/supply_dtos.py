"""Supply ledger DTOs (Data Transfer Objects).

DTOs:
    - SupplyResult: Result from CreateSupply/UpdateSupply
    - ContributionResult: Result from contribution commands (with optional warning)
    - SupplyProgressResult: One entry of GetEventSupplies, cacheable as JSON
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from giftcircle.domain.entities import Contribution, Supply


@dataclass(frozen=True, kw_only=True)
class SupplyResult:
    id: UUID
    event_id: UUID
    item_name: str
    quantity_needed: int
    unit: str
    description: str | None
    image_url: str | None
    url: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, supply: Supply) -> "SupplyResult":
        return cls(
            id=supply.id,
            event_id=supply.event_id,
            item_name=supply.item_name,
            quantity_needed=supply.quantity_needed,
            unit=supply.unit,
            description=supply.description,
            image_url=supply.image_url,
            url=supply.url,
            created_at=supply.created_at,
            updated_at=supply.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class ContributionResult:
    """Contribution plus the advisory warning of the write that produced it.

    Attributes:
        warning: Set when the supply total now exceeds the quantity needed
            but stays within the overcommit cap.
    """

    id: UUID
    supply_id: UUID
    user_id: UUID
    user_name: str | None
    quantity_committed: int
    notes: str | None
    created_at: datetime
    updated_at: datetime
    warning: str | None = None

    @classmethod
    def from_entity(
        cls, contribution: Contribution, warning: str | None = None
    ) -> "ContributionResult":
        return cls(
            id=contribution.id,
            supply_id=contribution.supply_id,
            user_id=contribution.user_id,
            user_name=contribution.user_name,
            quantity_committed=contribution.quantity_committed,
            notes=contribution.notes,
            created_at=contribution.created_at,
            updated_at=contribution.updated_at,
            warning=warning,
        )


@dataclass(frozen=True, kw_only=True)
class SupplyProgressResult:
    """Supply with committed total and fulfillment percentage.

    Round-trips through the cache as a plain JSON object (to_cache/from_cache).
    """

    id: UUID
    event_id: UUID
    item_name: str
    description: str | None
    quantity_needed: int
    unit: str
    image_url: str | None
    url: str | None
    quantity_committed: int
    fulfillment_percentage: int
    created_at: datetime
    updated_at: datetime

    def to_cache(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "event_id": str(self.event_id),
            "item_name": self.item_name,
            "description": self.description,
            "quantity_needed": self.quantity_needed,
            "unit": self.unit,
            "image_url": self.image_url,
            "url": self.url,
            "quantity_committed": self.quantity_committed,
            "fulfillment_percentage": self.fulfillment_percentage,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_cache(cls, data: dict[str, Any]) -> "SupplyProgressResult":
        """Rebuild from a cached JSON object.

        Raises:
            KeyError, ValueError: If the cached object is malformed.
        """
        return cls(
            id=UUID(data["id"]),
            event_id=UUID(data["event_id"]),
            item_name=data["item_name"],
            description=data.get("description"),
            quantity_needed=int(data["quantity_needed"]),
            unit=data["unit"],
            image_url=data.get("image_url"),
            url=data.get("url"),
            quantity_committed=int(data["quantity_committed"]),
            fulfillment_percentage=int(data["fulfillment_percentage"]),
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
        )
