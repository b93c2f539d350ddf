"""Supply and contribution commands (CQRS write operations).

Update commands follow PATCH semantics: a field left as None is unchanged.

Example:
    >>> cmd = CreateContribution(
    ...     supply_id=supply_id,
    ...     user_id=user_id,
    ...     quantity_committed=2,
    ... )
    >>> result = await handler.handle(cmd)
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateSupply:
    """Add a needed item to a registry or potluck event."""

    event_id: UUID
    user_id: UUID
    item_name: str
    quantity_needed: int
    unit: str
    description: str | None = None
    image_url: str | None = None
    url: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateSupply:
    """Change a supply (owner or group admin of its event)."""

    supply_id: UUID
    user_id: UUID
    item_name: str | None = None
    quantity_needed: int | None = None
    unit: str | None = None
    description: str | None = None
    image_url: str | None = None
    url: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteSupply:
    """Remove a supply and, by cascade, its contributions."""

    supply_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class CreateContribution:
    """Pledge a quantity toward a supply (owner or participant)."""

    supply_id: UUID
    user_id: UUID
    quantity_committed: int
    notes: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateContribution:
    """Change a pledge (original contributor only)."""

    contribution_id: UUID
    user_id: UUID
    quantity_committed: int | None = None
    notes: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteContribution:
    """Withdraw a pledge (original contributor only)."""

    contribution_id: UUID
    user_id: UUID
