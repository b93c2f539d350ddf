"""Supply ledger request and response schemas.

Pydantic schemas for supply and contribution endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- DTO-to-schema conversion methods
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, HttpUrl

from giftcircle.application.dtos import (
    ContributionResult,
    SupplyProgressResult,
    SupplyResult,
)


# =============================================================================
# Response Schemas
# =============================================================================


class SupplyResponse(BaseModel):
    """Single supply response.

    Attributes:
        id: Supply unique identifier.
        event_id: Event the supply belongs to.
        item_name: What is needed.
        quantity_needed: How many units are needed.
        unit: Unit of measure.
        description: Optional free text.
        image_url: Optional picture of the item.
        url: Optional link (e.g., a store page).
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID = Field(..., description="Supply unique identifier")
    event_id: UUID = Field(..., description="Event the supply belongs to")
    item_name: str = Field(..., description="What is needed")
    quantity_needed: int = Field(..., description="How many units are needed")
    unit: str = Field(..., description="Unit of measure", examples=["bottles", "kg"])
    description: str | None = Field(None, description="Free-text description")
    image_url: str | None = Field(None, description="Picture of the item")
    url: str | None = Field(None, description="Link to the item")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_dto(cls, dto: SupplyResult) -> "SupplyResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            event_id=dto.event_id,
            item_name=dto.item_name,
            quantity_needed=dto.quantity_needed,
            unit=dto.unit,
            description=dto.description,
            image_url=dto.image_url,
            url=dto.url,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class SupplyProgressResponse(SupplyResponse):
    """Supply with its committed total.

    Attributes:
        quantity_committed: Sum of all contributions.
        fulfillment_percentage: Committed over needed, rounded, may exceed 100.
    """

    quantity_committed: int = Field(..., description="Sum of all contributions")
    fulfillment_percentage: int = Field(
        ..., description="Committed / needed as a rounded percentage", examples=[80]
    )

    @classmethod
    def from_progress(cls, dto: SupplyProgressResult) -> "SupplyProgressResponse":
        return cls(
            id=dto.id,
            event_id=dto.event_id,
            item_name=dto.item_name,
            quantity_needed=dto.quantity_needed,
            unit=dto.unit,
            description=dto.description,
            image_url=dto.image_url,
            url=dto.url,
            quantity_committed=dto.quantity_committed,
            fulfillment_percentage=dto.fulfillment_percentage,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class SupplyListResponse(BaseModel):
    supplies: list[SupplyProgressResponse] = Field(
        ..., description="Supplies in creation order"
    )
    total_count: int = Field(..., description="Total supply count")

    @classmethod
    def from_dto(cls, dtos: list[SupplyProgressResult]) -> "SupplyListResponse":
        return cls(
            supplies=[SupplyProgressResponse.from_progress(s) for s in dtos],
            total_count=len(dtos),
        )


class ContributionResponse(BaseModel):
    """Single contribution response.

    Attributes:
        warning: Present when the supply is now over-committed but within the
            allowed margin.
    """

    id: UUID = Field(..., description="Contribution unique identifier")
    supply_id: UUID = Field(..., description="Supply contributed to")
    user_id: UUID = Field(..., description="Contributor")
    user_name: str | None = Field(None, description="Contributor display name")
    quantity_committed: int = Field(..., description="Units pledged")
    notes: str | None = Field(None, description="Free-text notes")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
    warning: str | None = Field(
        None,
        description="Over-commitment advisory",
        examples=[
            "Warning: the contribution exceeds the quantity needed. "
            "Total committed: 12 of 10 bottles needed."
        ],
    )

    @classmethod
    def from_dto(cls, dto: ContributionResult) -> "ContributionResponse":
        return cls(
            id=dto.id,
            supply_id=dto.supply_id,
            user_id=dto.user_id,
            user_name=dto.user_name,
            quantity_committed=dto.quantity_committed,
            notes=dto.notes,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
            warning=dto.warning,
        )


class ContributionListResponse(BaseModel):
    contributions: list[ContributionResponse] = Field(
        ..., description="Contributions in creation order"
    )
    total_count: int = Field(..., description="Total contribution count")

    @classmethod
    def from_dto(cls, dtos: list[ContributionResult]) -> "ContributionListResponse":
        return cls(
            contributions=[ContributionResponse.from_dto(c) for c in dtos],
            total_count=len(dtos),
        )


# =============================================================================
# Request Schemas
# =============================================================================


class CreateSupplyRequest(BaseModel):
    """Request to add a supply to an event.

    Attributes:
        item_name: What is needed.
        quantity_needed: How many units are needed (at least 1).
        unit: Unit of measure.
        description: Optional free text.
        image_url: Optional HTTP(S) URL of a picture.
        url: Optional HTTP(S) link.
    """

    item_name: str = Field(..., min_length=1, max_length=200, description="Item name")
    quantity_needed: int = Field(..., ge=1, description="Units needed")
    unit: str = Field(..., min_length=1, max_length=50, description="Unit of measure")
    description: str | None = Field(None, description="Free-text description")
    image_url: HttpUrl | None = Field(None, description="Picture of the item")
    url: HttpUrl | None = Field(None, description="Link to the item")

    model_config = {
        "json_schema_extra": {
            "example": {
                "item_name": "Sparkling water",
                "quantity_needed": 10,
                "unit": "bottles",
            }
        }
    }


class UpdateSupplyRequest(BaseModel):
    """Partial supply update; omitted fields keep their value."""

    item_name: str | None = Field(None, min_length=1, max_length=200)
    quantity_needed: int | None = Field(None, ge=1)
    unit: str | None = Field(None, min_length=1, max_length=50)
    description: str | None = None
    image_url: HttpUrl | None = None
    url: HttpUrl | None = None


class CreateContributionRequest(BaseModel):
    quantity_committed: int = Field(..., ge=1, description="Units pledged")
    notes: str | None = Field(None, description="Free-text notes")


class UpdateContributionRequest(BaseModel):
    """Partial contribution update; omitted fields keep their value."""

    quantity_committed: int | None = Field(None, ge=1, description="Units pledged")
    notes: str | None = Field(None, description="Free-text notes")


def url_or_none(value: HttpUrl | None) -> str | None:
    """Render an optional validated URL as the string the domain stores."""
    return str(value) if value is not None else None
