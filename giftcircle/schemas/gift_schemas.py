"""Gift suggestion request and response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, HttpUrl

from giftcircle.application.dtos import (
    EventGiftsResult,
    GiftEventRef,
    GiftInfo,
    GiftResult,
)
from giftcircle.schemas.event_schemas import UserRefResponse


# =============================================================================
# Response Schemas
# =============================================================================


class GiftEventResponse(BaseModel):
    id: UUID = Field(..., description="Event unique identifier")
    title: str = Field(..., description="Event title")
    event_date: datetime = Field(..., description="When the event happens")
    event_type: str = Field(..., description="Event type", examples=["secret_friend"])

    @classmethod
    def from_dto(cls, dto: GiftEventRef) -> "GiftEventResponse":
        return cls(
            id=dto.id,
            title=dto.title,
            event_date=dto.event_date,
            event_type=dto.event_type,
        )


class GiftResponse(BaseModel):
    """Created gift suggestion.

    Attributes:
        user: Who wants the gift.
        events: Events the suggestion was attached to, in request order.
    """

    id: UUID = Field(..., description="Gift unique identifier")
    title: str = Field(..., description="What the user would like")
    urls: list[str] = Field(..., description="Purchase links")
    user: UserRefResponse = Field(..., description="Who wants the gift")
    events: list[GiftEventResponse] = Field(..., description="Attached events")
    created_at: datetime = Field(..., description="Creation timestamp")

    @classmethod
    def from_dto(cls, dto: GiftResult) -> "GiftResponse":
        return cls(
            id=dto.id,
            title=dto.title,
            urls=list(dto.urls),
            user=UserRefResponse.from_dto(dto.user),
            events=[GiftEventResponse.from_dto(e) for e in dto.events],
            created_at=dto.created_at,
        )


class GiftInfoResponse(BaseModel):
    id: UUID = Field(..., description="Gift unique identifier")
    title: str = Field(..., description="What the user would like")
    urls: list[str] = Field(..., description="Purchase links")
    user_id: UUID = Field(..., description="Who wants the gift")
    user_name: str = Field(..., description="Display name of that user")
    created_at: datetime = Field(..., description="Creation timestamp")

    @classmethod
    def from_dto(cls, dto: GiftInfo) -> "GiftInfoResponse":
        return cls(
            id=dto.id,
            title=dto.title,
            urls=list(dto.urls),
            user_id=dto.user_id,
            user_name=dto.user_name,
            created_at=dto.created_at,
        )


class EventGiftsResponse(BaseModel):
    """Gift suggestions of an event visible to the caller.

    Attributes:
        receiver: Secret-friend events only; the participant the caller
            drew, whose suggestions are the ones listed.
    """

    event_id: UUID = Field(..., description="Event unique identifier")
    event_title: str = Field(..., description="Event title")
    event_type: str = Field(..., description="Event type")
    receiver: UserRefResponse | None = Field(
        None, description="Drawn receiver (secret-friend events)"
    )
    gifts: list[GiftInfoResponse] = Field(..., description="Suggestions, oldest first")
    total_count: int = Field(..., description="Total gift count")

    @classmethod
    def from_dto(cls, dto: EventGiftsResult) -> "EventGiftsResponse":
        return cls(
            event_id=dto.event_id,
            event_title=dto.event_title,
            event_type=dto.event_type,
            receiver=UserRefResponse.from_dto(dto.receiver) if dto.receiver else None,
            gifts=[GiftInfoResponse.from_dto(g) for g in dto.gifts],
            total_count=len(dto.gifts),
        )


# =============================================================================
# Request Schemas
# =============================================================================


class CreateGiftRequest(BaseModel):
    """Request to suggest a gift for one or more events.

    Attributes:
        title: What the user would like.
        urls: HTTP(S) purchase links.
        event_ids: Events to attach the suggestion to.
    """

    title: str = Field(..., min_length=1, max_length=255, description="Gift title")
    urls: list[HttpUrl] = Field(default_factory=list, description="Purchase links")
    event_ids: list[UUID] = Field(..., min_length=1, description="Target events")

    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "Board game",
                "urls": ["https://example.com/board-game"],
                "event_ids": ["0192b5c4-0000-7000-8000-000000000000"],
            }
        }
    }
