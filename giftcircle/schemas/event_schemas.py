"""Event request and response schemas.

Pydantic schemas for event, participant and draw endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- DTO-to-schema conversion methods
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from giftcircle.application.dtos import (
    DrawResult,
    EventParticipantsResult,
    EventSummary,
    GroupSummary,
    MatchPair,
    ParticipantResult,
    UserRef,
)
from giftcircle.domain.enums import EventType


# =============================================================================
# Response Schemas
# =============================================================================


class GroupResponse(BaseModel):
    id: UUID = Field(..., description="Group unique identifier")
    name: str = Field(..., description="Group name")
    description: str | None = Field(None, description="Group description")

    @classmethod
    def from_dto(cls, dto: GroupSummary) -> "GroupResponse":
        return cls(id=dto.id, name=dto.name, description=dto.description)


class EventResponse(BaseModel):
    """Single event response.

    Attributes:
        id: Event unique identifier.
        title: Event title.
        event_date: When the event takes place.
        owner_id: User who created the event.
        owner_name: Owner display name.
        event_type: Event type value (e.g., "potluck").
        groups: Attached groups, primary group first.
    """

    id: UUID = Field(..., description="Event unique identifier")
    title: str = Field(..., description="Event title")
    event_date: datetime = Field(..., description="When the event takes place")
    owner_id: UUID = Field(..., description="Event owner")
    owner_name: str = Field(..., description="Owner display name")
    event_type: str = Field(
        ...,
        description="Event type",
        examples=["regular", "secret_friend", "registry", "potluck"],
    )
    groups: list[GroupResponse] = Field(
        default_factory=list, description="Attached groups, primary group first"
    )

    @classmethod
    def from_dto(cls, dto: EventSummary) -> "EventResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            title=dto.title,
            event_date=dto.event_date,
            owner_id=dto.owner_id,
            owner_name=dto.owner_name,
            event_type=dto.event_type,
            groups=[GroupResponse.from_dto(g) for g in dto.groups],
        )


class EventListResponse(BaseModel):
    events: list[EventResponse] = Field(..., description="List of events")
    total_count: int = Field(..., description="Total event count")

    @classmethod
    def from_dto(cls, dtos: list[EventSummary]) -> "EventListResponse":
        return cls(
            events=[EventResponse.from_dto(e) for e in dtos],
            total_count=len(dtos),
        )


class ParticipantResponse(BaseModel):
    id: UUID = Field(..., description="Participant registration ID")
    name: str = Field(..., description="Participant display name")
    user_id: UUID = Field(..., description="Registered user")

    @classmethod
    def from_dto(cls, dto: ParticipantResult) -> "ParticipantResponse":
        return cls(id=dto.id, name=dto.name, user_id=dto.user_id)


class EventParticipantsResponse(BaseModel):
    event_id: UUID = Field(..., description="Event unique identifier")
    participants: list[ParticipantResponse] = Field(
        ..., description="Current participant list"
    )

    @classmethod
    def from_dto(cls, dto: EventParticipantsResult) -> "EventParticipantsResponse":
        return cls(
            event_id=dto.event_id,
            participants=[ParticipantResponse.from_dto(p) for p in dto.participants],
        )


class UserRefResponse(BaseModel):
    id: UUID = Field(..., description="User unique identifier")
    name: str = Field(..., description="User display name")

    @classmethod
    def from_dto(cls, dto: UserRef) -> "UserRefResponse":
        return cls(id=dto.id, name=dto.name)


class MatchResponse(BaseModel):
    giver: UserRefResponse = Field(..., description="Participant giving the gift")
    receiver: UserRefResponse = Field(..., description="Participant receiving it")

    @classmethod
    def from_dto(cls, dto: MatchPair) -> "MatchResponse":
        return cls(
            giver=UserRefResponse.from_dto(dto.giver),
            receiver=UserRefResponse.from_dto(dto.receiver),
        )


class DrawResponse(BaseModel):
    """Secret-friend draw result.

    Attributes:
        event_id: Event the draw ran for.
        event_title: Event title.
        matches: One giver/receiver pair per participant.
    """

    event_id: UUID = Field(..., description="Event unique identifier")
    event_title: str = Field(..., description="Event title")
    matches: list[MatchResponse] = Field(..., description="Giver/receiver pairs")

    @classmethod
    def from_dto(cls, dto: DrawResult) -> "DrawResponse":
        return cls(
            event_id=dto.event_id,
            event_title=dto.event_title,
            matches=[MatchResponse.from_dto(m) for m in dto.matches],
        )


# =============================================================================
# Request Schemas
# =============================================================================


class CreateEventRequest(BaseModel):
    """Request to create an event.

    Attributes:
        title: Event title.
        event_date: When the event takes place.
        group_ids: Groups to attach; the first one is the primary group.
        event_type: Event type (cannot be changed later).
    """

    title: str = Field(..., min_length=1, max_length=200, description="Event title")
    event_date: datetime = Field(..., description="When the event takes place")
    group_ids: list[UUID] = Field(
        ..., min_length=1, description="Groups to attach, primary group first"
    )
    event_type: EventType = Field(EventType.REGULAR, description="Event type")

    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "Office Secret Friend",
                "event_date": "2026-12-20T19:00:00Z",
                "group_ids": ["0192b5c4-0000-7000-8000-000000000001"],
                "event_type": "secret_friend",
            }
        }
    }


class AddParticipantsRequest(BaseModel):
    """Request to replace an event's participant list.

    The event owner is always included, whether or not listed.
    """

    participant_ids: list[UUID] = Field(
        default_factory=list, description="Users to register"
    )
