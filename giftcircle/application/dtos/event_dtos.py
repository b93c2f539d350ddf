"""Event DTOs (Data Transfer Objects).

Result dataclasses carried from event handlers to the presentation layer.
Participant references expose only an ID and a display name.

DTOs:
    - UserRef: {id, name} of a participant
    - MatchPair: giver and receiver of one secret-friend assignment
    - DrawResult: Result from DrawSecretFriend
    - ParticipantResult / EventParticipantsResult: Result from AddEventParticipants
    - GroupSummary / EventSummary: Results from CreateEvent and event listings
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from giftcircle.domain.entities import Event


@dataclass(frozen=True, kw_only=True)
class UserRef:
    id: UUID
    name: str


@dataclass(frozen=True, kw_only=True)
class MatchPair:
    giver: UserRef
    receiver: UserRef


@dataclass(frozen=True, kw_only=True)
class DrawResult:
    """Outcome of a secret-friend draw.

    Attributes:
        event_id: Event the draw ran for.
        event_title: Event title.
        matches: One pair per participant, in giver order.
    """

    event_id: UUID
    event_title: str
    matches: list[MatchPair]


@dataclass(frozen=True, kw_only=True)
class ParticipantResult:
    """Participant registration.

    Attributes:
        id: Registration ID.
        name: Participant display name.
        user_id: Registered user.
    """

    id: UUID
    name: str
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class EventParticipantsResult:
    event_id: UUID
    participants: list[ParticipantResult]


@dataclass(frozen=True, kw_only=True)
class GroupSummary:
    id: UUID
    name: str
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class EventSummary:
    """Event as listed to clients.

    Attributes:
        id: Event ID.
        title: Event title.
        event_date: When the event takes place.
        owner_id: Event owner.
        owner_name: Owner display name ("" when unknown).
        event_type: EventType value.
        groups: Attached groups, primary group first.
    """

    id: UUID
    title: str
    event_date: datetime
    owner_id: UUID
    owner_name: str
    event_type: str
    groups: list[GroupSummary] = field(default_factory=list)

    @classmethod
    def from_entity(cls, event: Event) -> "EventSummary":
        return cls(
            id=event.id,
            title=event.title,
            event_date=event.event_date,
            owner_id=event.owner_id,
            owner_name=event.owner_name or "",
            event_type=event.event_type.value,
            groups=[
                GroupSummary(id=g.id, name=g.name, description=g.description)
                for g in event.groups
            ],
        )
