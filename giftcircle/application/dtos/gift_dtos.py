"""Gift DTOs.

DTOs:
    - GiftEventRef: event a created gift was attached to
    - GiftResult: Result from CreateGift
    - GiftInfo / EventGiftsResult: Result from ListEventGifts, cacheable
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from giftcircle.application.dtos.event_dtos import UserRef
from giftcircle.domain.entities import Event, Gift


@dataclass(frozen=True, kw_only=True)
class GiftEventRef:
    id: UUID
    title: str
    event_date: datetime
    event_type: str


@dataclass(frozen=True, kw_only=True)
class GiftResult:
    """A stored gift suggestion and the events it was attached to."""

    id: UUID
    title: str
    urls: list[str]
    user: UserRef
    events: list[GiftEventRef]
    created_at: datetime

    @classmethod
    def from_entity(
        cls, gift: Gift, user_name: str, events: list[Event]
    ) -> "GiftResult":
        return cls(
            id=gift.id,
            title=gift.title,
            urls=list(gift.urls),
            user=UserRef(id=gift.user_id, name=user_name),
            events=[
                GiftEventRef(
                    id=event.id,
                    title=event.title,
                    event_date=event.event_date,
                    event_type=event.event_type.value,
                )
                for event in events
            ],
            created_at=gift.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class GiftInfo:
    id: UUID
    title: str
    urls: list[str]
    user_id: UUID
    user_name: str
    created_at: datetime

    @classmethod
    def from_entity(cls, gift: Gift) -> "GiftInfo":
        return cls(
            id=gift.id,
            title=gift.title,
            urls=list(gift.urls),
            user_id=gift.user_id,
            user_name=gift.user_name or "",
            created_at=gift.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class EventGiftsResult:
    """Gift suggestions of an event for one viewer.

    receiver is set for secret-friend events: the participant the viewer
    drew, whose suggestions are the only ones listed.

    Round-trips through the cache as a plain JSON object (to_cache/from_cache).
    """

    event_id: UUID
    event_title: str
    event_type: str
    gifts: list[GiftInfo]
    receiver: UserRef | None = None

    def to_cache(self) -> dict[str, Any]:
        return {
            "event_id": str(self.event_id),
            "event_title": self.event_title,
            "event_type": self.event_type,
            "receiver": (
                {"id": str(self.receiver.id), "name": self.receiver.name}
                if self.receiver
                else None
            ),
            "gifts": [
                {
                    "id": str(gift.id),
                    "title": gift.title,
                    "urls": gift.urls,
                    "user_id": str(gift.user_id),
                    "user_name": gift.user_name,
                    "created_at": gift.created_at.isoformat(),
                }
                for gift in self.gifts
            ],
        }

    @classmethod
    def from_cache(cls, data: dict[str, Any]) -> "EventGiftsResult":
        """Rebuild from a cached JSON object.

        Raises:
            KeyError, TypeError, ValueError: If the cached object is malformed.
        """
        receiver = data.get("receiver")
        return cls(
            event_id=UUID(data["event_id"]),
            event_title=data["event_title"],
            event_type=data["event_type"],
            receiver=(
                UserRef(id=UUID(receiver["id"]), name=receiver["name"])
                if receiver
                else None
            ),
            gifts=[
                GiftInfo(
                    id=UUID(item["id"]),
                    title=item["title"],
                    urls=list(item["urls"]),
                    user_id=UUID(item["user_id"]),
                    user_name=item["user_name"],
                    created_at=datetime.fromisoformat(item["created_at"]),
                )
                for item in data["gifts"]
            ],
        )
