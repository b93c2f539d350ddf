"""Application DTOs."""

from giftcircle.application.dtos.event_dtos import (
    DrawResult,
    EventParticipantsResult,
    EventSummary,
    GroupSummary,
    MatchPair,
    ParticipantResult,
    UserRef,
)
from giftcircle.application.dtos.gift_dtos import (
    EventGiftsResult,
    GiftEventRef,
    GiftInfo,
    GiftResult,
)
from giftcircle.application.dtos.supply_dtos import (
    ContributionResult,
    SupplyProgressResult,
    SupplyResult,
)

__all__ = [
    "ContributionResult",
    "DrawResult",
    "EventGiftsResult",
    "EventParticipantsResult",
    "EventSummary",
    "GiftEventRef",
    "GiftInfo",
    "GiftResult",
    "GroupSummary",
    "MatchPair",
    "ParticipantResult",
    "SupplyProgressResult",
    "SupplyResult",
    "UserRef",
]
