"""Domain entities package.

Usage:
    from giftcircle.domain.entities import Event, Gift, Supply, Contribution
"""

from giftcircle.domain.entities.contribution import Contribution
from giftcircle.domain.entities.event import Event
from giftcircle.domain.entities.gift import Gift
from giftcircle.domain.entities.group import Group
from giftcircle.domain.entities.match import Match
from giftcircle.domain.entities.participant import EventParticipant
from giftcircle.domain.entities.supply import Supply
from giftcircle.domain.entities.user import User

__all__ = [
    "Contribution",
    "Event",
    "EventParticipant",
    "Gift",
    "Group",
    "Match",
    "Supply",
    "User",
]
