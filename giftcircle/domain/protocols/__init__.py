"""Domain protocols (ports).

Usage:
    from giftcircle.domain.protocols import CacheProtocol, EventRepository
"""

from giftcircle.domain.protocols.cache_protocol import CacheProtocol
from giftcircle.domain.protocols.contribution_repository import (
    ContributionRepository,
)
from giftcircle.domain.protocols.event_repository import EventRepository
from giftcircle.domain.protocols.gift_repository import GiftRepository
from giftcircle.domain.protocols.group_repository import GroupRepository
from giftcircle.domain.protocols.logger_protocol import LoggerProtocol
from giftcircle.domain.protocols.match_repository import MatchRepository
from giftcircle.domain.protocols.message_publisher_protocol import (
    MessagePublisherProtocol,
)
from giftcircle.domain.protocols.participant_repository import (
    ParticipantRepository,
)
from giftcircle.domain.protocols.random_source_protocol import RandomSource
from giftcircle.domain.protocols.supply_repository import SupplyRepository
from giftcircle.domain.protocols.user_repository import UserRepository

__all__ = [
    "CacheProtocol",
    "ContributionRepository",
    "EventRepository",
    "GiftRepository",
    "GroupRepository",
    "LoggerProtocol",
    "MatchRepository",
    "MessagePublisherProtocol",
    "ParticipantRepository",
    "RandomSource",
    "SupplyRepository",
    "UserRepository",
]
