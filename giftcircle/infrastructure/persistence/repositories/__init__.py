"""Repository adapters (SQLAlchemy implementations of domain ports)."""

from giftcircle.infrastructure.persistence.repositories.contribution_repository import (
    ContributionRepository,
)
from giftcircle.infrastructure.persistence.repositories.event_repository import (
    EventRepository,
)
from giftcircle.infrastructure.persistence.repositories.gift_repository import (
    GiftRepository,
)
from giftcircle.infrastructure.persistence.repositories.group_repository import (
    GroupRepository,
)
from giftcircle.infrastructure.persistence.repositories.match_repository import (
    MatchRepository,
)
from giftcircle.infrastructure.persistence.repositories.participant_repository import (
    ParticipantRepository,
)
from giftcircle.infrastructure.persistence.repositories.supply_repository import (
    SupplyRepository,
)
from giftcircle.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "ContributionRepository",
    "EventRepository",
    "GiftRepository",
    "GroupRepository",
    "MatchRepository",
    "ParticipantRepository",
    "SupplyRepository",
    "UserRepository",
]
