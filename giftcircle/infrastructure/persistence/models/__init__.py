"""SQLAlchemy models.

Importing this package registers every table on BaseModel.metadata
(used by Alembic autogenerate).
"""

from giftcircle.infrastructure.persistence.models.contribution import (
    ContributionModel,
)
from giftcircle.infrastructure.persistence.models.event import EventModel
from giftcircle.infrastructure.persistence.models.gift import GiftModel, event_gifts
from giftcircle.infrastructure.persistence.models.group import (
    GroupModel,
    group_events,
)
from giftcircle.infrastructure.persistence.models.match import MatchModel
from giftcircle.infrastructure.persistence.models.participant import (
    ParticipantModel,
)
from giftcircle.infrastructure.persistence.models.supply import SupplyModel
from giftcircle.infrastructure.persistence.models.user import UserModel

__all__ = [
    "ContributionModel",
    "EventModel",
    "GiftModel",
    "GroupModel",
    "MatchModel",
    "ParticipantModel",
    "SupplyModel",
    "UserModel",
    "event_gifts",
    "group_events",
]
