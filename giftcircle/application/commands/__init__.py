"""Commands (CQRS write operations)."""

from giftcircle.application.commands.event_commands import (
    AddEventParticipants,
    CreateEvent,
    DrawSecretFriend,
)
from giftcircle.application.commands.gift_commands import CreateGift
from giftcircle.application.commands.supply_commands import (
    CreateContribution,
    CreateSupply,
    DeleteContribution,
    DeleteSupply,
    UpdateContribution,
    UpdateSupply,
)

__all__ = [
    "AddEventParticipants",
    "CreateContribution",
    "CreateEvent",
    "CreateGift",
    "CreateSupply",
    "DeleteContribution",
    "DeleteSupply",
    "DrawSecretFriend",
    "UpdateContribution",
    "UpdateSupply",
]
