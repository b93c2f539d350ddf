"""Domain authorization policies."""

from giftcircle.domain.policies.event_access_policy import (
    AccessDecision,
    can_contribute,
    can_draw,
    can_manage_participants,
    can_manage_supplies,
    can_modify_contribution,
    can_suggest_gift,
)

__all__ = [
    "AccessDecision",
    "can_contribute",
    "can_draw",
    "can_manage_participants",
    "can_manage_supplies",
    "can_modify_contribution",
    "can_suggest_gift",
]
