"""Event access policy.

Pure authorization decisions for event features. Each rule takes the actor
and the already-loaded resource and returns an AccessDecision; no rule
touches persistence, so handlers load what a rule needs and ask it.

Roles:
    - owner: user who created the event
    - group admin: owner of any group the event is attached to
    - participant: user registered for the event (the owner always is)
    - contributor: user who made a given contribution

Gift suggestions follow the event type: any participant in a secret-friend
event, only the owner elsewhere.

Usage:
    decision = can_manage_supplies(event, user_id)
    if not decision.allowed:
        return Failure(error=decision.to_error())
"""

from dataclasses import dataclass
from uuid import UUID

from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import AuthorizationError
from giftcircle.domain.entities.contribution import Contribution
from giftcircle.domain.entities.event import Event
from giftcircle.domain.enums.event_type import EventType


@dataclass(frozen=True, slots=True, kw_only=True)
class AccessDecision:
    """Outcome of an authorization rule.

    Attributes:
        allowed: Whether the actor may proceed.
        reason: Human-readable explanation (set when denied).
        required_role: Role the actor was expected to hold.
    """

    allowed: bool
    reason: str | None = None
    required_role: str | None = None

    @classmethod
    def allow(cls) -> "AccessDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str, required_role: str) -> "AccessDecision":
        return cls(allowed=False, reason=reason, required_role=required_role)

    def to_error(self) -> AuthorizationError:
        """Convert a denial into an AuthorizationError."""
        return AuthorizationError(
            code=ErrorCode.PERMISSION_DENIED,
            message=self.reason or "Access denied",
            required_permission=self.required_role,
        )


def can_draw(event: Event, actor_id: UUID) -> AccessDecision:
    """Only the event owner may run the secret-friend draw."""
    if event.is_owned_by(actor_id):
        return AccessDecision.allow()
    return AccessDecision.deny(
        "Only the event owner can perform the secret friend draw",
        required_role="event_owner",
    )


def can_manage_participants(event: Event, actor_id: UUID) -> AccessDecision:
    """Only the event owner may change the participant list."""
    if event.is_owned_by(actor_id):
        return AccessDecision.allow()
    return AccessDecision.deny(
        "Only the event owner can manage participants",
        required_role="event_owner",
    )


def can_manage_supplies(event: Event, actor_id: UUID) -> AccessDecision:
    """The event owner or an admin of one of its groups may manage supplies."""
    if event.is_owned_by(actor_id) or event.is_group_admin(actor_id):
        return AccessDecision.allow()
    return AccessDecision.deny(
        "Only the event owner or a group admin can manage supplies",
        required_role="event_owner_or_group_admin",
    )


def can_contribute(
    event: Event, actor_id: UUID, *, is_participant: bool
) -> AccessDecision:
    """The event owner or a registered participant may pledge contributions."""
    if event.is_owned_by(actor_id) or is_participant:
        return AccessDecision.allow()
    return AccessDecision.deny(
        "Only event participants can contribute supplies",
        required_role="event_participant",
    )


def can_modify_contribution(
    contribution: Contribution, actor_id: UUID
) -> AccessDecision:
    """Only the original contributor may edit or withdraw a contribution."""
    if contribution.is_owned_by(actor_id):
        return AccessDecision.allow()
    return AccessDecision.deny(
        "Only the contributor can change this contribution",
        required_role="contributor",
    )


def can_suggest_gift(
    event: Event, actor_id: UUID, *, is_participant: bool
) -> AccessDecision:
    """Who may attach a gift suggestion to an event.

    Secret-friend events take suggestions from every participant (the owner
    included), since each of them is somebody's receiver. Other events only
    take the owner's own wish list.
    """
    if event.event_type is EventType.SECRET_FRIEND:
        if event.is_owned_by(actor_id) or is_participant:
            return AccessDecision.allow()
        return AccessDecision.deny(
            f"Only participants of '{event.title}' can suggest gifts",
            required_role="event_participant",
        )
    if event.is_owned_by(actor_id):
        return AccessDecision.allow()
    return AccessDecision.deny(
        f"Only the owner of '{event.title}' can suggest gifts",
        required_role="event_owner",
    )
