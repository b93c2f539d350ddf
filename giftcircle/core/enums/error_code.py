"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_*)
- Authentication errors (TOKEN_*)
- Authorization errors (PERMISSION_*, *_NOT_OWNED)
- Draw rule violations (DRAW_*)
- Ledger rule violations (SUPPLY_*, CONTRIBUTION_*)
- Gift suggestion rules (GIFT_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_INPUT = "invalid_input"
    INVALID_EVENT_TYPE = "invalid_event_type"
    INVALID_QUANTITY = "invalid_quantity"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    GROUP_NOT_FOUND = "group_not_found"
    EVENT_NOT_FOUND = "event_not_found"
    SUPPLY_NOT_FOUND = "supply_not_found"
    CONTRIBUTION_NOT_FOUND = "contribution_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    RESOURCE_CONFLICT = "resource_conflict"

    # Authentication errors
    TOKEN_INVALID = "token_invalid"
    AUTHENTICATION_FAILED = "authentication_failed"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    RESOURCE_NOT_OWNED = "resource_not_owned"

    # Secret-friend draw rules
    DRAW_EVENT_HAS_NO_GROUP = "draw_event_has_no_group"
    DRAW_INSUFFICIENT_PARTICIPANTS = "draw_insufficient_participants"
    DRAW_ODD_PARTICIPANT_COUNT = "draw_odd_participant_count"
    DRAW_ALREADY_PERFORMED = "draw_already_performed"
    DRAW_ATTEMPTS_EXHAUSTED = "draw_attempts_exhausted"

    # Supply ledger rules
    CONTRIBUTION_LIMIT_EXCEEDED = "contribution_limit_exceeded"

    # Gift suggestion rules
    GIFT_EVENT_HAS_NO_GROUP = "gift_event_has_no_group"
    GIFT_RECEIVER_NOT_DRAWN = "gift_receiver_not_drawn"

    # Infrastructure (mapped from InfrastructureErrorCode)
    PERSISTENCE_FAILED = "persistence_failed"
    CACHE_UNAVAILABLE = "cache_unavailable"
    MESSAGE_BROKER_UNAVAILABLE = "message_broker_unavailable"
