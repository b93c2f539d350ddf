"""Supply ledger rules.

Pure functions for the contribution threshold and progress figures.

Threshold:
    The total pledged toward a supply may exceed the quantity needed by up to
    20%, rounded down: max_allowed = floor(quantity_needed * 1.2). Totals
    above quantity_needed but within the cap are accepted with an advisory
    warning; totals above the cap are rejected.

Example:
    # Needs 10: pledging 12 is accepted with a warning, 13 is rejected
    check_commitment(quantity_needed=10, current_total=0, requested=12, unit="cans")
    fulfillment_percentage(committed=10, needed=10)  # 100
"""

import math
from dataclasses import dataclass
from fractions import Fraction

from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import ValidationError
from giftcircle.core.result import Failure, Result, Success

OVERCOMMIT_RATIO = Fraction(6, 5)


@dataclass(frozen=True, slots=True, kw_only=True)
class CommitmentCheck:
    """Accepted pledge total.

    Attributes:
        new_total: Total committed once the pledge is stored.
        max_allowed: Hard cap for the supply.
        warning: Advisory message when the total exceeds what is needed.
    """

    new_total: int
    max_allowed: int
    warning: str | None = None


def max_allowed_quantity(quantity_needed: int) -> int:
    """Hard cap on the total pledged toward a supply."""
    return math.floor(quantity_needed * OVERCOMMIT_RATIO)


def validate_quantity(value: int, field: str) -> Result[int, ValidationError]:
    """Quantities are whole units, at least 1."""
    if value < 1:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_QUANTITY,
                message=f"{field} must be at least 1",
                field=field,
            )
        )
    return Success(value=value)


def check_commitment(
    *,
    quantity_needed: int,
    current_total: int,
    requested: int,
    unit: str,
) -> Result[CommitmentCheck, ValidationError]:
    """Validate a pledge against the overcommit threshold.

    Args:
        quantity_needed: Units the supply needs.
        current_total: Units already pledged by other contributions.
        requested: Units in the new or edited pledge.
        unit: Unit label used in messages.

    Returns:
        Success(CommitmentCheck) if within the cap (with a warning above
        quantity_needed), Failure(ValidationError) if above the cap.
    """
    new_total = current_total + requested
    max_allowed = max_allowed_quantity(quantity_needed)

    if new_total > max_allowed:
        return Failure(
            error=ValidationError(
                code=ErrorCode.CONTRIBUTION_LIMIT_EXCEEDED,
                message=(
                    f"Cannot commit {requested} {unit}. The event needs "
                    f"{quantity_needed} and already has {current_total} committed. "
                    f"Maximum allowed: {max_allowed}."
                ),
                field="quantity_committed",
                details={
                    "quantity_needed": str(quantity_needed),
                    "current_total": str(current_total),
                    "max_allowed": str(max_allowed),
                },
            )
        )

    warning = None
    if new_total > quantity_needed:
        warning = (
            f"Warning: the contribution exceeds the quantity needed. Total committed: "
            f"{new_total} of {quantity_needed} {unit} needed."
        )

    return Success(
        value=CommitmentCheck(
            new_total=new_total, max_allowed=max_allowed, warning=warning
        )
    )


def fulfillment_percentage(committed: int, needed: int) -> int:
    """Percentage of the need covered, rounded half up.

    Defined as 0 when nothing is needed.
    """
    if needed <= 0:
        return 0
    # floor(100 * committed / needed + 1/2) in integer arithmetic
    return (200 * committed + needed) // (2 * needed)
