"""Secret-friend match engine.

Produces a derangement of the participants: every participant gives exactly
one gift and receives exactly one, and nobody draws themselves.

Algorithm:
    Receivers start as a copy of the givers. Each attempt applies a
    Fisher-Yates shuffle to the receivers and accepts the first permutation
    with no fixed point. Attempts are capped; for four or more participants
    roughly one shuffle in e is a derangement, so the cap is only reached
    with a broken random source or a single participant.

The random source is injected so tests can force both outcomes.
"""

import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar
from uuid import UUID

from giftcircle.core.enums import ErrorCode
from giftcircle.core.errors import ValidationError
from giftcircle.core.result import Failure, Result, Success
from giftcircle.domain.protocols.random_source_protocol import RandomSource

DEFAULT_MAX_SHUFFLE_ATTEMPTS = 100

T = TypeVar("T")


@dataclass(frozen=True, slots=True, kw_only=True)
class Pairing:
    """Giver and receiver chosen by a draw."""

    giver_id: UUID
    receiver_id: UUID


def check_draw_pool(
    participant_count: int, minimum: int
) -> Result[None, ValidationError]:
    """Validate the size of the draw pool.

    Order matters: the minimum is checked before parity so a pool of three
    with a minimum of four reports the minimum.

    Args:
        participant_count: Number of distinct participants.
        minimum: Configured minimum pool size.

    Returns:
        Success(None) if the pool may be drawn, Failure(ValidationError) otherwise.
    """
    if participant_count < minimum:
        return Failure(
            error=ValidationError(
                code=ErrorCode.DRAW_INSUFFICIENT_PARTICIPANTS,
                message=(
                    f"At least {minimum} participants are required for the draw, "
                    f"found {participant_count}"
                ),
                field="participants",
                details={"count": str(participant_count), "minimum": str(minimum)},
            )
        )
    if participant_count % 2 != 0:
        return Failure(
            error=ValidationError(
                code=ErrorCode.DRAW_ODD_PARTICIPANT_COUNT,
                message=(
                    f"The number of participants must be even, found {participant_count}"
                ),
                field="participants",
                details={"count": str(participant_count)},
            )
        )
    return Success(value=None)


class MatchEngine:
    """Generates self-match-free assignments with a bounded attempt budget.

    Attributes:
        max_attempts: Shuffles tried before giving up.
    """

    def __init__(
        self,
        random_source: RandomSource | None = None,
        max_attempts: int = DEFAULT_MAX_SHUFFLE_ATTEMPTS,
    ) -> None:
        """Initialize the engine.

        Args:
            random_source: Integer source; defaults to the OS-backed
                ``random.SystemRandom``.
            max_attempts: Shuffle budget, at least 1.

        Raises:
            ValueError: If max_attempts is below 1.
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._random: RandomSource = random_source or random.SystemRandom()
        self.max_attempts = max_attempts

    def shuffle(self, items: list[T]) -> None:
        """Shuffle a list in place (Fisher-Yates)."""
        for i in range(len(items) - 1, 0, -1):
            j = self._random.randint(0, i)
            items[i], items[j] = items[j], items[i]

    def derange(
        self, participant_ids: Sequence[UUID]
    ) -> Result[list[Pairing], ValidationError]:
        """Pair every participant with someone other than themselves.

        Args:
            participant_ids: Distinct participant IDs.

        Returns:
            Success with one Pairing per participant, in giver order, or a
            retryable Failure(ValidationError) when the budget runs out.

        Raises:
            ValueError: If participant_ids contains duplicates.
        """
        givers = list(participant_ids)
        if len(set(givers)) != len(givers):
            raise ValueError("participant_ids must be distinct")

        receivers = list(givers)
        for _ in range(self.max_attempts):
            self.shuffle(receivers)
            if all(giver != receiver for giver, receiver in zip(givers, receivers)):
                return Success(
                    value=[
                        Pairing(giver_id=giver, receiver_id=receiver)
                        for giver, receiver in zip(givers, receivers)
                    ]
                )

        return Failure(
            error=ValidationError(
                code=ErrorCode.DRAW_ATTEMPTS_EXHAUSTED,
                message=(
                    "Could not find a valid secret friend assignment, please try again"
                ),
                retryable=True,
                details={"attempts": str(self.max_attempts)},
            )
        )
