"""Random source protocol.

The secret-friend shuffle draws its randomness through this port so tests
can force specific permutations. ``random.Random`` and
``random.SystemRandom`` satisfy it structurally.
"""

from typing import Protocol


class RandomSource(Protocol):
    """Source of uniformly distributed integers."""

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        ...
