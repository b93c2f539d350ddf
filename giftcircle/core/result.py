"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising. Callers branch
on the variant with structural pattern matching.

Usage:
    def reserve(quantity: int) -> Result[int, str]:
        if quantity <= 0:
            return Failure(error="Quantity must be positive")
        return Success(value=quantity)

    match reserve(3):
        case Success(value=quantity):
            print(f"Reserved {quantity}")
        case Failure(error=error):
            print(f"Rejected: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
