"""Result types for railway-oriented programming.

Operations that can fail for business reasons return a Result instead of
raising, which keeps error handling explicit and testable.

Usage:
    def reserve(seats: int) -> Result[int, str]:
        if seats < 1:
            return Failure(error="Not enough seats")
        return Success(value=seats)

    match reserve(10):
        case Success(value=seats):
            print(f"Reserved {seats}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
