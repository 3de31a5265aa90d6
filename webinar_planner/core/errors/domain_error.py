"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for business rule violations.
Domain errors flow through the system as data (Result types), not exceptions.

Architecture:
- Does NOT inherit from Exception (not raised, returned in Result)
- Uses dataclass inheritance (NOT Protocol/ABC)
- Type-safe with Result[T, DomainError]

Usage:
    from webinar_planner.core.errors import DomainError
    from webinar_planner.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message
"""

from dataclasses import dataclass

from webinar_planner.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
    """

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
