"""Webinar domain errors.

Closed set of business rule violations for the webinar use cases. Each error
carries a fixed code and a fixed, caller-facing message.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from webinar_planner.core.result import Failure, Success
    from webinar_planner.domain.errors import WebinarNotFound, WebinarNotOrganizer

    match await handler.handle(command):
        case Success():
            ...
        case Failure(error=WebinarNotFound()):
            ...
        case Failure(error=WebinarNotOrganizer()):
            ...
"""

from dataclasses import dataclass, field

from webinar_planner.core.enums import ErrorCode
from webinar_planner.core.errors import DomainError
from webinar_planner.domain.entities.webinar import MAX_SEATS, MIN_LEAD_TIME, MIN_SEATS


@dataclass(frozen=True, slots=True, kw_only=True)
class WebinarDatesTooSoon(DomainError):
    """Start date is closer to now than the minimum lead time."""

    code: ErrorCode = field(default=ErrorCode.WEBINAR_DATES_TOO_SOON, init=False)
    message: str = field(
        default=(
            "Webinar must be scheduled at least "
            f"{MIN_LEAD_TIME.days} days in advance"
        ),
        init=False,
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class WebinarTooManySeats(DomainError):
    """Requested seat count exceeds MAX_SEATS."""

    code: ErrorCode = field(default=ErrorCode.WEBINAR_TOO_MANY_SEATS, init=False)
    message: str = field(
        default=f"Webinar must have at most {MAX_SEATS} seats",
        init=False,
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class WebinarNotEnoughSeats(DomainError):
    """Requested seat count is below MIN_SEATS."""

    code: ErrorCode = field(default=ErrorCode.WEBINAR_NOT_ENOUGH_SEATS, init=False)
    message: str = field(
        default=f"Webinar must have at least {MIN_SEATS} seat",
        init=False,
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class WebinarNotFound(DomainError):
    """No webinar exists with the requested identifier."""

    code: ErrorCode = field(default=ErrorCode.WEBINAR_NOT_FOUND, init=False)
    message: str = field(default="Webinar not found", init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class WebinarNotOrganizer(DomainError):
    """Acting user does not organize the webinar."""

    code: ErrorCode = field(default=ErrorCode.WEBINAR_NOT_ORGANIZER, init=False)
    message: str = field(
        default="User is not allowed to update this webinar",
        init=False,
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class WebinarSeatsCannotDecrease(DomainError):
    """New seat total is lower than the current one."""

    code: ErrorCode = field(
        default=ErrorCode.WEBINAR_SEATS_CANNOT_DECREASE, init=False
    )
    message: str = field(
        default="You cannot reduce the number of seats",
        init=False,
    )


# Failure kinds per use case (closed unions for exhaustive matching)
type OrganizeWebinarError = (
    WebinarDatesTooSoon | WebinarTooManySeats | WebinarNotEnoughSeats
)
type ChangeSeatsError = (
    WebinarNotFound
    | WebinarNotOrganizer
    | WebinarSeatsCannotDecrease
    | WebinarTooManySeats
)
