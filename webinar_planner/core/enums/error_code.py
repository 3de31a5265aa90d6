"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Authorization errors (*_NOT_ORGANIZER)
- Business rule violations (WEBINAR_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    WEBINAR_NOT_FOUND = "webinar_not_found"

    # Authorization errors
    WEBINAR_NOT_ORGANIZER = "webinar_not_organizer"

    # Business rule violations
    WEBINAR_DATES_TOO_SOON = "webinar_dates_too_soon"
    WEBINAR_TOO_MANY_SEATS = "webinar_too_many_seats"
    WEBINAR_NOT_ENOUGH_SEATS = "webinar_not_enough_seats"
    WEBINAR_SEATS_CANNOT_DECREASE = "webinar_seats_cannot_decrease"
