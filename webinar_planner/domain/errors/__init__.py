"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from webinar_planner.domain.errors import WebinarNotFound, StorageError
"""

from webinar_planner.domain.errors.storage_error import StorageError
from webinar_planner.domain.errors.webinar_error import (
    ChangeSeatsError,
    OrganizeWebinarError,
    WebinarDatesTooSoon,
    WebinarNotEnoughSeats,
    WebinarNotFound,
    WebinarNotOrganizer,
    WebinarSeatsCannotDecrease,
    WebinarTooManySeats,
)

__all__ = [
    "ChangeSeatsError",
    "OrganizeWebinarError",
    "StorageError",
    "WebinarDatesTooSoon",
    "WebinarNotEnoughSeats",
    "WebinarNotFound",
    "WebinarNotOrganizer",
    "WebinarSeatsCannotDecrease",
    "WebinarTooManySeats",
]
