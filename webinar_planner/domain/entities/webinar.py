"""Webinar domain entity.

The Webinar is the aggregate root of the planner: a scheduled session owned
by a single organizer, with a bounded number of seats.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Data container with small query/mutation helpers
    - Business rules live in the command handlers, not here: they are
      operation-specific (e.g. "seats cannot decrease" applies to updates only)

Usage:
    from datetime import UTC, datetime, timedelta
    from webinar_planner.domain.entities import Webinar

    webinar = Webinar(
        id="0192f1f8-...",
        organizer_id="alice",
        title="Hexagonal architecture in practice",
        start_date=datetime(2026, 12, 1, 10, tzinfo=UTC),
        end_date=datetime(2026, 12, 1, 11, tzinfo=UTC),
        seats=100,
    )
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

# Scheduling policy
MIN_LEAD_TIME: timedelta = timedelta(days=3)
"""Minimum interval between now and a webinar's start date."""

MIN_SEATS: int = 1
"""Lowest seat count a webinar may hold."""

MAX_SEATS: int = 1000
"""Highest seat count a webinar may hold."""


@dataclass
class Webinar:
    """Scheduled webinar owned by an organizer.

    `id` and `organizer_id` are fixed at creation and never reassigned.
    `seats` is the only field that changes after creation, and always stays
    within [MIN_SEATS, MAX_SEATS] once persisted.

    Attributes:
        id: Opaque unique identifier.
        organizer_id: Identifier of the owning user.
        title: Free-form title.
        start_date: Scheduled start (timezone-aware).
        end_date: Scheduled end (timezone-aware).
        seats: Seat capacity.

    Example:
        >>> webinar.is_organizer("alice")
        True
        >>> webinar.update_seats(200)
        >>> webinar.seats
        200
    """

    id: str
    organizer_id: str
    title: str
    start_date: datetime
    end_date: datetime
    seats: int

    def is_organizer(self, user_id: str) -> bool:
        """Check whether the given user organizes this webinar.

        Args:
            user_id: Identifier of the acting user.

        Returns:
            True if the user owns the webinar.
        """
        return self.organizer_id == user_id

    def update_seats(self, seats: int) -> None:
        """Set the seat capacity.

        Callers validate the new value first; see ChangeSeatsHandler.

        Args:
            seats: New total seat count.
        """
        self.seats = seats
