"""User domain entity.

Minimal identity of an authenticated user. The planner never loads users
from storage: ownership is a comparison between `User.id` and
`Webinar.organizer_id`.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class User:
    """Authenticated user acting on webinars.

    Attributes:
        id: User's unique identifier.
        email: User's email address, when known.
    """

    id: str
    email: str | None = None
