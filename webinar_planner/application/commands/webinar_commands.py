"""Webinar commands.

Commands that schedule webinars and change their seat capacity.

Architecture:
    - Commands are immutable value objects representing user intent
    - Handlers validate business rules and return Result types
    - Request payloads are parsed and type-checked at the HTTP boundary
      before a command is built
"""

from dataclasses import dataclass
from datetime import datetime

from webinar_planner.domain.protocols.principal_protocol import PrincipalProtocol


@dataclass(frozen=True, kw_only=True)
class OrganizeWebinar:
    """Command to schedule a new webinar.

    Attributes:
        user_id: Organizer creating the webinar.
        title: Webinar title.
        seats: Initial seat capacity.
        start_date: Scheduled start (timezone-aware).
        end_date: Scheduled end (timezone-aware).
    """

    user_id: str
    title: str
    seats: int
    start_date: datetime
    end_date: datetime


@dataclass(frozen=True, kw_only=True)
class ChangeSeats:
    """Command to set a webinar's seat capacity.

    Attributes:
        user: Acting principal (must be the organizer).
        webinar_id: Webinar to update.
        seats: New total seat count (not a delta).
    """

    user: PrincipalProtocol
    webinar_id: str
    seats: int
