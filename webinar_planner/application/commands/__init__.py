"""Application commands package.

Commands are immutable value objects representing user intent.

Usage:
    from webinar_planner.application.commands import ChangeSeats, OrganizeWebinar
"""

from webinar_planner.application.commands.webinar_commands import (
    ChangeSeats,
    OrganizeWebinar,
)

__all__ = ["ChangeSeats", "OrganizeWebinar"]
