"""Command handlers.

Usage:
    from webinar_planner.application.commands.handlers import (
        ChangeSeatsHandler,
        OrganizeWebinarHandler,
    )
"""

from webinar_planner.application.commands.handlers.change_seats_handler import (
    ChangeSeatsHandler,
)
from webinar_planner.application.commands.handlers.organize_webinar_handler import (
    OrganizeWebinarHandler,
)

__all__ = ["ChangeSeatsHandler", "OrganizeWebinarHandler"]
