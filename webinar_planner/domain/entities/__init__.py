"""Domain entities package.

Usage:
    from webinar_planner.domain.entities import User, Webinar
"""

from webinar_planner.domain.entities.user import User
from webinar_planner.domain.entities.webinar import Webinar

__all__ = ["User", "Webinar"]
