"""Application DTOs package.

Usage:
    from webinar_planner.application.dtos import OrganizedWebinar
"""

from webinar_planner.application.dtos.webinar_dtos import OrganizedWebinar

__all__ = ["OrganizedWebinar"]
