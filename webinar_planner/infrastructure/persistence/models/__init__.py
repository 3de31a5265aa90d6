"""Database models package.

Importing this package registers every table on BaseModel.metadata.

Usage:
    from webinar_planner.infrastructure.persistence.models import Webinar
"""

from webinar_planner.infrastructure.persistence.models.webinar import Webinar

__all__ = ["Webinar"]
