"""Webinar repository implementations.

Usage:
    from webinar_planner.infrastructure.persistence.repositories import (
        InMemoryWebinarRepository,
        WebinarRepository,
    )
"""

from webinar_planner.infrastructure.persistence.repositories.in_memory_webinar_repository import (
    InMemoryWebinarRepository,
)
from webinar_planner.infrastructure.persistence.repositories.webinar_repository import (
    WebinarRepository,
)

__all__ = ["InMemoryWebinarRepository", "WebinarRepository"]
