"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from webinar_planner.core.container import get_logger, get_webinar_repository

The container is organized into modules by concern:
- infrastructure: Core services (database, logging, clock, identifiers)
- repositories: Repository factories
- webinar_handlers: Webinar command handler factories
"""

# Infrastructure services
from webinar_planner.core.container.infrastructure import (
    get_clock,
    get_database,
    get_db_session,
    get_id_generator,
    get_logger,
)

# Repositories
from webinar_planner.core.container.repositories import (
    get_in_memory_webinar_repository,
    get_webinar_repository,
)

# Webinar handlers
from webinar_planner.core.container.webinar_handlers import (
    get_change_seats_handler,
    get_organize_webinar_handler,
)

__all__ = [
    # Infrastructure
    "get_clock",
    "get_database",
    "get_db_session",
    "get_id_generator",
    "get_logger",
    # Repositories
    "get_in_memory_webinar_repository",
    "get_webinar_repository",
    # Webinar handlers
    "get_change_seats_handler",
    "get_organize_webinar_handler",
]
