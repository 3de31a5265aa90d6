"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL, SQLite for tests)
- Logging (structlog console adapter)
- Clock (system UTC clock)
- Identifier generation (UUIDv7)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from webinar_planner.core.config import settings
from webinar_planner.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from webinar_planner.domain.protocols.clock_protocol import ClockProtocol
    from webinar_planner.domain.protocols.id_generator_protocol import (
        IdGeneratorProtocol,
    )
    from webinar_planner.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from webinar_planner.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_clock() -> "ClockProtocol":
    """Get clock singleton (app-scoped).

    Returns:
        SystemClock reporting the current UTC instant.
    """
    from webinar_planner.infrastructure.clock.system_clock import SystemClock

    return SystemClock()


@lru_cache()
def get_id_generator() -> "IdGeneratorProtocol":
    """Get identifier generator singleton (app-scoped).

    Returns:
        UuidGenerator producing time-ordered UUIDv7 strings.
    """
    from webinar_planner.infrastructure.identifiers.uuid_generator import (
        UuidGenerator,
    )

    return UuidGenerator()


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
