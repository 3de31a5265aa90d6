"""Repository dependency factories.

The storage backend is chosen by settings.repository_backend:
- sql: request-scoped WebinarRepository bound to the request's session
- memory: one InMemoryWebinarRepository shared by the whole process
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from webinar_planner.core.config import settings
from webinar_planner.core.container.infrastructure import get_database
from webinar_planner.core.enums import RepositoryBackend
from webinar_planner.domain.protocols.webinar_repository import (
    WebinarRepository as WebinarRepositoryProtocol,
)

if TYPE_CHECKING:
    from webinar_planner.infrastructure.persistence.repositories import (
        InMemoryWebinarRepository,
    )


# ============================================================================
# Repository Factories
# ============================================================================


@lru_cache()
def get_in_memory_webinar_repository() -> "InMemoryWebinarRepository":
    """Get the process-wide in-memory webinar repository (app-scoped).

    Returns:
        InMemoryWebinarRepository singleton.
    """
    from webinar_planner.infrastructure.persistence.repositories import (
        InMemoryWebinarRepository,
    )

    return InMemoryWebinarRepository()


async def get_webinar_repository() -> AsyncGenerator[WebinarRepositoryProtocol, None]:
    """Get webinar repository for the configured backend (request-scoped).

    With the SQL backend a new repository is created per request and the
    session is closed when the request finishes.

    Yields:
        Implementation of the WebinarRepository protocol.

    Usage:
        # Presentation Layer (FastAPI Depends)
        @router.put("/webinars/{webinar_id}/seats")
        async def change_seats(
            webinar_repo: WebinarRepository = Depends(get_webinar_repository),
        ): ...
    """
    if settings.repository_backend == RepositoryBackend.MEMORY:
        yield get_in_memory_webinar_repository()
        return

    from webinar_planner.infrastructure.persistence.repositories import (
        WebinarRepository,
    )

    async with get_database().get_session() as session:
        yield WebinarRepository(session=session)
