"""Webinar handler dependency factories.

Request-scoped handler instances for webinar operations:
- Organize webinar
- Change seats
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from webinar_planner.core.container.infrastructure import (
    get_clock,
    get_id_generator,
    get_logger,
)
from webinar_planner.core.container.repositories import get_webinar_repository
from webinar_planner.domain.protocols.clock_protocol import ClockProtocol
from webinar_planner.domain.protocols.id_generator_protocol import IdGeneratorProtocol
from webinar_planner.domain.protocols.logger_protocol import LoggerProtocol
from webinar_planner.domain.protocols.webinar_repository import WebinarRepository

if TYPE_CHECKING:
    from webinar_planner.application.commands.handlers.change_seats_handler import (
        ChangeSeatsHandler,
    )
    from webinar_planner.application.commands.handlers.organize_webinar_handler import (
        OrganizeWebinarHandler,
    )


# ============================================================================
# Webinar Handler Factories
# ============================================================================


async def get_organize_webinar_handler(
    webinar_repo: WebinarRepository = Depends(get_webinar_repository),
    id_generator: IdGeneratorProtocol = Depends(get_id_generator),
    clock: ClockProtocol = Depends(get_clock),
    logger: LoggerProtocol = Depends(get_logger),
) -> "OrganizeWebinarHandler":
    """Get OrganizeWebinar command handler (request-scoped).

    Creates handler with:
    - WebinarRepository (request-scoped)
    - IdGenerator, Clock, Logger (app-scoped singletons)

    Each collaborator is resolved through Depends so tests can replace it
    with app.dependency_overrides.

    Returns:
        OrganizeWebinarHandler instance.
    """
    from webinar_planner.application.commands.handlers.organize_webinar_handler import (
        OrganizeWebinarHandler,
    )

    return OrganizeWebinarHandler(
        webinar_repo=webinar_repo,
        id_generator=id_generator,
        clock=clock,
        logger=logger,
    )


async def get_change_seats_handler(
    webinar_repo: WebinarRepository = Depends(get_webinar_repository),
    logger: LoggerProtocol = Depends(get_logger),
) -> "ChangeSeatsHandler":
    """Get ChangeSeats command handler (request-scoped).

    Creates handler with:
    - WebinarRepository (request-scoped)
    - Logger (app-scoped singleton)

    Returns:
        ChangeSeatsHandler instance.
    """
    from webinar_planner.application.commands.handlers.change_seats_handler import (
        ChangeSeatsHandler,
    )

    return ChangeSeatsHandler(webinar_repo=webinar_repo, logger=logger)
