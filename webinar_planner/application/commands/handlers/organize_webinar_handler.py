"""OrganizeWebinar command handler.

Schedules a new webinar after checking the lead time and seat bounds.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer (entities, errors, protocols)
- Uses Result types for business rule violations
- All validation happens before the single write (create)
"""

from typing import cast

from webinar_planner.application.commands.webinar_commands import OrganizeWebinar
from webinar_planner.application.dtos.webinar_dtos import OrganizedWebinar
from webinar_planner.core.result import Failure, Result, Success
from webinar_planner.domain.entities.webinar import (
    MAX_SEATS,
    MIN_LEAD_TIME,
    MIN_SEATS,
    Webinar,
)
from webinar_planner.domain.errors.webinar_error import (
    OrganizeWebinarError,
    WebinarDatesTooSoon,
    WebinarNotEnoughSeats,
    WebinarTooManySeats,
)
from webinar_planner.domain.protocols.clock_protocol import ClockProtocol
from webinar_planner.domain.protocols.id_generator_protocol import IdGeneratorProtocol
from webinar_planner.domain.protocols.logger_protocol import LoggerProtocol
from webinar_planner.domain.protocols.webinar_repository import WebinarRepository


class OrganizeWebinarHandler:
    """Handler for OrganizeWebinar command.

    Dependencies (injected via constructor):
        - WebinarRepository: For persistence
        - IdGeneratorProtocol: For the new webinar's ID
        - ClockProtocol: For the lead time check
        - LoggerProtocol: For operational logging
    """

    def __init__(
        self,
        webinar_repo: WebinarRepository,
        id_generator: IdGeneratorProtocol,
        clock: ClockProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            webinar_repo: Webinar repository.
            id_generator: Identifier generator for new webinars.
            clock: Source of the current instant.
            logger: Structured logger.
        """
        self._webinar_repo = webinar_repo
        self._id_generator = id_generator
        self._clock = clock
        self._logger = logger

    async def handle(
        self, cmd: OrganizeWebinar
    ) -> Result[OrganizedWebinar, OrganizeWebinarError]:
        """Handle OrganizeWebinar command.

        Checks run in a fixed order: lead time, then upper seat bound, then
        lower seat bound. The first violation is returned.

        Args:
            cmd: OrganizeWebinar command.

        Returns:
            Success(OrganizedWebinar): Webinar created, carries its new ID.
            Failure(WebinarDatesTooSoon): Start date within the lead time.
            Failure(WebinarTooManySeats): More than MAX_SEATS requested.
            Failure(WebinarNotEnoughSeats): Fewer than MIN_SEATS requested.

        Raises:
            StorageError: Propagated from the repository (unexpected failure).

        Side Effects:
            - Creates the Webinar in the repository (on success only)
        """
        # Step 1: Lead time
        now = self._clock.now()
        if cmd.start_date < now + MIN_LEAD_TIME:
            return cast(
                Result[OrganizedWebinar, OrganizeWebinarError],
                Failure(error=WebinarDatesTooSoon()),
            )

        # Step 2: Seat bounds (upper before lower)
        if cmd.seats > MAX_SEATS:
            return cast(
                Result[OrganizedWebinar, OrganizeWebinarError],
                Failure(error=WebinarTooManySeats()),
            )
        if cmd.seats < MIN_SEATS:
            return cast(
                Result[OrganizedWebinar, OrganizeWebinarError],
                Failure(error=WebinarNotEnoughSeats()),
            )

        # Step 3: Create
        webinar = Webinar(
            id=self._id_generator.generate(),
            organizer_id=cmd.user_id,
            title=cmd.title,
            start_date=cmd.start_date,
            end_date=cmd.end_date,
            seats=cmd.seats,
        )
        await self._webinar_repo.create(webinar)

        self._logger.info(
            "webinar_organized",
            webinar_id=webinar.id,
            organizer_id=webinar.organizer_id,
            seats=webinar.seats,
            start_date=webinar.start_date.isoformat(),
        )

        return Success(value=OrganizedWebinar(id=webinar.id))
