"""ChangeSeats command handler.

Raises the seat capacity of an existing webinar on behalf of its organizer.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer (entities, errors, protocols)
- Uses Result types for business rule violations
- Read, validate, then write: a failure never touches storage

Error precedence (first match wins):
    not found → not organizer → decrease → too many seats
"""

from typing import cast

from webinar_planner.application.commands.webinar_commands import ChangeSeats
from webinar_planner.core.result import Failure, Result, Success
from webinar_planner.domain.entities.webinar import MAX_SEATS
from webinar_planner.domain.errors.webinar_error import (
    ChangeSeatsError,
    WebinarNotFound,
    WebinarNotOrganizer,
    WebinarSeatsCannotDecrease,
    WebinarTooManySeats,
)
from webinar_planner.domain.protocols.logger_protocol import LoggerProtocol
from webinar_planner.domain.protocols.webinar_repository import WebinarRepository


class ChangeSeatsHandler:
    """Handler for ChangeSeats command.

    Setting the current value again is accepted as a no-op.

    Dependencies (injected via constructor):
        - WebinarRepository: For persistence
        - LoggerProtocol: For operational logging
    """

    def __init__(
        self,
        webinar_repo: WebinarRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            webinar_repo: Webinar repository.
            logger: Structured logger.
        """
        self._webinar_repo = webinar_repo
        self._logger = logger

    async def handle(self, cmd: ChangeSeats) -> Result[None, ChangeSeatsError]:
        """Handle ChangeSeats command.

        Args:
            cmd: ChangeSeats command with principal, webinar ID and new total.

        Returns:
            Success(None): Seat count updated (or unchanged for an equal value).
            Failure(WebinarNotFound): No webinar with this ID.
            Failure(WebinarNotOrganizer): Principal does not own the webinar.
            Failure(WebinarSeatsCannotDecrease): New total below current total.
            Failure(WebinarTooManySeats): New total above MAX_SEATS.

        Raises:
            StorageError: Propagated from the repository (unexpected failure).

        Side Effects:
            - Updates the Webinar in the repository (on success only)
        """
        # Step 1: Load
        webinar = await self._webinar_repo.find_by_id(cmd.webinar_id)
        if webinar is None:
            return cast(
                Result[None, ChangeSeatsError], Failure(error=WebinarNotFound())
            )

        # Step 2: Ownership
        if not webinar.is_organizer(cmd.user.id):
            return cast(
                Result[None, ChangeSeatsError], Failure(error=WebinarNotOrganizer())
            )

        # Step 3: Monotonicity (equal is allowed)
        if cmd.seats < webinar.seats:
            return cast(
                Result[None, ChangeSeatsError],
                Failure(error=WebinarSeatsCannotDecrease()),
            )

        # Step 4: Upper bound
        if cmd.seats > MAX_SEATS:
            return cast(
                Result[None, ChangeSeatsError], Failure(error=WebinarTooManySeats())
            )

        # Step 5: Persist
        previous_seats = webinar.seats
        webinar.update_seats(cmd.seats)
        await self._webinar_repo.update(webinar)

        self._logger.info(
            "webinar_seats_changed",
            webinar_id=webinar.id,
            organizer_id=webinar.organizer_id,
            previous_seats=previous_seats,
            seats=webinar.seats,
        )

        return Success(value=None)
