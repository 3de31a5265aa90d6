"""Unit tests for OrganizeWebinarHandler.

Runs the handler against the in-memory repository with a fixed clock and a
sequential identifier generator, so every outcome is deterministic.
"""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from webinar_planner.application.commands.handlers.organize_webinar_handler import (
    OrganizeWebinarHandler,
)
from webinar_planner.application.commands.webinar_commands import OrganizeWebinar
from webinar_planner.application.dtos.webinar_dtos import OrganizedWebinar
from webinar_planner.core.result import Failure, Success
from webinar_planner.domain.entities.webinar import MAX_SEATS, MIN_LEAD_TIME
from webinar_planner.domain.errors import (
    StorageError,
    WebinarDatesTooSoon,
    WebinarNotEnoughSeats,
    WebinarTooManySeats,
)
from webinar_planner.domain.protocols.webinar_repository import WebinarRepository
from webinar_planner.infrastructure.persistence.repositories import (
    InMemoryWebinarRepository,
)
from tests.utils.doubles import NOW, FixedClock, SequentialIdGenerator


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def repo():
    return InMemoryWebinarRepository()


@pytest.fixture
def handler(repo, mock_logger):
    return OrganizeWebinarHandler(
        webinar_repo=repo,
        id_generator=SequentialIdGenerator(),
        clock=FixedClock(NOW),
        logger=mock_logger,
    )


def create_command(**overrides) -> OrganizeWebinar:
    fields = {
        "user_id": "alice",
        "title": "Hexagonal architecture in practice",
        "seats": 100,
        "start_date": NOW + timedelta(days=4),
        "end_date": NOW + timedelta(days=4, hours=1),
    }
    fields.update(overrides)
    return OrganizeWebinar(**fields)


# =============================================================================
# Success Tests
# =============================================================================


@pytest.mark.unit
class TestOrganizeWebinarSuccess:
    """Webinars that satisfy the lead time and seat bounds are created."""

    @pytest.mark.asyncio
    async def test_returns_new_id_and_persists_webinar(self, handler, repo):
        # Arrange
        command = create_command()

        # Act
        result = await handler.handle(command)

        # Assert
        assert isinstance(result, Success)
        assert result.value == OrganizedWebinar(id="webinar-1")

        stored = repo.all()
        assert len(stored) == 1
        webinar = stored[0]
        assert webinar.id == "webinar-1"
        assert webinar.organizer_id == "alice"
        assert webinar.title == command.title
        assert webinar.seats == 100
        assert webinar.start_date == command.start_date
        assert webinar.end_date == command.end_date

    @pytest.mark.asyncio
    @pytest.mark.parametrize("seats", [1, 500, MAX_SEATS])
    async def test_accepts_seat_bounds_inclusive(self, handler, repo, seats):
        result = await handler.handle(create_command(seats=seats))

        assert isinstance(result, Success)
        assert repo.all()[0].seats == seats

    @pytest.mark.asyncio
    async def test_accepts_start_exactly_at_lead_time(self, handler):
        result = await handler.handle(
            create_command(start_date=NOW + MIN_LEAD_TIME)
        )

        assert isinstance(result, Success)

    @pytest.mark.asyncio
    async def test_each_call_gets_fresh_id(self, handler, repo):
        first = await handler.handle(create_command())
        second = await handler.handle(create_command())

        assert isinstance(first, Success)
        assert isinstance(second, Success)
        assert first.value.id != second.value.id
        assert len(repo.all()) == 2

    @pytest.mark.asyncio
    async def test_does_not_check_end_after_start(self, handler):
        """End date before start date is accepted unchanged."""
        start = NOW + timedelta(days=5)
        result = await handler.handle(
            create_command(start_date=start, end_date=start - timedelta(hours=1))
        )

        assert isinstance(result, Success)

    @pytest.mark.asyncio
    async def test_logs_organized_event(self, handler, mock_logger):
        await handler.handle(create_command())

        mock_logger.info.assert_called_once()
        assert mock_logger.info.call_args[0][0] == "webinar_organized"
        assert mock_logger.info.call_args[1]["webinar_id"] == "webinar-1"


# =============================================================================
# Failure Tests
# =============================================================================


@pytest.mark.unit
class TestOrganizeWebinarFailures:
    """Rule violations return Failure and leave storage untouched."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "start_offset",
        [
            timedelta(days=-1),
            timedelta(0),
            timedelta(days=2),
            MIN_LEAD_TIME - timedelta(seconds=1),
        ],
    )
    async def test_start_within_lead_time_fails(self, handler, repo, start_offset):
        result = await handler.handle(create_command(start_date=NOW + start_offset))

        assert isinstance(result, Failure)
        assert isinstance(result.error, WebinarDatesTooSoon)
        assert repo.all() == []

    @pytest.mark.asyncio
    async def test_zero_seats_fails_with_not_enough_seats(self, handler, repo):
        result = await handler.handle(create_command(seats=0))

        assert isinstance(result, Failure)
        assert isinstance(result.error, WebinarNotEnoughSeats)
        assert repo.all() == []

    @pytest.mark.asyncio
    async def test_negative_seats_fails_with_not_enough_seats(self, handler):
        result = await handler.handle(create_command(seats=-5))

        assert isinstance(result, Failure)
        assert isinstance(result.error, WebinarNotEnoughSeats)

    @pytest.mark.asyncio
    async def test_too_many_seats_fails(self, handler, repo):
        result = await handler.handle(create_command(seats=MAX_SEATS + 1))

        assert isinstance(result, Failure)
        assert isinstance(result.error, WebinarTooManySeats)
        assert repo.all() == []

    @pytest.mark.asyncio
    async def test_lead_time_checked_before_seats(self, handler):
        result = await handler.handle(
            create_command(start_date=NOW, seats=MAX_SEATS + 1)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, WebinarDatesTooSoon)

    @pytest.mark.asyncio
    async def test_failure_does_not_log(self, handler, mock_logger):
        await handler.handle(create_command(seats=0))

        mock_logger.info.assert_not_called()


@pytest.mark.unit
class TestOrganizeWebinarStorage:
    """Storage failures propagate unmodified."""

    @pytest.mark.asyncio
    async def test_storage_error_propagates(self, mock_logger):
        # Arrange
        repo = AsyncMock(spec=WebinarRepository)
        repo.create.side_effect = StorageError("boom", webinar_id="webinar-1")
        handler = OrganizeWebinarHandler(
            webinar_repo=repo,
            id_generator=SequentialIdGenerator(),
            clock=FixedClock(NOW),
            logger=mock_logger,
        )

        # Act / Assert
        with pytest.raises(StorageError):
            await handler.handle(create_command())

    @pytest.mark.asyncio
    async def test_validation_failure_never_calls_repository(self, mock_logger):
        repo = AsyncMock(spec=WebinarRepository)
        handler = OrganizeWebinarHandler(
            webinar_repo=repo,
            id_generator=SequentialIdGenerator(),
            clock=FixedClock(NOW),
            logger=mock_logger,
        )

        await handler.handle(create_command(start_date=NOW))

        repo.create.assert_not_called()
