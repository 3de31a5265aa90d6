"""Unit tests for webinar domain errors."""

from dataclasses import fields

import pytest

from webinar_planner.core.enums import ErrorCode
from webinar_planner.core.errors import DomainError
from webinar_planner.core.result import Failure
from webinar_planner.domain.errors import (
    StorageError,
    WebinarDatesTooSoon,
    WebinarNotEnoughSeats,
    WebinarNotFound,
    WebinarNotOrganizer,
    WebinarSeatsCannotDecrease,
    WebinarTooManySeats,
)


@pytest.mark.unit
class TestWebinarErrors:
    @pytest.mark.parametrize(
        ("error", "code", "message"),
        [
            (
                WebinarDatesTooSoon(),
                ErrorCode.WEBINAR_DATES_TOO_SOON,
                "Webinar must be scheduled at least 3 days in advance",
            ),
            (
                WebinarTooManySeats(),
                ErrorCode.WEBINAR_TOO_MANY_SEATS,
                "Webinar must have at most 1000 seats",
            ),
            (
                WebinarNotEnoughSeats(),
                ErrorCode.WEBINAR_NOT_ENOUGH_SEATS,
                "Webinar must have at least 1 seat",
            ),
            (WebinarNotFound(), ErrorCode.WEBINAR_NOT_FOUND, "Webinar not found"),
            (
                WebinarNotOrganizer(),
                ErrorCode.WEBINAR_NOT_ORGANIZER,
                "User is not allowed to update this webinar",
            ),
            (
                WebinarSeatsCannotDecrease(),
                ErrorCode.WEBINAR_SEATS_CANNOT_DECREASE,
                "You cannot reduce the number of seats",
            ),
        ],
    )
    def test_fixed_code_and_message(self, error, code, message):
        assert isinstance(error, DomainError)
        assert error.code == code
        assert error.message == message
        assert str(error) == f"{code.value}: {message}"

    def test_errors_carry_only_code_and_message(self):
        names = [f.name for f in fields(WebinarSeatsCannotDecrease)]

        assert names == ["code", "message"]

    def test_errors_are_not_exceptions(self):
        assert not isinstance(WebinarNotFound(), Exception)

    def test_errors_compare_by_value(self):
        assert WebinarNotFound() == WebinarNotFound()
        assert WebinarNotFound() != WebinarNotOrganizer()

    def test_match_on_failure_kind(self):
        result = Failure(error=WebinarNotOrganizer())

        match result:
            case Failure(error=WebinarNotFound()):
                matched = "not_found"
            case Failure(error=WebinarNotOrganizer()):
                matched = "not_organizer"
            case _:
                matched = "other"

        assert matched == "not_organizer"


@pytest.mark.unit
class TestStorageError:
    def test_carries_webinar_id(self):
        error = StorageError("Webinar w-1 does not exist", webinar_id="w-1")

        assert isinstance(error, Exception)
        assert error.webinar_id == "w-1"
        assert str(error) == "Webinar w-1 does not exist"
