"""Unit tests for ErrorResponseBuilder status and title mapping."""

import json

import pytest
from starlette.requests import Request

from webinar_planner.core.config import settings
from webinar_planner.core.enums import ErrorCode
from webinar_planner.domain.errors import (
    WebinarDatesTooSoon,
    WebinarNotEnoughSeats,
    WebinarNotFound,
    WebinarNotOrganizer,
    WebinarSeatsCannotDecrease,
    WebinarTooManySeats,
)
from webinar_planner.presentation.routers.api.v1.errors import ErrorResponseBuilder


def make_request(path: str) -> Request:
    return Request(
        {
            "type": "http",
            "method": "PUT",
            "path": path,
            "headers": [],
            "query_string": b"",
            "scheme": "http",
            "server": ("testserver", 80),
        }
    )


@pytest.mark.unit
class TestErrorResponseBuilder:
    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (WebinarDatesTooSoon(), 400),
            (WebinarTooManySeats(), 400),
            (WebinarNotEnoughSeats(), 400),
            (WebinarSeatsCannotDecrease(), 400),
            (WebinarNotOrganizer(), 401),
            (WebinarNotFound(), 404),
        ],
    )
    def test_status_mapping(self, error, status_code):
        assert ErrorResponseBuilder.get_status_code(error.code) == status_code

    def test_validation_failed_maps_to_422(self):
        assert ErrorResponseBuilder.get_status_code(ErrorCode.VALIDATION_FAILED) == 422
        assert ErrorResponseBuilder.get_title(ErrorCode.VALIDATION_FAILED) == (
            "Validation Failed"
        )

    def test_every_error_code_has_a_title(self):
        for code in ErrorCode:
            assert ErrorResponseBuilder.get_title(code) != "Internal Server Error"

    def test_builds_problem_details_body(self):
        response = ErrorResponseBuilder.from_domain_error(
            error=WebinarNotFound(),
            request=make_request("/api/v1/webinars/w-1/seats"),
            trace_id="trace-1",
        )

        body = json.loads(response.body)
        assert response.status_code == 404
        assert body == {
            "type": f"{settings.api_base_url}/errors/webinar_not_found",
            "title": "Webinar Not Found",
            "status": 404,
            "detail": "Webinar not found",
            "instance": "/api/v1/webinars/w-1/seats",
            "trace_id": "trace-1",
        }

    def test_trace_id_omitted_when_absent(self):
        response = ErrorResponseBuilder.from_domain_error(
            error=WebinarTooManySeats(),
            request=make_request("/api/v1/webinars"),
            trace_id=None,
        )

        assert "trace_id" not in json.loads(response.body)
