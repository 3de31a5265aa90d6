"""Error response builder for RFC 9457 Problem Details.

Builds RFC 9457 responses from domain errors returned by command handlers.
The request validation handler reads the same status and title table.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from webinar_planner.core.config import settings
from webinar_planner.core.enums import ErrorCode
from webinar_planner.core.errors import DomainError
from webinar_planner.presentation.routers.api.v1.errors.problem_details import (
    ProblemDetails,
)

# Error code to (HTTP status, title)
_ERROR_INFO: dict[ErrorCode, tuple[int, str]] = {
    ErrorCode.VALIDATION_FAILED: (
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Validation Failed",
    ),
    ErrorCode.WEBINAR_DATES_TOO_SOON: (
        status.HTTP_400_BAD_REQUEST,
        "Webinar Dates Too Soon",
    ),
    ErrorCode.WEBINAR_TOO_MANY_SEATS: (
        status.HTTP_400_BAD_REQUEST,
        "Too Many Seats",
    ),
    ErrorCode.WEBINAR_NOT_ENOUGH_SEATS: (
        status.HTTP_400_BAD_REQUEST,
        "Not Enough Seats",
    ),
    ErrorCode.WEBINAR_SEATS_CANNOT_DECREASE: (
        status.HTTP_400_BAD_REQUEST,
        "Seats Cannot Decrease",
    ),
    ErrorCode.WEBINAR_NOT_ORGANIZER: (
        status.HTTP_401_UNAUTHORIZED,
        "Not Webinar Organizer",
    ),
    ErrorCode.WEBINAR_NOT_FOUND: (
        status.HTTP_404_NOT_FOUND,
        "Webinar Not Found",
    ),
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> response = ErrorResponseBuilder.from_domain_error(
        ...     error=WebinarNotFound(),
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
        >>> response.status_code
        404
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert a DomainError to an RFC 9457 JSON response.

        Args:
            error: Domain error returned in a Failure.
            request: FastAPI Request object (for instance URL).
            trace_id: Request trace ID for debugging.

        Returns:
            JSONResponse with RFC 9457 ProblemDetails content.
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder.get_title(error.code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id,
        )

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(code: ErrorCode) -> int:
        """Map error code to HTTP status code.

        Unknown codes map to 500.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ErrorCode.WEBINAR_NOT_FOUND)
            404
        """
        return _ERROR_INFO.get(code, (status.HTTP_500_INTERNAL_SERVER_ERROR, ""))[0]

    @staticmethod
    def get_title(code: ErrorCode) -> str:
        """Get human-readable title for error code."""
        return _ERROR_INFO.get(code, (0, "Internal Server Error"))[1]
