"""Global exception handlers for FastAPI application.

Converts exceptions that escape route handlers into RFC 9457 Problem Details.

Handlers:
    http_exception_handler: Converts HTTPException to RFC 9457 format
    validation_exception_handler: Converts RequestValidationError to RFC 9457 format
    storage_exception_handler: Converts repository StorageError to a 500
    generic_exception_handler: Catches all unhandled exceptions

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from webinar_planner.core.config import settings
from webinar_planner.core.container import get_logger
from webinar_planner.core.enums import ErrorCode
from webinar_planner.domain.errors import StorageError
from webinar_planner.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from webinar_planner.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# HTTP status code to (title, slug) mapping for RFC 9457
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
}


def _status_info(status_code: int) -> tuple[str, str]:
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))


def _internal_error_response(request: Request) -> JSONResponse:
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/internal-server-error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with the trace ID.",
        instance=str(request.url.path),
        errors=None,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to RFC 9457 Problem Details response.

    Covers auth dependency failures and Starlette's own 404/405 responses.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by handler, dependency or router.

    Returns:
        JSONResponse with RFC 9457 ProblemDetails.
    """
    assert isinstance(exc, StarletteHTTPException)

    title, error_slug = _status_info(exc.status_code)

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{error_slug}",
        title=title,
        status=exc.status_code,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        errors=None,
        trace_id=getattr(request.state, "trace_id", None),
    )

    # Preserve any headers from HTTPException (e.g., WWW-Authenticate)
    headers = getattr(exc, "headers", None)

    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to RFC 9457 Problem Details response.

    Example:
        >>> # PUT /api/v1/webinars/{id}/seats with {"seats": "many"}
        >>> # {
        >>> #   "type": "http://localhost:8000/errors/validation-failed",
        >>> #   "title": "Validation Failed",
        >>> #   "status": 422,
        >>> #   "errors": [
        >>> #     {"field": "seats", "code": "int_parsing", "message": "..."}
        >>> #   ],
        >>> #   ...
        >>> # }
    """
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["body", "seats"] -> "seats"
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p != "body"]
        field_name = ".".join(field_parts) if field_parts else "unknown"

        field_errors.append(
            ErrorDetail(
                field=field_name,
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    status_code = ErrorResponseBuilder.get_status_code(ErrorCode.VALIDATION_FAILED)
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/validation-failed",
        title=ErrorResponseBuilder.get_title(ErrorCode.VALIDATION_FAILED),
        status=status_code,
        detail="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        errors=field_errors if field_errors else None,
        trace_id=getattr(request.state, "trace_id", None),
    )

    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
    )


async def storage_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle repository storage failures.

    The webinar ID is logged but never returned to the client.

    Args:
        request: FastAPI Request object.
        exc: StorageError raised by a repository adapter.

    Returns:
        JSONResponse with RFC 9457 ProblemDetails (500 Internal Server Error).
    """
    assert isinstance(exc, StorageError)

    get_logger().error(
        "webinar_storage_failed",
        error=exc,
        webinar_id=exc.webinar_id,
        request_path=request.url.path,
        request_method=request.method,
    )
    return _internal_error_response(request)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Prevents leaking stack traces or internal details to API consumers.

    Args:
        request: FastAPI Request object.
        exc: Unhandled exception.

    Returns:
        JSONResponse with RFC 9457 ProblemDetails (500 Internal Server Error).
    """
    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )
    return _internal_error_response(request)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
