"""Webinar resource router.

Endpoints:
    POST /webinars                     - Organize a webinar
    PUT  /webinars/{webinar_id}/seats  - Change a webinar's seat capacity

Both endpoints require the X-User-Id identity header. Business rule
violations come back from the handlers as Failure values and are rendered
as RFC 9457 Problem Details.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, status
from fastapi.responses import JSONResponse

from webinar_planner.application.commands import ChangeSeats, OrganizeWebinar
from webinar_planner.application.commands.handlers import (
    ChangeSeatsHandler,
    OrganizeWebinarHandler,
)
from webinar_planner.core.container import (
    get_change_seats_handler,
    get_logger,
    get_organize_webinar_handler,
)
from webinar_planner.core.result import Failure
from webinar_planner.domain.protocols.logger_protocol import LoggerProtocol
from webinar_planner.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
)
from webinar_planner.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from webinar_planner.presentation.routers.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from webinar_planner.schemas.webinar_schemas import (
    ChangeSeatsRequest,
    MessageResponse,
    OrganizeWebinarRequest,
    WebinarCreatedResponse,
)

router = APIRouter(prefix="/webinars", tags=["Webinars"])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ProblemDetails},
    status.HTTP_401_UNAUTHORIZED: {"model": ProblemDetails},
    status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ProblemDetails},
}


@router.post(
    "",
    response_model=WebinarCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
    summary="Organize a webinar",
)
async def organize_webinar(
    request: Request,
    current_user: AuthenticatedUser,
    data: OrganizeWebinarRequest,
    handler: OrganizeWebinarHandler = Depends(get_organize_webinar_handler),
    logger: LoggerProtocol = Depends(get_logger),
) -> WebinarCreatedResponse | JSONResponse:
    """Organize a new webinar owned by the current user.

    POST /api/v1/webinars → 201 Created

    Args:
        request: FastAPI request object.
        current_user: Authenticated user.
        data: Webinar title, seats and dates.
        handler: OrganizeWebinar handler (injected).
        logger: Structured logger (injected).

    Returns:
        WebinarCreatedResponse with the new webinar ID.
        JSONResponse with RFC 9457 error on failure.
    """
    command = OrganizeWebinar(
        user_id=current_user.id,
        title=data.title,
        seats=data.seats,
        start_date=data.start_date,
        end_date=data.end_date,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        logger.info(
            "webinar_request_rejected",
            operation="organize_webinar",
            user_id=current_user.id,
            code=result.error.code.value,
        )
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id(),
        )

    return WebinarCreatedResponse.from_dto(result.value)


@router.put(
    "/{webinar_id}/seats",
    response_model=MessageResponse,
    responses={
        **_ERROR_RESPONSES,
        status.HTTP_404_NOT_FOUND: {"model": ProblemDetails},
    },
    summary="Change seat capacity",
)
async def change_seats(
    request: Request,
    current_user: AuthenticatedUser,
    webinar_id: Annotated[str, Path(description="Webinar identifier")],
    data: ChangeSeatsRequest,
    handler: ChangeSeatsHandler = Depends(get_change_seats_handler),
    logger: LoggerProtocol = Depends(get_logger),
) -> MessageResponse | JSONResponse:
    """Set a new total seat count on a webinar the current user organizes.

    PUT /api/v1/webinars/{webinar_id}/seats → 200 OK

    Returns:
        MessageResponse on success.
        JSONResponse with RFC 9457 error on failure.
    """
    command = ChangeSeats(user=current_user, webinar_id=webinar_id, seats=data.seats)
    result = await handler.handle(command)

    if isinstance(result, Failure):
        logger.info(
            "webinar_request_rejected",
            operation="change_seats",
            user_id=current_user.id,
            webinar_id=webinar_id,
            code=result.error.code.value,
        )
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id(),
        )

    return MessageResponse(message="Seats updated")
