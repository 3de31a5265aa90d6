"""System router for non-versioned application endpoints.

Root and health endpoints. These are not part of the
versioned API contract and have no side effects.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from webinar_planner.core.config import settings
from webinar_planner.core.container import get_database, get_logger
from webinar_planner.core.enums import RepositoryBackend

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Service name, status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """Health check endpoint for monitoring and load balancers.

    The database is only probed when it backs the webinar repository.

    Returns:
        JSONResponse: 200 when healthy, 503 when the database is unreachable.
    """
    if settings.repository_backend == RepositoryBackend.SQL:
        if not await get_database().check_connection():
            get_logger().warning("database_unreachable")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unhealthy", "database": "unreachable"},
            )

    return JSONResponse(content={"status": "healthy"})
