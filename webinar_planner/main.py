"""
Main FastAPI application entry point.

Wires middleware, global exception handlers and routers, and releases the
database connection pool on shutdown.

Run:
    uvicorn webinar_planner.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from webinar_planner.core.config import settings
from webinar_planner.core.container import get_database, get_logger
from webinar_planner.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
)
from webinar_planner.presentation.routers.api.v1 import v1_router
from webinar_planner.presentation.routers.api.v1.errors import (
    register_exception_handlers,
)
from webinar_planner.presentation.routers.system import system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Log configuration summary
    - Shutdown: Dispose database connection pool

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
        repository_backend=settings.repository_backend.value,
    )

    yield

    await get_database().close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Schedule webinars and manage their seat capacity",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
