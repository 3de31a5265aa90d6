"""API v1 routers.

Resources:
    /api/v1/webinars                      - Organize webinars
    /api/v1/webinars/{webinar_id}/seats   - Webinar seat capacity
"""

from fastapi import APIRouter

from webinar_planner.core.config import settings
from webinar_planner.presentation.routers.api.v1.webinars import (
    router as webinars_router,
)

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(webinars_router)

__all__ = [
    "v1_router",
]
