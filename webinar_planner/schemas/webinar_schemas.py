"""Webinar request and response schemas.

Pydantic schemas for webinar API endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- DTO-to-schema conversion methods

Seat bounds and the scheduling lead time are business rules and are checked
by the command handlers, not here. These schemas only check shape.
"""

from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator

from webinar_planner.application.dtos.webinar_dtos import OrganizedWebinar


# =============================================================================
# Request Schemas
# =============================================================================


class OrganizeWebinarRequest(BaseModel):
    """Request to organize a new webinar.

    Datetimes without a UTC offset are read as UTC.

    Attributes:
        title: Webinar title.
        seats: Seat capacity.
        start_date: Scheduled start.
        end_date: Scheduled end.
    """

    title: str = Field(
        ..., min_length=1, description="Webinar title", examples=["Intro to FastAPI"]
    )
    seats: int = Field(..., description="Seat capacity", examples=[100])
    start_date: datetime = Field(
        ..., description="Scheduled start", examples=["2026-03-01T10:00:00Z"]
    )
    end_date: datetime = Field(
        ..., description="Scheduled end", examples=["2026-03-01T11:00:00Z"]
    )

    @field_validator("start_date", "end_date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Attach UTC to naive datetimes."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v


class ChangeSeatsRequest(BaseModel):
    """Request to change a webinar's seat capacity.

    Attributes:
        seats: New total seat count (not a delta).
    """

    seats: int = Field(..., description="New total seat count", examples=[150])


# =============================================================================
# Response Schemas
# =============================================================================


class WebinarCreatedResponse(BaseModel):
    """Response after organizing a webinar."""

    id: str = Field(..., description="New webinar identifier")
    message: str = Field(default="Webinar created", description="Status message")

    @classmethod
    def from_dto(cls, dto: OrganizedWebinar) -> "WebinarCreatedResponse":
        """Convert application DTO to response schema.

        Args:
            dto: OrganizedWebinar from handler.

        Returns:
            WebinarCreatedResponse for API response.
        """
        return cls(id=dto.id)


class MessageResponse(BaseModel):
    """Plain status message response."""

    message: str = Field(..., description="Status message", examples=["Seats updated"])
