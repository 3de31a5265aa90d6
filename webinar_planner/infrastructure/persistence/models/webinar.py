"""Webinar database model.

Stores scheduled webinars and their seat capacity.

Indexes:
    - ix_webinars_organizer_id: (organizer_id) for per-organizer queries

Constraints:
    - ck_webinars_seats_range: seats between 1 and 1000
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from webinar_planner.domain.entities.webinar import MAX_SEATS, MIN_SEATS
from webinar_planner.infrastructure.persistence.base import ID_LENGTH, BaseMutableModel


class Webinar(BaseMutableModel):
    """Webinar model.

    Fields:
        id: String primary key (from BaseMutableModel)
        created_at: Row creation time (from BaseMutableModel)
        updated_at: Last update time (from BaseMutableModel)
        organizer_id: Owning user identifier
        title: Webinar title
        start_date: Scheduled start
        end_date: Scheduled end
        seats: Seat capacity

    Example:
        webinar = Webinar(
            id="0192f1f8-...",
            organizer_id="alice",
            title="Intro",
            start_date=start,
            end_date=end,
            seats=100,
        )
        session.add(webinar)
        await session.commit()
    """

    __tablename__ = "webinars"
    __table_args__ = (
        CheckConstraint(
            f"seats >= {MIN_SEATS} AND seats <= {MAX_SEATS}",
            name="ck_webinars_seats_range",
        ),
    )

    organizer_id: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        nullable=False,
        index=True,
        comment="User who organizes this webinar",
    )

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Webinar title",
    )

    start_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Scheduled start",
    )

    end_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Scheduled end",
    )

    seats: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Seat capacity",
    )
