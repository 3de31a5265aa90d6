"""WebinarRepository - SQLAlchemy implementation.

Adapter for hexagonal architecture.
Maps between domain Webinar entities and database Webinar models.
"""

from datetime import UTC, datetime

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import FlushError

from webinar_planner.domain.entities.webinar import Webinar
from webinar_planner.domain.errors.storage_error import StorageError
from webinar_planner.infrastructure.persistence.models.webinar import (
    Webinar as WebinarModel,
)


class WebinarRepository:
    """SQLAlchemy implementation of WebinarRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Seat changes are written with a single UPDATE statement keyed by ID;
    concurrent writers are resolved by the database (last write wins).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = WebinarRepository(session)
        ...     webinar = await repo.find_by_id(webinar_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, webinar: Webinar) -> None:
        """Insert a new webinar row.

        Args:
            webinar: Webinar entity to persist.

        Raises:
            StorageError: If the row is rejected (duplicate ID or a violated
                table constraint).
        """
        self.session.add(self._to_model(webinar))
        try:
            await self.session.commit()
        except (IntegrityError, FlushError) as e:
            await self.session.rollback()
            raise StorageError(
                f"Webinar {webinar.id} could not be created", webinar_id=webinar.id
            ) from e

    async def find_by_id(self, webinar_id: str) -> Webinar | None:
        """Find webinar by ID.

        Args:
            webinar_id: Webinar's unique identifier.

        Returns:
            Domain Webinar entity if found, None otherwise.
        """
        stmt = (
            select(WebinarModel)
            .where(WebinarModel.id == webinar_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def update(self, webinar: Webinar) -> None:
        """Overwrite the stored state of a webinar.

        Args:
            webinar: Webinar entity carrying the new state.

        Raises:
            StorageError: If no webinar with this ID exists.
        """
        stmt = (
            update(WebinarModel)
            .where(WebinarModel.id == webinar.id)
            .values(
                organizer_id=webinar.organizer_id,
                title=webinar.title,
                start_date=webinar.start_date,
                end_date=webinar.end_date,
                seats=webinar.seats,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)

        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise StorageError(
                f"Webinar {webinar.id} does not exist", webinar_id=webinar.id
            )

        await self.session.commit()

    # =========================================================================
    # Entity ↔ Model Mapping
    # =========================================================================

    def _to_domain(self, model: WebinarModel) -> Webinar:
        """Convert database model to domain entity.

        Args:
            model: SQLAlchemy Webinar model.

        Returns:
            Domain Webinar entity.
        """
        return Webinar(
            id=model.id,
            organizer_id=model.organizer_id,
            title=model.title,
            start_date=_as_utc(model.start_date),
            end_date=_as_utc(model.end_date),
            seats=model.seats,
        )

    def _to_model(self, entity: Webinar) -> WebinarModel:
        """Convert domain entity to database model.

        Args:
            entity: Domain Webinar entity.

        Returns:
            SQLAlchemy Webinar model.
        """
        return WebinarModel(
            id=entity.id,
            organizer_id=entity.organizer_id,
            title=entity.title,
            start_date=entity.start_date,
            end_date=entity.end_date,
            seats=entity.seats,
        )


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo; stored values are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
