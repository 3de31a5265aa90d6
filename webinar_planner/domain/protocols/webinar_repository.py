"""WebinarRepository protocol for webinar persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol

from webinar_planner.domain.entities.webinar import Webinar


class WebinarRepository(Protocol):
    """Webinar repository protocol (port).

    Defines the persistence operations the webinar handlers depend on.
    Infrastructure layer provides concrete implementations:

    - WebinarRepository (SQLAlchemy, relational database)
    - InMemoryWebinarRepository (process-local dictionary)

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        create: Persist a new webinar
        find_by_id: Retrieve webinar by ID
        update: Overwrite an existing webinar

    Example Implementation:
        >>> class PostgresWebinarRepository:
        ...     async def find_by_id(self, webinar_id: str) -> Webinar | None:
        ...         # Database logic here
        ...         pass
    """

    async def create(self, webinar: Webinar) -> None:
        """Persist a new webinar.

        Args:
            webinar: Webinar entity to persist.

        Raises:
            StorageError: If a webinar with the same ID already exists.
        """
        ...

    async def find_by_id(self, webinar_id: str) -> Webinar | None:
        """Find webinar by ID.

        Args:
            webinar_id: Webinar's unique identifier.

        Returns:
            Webinar if found, None otherwise. Never raises for not-found.

        Example:
            >>> webinar = await repo.find_by_id("0192f1f8-...")
            >>> if webinar:
            ...     print(webinar.seats)
        """
        ...

    async def update(self, webinar: Webinar) -> None:
        """Overwrite the stored state of an existing webinar.

        Args:
            webinar: Webinar entity carrying the new state, keyed by its ID.

        Raises:
            StorageError: If no webinar with this ID exists.
        """
        ...
