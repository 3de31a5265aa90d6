"""InMemoryWebinarRepository - process-local implementation.

Second implementation of the WebinarRepository protocol, backed by a
dictionary. Used by unit tests and by the "memory" repository backend.

Entities are copied on the way in and on the way out, so callers never
share state with the store (same behavior as a database round-trip).

Not safe for use across processes; a single event loop is assumed.
"""

from collections.abc import Iterable
from dataclasses import replace

from webinar_planner.domain.entities.webinar import Webinar
from webinar_planner.domain.errors.storage_error import StorageError


class InMemoryWebinarRepository:
    """Dictionary-backed implementation of WebinarRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Example:
        >>> repo = InMemoryWebinarRepository([existing_webinar])
        >>> webinar = await repo.find_by_id(existing_webinar.id)
    """

    def __init__(self, webinars: Iterable[Webinar] = ()) -> None:
        """Initialize repository, optionally seeded with webinars.

        Args:
            webinars: Initial webinars to store.
        """
        self._webinars: dict[str, Webinar] = {
            webinar.id: replace(webinar) for webinar in webinars
        }

    async def create(self, webinar: Webinar) -> None:
        """Store a new webinar.

        Args:
            webinar: Webinar entity to persist.

        Raises:
            StorageError: If a webinar with the same ID already exists.
        """
        if webinar.id in self._webinars:
            raise StorageError(
                f"Webinar {webinar.id} already exists", webinar_id=webinar.id
            )
        self._webinars[webinar.id] = replace(webinar)

    async def find_by_id(self, webinar_id: str) -> Webinar | None:
        """Find webinar by ID.

        Args:
            webinar_id: Webinar's unique identifier.

        Returns:
            Copy of the stored webinar if found, None otherwise.
        """
        webinar = self._webinars.get(webinar_id)
        return replace(webinar) if webinar is not None else None

    async def update(self, webinar: Webinar) -> None:
        """Overwrite a stored webinar.

        Args:
            webinar: Webinar entity carrying the new state.

        Raises:
            StorageError: If no webinar with this ID exists.
        """
        if webinar.id not in self._webinars:
            raise StorageError(
                f"Webinar {webinar.id} does not exist", webinar_id=webinar.id
            )
        self._webinars[webinar.id] = replace(webinar)

    def all(self) -> list[Webinar]:
        """Return copies of every stored webinar.

        Returns:
            List of webinars in insertion order.
        """
        return [replace(webinar) for webinar in self._webinars.values()]
