"""PrincipalProtocol: the acting user as seen by the webinar handlers.

Handlers only compare identifiers; authentication happens upstream.
"""

from typing import Protocol


class PrincipalProtocol(Protocol):
    """Any object exposing the acting user's identifier."""

    @property
    def id(self) -> str:
        """Identifier of the acting user."""
        ...
