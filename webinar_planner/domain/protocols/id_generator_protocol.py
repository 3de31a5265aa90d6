"""IdGeneratorProtocol: source of identifiers for new entities.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol


class IdGeneratorProtocol(Protocol):
    """Identifier generator port.

    Implementations produce string identifiers that are unique with
    overwhelming probability across the system's lifetime. No error conditions.
    """

    def generate(self) -> str:
        """Generate a new unique identifier.

        Returns:
            Opaque identifier string.
        """
        ...
