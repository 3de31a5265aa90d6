"""UUIDv7 identifier generator.

Implements IdGeneratorProtocol. UUIDv7 values are time-ordered, which keeps
primary key index inserts append-mostly in the database.
"""

from uuid_extensions import uuid7


class UuidGenerator:
    """Generate identifiers as canonical UUIDv7 strings."""

    def generate(self) -> str:
        """Generate a new unique identifier.

        Returns:
            str: UUIDv7 in canonical hyphenated form.
        """
        return str(uuid7())
