"""Persistence backends for the webinar repository port.

- SQL: SQLAlchemy adapter over the configured relational database
- MEMORY: Process-local dictionary store (development, demos, tests)
"""

from enum import Enum


class RepositoryBackend(str, Enum):
    """Available webinar repository implementations."""

    SQL = "sql"
    MEMORY = "memory"
