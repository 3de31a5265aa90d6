"""Persistence infrastructure package.

Usage:
    from webinar_planner.infrastructure.persistence import BaseModel, Database
"""

from webinar_planner.infrastructure.persistence.base import (
    BaseModel,
    BaseMutableModel,
)
from webinar_planner.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "BaseMutableModel", "Database"]
