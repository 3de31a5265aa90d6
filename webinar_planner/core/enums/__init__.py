"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from webinar_planner.core.enums import ErrorCode, Environment, RepositoryBackend
"""

from webinar_planner.core.enums.environment import Environment
from webinar_planner.core.enums.error_code import ErrorCode
from webinar_planner.core.enums.repository_backend import RepositoryBackend

__all__ = ["ErrorCode", "Environment", "RepositoryBackend"]
