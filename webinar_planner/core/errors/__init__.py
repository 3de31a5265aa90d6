"""Core errors package.

Usage:
    from webinar_planner.core.errors import DomainError
"""

from webinar_planner.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
