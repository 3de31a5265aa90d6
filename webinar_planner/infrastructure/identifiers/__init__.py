"""Identifier generator adapters.

Usage:
    from webinar_planner.infrastructure.identifiers import UuidGenerator
"""

from webinar_planner.infrastructure.identifiers.uuid_generator import UuidGenerator

__all__ = ["UuidGenerator"]
