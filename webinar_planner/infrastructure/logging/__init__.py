"""Logging adapters.

Usage:
    from webinar_planner.infrastructure.logging import ConsoleAdapter
"""

from webinar_planner.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
