"""Clock adapters.

Usage:
    from webinar_planner.infrastructure.clock import SystemClock
"""

from webinar_planner.infrastructure.clock.system_clock import SystemClock

__all__ = ["SystemClock"]
