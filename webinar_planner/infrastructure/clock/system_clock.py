"""System clock adapter.

Implements ClockProtocol with the host's wall clock, in UTC.

Implementation intentionally does NOT inherit from ClockProtocol (PEP 544
structural subtyping).
"""

from datetime import UTC, datetime


class SystemClock:
    """Wall-clock time source."""

    def now(self) -> datetime:
        """Return the current instant.

        Returns:
            datetime: Timezone-aware current time in UTC.
        """
        return datetime.now(UTC)
