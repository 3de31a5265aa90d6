"""ClockProtocol: source of the current instant.

Port (interface) for hexagonal architecture. Handlers never call
datetime.now() directly, so scheduling rules can be tested with a fixed clock.
"""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Clock port.

    Implementations return timezone-aware UTC datetimes that advance
    monotonically within a process. No error conditions.

    Example Implementation:
        >>> class SystemClock:
        ...     def now(self) -> datetime:
        ...         return datetime.now(UTC)
    """

    def now(self) -> datetime:
        """Return the current instant.

        Returns:
            Timezone-aware current datetime (UTC).
        """
        ...
