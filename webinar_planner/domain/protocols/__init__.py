"""Domain protocols (ports) package.

This package contains protocol definitions that the domain and application
layers depend on. Infrastructure adapters implement these protocols without
inheritance (PEP 544 structural subtyping).

Usage:
    from webinar_planner.domain.protocols import (
        ClockProtocol,
        IdGeneratorProtocol,
        WebinarRepository,
    )
"""

from webinar_planner.domain.protocols.clock_protocol import ClockProtocol
from webinar_planner.domain.protocols.id_generator_protocol import IdGeneratorProtocol
from webinar_planner.domain.protocols.logger_protocol import LoggerProtocol
from webinar_planner.domain.protocols.principal_protocol import PrincipalProtocol
from webinar_planner.domain.protocols.webinar_repository import WebinarRepository

__all__ = [
    "ClockProtocol",
    "IdGeneratorProtocol",
    "LoggerProtocol",
    "PrincipalProtocol",
    "WebinarRepository",
]
