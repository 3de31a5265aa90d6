"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Messages are short snake_case
event names; everything else goes in key-value context.

Log Levels:
    - DEBUG: Diagnostic detail (dev only)
    - INFO: Normal operational events (webinar organized, seats changed,
      request rejected by a business rule)
    - WARNING: Degraded operations (unhealthy dependencies)
    - ERROR: Operation failed unexpectedly, system continues
    - CRITICAL: System-wide failure

Usage:
    from webinar_planner.core.container import get_logger

    logger = get_logger()
    logger.info("webinar_organized", webinar_id=webinar_id, organizer_id=user_id)

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("webinar_request_rejected", code="webinar_not_found")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Implementations may enrich logs with timestamp and level.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            error: Optional exception instance.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.

        Args:
            **context: Context to include in all subsequent logs.

        Returns:
            New logger instance with bound context.

        Example:
            request_logger = logger.bind(trace_id=trace_id, path=request.url.path)
            request_logger.info("request_started")
        """
        ...
