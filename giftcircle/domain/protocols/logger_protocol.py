"""LoggerProtocol definition for structured logging.

This protocol standardizes structured logging across the codebase while
remaining backend-agnostic. Implementations MUST ensure logs are structured
(message plus key-value context) and never carry tokens or secrets.

Log Levels:
    - DEBUG: Diagnostic detail (cache hits, publish attempts)
    - INFO: Normal operational events (draw completed, supply created)
    - WARNING: Degraded service (cache unreachable, publish retry)
    - ERROR: Operation failed, system continues (invalidation dropped)
    - CRITICAL: System-wide failure

Usage:
    from giftcircle.core.container import get_logger

    logger = get_logger()
    logger.info("draw_completed", event_id=str(event_id), pairs=6)

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("request_started")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name (snake_case; avoid f-strings, use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for catastrophic failures."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
