"""Console logging adapter (structlog to stdout).

- Development: colored, human-readable lines
- Testing/CI/production: one JSON object per line

Request-scoped fields bound with structlog.contextvars (the trace ID set by
TraceMiddleware) are merged into every entry. UUID and Enum values are
rendered as plain strings so handlers can log IDs without converting them.

Does NOT inherit from LoggerProtocol (PEP 544 structural subtyping).
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Any
from uuid import UUID

import structlog
from structlog.typing import EventDict, WrappedLogger


def _plain_values(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    for key, value in event_dict.items():
        if isinstance(value, UUID):
            event_dict[key] = str(value)
        elif isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


class ConsoleAdapter:
    """Structured console logger.

    Args:
        use_json: JSON lines when True, human-readable output when False.
        level: Minimum level name; unknown names fall back to INFO.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        renderer: structlog.types.Processor = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )
        min_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_log_level,
                _plain_values,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=False,
        )

        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error; an exception is flattened into error_type/error_message."""
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._logger.error(message, **context)

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._logger.critical(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter carrying extra context; this one is unchanged."""
        bound = ConsoleAdapter.__new__(ConsoleAdapter)
        bound._logger = self._logger.bind(**context)
        return bound
