"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Structured logger that outputs one JSON object per record.

Design:
- JSON output (compatible with log aggregators)
- Thread-safe (uses standard logging module)
- Contextual metadata (anchor, shape, container size, etc.)
- Type-safe events (LogEvent enum)

Example:
    >>> logger = StructuredLogger(component="geometry")
    >>> logger.info(
    ...     event=LogEvent.BOUNDARY_COMPUTED,
    ...     message="Computed rectangle boundary",
    ...     metadata={'anchor': 'ANCHOR_MIDDLE'}
    ... )

Output:
    {
        "timestamp": "2026-10-18T15:30:45.123456",
        "level": "INFO",
        "component": "geometry",
        "event": "boundary.computed",
        "message": "Computed rectangle boundary",
        "metadata": {"anchor": "ANCHOR_MIDDLE"}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Wraps Python's logging module with structured metadata support.

    Attributes:
        component: Component name (e.g., "geometry", "cli")
        logger: Underlying Python logger instance

    Thread Safety:
        Thread-safe via Python's logging module.
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "geometry")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: holemask.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"holemask.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(log_level, json.dumps(log_entry, default=str))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log WARNING level message.

        Example:
            >>> logger.warning(
            ...     event=LogEvent.ANCHOR_FALLBACK,
            ...     message="Unknown anchor, using ANCHOR_MIDDLE",
            ...     metadata={'anchor': 'ANCHOR_CENTER'}
            ... )
        """
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception instance, summarized in the record
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        """
        Change logging level dynamically.

        Args:
            level: New logging level (logging.DEBUG, INFO, WARNING, ERROR)
        """
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """
    Pass-through formatter for records built by StructuredLogger.

    The message is already a JSON document.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Args:
        component: Component identifier
        level: Logging level (default: INFO)

    Returns:
        Configured StructuredLogger instance

    Example:
        >>> logger = create_logger("cli", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
