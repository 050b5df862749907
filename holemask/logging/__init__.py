"""
Structured Logging for holemask
===============================

Bounded Context: Observability

JSON-structured logging shared by the geometry core and the CLI.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from holemask.logging import create_logger, LogEvent
    >>> logger = create_logger("geometry")
    >>> logger.warning(
    ...     event=LogEvent.ANCHOR_FALLBACK,
    ...     message="Unknown anchor 'ANCHOR_CENTER', using ANCHOR_MIDDLE",
    ...     metadata={'anchor': 'ANCHOR_CENTER'}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
