"""
Structured Logging for SOLID Shapes
===================================

Bounded Context: Observability

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from solid_shapes.logging import create_logger, LogEvent
    >>> logger = create_logger("printer")
    >>> logger.info(
    ...     event=LogEvent.PRINTER_FORMATTED,
    ...     message="Formatted sum",
    ...     metadata={'sum': 100.0}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, JSONFormatter, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'JSONFormatter',
    'create_logger',
]
