"""
Structured Logging for Beacon Zone
==================================

Bounded Context: Observability

JSON-structured logging for the coverage engine and its CLI.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from beacon_zone.logging import create_logger, LogEvent
    >>> logger = create_logger("search")
    >>> logger.info(
    ...     event=LogEvent.SEARCH_POINT_FOUND,
    ...     message="Found uncovered point",
    ...     metadata={'x': 14, 'y': 11}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
