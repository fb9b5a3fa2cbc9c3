"""
Structured Logging for shapevisit
=================================

Bounded Context: Observability

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from shapevisit.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="survey")
    >>> logger.info(
    ...     event=LogEvent.SURVEY_STARTED,
    ...     message="Surveying 2 shapes",
    ...     metadata={'shape_count': 2}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
