"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

One strict JSON object per log line, built on the standard logging module.

Design:
- Level is held per StructuredLogger instance, so two surveys sharing a
  component name keep independent verbosity
- Non-finite floats (NaN, inf) in metadata are written as strings, since
  shapes accept them and bare NaN/Infinity tokens are not JSON
- Events come from the LogEvent enum

Example:
    >>> logger = StructuredLogger(component="survey")
    >>> logger.info(
    ...     event=LogEvent.SURVEY_COMPLETED,
    ...     message="Survey finished",
    ...     metadata={'area': 7.283185307179586}
    ... )

Output:
    {"timestamp": "2026-10-19T15:30:45.123456+00:00", "level": "INFO",
     "component": "survey", "event": "survey.completed",
     "message": "Survey finished", "metadata": {"area": 7.283185307179586}}
"""

import json
import logging
import math
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


def _json_safe(value: Any) -> Any:
    """Replace non-finite floats with their repr, recursing into containers."""
    if isinstance(value, float) and not math.isfinite(value):
        return repr(value)
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return value


class StructuredLogger:
    """
    Emits LogEvent records as JSON through a stdlib logger.

    Attributes:
        component: Component name (e.g., "survey", "registry")
        level: Minimum level this instance emits
        logger: Underlying stdlib logger (shapevisit.<component>)
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        self.component = component
        self.level = level
        self.logger_name = logger_name or f"shapevisit.{component}"
        self.logger = logging.getLogger(self.logger_name)

        # Filtering happens in _log; the shared stdlib logger only needs to
        # pass DEBUG through once, and an explicit level set elsewhere is kept.
        if self.logger.level == logging.NOTSET:
            self.logger.setLevel(logging.DEBUG)

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
        if log_level < self.level or not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = _json_safe(metadata)

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(
            log_level,
            json.dumps(log_entry, allow_nan=False),
            exc_info=exc_info if level == 'ERROR' else None
        )

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log at ERROR, attaching the exception type and message.

        The traceback is forwarded to the stdlib record as well.
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        """Change this instance's minimum level; other instances are unaffected."""
        self.level = level


class JSONFormatter(logging.Formatter):
    """Passes the already-serialized JSON message through unchanged."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """Shorthand for StructuredLogger(component=..., level=...)."""
    return StructuredLogger(component=component, level=level)
