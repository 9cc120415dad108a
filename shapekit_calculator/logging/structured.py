"""
Structured JSON Logger
======================

Bounded Context: Observability Infrastructure

Every record carries a typed event plus optional metadata as `extra`
attributes; JSONFormatter turns the record into one JSON object per line.

Design:
- Records stay plain logging.LogRecord objects (caplog/handlers see them)
- event / component / metadata live on the record, not inside the message
- Serialization happens once, in the formatter

Example:
    >>> logger = StructuredLogger(component="calculator")
    >>> logger.info(
    ...     event=LogEvent.SUM_COMPUTED,
    ...     message="Computed sum of areas",
    ...     metadata={'shape_count': 3, 'sum': 73.566}
    ... )

Output:
    {"timestamp": "2025-10-24T15:30:45.123456+00:00", "level": "INFO",
     "component": "calculator", "event": "calculator.sum.computed",
     "message": "Computed sum of areas",
     "metadata": {"shape_count": 3, "sum": 73.566}}
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .events import LogEvent


class StructuredLogger:
    """
    Component-scoped logger emitting typed events.

    Attributes:
        component: Component name (e.g., "calculator", "cli")
        logger: Underlying Python logger ("shapekit.<component>")
    """

    def __init__(
        self,
        component: str,
        level: Optional[int] = None,
        logger_name: Optional[str] = None
    ):
        self.component = component
        self.logger = logging.getLogger(logger_name or f"shapekit.{component}")

        # An explicit level always applies; the INFO default only on first use
        if level is not None:
            self.logger.setLevel(level)
        elif not self.logger.handlers:
            self.logger.setLevel(logging.INFO)

        # One JSON handler per named logger, however many wrappers exist
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _emit(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        error: Optional[BaseException] = None
    ) -> None:
        extra = {
            'component': self.component,
            'event': event.value,
            'metadata': dict(metadata) if metadata else None,
            'error': error,
        }
        self.logger.log(level, message, extra=extra)

    def debug(self, event: LogEvent, message: str,
              metadata: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.DEBUG, event, message, metadata)

    def info(self, event: LogEvent, message: str,
             metadata: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.INFO, event, message, metadata)

    def warning(self, event: LogEvent, message: str,
                metadata: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.WARNING, event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """
        Log an error event.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception whose type and message are embedded

        Example:
            >>> try:
            ...     calculator.sum()
            ... except InvalidShapeError as e:
            ...     logger.error(
            ...         event=LogEvent.INVALID_SHAPE_ERROR,
            ...         message="Calculation aborted",
            ...         exc_info=e,
            ...         metadata={'index': e.index}
            ...     )
        """
        self._emit(logging.ERROR, event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """
    Renders a record as a single-line JSON object.

    Records not produced by StructuredLogger are still rendered, with the
    logger name as component and no event.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'component': getattr(record, 'component', record.name),
            'event': getattr(record, 'event', None),
            'message': record.getMessage(),
        }

        metadata = getattr(record, 'metadata', None)
        if metadata:
            entry['metadata'] = metadata

        error = getattr(record, 'error', None)
        if error is not None:
            entry['exception'] = {'type': type(error).__name__, 'message': str(error)}

        # default=str: metadata may carry arbitrary offending values
        return json.dumps(entry, default=str)


def create_logger(component: str, level: Optional[int] = None) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Without a level, an existing logger keeps whatever level it already has.

    Example:
        >>> logger = create_logger("cli", level=logging.WARNING)
    """
    return StructuredLogger(component=component, level=level)
