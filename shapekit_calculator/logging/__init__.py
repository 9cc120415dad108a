"""
Structured Logging for shapekit
===============================

Bounded Context: Observability

JSON-structured logging for calculators, formatters and the CLI.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function
"""

from .events import LogEvent
from .structured import StructuredLogger, JSONFormatter, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'JSONFormatter',
    'create_logger',
]
