"""
Structured Logging for shapevault
=================================

Bounded Context: Observability

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from shapevault_core.logging import create_logger, LogEvent
    >>> logger = create_logger("ingest")
    >>> logger.info(
    ...     event=LogEvent.INGEST_FILE_LOADED,
    ...     message="Loaded rectangles",
    ...     metadata={'loaded': 12, 'skipped': 1}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
