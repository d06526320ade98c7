"""
Structured JSON Logger
======================

One JSON object per log line, tagged with a component and a LogEvent.

Design:
- Thin layer over the standard logging module (handlers, levels, caplog)
- Bound context: bind() returns a logger that adds fixed fields to every
  entry, e.g. the file path while a record file is loaded
- Exceptions are summarized in the entry; ERROR lines also carry the traceback

Example:
    >>> logger = create_logger("ingest")
    >>> file_logger = logger.bind(path="data/cones.txt")
    >>> file_logger.warning(
    ...     event=LogEvent.INGEST_RECORD_SKIPPED,
    ...     message="Skipping invalid cone record",
    ...     metadata={'line': 4, 'reason': 'Cone radius must be positive, got -2'}
    ... )

Output:
    {"timestamp": "2025-10-24T15:30:45.123456+00:00", "level": "WARNING",
     "component": "ingest", "event": "ingest.record.skipped",
     "message": "Skipping invalid cone record",
     "metadata": {"path": "data/cones.txt", "line": 4, "reason": "..."}}
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .events import LogEvent


class StructuredLogger:
    """
    Component logger emitting JSON entries.

    Attributes:
        component: Component name ("shape", "repository", "ingest", ...)
        context: Fields merged into the metadata of every entry
        logger: Underlying logging.Logger (shapevault.<component>)
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.component = component
        self.context: Dict[str, Any] = dict(context or {})
        self.logger = logging.getLogger(logger_name or f"shapevault.{component}")
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def bind(self, **context: Any) -> "StructuredLogger":
        """Logger for the same component with extra fixed metadata."""
        bound = StructuredLogger.__new__(StructuredLogger)
        bound.component = self.component
        bound.context = {**self.context, **context}
        bound.logger = self.logger
        return bound

    def info(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.INFO, event, message, metadata)

    def warning(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.WARNING, event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """
        Log an ERROR entry.

        Args:
            exc_info: Exception to summarize in the entry and attach as traceback
        """
        self._emit(logging.ERROR, event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def _entry(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]],
        exc_info: Optional[BaseException]
    ) -> Dict[str, Any]:
        entry: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': logging.getLevelName(level),
            'component': self.component,
            'event': event.value,
            'message': message,
        }
        fields = {**self.context, **(metadata or {})}
        if fields:
            entry['metadata'] = fields
        if exc_info is not None:
            entry['exception'] = {'type': type(exc_info).__name__, 'message': str(exc_info)}
        return entry

    def _emit(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        entry = self._entry(level, event, message, metadata, exc_info)
        self.logger.log(
            level,
            json.dumps(entry, default=str),
            exc_info=exc_info if level >= logging.ERROR else None
        )


class JSONFormatter(logging.Formatter):
    """Passes the JSON line through; a traceback follows on its own lines."""

    def format(self, record: logging.LogRecord) -> str:
        text = record.getMessage()
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text


def create_logger(component: str, level: int = logging.INFO, **context: Any) -> StructuredLogger:
    """
    Build a StructuredLogger, optionally with bound context.

    Example:
        >>> logger = create_logger("ingest", level=logging.WARNING)
    """
    return StructuredLogger(component=component, level=level, context=context)
