"""
Observer Channel
================

Subject/observer protocol used by shapes to broadcast changes.

Design:
- Observers are any object with update(subject) (structural Protocol)
- Registration is identity keyed and idempotent
- Notification is synchronous, in registration order
- A failing observer is logged and skipped; the rest still run
"""

import threading
from typing import List, Optional, Protocol, runtime_checkable

from shapevault_core.logging import LogEvent, StructuredLogger, create_logger


@runtime_checkable
class ShapeObserver(Protocol):
    """Protocol for objects that react to shape changes."""

    def update(self, subject: "Observable") -> None:
        """Called after the subject recomputed its derived values."""
        ...


_default_logger: Optional[StructuredLogger] = None


def _observer_logger() -> StructuredLogger:
    global _default_logger
    if _default_logger is None:
        _default_logger = create_logger("shape")
    return _default_logger


class Observable:
    """
    Base class holding a per-instance observer list.

    Thread Safety:
        `_lock` is re-entrant. Subclasses hold it across
        "replace field + recompute + notify" so readers never observe a
        half-applied mutation.
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self._observers: List[ShapeObserver] = []
        self._lock = threading.RLock()
        self._logger = logger

    def add_observer(self, observer: ShapeObserver) -> None:
        """Register observer; registering the same object twice is a no-op."""
        with self._lock:
            if not any(existing is observer for existing in self._observers):
                self._observers.append(observer)

    def remove_observer(self, observer: ShapeObserver) -> None:
        """Remove observer if registered."""
        with self._lock:
            for index, existing in enumerate(self._observers):
                if existing is observer:
                    del self._observers[index]
                    return

    def notify_observers(self) -> None:
        """
        Call update(self) on every observer in registration order.

        Exceptions raised by an observer are logged and do not reach the
        caller or prevent later observers from running.
        """
        with self._lock:
            # Snapshot: observers may detach themselves during update()
            observers = list(self._observers)
            for observer in observers:
                try:
                    observer.update(self)
                except Exception as e:
                    logger = self._logger or _observer_logger()
                    logger.error(
                        event=LogEvent.SHAPE_OBSERVER_FAILED,
                        message="Observer failed during notification",
                        exc_info=e,
                        metadata={
                            'observer': type(observer).__name__,
                            'subject': getattr(self, 'id', None),
                        }
                    )

    def has_observer(self, observer: ShapeObserver) -> bool:
        return any(existing is observer for existing in self._observers)

    @property
    def observer_count(self) -> int:
        """Number of registered observers."""
        return len(self._observers)
