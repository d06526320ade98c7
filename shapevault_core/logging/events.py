"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (namespace.category.action)

Event Naming Convention:
    <component>.<category>.<action>

    component: shape, repository, ingest, error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - shape.*: Shape mutations and notifications
    - repository.*: Collection membership changes
    - ingest.*: Record file loading
    - error.*: Error conditions
    """

    # ========== Shape Events ==========
    SHAPE_OBSERVER_FAILED = "shape.observer.failed"
    """An observer raised while being notified; remaining observers still ran."""

    # ========== Repository Events ==========
    REPOSITORY_SHAPE_ADDED = "repository.shape.added"
    """Shape inserted (or replaced) in a repository."""

    REPOSITORY_SHAPE_REMOVED = "repository.shape.removed"
    """Shape removed from a repository and purged from the store."""

    REPOSITORY_CLEARED = "repository.cleared"
    """Repository and its property store emptied."""

    # ========== Ingest Events ==========
    INGEST_FILE_STARTED = "ingest.file.started"
    """Started reading a record file."""

    INGEST_FILE_LOADED = "ingest.file.loaded"
    """Finished reading a record file."""

    INGEST_RECORD_SKIPPED = "ingest.record.skipped"
    """A malformed record was logged and skipped."""

    # ========== Error Events ==========
    INGEST_FILE_ERROR = "error.ingest_file"
    """Record file could not be opened."""


# Event categories for filtering
SHAPE_EVENTS = {
    LogEvent.SHAPE_OBSERVER_FAILED,
}

REPOSITORY_EVENTS = {
    LogEvent.REPOSITORY_SHAPE_ADDED,
    LogEvent.REPOSITORY_SHAPE_REMOVED,
    LogEvent.REPOSITORY_CLEARED,
}

INGEST_EVENTS = {
    LogEvent.INGEST_FILE_STARTED,
    LogEvent.INGEST_FILE_LOADED,
    LogEvent.INGEST_RECORD_SKIPPED,
}

ERROR_EVENTS = {
    LogEvent.SHAPE_OBSERVER_FAILED,
    LogEvent.INGEST_FILE_ERROR,
}
