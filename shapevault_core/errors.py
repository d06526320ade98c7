"""
Error Types
===========

Bounded Context: Failure signals shared by core, ingestion and CLI.

Design:
- Fail fast: invalid geometry is rejected where it enters
- Absent values are None, never an exception
- Validation errors subclass ValueError so callers can catch broadly
"""


class InvalidDataError(ValueError):
    """Raised when a shape parameter or text record is malformed."""
    pass


class ComparatorNotAvailableError(Exception):
    """Raised when looking up a comparator name that was never registered"""
    pass


class ConfigError(ValueError):
    """Raised when configuration cannot be loaded or fails validation."""
    pass
