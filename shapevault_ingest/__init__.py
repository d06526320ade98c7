"""
shapevault ingestion
====================

Bounded Context: Reading shape records from text files.

Record format (one per line, whitespace separated, `#` starts a comment):

    rectangles:  x1 y1 x2 y2
    cones:       ax ay az bx by bz radius height

Public API
----------
    AppConfig, IngestConfig, LoggingConfig: YAML-backed configuration
    ShapeLoader, LoadReport, SkippedRecord: file loading
    RectangleFactory, ConeFactory: record -> shape
    RectangleValidator, ConeValidator: record validation
    iter_records, read_records: comment/blank-line filtering
"""

from shapevault_ingest.config import AppConfig, IngestConfig, LoggingConfig
from shapevault_ingest.factories import ConeFactory, RectangleFactory, ShapeFactory
from shapevault_ingest.loader import LoadReport, ShapeLoader, SkippedRecord
from shapevault_ingest.reader import iter_records, read_records
from shapevault_ingest.validators import ConeValidator, RectangleValidator

__all__ = [
    "AppConfig",
    "IngestConfig",
    "LoggingConfig",
    "ShapeFactory",
    "RectangleFactory",
    "ConeFactory",
    "ShapeLoader",
    "LoadReport",
    "SkippedRecord",
    "iter_records",
    "read_records",
    "RectangleValidator",
    "ConeValidator",
]
