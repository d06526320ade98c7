"""
Shape Loader
============

Bounded Context: Turning record files into repository members.

Design:
- Malformed records are logged and skipped, never fatal
- File-level failures (missing, unreadable) propagate to the caller
- Optional repository: loaded shapes are added as they are built

Usage:
    loader = ShapeLoader(config.ingest, logger=create_logger("ingest"),
                         repository=repository)
    reports = loader.load_all()
    for report in reports:
        print(report)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from shapevault_core.errors import InvalidDataError
from shapevault_core.geometry import Shape, ShapeType
from shapevault_core.logging import LogEvent, StructuredLogger, create_logger
from shapevault_core.repository import ShapeRepository
from shapevault_ingest.config import IngestConfig
from shapevault_ingest.factories import ConeFactory, RectangleFactory, ShapeFactory
from shapevault_ingest.reader import iter_records


@dataclass(frozen=True)
class SkippedRecord:
    """A record rejected during loading."""

    line: int
    text: str
    reason: str


@dataclass(frozen=True)
class LoadReport:
    """Immutable result of loading one file."""

    path: Path
    shape_type: ShapeType
    shapes: Tuple[Shape, ...] = ()
    skipped: Tuple[SkippedRecord, ...] = ()

    @property
    def loaded(self) -> int:
        return len(self.shapes)

    def __str__(self) -> str:
        return (
            f"{self.path}: {self.loaded} {self.shape_type.value}(s) loaded, "
            f"{len(self.skipped)} skipped"
        )


class ShapeLoader:
    """
    Loads rectangle and cone record files.

    Attributes:
        config: Ingest configuration (file paths, id prefixes)
        repository: Destination for loaded shapes (optional)
    """

    def __init__(
        self,
        config: IngestConfig,
        logger: Optional[StructuredLogger] = None,
        repository: Optional[ShapeRepository] = None
    ):
        self.config = config
        self.logger = logger or create_logger("ingest")
        self.repository = repository
        self._factories: Dict[ShapeType, ShapeFactory] = {
            ShapeType.RECTANGLE: RectangleFactory(config.rectangle_id_prefix),
            ShapeType.CONE: ConeFactory(config.cone_id_prefix),
        }

    def load_file(self, path: Path, shape_type: ShapeType) -> LoadReport:
        """
        Parse every record in path as shape_type.

        Raises:
            OSError: If the file cannot be opened
        """
        path = Path(path)
        shape_type = ShapeType(shape_type)
        factory = self._factories[shape_type]
        logger = self.logger.bind(path=str(path), shape_type=shape_type.value)

        logger.info(
            event=LogEvent.INGEST_FILE_STARTED,
            message=f"Processing {shape_type.value} records"
        )

        shapes: List[Shape] = []
        skipped: List[SkippedRecord] = []

        try:
            # undecodable bytes become U+FFFD, so the record fails number parsing
            with open(path, encoding="utf-8", errors="replace") as f:
                for line_number, text in iter_records(f, self.config.comment_marker):
                    try:
                        shape = factory.create_shape(text.split())
                    except InvalidDataError as e:
                        skipped.append(SkippedRecord(line=line_number, text=text, reason=str(e)))
                        logger.warning(
                            event=LogEvent.INGEST_RECORD_SKIPPED,
                            message=f"Skipping invalid {shape_type.value} record",
                            metadata={
                                'line': line_number,
                                'text': text,
                                'reason': str(e),
                            }
                        )
                        continue

                    shapes.append(shape)
                    if self.repository is not None:
                        self.repository.add(shape)
        except OSError as e:
            logger.error(
                event=LogEvent.INGEST_FILE_ERROR,
                message=f"Cannot read {shape_type.value} records",
                exc_info=e
            )
            raise

        report = LoadReport(
            path=path,
            shape_type=shape_type,
            shapes=tuple(shapes),
            skipped=tuple(skipped),
        )
        logger.info(
            event=LogEvent.INGEST_FILE_LOADED,
            message=f"Loaded {shape_type.value} records",
            metadata={'loaded': report.loaded, 'skipped': len(report.skipped)}
        )
        return report

    def load_rectangles(self, path: Optional[Path] = None) -> LoadReport:
        return self.load_file(path or self.config.rectangles_file, ShapeType.RECTANGLE)

    def load_cones(self, path: Optional[Path] = None) -> LoadReport:
        return self.load_file(path or self.config.cones_file, ShapeType.CONE)

    def load_all(self) -> List[LoadReport]:
        """Load the configured rectangle file, then the cone file."""
        return [self.load_rectangles(), self.load_cones()]
