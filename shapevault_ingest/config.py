"""
Configuration schema for shapevault ingestion and CLI.

Defines where shape record files live, how generated ids look, and the
logging level. Loaded from YAML and validated at construction.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from shapevault_core.errors import ConfigError


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class IngestConfig:
    """Record file locations and id generation."""

    rectangles_file: Path = Path("data/rectangles.txt")
    cones_file: Path = Path("data/cones.txt")
    rectangle_id_prefix: str = "rect"
    cone_id_prefix: str = "cone"
    comment_marker: str = "#"

    def __post_init__(self):
        """Validate ingest configuration."""
        object.__setattr__(self, "rectangles_file", Path(self.rectangles_file))
        object.__setattr__(self, "cones_file", Path(self.cones_file))

        for name in ("rectangle_id_prefix", "cone_id_prefix"):
            prefix = getattr(self, name)
            if not prefix or not isinstance(prefix, str):
                raise ConfigError(f"{name} must be a non-empty string, got {prefix!r}")
            if any(ch.isspace() for ch in prefix):
                raise ConfigError(f"{name} cannot contain whitespace, got {prefix!r}")

        if self.rectangle_id_prefix == self.cone_id_prefix:
            raise ConfigError(
                f"rectangle_id_prefix and cone_id_prefix must differ, "
                f"both are {self.rectangle_id_prefix!r}"
            )

        if not self.comment_marker or not isinstance(self.comment_marker, str):
            raise ConfigError(
                f"comment_marker must be a non-empty string, got {self.comment_marker!r}"
            )


@dataclass(frozen=True)
class LoggingConfig:
    """Structured logger settings."""

    level: str = "INFO"

    def __post_init__(self):
        """Validate logging configuration."""
        level = str(self.level).upper()
        if level not in VALID_LOG_LEVELS:
            raise ConfigError(
                f"Invalid log level: {self.level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )
        object.__setattr__(self, "level", level)

    @property
    def level_value(self) -> int:
        """Numeric level for the logging module."""
        return getattr(logging, self.level)


@dataclass(frozen=True)
class AppConfig:
    """
    Top-level configuration.

    Immutable after construction (frozen dataclass).
    """

    ingest: IngestConfig = field(default_factory=IngestConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    default_sort: str = "id"

    def __post_init__(self):
        if not self.default_sort:
            raise ConfigError("default_sort cannot be empty")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], base_dir: Optional[Path] = None) -> "AppConfig":
        """
        Build configuration from a parsed mapping.

        Relative file paths are resolved against base_dir when given.

        Raises:
            ConfigError: On unknown keys or invalid values
        """
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping, got {type(data).__name__}")

        try:
            ingest_data = _section(data, "ingest")
            if base_dir is not None:
                for key in ("rectangles_file", "cones_file"):
                    if key in ingest_data:
                        path = Path(ingest_data[key])
                        ingest_data[key] = path if path.is_absolute() else base_dir / path
            ingest = IngestConfig(**ingest_data)

            logging_config = LoggingConfig(**_section(data, "logging"))

            return cls(
                ingest=ingest,
                logging=logging_config,
                default_sort=data.get("default_sort", "id"),
            )
        except TypeError as e:
            # unknown key passed to a dataclass constructor
            raise ConfigError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            ingest:
              rectangles_file: "data/rectangles.txt"
              cones_file: "data/cones.txt"
              rectangle_id_prefix: "rect"
              cone_id_prefix: "cone"

            logging:
              level: "WARNING"

            default_sort: "distance"

        Raises:
            ConfigError: If the file is missing, unreadable or invalid
        """
        path = Path(yaml_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        return cls.from_dict(data, base_dir=path.parent)


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Copy of a top-level section; a missing or empty section is {}."""
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(
            f"Config section '{name}' must be a mapping, got {type(section).__name__}"
        )
    return dict(section)
