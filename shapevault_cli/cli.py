"""
shapevault CLI - Main entry point.

Loads rectangle and cone record files into a repository and prints
statistics, listings or query results.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from shapevault_core import (
    AreaRangeSpecification,
    DistanceRangeSpecification,
    FirstQuadrantSpecification,
    FourthQuadrantSpecification,
    NameSpecification,
    PropertyStore,
    SecondQuadrantSpecification,
    Shape,
    ShapeRepository,
    ShapeType,
    Specification,
    ThirdQuadrantSpecification,
    TypeSpecification,
    VolumeRangeSpecification,
    default_registry,
)
from shapevault_core.errors import ComparatorNotAvailableError, ConfigError
from shapevault_core.logging import create_logger
from shapevault_ingest import AppConfig, IngestConfig, LoggingConfig, ShapeLoader


QUADRANTS = {
    1: FirstQuadrantSpecification,
    2: SecondQuadrantSpecification,
    3: ThirdQuadrantSpecification,
    4: FourthQuadrantSpecification,
}


def load_config(args: argparse.Namespace) -> AppConfig:
    """
    Build configuration from --config plus command-line overrides.

    Raises:
        ConfigError: If the config file is missing or invalid
    """
    config = AppConfig.from_yaml(Path(args.config)) if args.config else AppConfig()

    if args.rectangles or args.cones or args.log_level:
        ingest = config.ingest
        config = AppConfig(
            ingest=IngestConfig(
                rectangles_file=Path(args.rectangles) if args.rectangles else ingest.rectangles_file,
                cones_file=Path(args.cones) if args.cones else ingest.cones_file,
                rectangle_id_prefix=ingest.rectangle_id_prefix,
                cone_id_prefix=ingest.cone_id_prefix,
                comment_marker=ingest.comment_marker,
            ),
            logging=LoggingConfig(level=args.log_level) if args.log_level else config.logging,
            default_sort=config.default_sort,
        )
    return config


def build_repository(config: AppConfig) -> ShapeRepository:
    """Create store + repository and load both record files into it."""
    logger = create_logger("ingest", level=config.logging.level_value)
    repository = ShapeRepository(PropertyStore())
    loader = ShapeLoader(config.ingest, logger=logger, repository=repository)
    loader.load_all()
    return repository


def build_query(args: argparse.Namespace) -> Optional[Specification]:
    """Combine every filter flag into one specification (AND)."""
    parts: List[Specification] = []

    if getattr(args, "type", None):
        parts.append(TypeSpecification(ShapeType(args.type)))
    if getattr(args, "name", None):
        parts.append(NameSpecification(args.name))
    if getattr(args, "quadrant", None):
        parts.append(QUADRANTS[args.quadrant]())
    if getattr(args, "min_distance", None) is not None or getattr(args, "max_distance", None) is not None:
        parts.append(DistanceRangeSpecification(
            args.min_distance if args.min_distance is not None else 0.0,
            args.max_distance if args.max_distance is not None else float("inf"),
        ))
    if getattr(args, "min_area", None) is not None or getattr(args, "max_area", None) is not None:
        parts.append(AreaRangeSpecification(
            args.min_area if args.min_area is not None else 0.0,
            args.max_area if args.max_area is not None else float("inf"),
        ))
    if getattr(args, "min_volume", None) is not None or getattr(args, "max_volume", None) is not None:
        parts.append(VolumeRangeSpecification(
            args.min_volume if args.min_volume is not None else 0.0,
            args.max_volume if args.max_volume is not None else float("inf"),
        ))

    if not parts:
        return None
    spec = parts[0]
    for part in parts[1:]:
        spec = spec & part
    return spec


def format_shape(shape: Shape) -> str:
    """One-line description with derived metrics."""
    head = f"{shape.id:<12} {shape.get_shape_type().value:<9} {shape.get_name():<16} {shape.get_first_point()}"
    if shape.get_shape_type() == ShapeType.RECTANGLE:
        return f"{head}  area={shape.area:g} perimeter={shape.perimeter:g} square={shape.is_square()}"
    return f"{head}  volume={shape.volume:.4f} surface_area={shape.surface_area:.4f}"


def print_shapes(shapes: List[Shape], args: argparse.Namespace, config: AppConfig) -> None:
    comparator = default_registry().get(args.sort_by or config.default_sort, descending=args.desc)
    for shape in sorted(shapes, key=comparator.key()):
        print(format_shape(shape))
    print(f"{len(shapes)} shape(s)")


def cmd_stats(repository: ShapeRepository, args: argparse.Namespace, config: AppConfig) -> None:
    stats = repository.store.get_statistics()
    print(f"Total shapes:        {stats.total_shapes}")
    print(f"Rectangles:          {stats.rectangles}")
    print(f"Cones:               {stats.cones}")
    print(f"Total area:          {stats.total_area:.4f}")
    print(f"Total perimeter:     {stats.total_perimeter:.4f}")
    print(f"Total volume:        {stats.total_volume:.4f}")
    print(f"Total surface area:  {stats.total_surface_area:.4f}")


def cmd_list(repository: ShapeRepository, args: argparse.Namespace, config: AppConfig) -> None:
    # list and query share this; list just exposes fewer filters
    spec = build_query(args)
    shapes = repository.find(spec) if spec else repository.get_all()
    print_shapes(shapes, args, config)


COMMANDS = {
    'stats': cmd_stats,
    'list': cmd_list,
    'query': cmd_list,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shapevault",
        description="shapevault CLI - Load shape records and inspect derived metrics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Aggregate statistics for the default data files
  shapevault stats

  # Use a YAML config
  shapevault --config config/shapevault.yaml stats

  # List cones sorted by distance from origin, farthest first
  shapevault list --type cone --sort-by distance --desc

  # Rectangles in the first quadrant with area between 10 and 50
  shapevault query --quadrant 1 --min-area 10 --max-area 50
"""
    )

    # Global arguments
    parser.add_argument("--config", help="Path to YAML config")
    parser.add_argument("--rectangles", help="Rectangle records file (overrides config)")
    parser.add_argument("--cones", help="Cone records file (overrides config)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('stats', help='Print property store statistics')

    sort_names = sorted(default_registry().available)

    list_cmd = subparsers.add_parser('list', help='List shapes with derived metrics')
    list_cmd.add_argument('--type', choices=[t.value for t in ShapeType], help='Only this shape type')
    list_cmd.add_argument('--sort-by', choices=sort_names, help='Sort order (default: from config)')
    list_cmd.add_argument('--desc', action='store_true', help='Descending order')

    query_cmd = subparsers.add_parser('query', help='Filter shapes')
    query_cmd.add_argument('--type', choices=[t.value for t in ShapeType], help='Shape type')
    query_cmd.add_argument('--name', help='Name substring (case-insensitive)')
    query_cmd.add_argument('--quadrant', type=int, choices=sorted(QUADRANTS), help='Quadrant of first point')
    query_cmd.add_argument('--min-distance', type=float)
    query_cmd.add_argument('--max-distance', type=float)
    query_cmd.add_argument('--min-area', type=float)
    query_cmd.add_argument('--max-area', type=float)
    query_cmd.add_argument('--min-volume', type=float)
    query_cmd.add_argument('--max-volume', type=float)
    query_cmd.add_argument('--sort-by', choices=sort_names, help='Sort order (default: from config)')
    query_cmd.add_argument('--desc', action='store_true', help='Descending order')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args)
        repository = build_repository(config)
        COMMANDS[args.command](repository, args, config)
    except (ConfigError, ComparatorNotAvailableError, OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
