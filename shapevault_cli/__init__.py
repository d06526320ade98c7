"""
shapevault CLI - Command-line interface over the shape repository.

Usage:
    shapevault stats
    shapevault --config config/shapevault.yaml list --sort-by distance
    shapevault query --quadrant 1 --min-area 10
"""

__version__ = "1.0.0"
