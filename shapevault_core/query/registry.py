"""
ComparatorRegistry - Explicit comparator registration

Bounded Context: Named sort orders
Responsibilities:
  - Register comparators under short names
  - Validate names before use
  - Provide introspection (available, get_help)

Threading: Thread-safe (uses lock for write operations)
Pattern: Registry with explicit registration
"""

from typing import Dict, Set
import threading

from shapevault_core.errors import ComparatorNotAvailableError
from shapevault_core.query.comparator import (
    Comparator,
    DistanceFromOriginComparator,
    FirstPointXComparator,
    FirstPointYComparator,
    FirstPointZComparator,
    IdComparator,
    NameComparator,
)


class ComparatorRegistry:
    """
    Registry of comparators addressable by name.

    Key Features:
      - Fail-fast: unknown names rejected immediately
      - Introspection: list names and descriptions at runtime

    Example:
        registry = ComparatorRegistry()
        registry.register('x', FirstPointXComparator(), "First point X")

        try:
            shapes = repository.sort(registry.get('x'))
        except ComparatorNotAvailableError as e:
            print(f"Unknown sort order: {e}")
    """

    def __init__(self):
        self._comparators: Dict[str, Comparator] = {}
        self._descriptions: Dict[str, str] = {}
        self._lock = threading.Lock()

    def register(self, name: str, comparator: Comparator, description: str) -> None:
        """
        Register a comparator.

        Raises:
            ValueError: If name already registered (double registration)
        """
        with self._lock:
            if name in self._comparators:
                raise ValueError(f"Comparator '{name}' already registered")

            self._comparators[name] = comparator
            self._descriptions[name] = description

    def get(self, name: str, descending: bool = False) -> Comparator:
        """
        Look up a comparator by name.

        Raises:
            ComparatorNotAvailableError: If name not registered
        """
        if name not in self._comparators:
            raise ComparatorNotAvailableError(
                f"Comparator '{name}' not available. "
                f"Available comparators: {', '.join(sorted(self.available))}"
            )

        comparator = self._comparators[name]
        return comparator.reversed() if descending else comparator

    def is_available(self, name: str) -> bool:
        return name in self._comparators

    @property
    def available(self) -> Set[str]:
        """Snapshot of registered names."""
        return set(self._comparators.keys())

    def get_help(self) -> Dict[str, str]:
        """Snapshot of name -> description."""
        return dict(self._descriptions)

    def count(self) -> int:
        return len(self._comparators)


def default_registry() -> ComparatorRegistry:
    """Registry preloaded with the built-in comparators."""
    registry = ComparatorRegistry()
    registry.register('id', IdComparator(), "Shape id (lexicographic)")
    registry.register('name', NameComparator(), "Display name (lexicographic)")
    registry.register('x', FirstPointXComparator(), "First point X coordinate")
    registry.register('y', FirstPointYComparator(), "First point Y coordinate")
    registry.register('z', FirstPointZComparator(), "First point Z coordinate")
    registry.register('distance', DistanceFromOriginComparator(), "First point distance from origin")
    return registry
