"""
Property Store Module
=====================

Shared cache of the last derived values pushed for each shape id.

Design:
- One instance per process, injected explicitly (no hidden global)
- Mutable per-category maps (private state)
- Public immutable snapshots (get_statistics())
- Weak references to shapes: the repository owns them, the store never does
- Re-entrant lock around every read and write
"""

import threading
import weakref
import numpy as np
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from shapevault_core.geometry.shapes import Shape, ShapeType


@dataclass(frozen=True)
class StoreStatistics:
    """
    Immutable statistics snapshot for a property store.

    Counts are per registration (add_shape without a matching remove_shape),
    recorded by id and type, so they stay consistent with the sums even after
    the owning repository has released its shapes. Sums only include entries
    that currently have a value.
    """

    total_shapes: int = 0
    rectangles: int = 0
    cones: int = 0
    total_area: float = 0.0
    total_perimeter: float = 0.0
    total_volume: float = 0.0
    total_surface_area: float = 0.0
    counts_by_type: Dict[str, int] = field(default_factory=dict)

    def __str__(self) -> str:
        return (
            f"shapes={self.total_shapes} (rectangles={self.rectangles}, cones={self.cones}), "
            f"area={self.total_area:g}, perimeter={self.total_perimeter:g}, "
            f"volume={self.total_volume:g}, surface_area={self.total_surface_area:g}"
        )


class PropertyStore:
    """
    Cache of derived scalars keyed by shape id.

    Usage:
        store = PropertyStore()
        repository = ShapeRepository(store)
        repository.add(rect)
        store.get_area(rect.id)      # kept current by StoreSyncObserver
        stats = store.get_statistics()

    Thread Safety:
        All public methods take an internal RLock.
    """

    def __init__(self):
        self._shapes: Dict[str, "weakref.ReferenceType[Shape]"] = {}
        self._types: Dict[str, ShapeType] = {}
        self._areas: Dict[str, float] = {}
        self._perimeters: Dict[str, float] = {}
        self._volumes: Dict[str, float] = {}
        self._surface_areas: Dict[str, float] = {}
        self._lock = threading.RLock()

    # ========== Shape registration ==========

    def add_shape(self, shape: Shape) -> None:
        """Register a shape (non-owning reference)."""
        with self._lock:
            self._shapes[shape.id] = weakref.ref(shape)
            self._types[shape.id] = shape.get_shape_type()

    def remove_shape(self, shape_id: str) -> None:
        """Unregister a shape and purge every cached scalar for its id."""
        with self._lock:
            self._shapes.pop(shape_id, None)
            self._types.pop(shape_id, None)
            self._areas.pop(shape_id, None)
            self._perimeters.pop(shape_id, None)
            self._volumes.pop(shape_id, None)
            self._surface_areas.pop(shape_id, None)

    def get_shape(self, shape_id: str) -> Optional[Shape]:
        """Registered shape, or None if unknown or already collected."""
        with self._lock:
            ref = self._shapes.get(shape_id)
            return ref() if ref is not None else None

    def get_all_shapes(self) -> List[Shape]:
        with self._lock:
            shapes = [ref() for ref in self._shapes.values()]
        return [shape for shape in shapes if shape is not None]

    def has_shape(self, shape_id: str) -> bool:
        return self.get_shape(shape_id) is not None

    # ========== Rectangle scalars ==========

    def set_area(self, shape_id: str, area: float) -> None:
        with self._lock:
            self._areas[shape_id] = area

    def get_area(self, shape_id: str) -> Optional[float]:
        with self._lock:
            return self._areas.get(shape_id)

    def get_all_areas(self) -> Dict[str, float]:
        with self._lock:
            return dict(self._areas)

    def set_perimeter(self, shape_id: str, perimeter: float) -> None:
        with self._lock:
            self._perimeters[shape_id] = perimeter

    def get_perimeter(self, shape_id: str) -> Optional[float]:
        with self._lock:
            return self._perimeters.get(shape_id)

    def get_all_perimeters(self) -> Dict[str, float]:
        with self._lock:
            return dict(self._perimeters)

    # ========== Cone scalars ==========

    def set_volume(self, shape_id: str, volume: float) -> None:
        with self._lock:
            self._volumes[shape_id] = volume

    def get_volume(self, shape_id: str) -> Optional[float]:
        with self._lock:
            return self._volumes.get(shape_id)

    def get_all_volumes(self) -> Dict[str, float]:
        with self._lock:
            return dict(self._volumes)

    def set_surface_area(self, shape_id: str, surface_area: float) -> None:
        with self._lock:
            self._surface_areas[shape_id] = surface_area

    def get_surface_area(self, shape_id: str) -> Optional[float]:
        with self._lock:
            return self._surface_areas.get(shape_id)

    def get_all_surface_areas(self) -> Dict[str, float]:
        with self._lock:
            return dict(self._surface_areas)

    # ========== Aggregates ==========

    def get_statistics(self) -> StoreStatistics:
        """
        Compute an aggregate snapshot on demand.

        Returns:
            Frozen StoreStatistics with counts per variant and category sums
        """
        with self._lock:
            counts: Dict[str, int] = {shape_type.value: 0 for shape_type in ShapeType}
            for shape_type in self._types.values():
                counts[shape_type.value] += 1

            return StoreStatistics(
                total_shapes=len(self._types),
                rectangles=counts[ShapeType.RECTANGLE.value],
                cones=counts[ShapeType.CONE.value],
                total_area=_total(self._areas),
                total_perimeter=_total(self._perimeters),
                total_volume=_total(self._volumes),
                total_surface_area=_total(self._surface_areas),
                counts_by_type=counts,
            )

    def clear(self) -> None:
        """Drop every registration and cached scalar."""
        with self._lock:
            self._shapes.clear()
            self._types.clear()
            self._areas.clear()
            self._perimeters.clear()
            self._volumes.clear()
            self._surface_areas.clear()

    def __len__(self) -> int:
        """Number of registered ids."""
        with self._lock:
            return len(self._types)

    def __repr__(self) -> str:
        return f"PropertyStore(shapes={len(self)})"


def _total(values: Dict[str, float]) -> float:
    if not values:
        return 0.0
    return float(np.sum(np.fromiter(values.values(), dtype=float)))
