"""
Shape Repository Module
=======================

Owning, indexed collection of shapes.

Design:
- Sole long-lived owner of shapes (the store only holds weak references)
- add() wires the shared StoreSyncObserver and primes the store at once
- Query methods are pure filters built from the specification leaves
- Sorting is stable (Python's sort); sort_in_place() reorders iteration
- Thread-safety via encapsulation (caller must synchronize if multi-threaded)

Usage:
    store = PropertyStore()
    repository = ShapeRepository(store)

    repository.add(Rectangle("r1", Point(0, 0), Point(4, 3)))
    store.get_area("r1")                               # 12.0

    q1 = repository.find(FirstQuadrantSpecification())
    by_x = repository.sort(FirstPointXComparator())
"""

from typing import Dict, List, Optional

from shapevault_core.analytics.store import PropertyStore
from shapevault_core.analytics.sync import StoreSyncObserver
from shapevault_core.geometry.shapes import Shape, ShapeType
from shapevault_core.logging import LogEvent, StructuredLogger
from shapevault_core.query.comparator import Comparator
from shapevault_core.query.specification import (
    AreaRangeSpecification,
    DistanceRangeSpecification,
    FirstQuadrantSpecification,
    FourthQuadrantSpecification,
    NameSpecification,
    PerimeterRangeSpecification,
    SecondQuadrantSpecification,
    Specification,
    SurfaceAreaRangeSpecification,
    ThirdQuadrantSpecification,
    TypeSpecification,
    VolumeRangeSpecification,
)


class ShapeRepository:
    """
    Collection of shapes keyed by id.

    Attributes:
        store: Property store kept in sync with every member shape
    """

    def __init__(
        self,
        store: PropertyStore,
        logger: Optional[StructuredLogger] = None
    ):
        """
        Args:
            store: Shared property store (injected, not created here)
            logger: Optional structured logger for membership events
        """
        self._shapes: Dict[str, Shape] = {}
        self._store = store
        self._sync = StoreSyncObserver(store)
        self._logger = logger

    @property
    def store(self) -> PropertyStore:
        return self._store

    @property
    def sync_observer(self) -> StoreSyncObserver:
        return self._sync

    # ========== CRUD ==========

    def add(self, shape: Shape) -> None:
        """
        Insert shape under its id (an existing id is replaced).

        Registers the sync observer and pushes current values into the
        store before returning.
        """
        previous = self._shapes.get(shape.id)
        if previous is not None and previous is not shape:
            # drop scalars of the replaced shape (it may be another variant)
            previous.remove_observer(self._sync)
            self._store.remove_shape(shape.id)

        self._shapes[shape.id] = shape
        self._store.add_shape(shape)
        shape.add_observer(self._sync)
        self._sync.update(shape)

        if self._logger:
            self._logger.info(
                event=LogEvent.REPOSITORY_SHAPE_ADDED,
                message="Shape added",
                metadata={
                    'shape_id': shape.id,
                    'shape_type': shape.get_shape_type().value,
                    'replaced': previous is not None,
                }
            )

    def remove(self, shape_id: str) -> bool:
        """
        Remove shape by id and purge its store entry.

        Returns:
            True if a shape was removed
        """
        shape = self._shapes.pop(shape_id, None)
        if shape is None:
            return False

        shape.remove_observer(self._sync)
        self._store.remove_shape(shape_id)

        if self._logger:
            self._logger.info(
                event=LogEvent.REPOSITORY_SHAPE_REMOVED,
                message="Shape removed",
                metadata={'shape_id': shape_id}
            )
        return True

    def get_by_id(self, shape_id: str) -> Optional[Shape]:
        return self._shapes.get(shape_id)

    def exists(self, shape_id: str) -> bool:
        return shape_id in self._shapes

    def count(self) -> int:
        return len(self._shapes)

    def get_all(self) -> List[Shape]:
        """Fresh list; mutating it does not affect the repository."""
        return list(self._shapes.values())

    def clear(self) -> None:
        """Empty the repository and its property store."""
        for shape in self._shapes.values():
            shape.remove_observer(self._sync)
        self._shapes.clear()
        self._store.clear()

        if self._logger:
            self._logger.info(
                event=LogEvent.REPOSITORY_CLEARED,
                message="Repository cleared"
            )

    # ========== Queries ==========

    def find(self, specification: Specification) -> List[Shape]:
        return [shape for shape in self._shapes.values() if specification.is_satisfied_by(shape)]

    def find_one(self, specification: Specification) -> Optional[Shape]:
        for shape in self._shapes.values():
            if specification.is_satisfied_by(shape):
                return shape
        return None

    def find_by_name(self, name: str, case_sensitive: bool = False) -> List[Shape]:
        return self.find(NameSpecification(name, case_sensitive=case_sensitive))

    def get_in_first_quadrant(self) -> List[Shape]:
        return self.find(FirstQuadrantSpecification())

    def get_in_second_quadrant(self) -> List[Shape]:
        return self.find(SecondQuadrantSpecification())

    def get_in_third_quadrant(self) -> List[Shape]:
        return self.find(ThirdQuadrantSpecification())

    def get_in_fourth_quadrant(self) -> List[Shape]:
        return self.find(FourthQuadrantSpecification())

    def get_by_distance_range(self, min_distance: float, max_distance: float) -> List[Shape]:
        return self.find(DistanceRangeSpecification(min_distance, max_distance))

    def get_rectangles_by_area_range(self, min_area: float, max_area: float) -> List[Shape]:
        return self.find(AreaRangeSpecification(min_area, max_area))

    def get_rectangles_by_perimeter_range(
        self,
        min_perimeter: float,
        max_perimeter: float
    ) -> List[Shape]:
        return self.find(PerimeterRangeSpecification(min_perimeter, max_perimeter))

    def get_cones_by_volume_range(self, min_volume: float, max_volume: float) -> List[Shape]:
        return self.find(VolumeRangeSpecification(min_volume, max_volume))

    def get_cones_by_surface_area_range(
        self,
        min_surface_area: float,
        max_surface_area: float
    ) -> List[Shape]:
        return self.find(SurfaceAreaRangeSpecification(min_surface_area, max_surface_area))

    def get_all_rectangles(self) -> List[Shape]:
        return self.find(TypeSpecification(ShapeType.RECTANGLE))

    def get_all_cones(self) -> List[Shape]:
        return self.find(TypeSpecification(ShapeType.CONE))

    # ========== Ordering ==========

    def sort(self, comparator: Comparator) -> List[Shape]:
        """New list ordered by comparator; equal elements keep their order."""
        return sorted(self._shapes.values(), key=comparator.key())

    def sort_in_place(self, comparator: Comparator) -> None:
        """Reorder the repository's own iteration order to match sort()."""
        ordered = self.sort(comparator)
        self._shapes = {shape.id: shape for shape in ordered}

    # ========== Dunder ==========

    def __len__(self) -> int:
        return len(self._shapes)

    def __contains__(self, shape_id: object) -> bool:
        return shape_id in self._shapes

    def __iter__(self):
        return iter(self.get_all())

    def __repr__(self) -> str:
        return f"ShapeRepository(shapes={len(self._shapes)})"
