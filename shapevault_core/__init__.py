"""
shapevault core
===============

Bounded Context: Live shape collections with derived metrics kept in sync.

Architecture:

    shapevault_core/
    ├── geometry/          # Entities
    │   ├── point.py       # Point (immutable)
    │   ├── observer.py    # Observable, ShapeObserver
    │   └── shapes.py      # Shape, Rectangle, Cone, ShapeType
    │
    ├── analytics/         # Derived-value cache
    │   ├── store.py       # PropertyStore, StoreStatistics
    │   └── sync.py        # StoreSyncObserver
    │
    ├── query/             # Filtering & ordering
    │   ├── specification.py
    │   ├── comparator.py
    │   └── registry.py    # ComparatorRegistry
    │
    ├── logging/           # Structured JSON logging
    ├── errors.py
    └── repository.py      # ShapeRepository (wires everything)

Usage:

    from shapevault_core import (
        PropertyStore, ShapeRepository, Rectangle, Cone, Point,
        FirstQuadrantSpecification, FirstPointXComparator,
    )

    store = PropertyStore()
    repository = ShapeRepository(store)

    rect = Rectangle("r1", Point(0, 0), Point(4, 3))
    repository.add(rect)
    store.get_area("r1")              # 12.0

    rect.set_bottom_right(Point(10, 10))
    store.get_area("r1")              # 100.0

    repository.find(FirstQuadrantSpecification())
    repository.sort(FirstPointXComparator())
"""

from shapevault_core.errors import (
    ComparatorNotAvailableError,
    ConfigError,
    InvalidDataError,
)

# Geometry Layer
from shapevault_core.geometry import (
    Cone,
    Observable,
    Point,
    Rectangle,
    Shape,
    ShapeObserver,
    ShapeType,
    VolumeSplit,
)

# Analytics Layer
from shapevault_core.analytics import PropertyStore, StoreStatistics, StoreSyncObserver

# Query Layer
from shapevault_core.query import (
    AreaRangeSpecification,
    Comparator,
    ComparatorRegistry,
    DistanceFromOriginComparator,
    DistanceRangeSpecification,
    FirstPointXComparator,
    FirstPointYComparator,
    FirstPointZComparator,
    FirstQuadrantSpecification,
    FourthQuadrantSpecification,
    IdComparator,
    IdSpecification,
    NameComparator,
    NameSpecification,
    NegativeZSpecification,
    PerimeterRangeSpecification,
    PositiveZSpecification,
    PropertyRangeSpecification,
    SecondQuadrantSpecification,
    Specification,
    SurfaceAreaRangeSpecification,
    ThirdQuadrantSpecification,
    TypeSpecification,
    VolumeRangeSpecification,
    default_registry,
)

# Repository
from shapevault_core.repository import ShapeRepository

__all__ = [
    # Errors
    "InvalidDataError",
    "ComparatorNotAvailableError",
    "ConfigError",
    # Geometry
    "Point",
    "Observable",
    "ShapeObserver",
    "Shape",
    "ShapeType",
    "Rectangle",
    "Cone",
    "VolumeSplit",
    # Analytics
    "PropertyStore",
    "StoreStatistics",
    "StoreSyncObserver",
    # Query
    "Specification",
    "IdSpecification",
    "NameSpecification",
    "FirstQuadrantSpecification",
    "SecondQuadrantSpecification",
    "ThirdQuadrantSpecification",
    "FourthQuadrantSpecification",
    "PositiveZSpecification",
    "NegativeZSpecification",
    "DistanceRangeSpecification",
    "TypeSpecification",
    "PropertyRangeSpecification",
    "AreaRangeSpecification",
    "PerimeterRangeSpecification",
    "VolumeRangeSpecification",
    "SurfaceAreaRangeSpecification",
    "Comparator",
    "IdComparator",
    "NameComparator",
    "FirstPointXComparator",
    "FirstPointYComparator",
    "FirstPointZComparator",
    "DistanceFromOriginComparator",
    "ComparatorRegistry",
    "default_registry",
    # Repository
    "ShapeRepository",
]

__version__ = "1.0.0"
