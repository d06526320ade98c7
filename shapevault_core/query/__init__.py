"""
Query Layer
===========

Bounded Context: Filtering and ordering shape collections.

Responsibilities:
- Specification algebra (leaves + and/or/not)
- Comparators and a named registry for them
- NO storage: queries run against whatever collection is passed in
"""

from shapevault_core.query.specification import (
    AndSpecification,
    AreaRangeSpecification,
    DistanceRangeSpecification,
    FirstQuadrantSpecification,
    FourthQuadrantSpecification,
    IdSpecification,
    NameSpecification,
    NegativeZSpecification,
    NotSpecification,
    OrSpecification,
    PerimeterRangeSpecification,
    PositiveZSpecification,
    PropertyRangeSpecification,
    SecondQuadrantSpecification,
    Specification,
    SurfaceAreaRangeSpecification,
    ThirdQuadrantSpecification,
    TypeSpecification,
    VolumeRangeSpecification,
)
from shapevault_core.query.comparator import (
    Comparator,
    DistanceFromOriginComparator,
    FirstPointXComparator,
    FirstPointYComparator,
    FirstPointZComparator,
    IdComparator,
    NameComparator,
    ReversedComparator,
)
from shapevault_core.query.registry import ComparatorRegistry, default_registry

__all__ = [
    # Specifications
    "Specification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
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
    # Comparators
    "Comparator",
    "ReversedComparator",
    "IdComparator",
    "NameComparator",
    "FirstPointXComparator",
    "FirstPointYComparator",
    "FirstPointZComparator",
    "DistanceFromOriginComparator",
    # Registry
    "ComparatorRegistry",
    "default_registry",
]
