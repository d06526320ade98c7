"""
Specification Algebra
=====================

Composable boolean predicates over shapes.

Design:
- Immutable nodes (frozen dataclasses); combinators wrap, never flatten
- and/or short-circuit, left operand first
- Total: a candidate lacking a property or a variant simply does not match
- Python operators: spec_a & spec_b, spec_a | spec_b, ~spec

Example:
    >>> spec = FirstQuadrantSpecification() & TypeSpecification(ShapeType.RECTANGLE)
    >>> repository.find(spec)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Union

from shapevault_core.geometry.shapes import ShapeType


class Specification(ABC):
    """Base class for shape predicates."""

    @abstractmethod
    def is_satisfied_by(self, candidate: Any) -> bool:
        """True if the candidate matches."""

    def and_(self, other: "Specification") -> "Specification":
        return AndSpecification(self, other)

    def or_(self, other: "Specification") -> "Specification":
        return OrSpecification(self, other)

    def not_(self) -> "Specification":
        return NotSpecification(self)

    def __and__(self, other: "Specification") -> "Specification":
        return self.and_(other)

    def __or__(self, other: "Specification") -> "Specification":
        return self.or_(other)

    def __invert__(self) -> "Specification":
        return self.not_()

    def __call__(self, candidate: Any) -> bool:
        return self.is_satisfied_by(candidate)


# ========== Combinators ==========


@dataclass(frozen=True)
class AndSpecification(Specification):
    left: Specification
    right: Specification

    def is_satisfied_by(self, candidate: Any) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)


@dataclass(frozen=True)
class OrSpecification(Specification):
    left: Specification
    right: Specification

    def is_satisfied_by(self, candidate: Any) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)


@dataclass(frozen=True)
class NotSpecification(Specification):
    inner: Specification

    def is_satisfied_by(self, candidate: Any) -> bool:
        return not self.inner.is_satisfied_by(candidate)


# ========== Identity / naming ==========


@dataclass(frozen=True)
class IdSpecification(Specification):
    shape_id: str

    def is_satisfied_by(self, candidate: Any) -> bool:
        return candidate.id == self.shape_id


@dataclass(frozen=True)
class NameSpecification(Specification):
    """Substring match on the display name (case-insensitive by default)."""

    name: str
    case_sensitive: bool = False

    def is_satisfied_by(self, candidate: Any) -> bool:
        candidate_name = candidate.get_name()
        if self.case_sensitive:
            return self.name in candidate_name
        return self.name.lower() in candidate_name.lower()


# ========== Spatial (first point) ==========


@dataclass(frozen=True)
class FirstQuadrantSpecification(Specification):
    """X > 0 and Y > 0."""

    def is_satisfied_by(self, candidate: Any) -> bool:
        return candidate.get_first_point().is_in_first_quadrant()


@dataclass(frozen=True)
class SecondQuadrantSpecification(Specification):
    """X < 0 and Y > 0."""

    def is_satisfied_by(self, candidate: Any) -> bool:
        return candidate.get_first_point().is_in_second_quadrant()


@dataclass(frozen=True)
class ThirdQuadrantSpecification(Specification):
    """X < 0 and Y < 0."""

    def is_satisfied_by(self, candidate: Any) -> bool:
        return candidate.get_first_point().is_in_third_quadrant()


@dataclass(frozen=True)
class FourthQuadrantSpecification(Specification):
    """X > 0 and Y < 0."""

    def is_satisfied_by(self, candidate: Any) -> bool:
        return candidate.get_first_point().is_in_fourth_quadrant()


@dataclass(frozen=True)
class PositiveZSpecification(Specification):
    def is_satisfied_by(self, candidate: Any) -> bool:
        return candidate.get_first_point().z > 0


@dataclass(frozen=True)
class NegativeZSpecification(Specification):
    def is_satisfied_by(self, candidate: Any) -> bool:
        return candidate.get_first_point().z < 0


@dataclass(frozen=True)
class DistanceRangeSpecification(Specification):
    """First point's distance from origin within [min_distance, max_distance]."""

    min_distance: float
    max_distance: float

    def is_satisfied_by(self, candidate: Any) -> bool:
        distance = candidate.get_first_point().distance_from_origin()
        return self.min_distance <= distance <= self.max_distance


# ========== Variant / derived properties ==========


def _coerce_shape_type(value: Union[ShapeType, str]) -> Optional[ShapeType]:
    if isinstance(value, ShapeType):
        return value
    if isinstance(value, str):
        try:
            return ShapeType(value.lower())
        except ValueError:
            return None
    return None


def _candidate_type(candidate: Any) -> Optional[ShapeType]:
    get_shape_type = getattr(candidate, "get_shape_type", None)
    return get_shape_type() if get_shape_type is not None else None


@dataclass(frozen=True)
class TypeSpecification(Specification):
    """
    Variant equality.

    Accepts a ShapeType or its string value ("rectangle", "Cone", ...).
    An unknown string matches nothing.
    """

    shape_type: Union[ShapeType, str]

    def __post_init__(self):
        object.__setattr__(self, "shape_type", _coerce_shape_type(self.shape_type))

    def is_satisfied_by(self, candidate: Any) -> bool:
        if self.shape_type is None:
            return False
        return _candidate_type(candidate) == self.shape_type


@dataclass(frozen=True)
class PropertyRangeSpecification(Specification):
    """
    Inclusive range check on a named scalar of one variant.

    False when the candidate is another variant or the property is absent.
    """

    shape_type: Union[ShapeType, str]
    property_name: str
    min_value: float
    max_value: float

    def __post_init__(self):
        object.__setattr__(self, "shape_type", _coerce_shape_type(self.shape_type))

    def is_satisfied_by(self, candidate: Any) -> bool:
        if self.shape_type is None or _candidate_type(candidate) != self.shape_type:
            return False
        value = candidate.get_property(self.property_name)
        if value is None:
            return False
        return self.min_value <= value <= self.max_value


class AreaRangeSpecification(PropertyRangeSpecification):
    def __init__(self, min_area: float, max_area: float):
        super().__init__(ShapeType.RECTANGLE, "area", min_area, max_area)


class PerimeterRangeSpecification(PropertyRangeSpecification):
    def __init__(self, min_perimeter: float, max_perimeter: float):
        super().__init__(ShapeType.RECTANGLE, "perimeter", min_perimeter, max_perimeter)


class VolumeRangeSpecification(PropertyRangeSpecification):
    def __init__(self, min_volume: float, max_volume: float):
        super().__init__(ShapeType.CONE, "volume", min_volume, max_volume)


class SurfaceAreaRangeSpecification(PropertyRangeSpecification):
    def __init__(self, min_surface_area: float, max_surface_area: float):
        super().__init__(ShapeType.CONE, "surface_area", min_surface_area, max_surface_area)
