"""
Geometric Shapes Module
=======================

Mutable shape entities with derived metrics kept in sync with geometry.

Design:
- Closed set of variants, tagged by ShapeType (never by class name)
- Every geometry setter: validate -> replace -> recompute -> notify
- Derived values are stored, not computed lazily, so observers read
  exactly what the shape reports
- get_property() is total: unknown names return None
"""

import math
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from shapevault_core.errors import InvalidDataError
from shapevault_core.geometry.observer import Observable
from shapevault_core.geometry.point import Point
from shapevault_core.logging import StructuredLogger


class ShapeType(str, Enum):
    """Variant tag for shapes."""

    RECTANGLE = "rectangle"
    CONE = "cone"


def normalize_property_name(name: str) -> str:
    """Canonical property key: lowercase, underscores dropped."""
    return name.replace("_", "").lower()


def _require_point(value: Any, field_name: str) -> Point:
    if not isinstance(value, Point):
        raise InvalidDataError(
            f"{field_name} must be a Point, got {type(value).__name__}"
        )
    return value


def _require_positive(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidDataError(
            f"{field_name} must be a number, got {type(value).__name__}"
        )
    if not math.isfinite(value):
        raise InvalidDataError(f"{field_name} must be finite, got {value}")
    if value <= 0:
        raise InvalidDataError(f"{field_name} must be > 0, got {value}")
    return float(value)


class Shape(Observable, ABC):
    """
    Base entity for all shapes.

    Attributes:
        id: Opaque identifier (unique within one repository)
        name: Display name, defaults to id
    """

    def __init__(
        self,
        shape_id: str,
        name: Optional[str] = None,
        logger: Optional[StructuredLogger] = None
    ):
        if not isinstance(shape_id, str) or not shape_id:
            raise InvalidDataError("shape id must be a non-empty string")
        super().__init__(logger=logger)
        self.id = shape_id
        self._name = name if name is not None else shape_id

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        """Rename the shape and notify observers."""
        if not isinstance(name, str):
            raise InvalidDataError(f"name must be a string, got {type(name).__name__}")
        with self._lock:
            self._name = name
            self.notify_observers()

    def get_property(self, name: str) -> Optional[float]:
        """
        Case-insensitive scalar lookup.

        Returns:
            The value, or None for unknown names
        """
        if not isinstance(name, str):
            return None
        with self._lock:
            return self._properties().get(normalize_property_name(name))

    def _mutate(self, attribute: str, value: Any) -> None:
        # One atomic unit: no reader sees the new field with stale derived values
        with self._lock:
            setattr(self, attribute, value)
            self._recompute()
            self.notify_observers()

    @abstractmethod
    def _recompute(self) -> None:
        """Refresh every derived field from current geometry."""

    @abstractmethod
    def _properties(self) -> Dict[str, float]:
        """Scalars exposed through get_property(), keyed canonically."""

    @abstractmethod
    def get_first_point(self) -> Point:
        """Spatial anchor used by predicates and comparators."""

    @abstractmethod
    def get_shape_type(self) -> ShapeType:
        """Variant tag."""

    @property
    def shape_type(self) -> ShapeType:
        return self.get_shape_type()


class Rectangle(Shape):
    """
    Axis-aligned rectangle defined by two opposite corners.

    width and height are absolute coordinate differences, so the corners may
    be given in any order. A zero width or height is allowed here (the
    ingestion validators reject such records).

    Example:
        >>> rect = Rectangle("r1", Point(0, 0), Point(4, 3))
        >>> rect.area, rect.perimeter, rect.is_square()
        (12.0, 14.0, False)
    """

    def __init__(
        self,
        shape_id: str,
        top_left: Point,
        bottom_right: Point,
        name: Optional[str] = None,
        logger: Optional[StructuredLogger] = None
    ):
        super().__init__(shape_id, name=name, logger=logger)
        self._top_left = _require_point(top_left, "top_left")
        self._bottom_right = _require_point(bottom_right, "bottom_right")
        self._recompute()

    @property
    def top_left(self) -> Point:
        return self._top_left

    @property
    def bottom_right(self) -> Point:
        return self._bottom_right

    def set_top_left(self, point: Point) -> None:
        self._mutate("_top_left", _require_point(point, "top_left"))

    def set_bottom_right(self, point: Point) -> None:
        self._mutate("_bottom_right", _require_point(point, "bottom_right"))

    def set_corners(self, top_left: Point, bottom_right: Point) -> None:
        """Replace both corners with a single recompute and notification."""
        top_left = _require_point(top_left, "top_left")
        bottom_right = _require_point(bottom_right, "bottom_right")
        with self._lock:
            self._top_left = top_left
            self._bottom_right = bottom_right
            self._recompute()
            self.notify_observers()

    def _recompute(self) -> None:
        self._width = abs(self._bottom_right.x - self._top_left.x)
        self._height = abs(self._bottom_right.y - self._top_left.y)
        self._area = self._width * self._height
        self._perimeter = 2 * (self._width + self._height)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def area(self) -> float:
        return self._area

    @property
    def perimeter(self) -> float:
        return self._perimeter

    def get_area(self) -> float:
        return self._area

    def get_perimeter(self) -> float:
        return self._perimeter

    def is_square(self) -> bool:
        # exact equality, no tolerance
        return self._width == self._height

    def is_valid(self) -> bool:
        """True when the rectangle has non-zero width and height."""
        return self._width > 0 and self._height > 0

    def _properties(self) -> Dict[str, float]:
        return {
            "area": self._area,
            "perimeter": self._perimeter,
            "width": self._width,
            "height": self._height,
        }

    def get_first_point(self) -> Point:
        return self._top_left

    def get_shape_type(self) -> ShapeType:
        return ShapeType.RECTANGLE

    def __repr__(self) -> str:
        return (
            f"Rectangle(id={self.id!r}, top_left={self._top_left}, "
            f"bottom_right={self._bottom_right}, area={self._area:g})"
        )


@dataclass(frozen=True)
class VolumeSplit:
    """Cone volume on each side of the z = 0 plane."""

    above: float
    below: float
    total: float


class Cone(Shape):
    """
    Right circular cone.

    Attributes:
        apex: Tip of the cone (first point)
        base_center: Center of the circular base
        radius: Base radius (> 0)
        height: Height (> 0)

    The formulas use radius and height only; apex and base_center place the
    cone in space for queries and the XOY split.
    """

    def __init__(
        self,
        shape_id: str,
        apex: Point,
        base_center: Point,
        radius: float,
        height: float,
        name: Optional[str] = None,
        logger: Optional[StructuredLogger] = None
    ):
        super().__init__(shape_id, name=name, logger=logger)
        self._apex = _require_point(apex, "apex")
        self._base_center = _require_point(base_center, "base_center")
        self._radius = _require_positive(radius, "radius")
        self._height = _require_positive(height, "height")
        self._recompute()

    @property
    def apex(self) -> Point:
        return self._apex

    @property
    def base_center(self) -> Point:
        return self._base_center

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def height(self) -> float:
        return self._height

    def set_apex(self, point: Point) -> None:
        self._mutate("_apex", _require_point(point, "apex"))

    def set_base_center(self, point: Point) -> None:
        self._mutate("_base_center", _require_point(point, "base_center"))

    def set_radius(self, radius: float) -> None:
        self._mutate("_radius", _require_positive(radius, "radius"))

    def set_height(self, height: float) -> None:
        self._mutate("_height", _require_positive(height, "height"))

    def _recompute(self) -> None:
        r, h = self._radius, self._height
        self._slant_height = math.sqrt(r ** 2 + h ** 2)
        self._surface_area = math.pi * r * (r + self._slant_height)
        self._volume = (1 / 3) * math.pi * r ** 2 * h

    @property
    def slant_height(self) -> float:
        return self._slant_height

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def surface_area(self) -> float:
        return self._surface_area

    def get_volume(self) -> float:
        return self._volume

    def get_surface_area(self) -> float:
        return self._surface_area

    def is_base_on_xoy(self) -> bool:
        """True when the base lies in the z = 0 plane."""
        return self._base_center.z == 0

    def volume_split_by_xoy(self) -> VolumeSplit:
        """
        Split the volume by the z = 0 plane.

        The piece on the apex side of the plane is a similar cone, so its
        share of the volume is the cube of its height ratio.

        Returns:
            VolumeSplit(above, below, total)
        """
        with self._lock:
            total = self._volume
            z_apex = self._apex.z
            z_base = self._base_center.z

            # Plane does not cut the cone
            if min(z_apex, z_base) >= 0 or max(z_apex, z_base) <= 0:
                above = total if (z_apex >= 0 and z_base >= 0) else 0.0
                return VolumeSplit(above=above, below=total - above, total=total)

            span = abs(z_base - z_apex) or self._height
            ratio = min(max(abs(z_apex) / span, 0.0), 1.0)
            apex_side = total * ratio ** 3

            if z_apex > 0:
                return VolumeSplit(above=apex_side, below=total - apex_side, total=total)
            return VolumeSplit(above=total - apex_side, below=apex_side, total=total)

    def _properties(self) -> Dict[str, float]:
        return {
            "volume": self._volume,
            "surfacearea": self._surface_area,
            "radius": self._radius,
            "height": self._height,
            "slantheight": self._slant_height,
        }

    def get_first_point(self) -> Point:
        return self._apex

    def get_shape_type(self) -> ShapeType:
        return ShapeType.CONE

    def __repr__(self) -> str:
        return (
            f"Cone(id={self.id!r}, apex={self._apex}, base_center={self._base_center}, "
            f"radius={self._radius:g}, height={self._height:g})"
        )
