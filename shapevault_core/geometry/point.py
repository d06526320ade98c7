"""
Point Value Object
==================

Immutable 3D coordinate used as the spatial anchor of every shape.

Design:
- Frozen dataclass (value object, no identity)
- Fail-fast: non-finite coordinates rejected at construction
- numpy for vector math
"""

import math
import numbers
import numpy as np
from dataclasses import dataclass

from shapevault_core.errors import InvalidDataError


@dataclass(frozen=True)
class Point:
    """
    Immutable (x, y, z) coordinate.

    Attributes:
        x: X coordinate
        y: Y coordinate
        z: Z coordinate (default 0.0, planar shapes leave it unset)

    Example:
        >>> Point(3, 4).distance_from_origin()
        5.0
    """

    x: float
    y: float
    z: float = 0.0

    def __post_init__(self):
        """Validate and normalize coordinates to float."""
        for axis in ("x", "y", "z"):
            value = getattr(self, axis)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidDataError(
                    f"Point.{axis} must be a real number, got {type(value).__name__}"
                )
            if not math.isfinite(value):
                raise InvalidDataError(f"Point.{axis} must be finite, got {value}")
            # using object.__setattr__ for frozen dataclass
            object.__setattr__(self, axis, float(value))

    def to_array(self) -> np.ndarray:
        """Read-only numpy vector [x, y, z]."""
        vector = np.array([self.x, self.y, self.z], dtype=float)
        vector.flags.writeable = False
        return vector

    def distance_from_origin(self) -> float:
        """Euclidean norm of the point."""
        return float(np.linalg.norm(self.to_array()))

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return float(np.linalg.norm(self.to_array() - other.to_array()))

    # Quadrant checks use strict inequalities: points on an axis belong to none.

    def is_in_first_quadrant(self) -> bool:
        return self.x > 0 and self.y > 0

    def is_in_second_quadrant(self) -> bool:
        return self.x < 0 and self.y > 0

    def is_in_third_quadrant(self) -> bool:
        return self.x < 0 and self.y < 0

    def is_in_fourth_quadrant(self) -> bool:
        return self.x > 0 and self.y < 0

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"
