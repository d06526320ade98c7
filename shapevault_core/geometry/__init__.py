"""
Geometry Layer
==============

Bounded Context: Shape entities and their change notifications.

Responsibilities:
- Point value object (immutable)
- Rectangle / Cone entities with derived metrics
- Observer channel used to broadcast shape changes
- NO caching, NO querying
"""

from shapevault_core.geometry.point import Point
from shapevault_core.geometry.observer import Observable, ShapeObserver
from shapevault_core.geometry.shapes import (
    Cone,
    Rectangle,
    Shape,
    ShapeType,
    VolumeSplit,
    normalize_property_name,
)

__all__ = [
    "Point",
    "Observable",
    "ShapeObserver",
    "Shape",
    "ShapeType",
    "Rectangle",
    "Cone",
    "VolumeSplit",
    "normalize_property_name",
]
