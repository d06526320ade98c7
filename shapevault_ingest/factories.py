"""
Shape factories: validated tokens in, fully constructed shapes out.

Ids are `<prefix>_<n>` with n counting from 1 per factory instance.
"""

import itertools
from abc import ABC, abstractmethod
from typing import Sequence

from shapevault_core.geometry import Cone, Point, Rectangle, Shape
from shapevault_ingest.validators import ConeValidator, RectangleValidator


class ShapeFactory(ABC):
    """Builds one shape variant from a tokenized record."""

    def __init__(self, id_prefix: str):
        self.id_prefix = id_prefix
        self._counter = itertools.count(1)

    def next_id(self) -> str:
        return f"{self.id_prefix}_{next(self._counter)}"

    @abstractmethod
    def create_shape(self, tokens: Sequence[str]) -> Shape:
        """
        Raises:
            InvalidDataError: If the record is malformed
        """


class RectangleFactory(ShapeFactory):
    def __init__(self, id_prefix: str = "rect"):
        super().__init__(id_prefix)

    def create_shape(self, tokens: Sequence[str]) -> Rectangle:
        x1, y1, x2, y2 = RectangleValidator.validate_record(tokens)
        return Rectangle(self.next_id(), Point(x1, y1), Point(x2, y2))


class ConeFactory(ShapeFactory):
    def __init__(self, id_prefix: str = "cone"):
        super().__init__(id_prefix)

    def create_shape(self, tokens: Sequence[str]) -> Cone:
        ax, ay, az, bx, by, bz, radius, height = ConeValidator.validate_record(tokens)
        return Cone(
            self.next_id(),
            apex=Point(ax, ay, az),
            base_center=Point(bx, by, bz),
            radius=radius,
            height=height,
        )
