"""
Record validators.

Each validator turns a tokenized record into numbers, or raises
InvalidDataError with a message naming the offending field.
"""

import math
from typing import List, Sequence

from shapevault_core.errors import InvalidDataError


def parse_numbers(tokens: Sequence[str], field_names: Sequence[str], kind: str) -> List[float]:
    """
    Parse the leading len(field_names) tokens as finite floats.

    Extra tokens are ignored.

    Raises:
        InvalidDataError: Too few tokens, a token is not a number, or not finite
    """
    if len(tokens) < len(field_names):
        raise InvalidDataError(
            f"{kind} record needs {len(field_names)} numbers "
            f"({' '.join(field_names)}), got {len(tokens)}"
        )

    values = []
    for name, token in zip(field_names, tokens):
        try:
            value = float(token)
        except ValueError:
            raise InvalidDataError(f"{kind} field '{name}' is not a number: {token!r}")
        if not math.isfinite(value):
            raise InvalidDataError(f"{kind} field '{name}' must be finite, got {token!r}")
        values.append(value)
    return values


class RectangleValidator:
    """Validates `x1 y1 x2 y2` records."""

    FIELDS = ("x1", "y1", "x2", "y2")

    @classmethod
    def validate_record(cls, tokens: Sequence[str]) -> List[float]:
        x1, y1, x2, y2 = parse_numbers(tokens, cls.FIELDS, "Rectangle")
        if abs(x2 - x1) <= 0 or abs(y2 - y1) <= 0:
            raise InvalidDataError("Rectangle width and height must be positive")
        return [x1, y1, x2, y2]


class ConeValidator:
    """Validates `ax ay az bx by bz r h` records."""

    FIELDS = ("ax", "ay", "az", "bx", "by", "bz", "radius", "height")

    @classmethod
    def validate_record(cls, tokens: Sequence[str]) -> List[float]:
        values = parse_numbers(tokens, cls.FIELDS, "Cone")
        radius, height = values[6], values[7]
        if radius <= 0:
            raise InvalidDataError(f"Cone radius must be positive, got {radius:g}")
        if height <= 0:
            raise InvalidDataError(f"Cone height must be positive, got {height:g}")
        return values
