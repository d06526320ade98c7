"""
Comparators
===========

Pairwise ordering rules for sorting shapes.

Design:
- compare(a, b) returns -1, 0 or 1
- Stateless; ties are left to the stability of the sort
- key() adapts to sorted()/list.sort() via functools.cmp_to_key
"""

from abc import ABC, abstractmethod
from functools import cmp_to_key
from typing import Any, Callable


def _three_way(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class Comparator(ABC):
    """Base class for shape comparators."""

    @abstractmethod
    def compare(self, a: Any, b: Any) -> int:
        """Negative if a sorts first, zero if tied, positive otherwise."""

    def __call__(self, a: Any, b: Any) -> int:
        return self.compare(a, b)

    def key(self) -> Callable[[Any], Any]:
        return cmp_to_key(self.compare)

    def reversed(self) -> "Comparator":
        """Descending version of this comparator (ties stay in input order)."""
        return ReversedComparator(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ReversedComparator(Comparator):
    def __init__(self, inner: Comparator):
        self.inner = inner

    def compare(self, a: Any, b: Any) -> int:
        return self.inner.compare(b, a)

    def __repr__(self) -> str:
        return f"ReversedComparator({self.inner!r})"


class IdComparator(Comparator):
    """Lexicographic by id."""

    def compare(self, a: Any, b: Any) -> int:
        return _three_way(a.id, b.id)


class NameComparator(Comparator):
    """Lexicographic by display name."""

    def compare(self, a: Any, b: Any) -> int:
        return _three_way(a.get_name(), b.get_name())


class FirstPointXComparator(Comparator):
    def compare(self, a: Any, b: Any) -> int:
        return _three_way(a.get_first_point().x, b.get_first_point().x)


class FirstPointYComparator(Comparator):
    def compare(self, a: Any, b: Any) -> int:
        return _three_way(a.get_first_point().y, b.get_first_point().y)


class FirstPointZComparator(Comparator):
    def compare(self, a: Any, b: Any) -> int:
        return _three_way(a.get_first_point().z, b.get_first_point().z)


class DistanceFromOriginComparator(Comparator):
    """Euclidean norm of the first point."""

    def compare(self, a: Any, b: Any) -> int:
        return _three_way(
            a.get_first_point().distance_from_origin(),
            b.get_first_point().distance_from_origin(),
        )
