"""Shared fixtures."""

import pytest

from shapevault_core import Cone, Point, PropertyStore, Rectangle, ShapeRepository


@pytest.fixture
def store() -> PropertyStore:
    store = PropertyStore()
    yield store
    store.clear()


@pytest.fixture
def repository(store) -> ShapeRepository:
    return ShapeRepository(store)


@pytest.fixture
def rect() -> Rectangle:
    """4x3 rectangle at the origin."""
    return Rectangle("rect1", Point(0, 0), Point(4, 3))


@pytest.fixture
def cone() -> Cone:
    """r=3, h=5 cone standing on the XOY plane."""
    return Cone("cone1", Point(0, 0, 5), Point(0, 0, 0), 3, 5)


@pytest.fixture
def quadrant_repository(repository) -> ShapeRepository:
    """One or more shapes per quadrant plus one anchored at the origin."""
    repository.add(Rectangle("rect1", Point(1, 1), Point(5, 5), name="Q1 Rect"))
    repository.add(Cone("cone1", Point(2, 3, 0), Point(2, 3, -5), 2, 5, name="Q1 Cone"))
    repository.add(Rectangle("rect2", Point(-5, 1), Point(-1, 5), name="Q2 Rect"))
    repository.add(Rectangle("rect3", Point(-5, -5), Point(-1, -1), name="Q3 Rect"))
    repository.add(Cone("cone2", Point(3, -2, 0), Point(3, -2, -5), 3, 5, name="Q4 Cone"))
    repository.add(Rectangle("rect4", Point(0, 0), Point(5, 5), name="Origin"))
    return repository
