"""
Store Sync Observer
===================

Observer that mirrors a shape's derived values into a PropertyStore.

Design:
- Stateless apart from the target store
- Exhaustive dispatch on ShapeType
- Unknown subjects are ignored, never an error
"""

from typing import Any

from shapevault_core.analytics.store import PropertyStore
from shapevault_core.geometry.shapes import ShapeType


class StoreSyncObserver:
    """
    Pushes fresh derived values into the store after every shape change.

    Example:
        store = PropertyStore()
        sync = StoreSyncObserver(store)
        rect.add_observer(sync)
        rect.set_bottom_right(Point(10, 10))
        store.get_area(rect.id)  # 100.0
    """

    def __init__(self, store: PropertyStore):
        self._store = store

    @property
    def store(self) -> PropertyStore:
        return self._store

    def update(self, subject: Any) -> None:
        get_shape_type = getattr(subject, "get_shape_type", None)
        if get_shape_type is None:
            return
        shape_type = get_shape_type()

        if shape_type == ShapeType.RECTANGLE:
            self._store.set_area(subject.id, subject.area)
            self._store.set_perimeter(subject.id, subject.perimeter)
        elif shape_type == ShapeType.CONE:
            self._store.set_volume(subject.id, subject.volume)
            self._store.set_surface_area(subject.id, subject.surface_area)

    def __repr__(self) -> str:
        return f"StoreSyncObserver(store={self._store!r})"
