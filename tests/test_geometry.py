"""
Tests for the geometry layer: Point, Rectangle, Cone and the observer channel.
"""

import math

import pytest

from shapevault_core import Cone, InvalidDataError, Point, Rectangle, ShapeType


class RecordingObserver:
    def __init__(self, log=None, label=None):
        self.calls = []
        self.log = log
        self.label = label

    def update(self, subject):
        self.calls.append(subject)
        if self.log is not None:
            self.log.append(self.label)


class FailingObserver:
    def update(self, subject):
        raise RuntimeError("boom")


# =============================================================================
# POINT
# =============================================================================


class TestPoint:
    def test_defaults_z_to_zero(self):
        assert Point(1, 2).z == 0.0

    def test_distance_from_origin(self):
        assert Point(3, 4, 0).distance_from_origin() == 5.0

    def test_distance_to(self):
        assert Point(0, 0, 0).distance_to(Point(3, 4, 0)) == 5.0

    def test_quadrants(self):
        assert Point(1, 1).is_in_first_quadrant()
        assert Point(-1, 1).is_in_second_quadrant()
        assert Point(-1, -1).is_in_third_quadrant()
        assert Point(1, -1).is_in_fourth_quadrant()

    def test_point_on_axis_is_in_no_quadrant(self):
        for point in (Point(0, 0), Point(0, 3), Point(-2, 0)):
            assert not point.is_in_first_quadrant()
            assert not point.is_in_second_quadrant()
            assert not point.is_in_third_quadrant()
            assert not point.is_in_fourth_quadrant()

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), -float("inf")])
    def test_rejects_non_finite(self, bad):
        with pytest.raises(InvalidDataError):
            Point(bad, 0)

    def test_rejects_non_numbers(self):
        with pytest.raises(InvalidDataError):
            Point("1", 0)

    def test_is_immutable(self):
        point = Point(1, 2, 3)
        with pytest.raises(AttributeError):
            point.x = 5

    def test_to_array_is_read_only(self):
        vector = Point(1, 2, 3).to_array()
        assert list(vector) == [1.0, 2.0, 3.0]
        with pytest.raises(ValueError):
            vector[0] = 9


# =============================================================================
# RECTANGLE
# =============================================================================


class TestRectangle:
    def test_area_perimeter_square(self, rect):
        assert rect.area == 12
        assert rect.perimeter == 14
        assert rect.is_square() is False

    def test_square(self):
        assert Rectangle("sq", Point(0, 0), Point(3, 3)).is_square() is True

    def test_corners_in_any_order(self):
        rect = Rectangle("r", Point(4, 3), Point(0, 0))
        assert rect.width == 4
        assert rect.height == 3
        assert rect.area == 12

    def test_name_defaults_to_id(self, rect):
        assert rect.get_name() == "rect1"

    def test_shape_type_and_first_point(self):
        top_left = Point(1, 2, 3)
        rect = Rectangle("r", top_left, Point(5, 5))
        assert rect.get_shape_type() is ShapeType.RECTANGLE
        assert rect.get_first_point() is top_left

    def test_get_property(self):
        rect = Rectangle("r", Point(0, 0), Point(5, 3))
        assert rect.get_property("area") == 15
        assert rect.get_property("AREA") == 15
        assert rect.get_property("perimeter") == 16
        assert rect.get_property("width") == 5
        assert rect.get_property("unknown") is None
        assert rect.get_property("volume") is None

    def test_get_property_is_idempotent(self, rect):
        assert rect.get_property("area") == rect.get_property("area")

    def test_setters_recompute(self, rect):
        rect.set_bottom_right(Point(10, 10))
        assert rect.area == 100
        assert rect.perimeter == 40
        rect.set_top_left(Point(5, 5))
        assert rect.area == 25
        assert rect.is_square()

    def test_set_corners(self, rect):
        observer = RecordingObserver()
        rect.add_observer(observer)
        rect.set_corners(Point(1, 1), Point(3, 2))
        assert rect.area == 2
        assert len(observer.calls) == 1

    def test_setter_rejects_non_point(self, rect):
        with pytest.raises(InvalidDataError):
            rect.set_top_left((1, 2))
        assert rect.area == 12

    def test_degenerate_rectangle_is_not_valid(self):
        rect = Rectangle("flat", Point(1, 1), Point(1, 5))
        assert rect.area == 0
        assert not rect.is_valid()

    def test_empty_id_rejected(self):
        with pytest.raises(InvalidDataError):
            Rectangle("", Point(0, 0), Point(1, 1))


# =============================================================================
# CONE
# =============================================================================


class TestCone:
    def test_volume_and_surface_area(self, cone):
        assert cone.volume == pytest.approx(math.pi * 9 * 5 / 3)
        assert cone.volume == pytest.approx(47.12, abs=0.01)
        assert cone.surface_area == pytest.approx(math.pi * 3 * (3 + math.sqrt(34)))

    def test_slant_height(self, cone):
        assert cone.slant_height == pytest.approx(math.sqrt(34))

    def test_get_property(self, cone):
        assert cone.get_property("volume") == cone.volume
        assert cone.get_property("surfacearea") == cone.surface_area
        assert cone.get_property("surfaceArea") == cone.surface_area
        assert cone.get_property("surface_area") == cone.surface_area
        assert cone.get_property("radius") == 3
        assert cone.get_property("height") == 5
        assert cone.get_property("area") is None

    def test_shape_type_and_first_point(self, cone):
        assert cone.get_shape_type() is ShapeType.CONE
        assert cone.get_first_point() == Point(0, 0, 5)

    @pytest.mark.parametrize("radius,height", [(0, 5), (-1, 5), (3, 0), (3, -2), (float("nan"), 1)])
    def test_rejects_non_positive_dimensions(self, radius, height):
        with pytest.raises(InvalidDataError):
            Cone("c", Point(0, 0, 1), Point(0, 0, 0), radius, height)

    def test_setters_recompute(self, cone):
        old_volume = cone.volume
        cone.set_radius(6)
        assert cone.volume == pytest.approx(4 * old_volume)
        cone.set_height(10)
        assert cone.volume == pytest.approx((1 / 3) * math.pi * 36 * 10)
        assert cone.surface_area == pytest.approx(math.pi * 6 * (6 + math.sqrt(136)))

    def test_invalid_setter_leaves_state_unchanged(self, cone):
        observer = RecordingObserver()
        cone.add_observer(observer)
        with pytest.raises(InvalidDataError):
            cone.set_radius(-3)
        assert cone.radius == 3
        assert observer.calls == []

    def test_is_base_on_xoy(self, cone):
        assert cone.is_base_on_xoy()
        cone.set_base_center(Point(0, 0, 1))
        assert not cone.is_base_on_xoy()

    def test_volume_split_entirely_above(self, cone):
        split = cone.volume_split_by_xoy()
        assert split.above == cone.volume
        assert split.below == 0

    def test_volume_split_entirely_below(self):
        cone = Cone("c", Point(0, 0, -5), Point(0, 0, 0), 3, 5)
        split = cone.volume_split_by_xoy()
        assert split.above == 0
        assert split.below == cone.volume

    def test_volume_split_apex_above_plane(self):
        cone = Cone("c", Point(0, 0, 2), Point(0, 0, -2), 1, 4)
        split = cone.volume_split_by_xoy()
        assert split.above == pytest.approx(cone.volume / 8)
        assert split.below == pytest.approx(cone.volume * 7 / 8)
        assert split.above + split.below == pytest.approx(split.total)

    def test_volume_split_apex_below_plane(self):
        cone = Cone("c", Point(0, 0, -1), Point(0, 0, 3), 1, 4)
        split = cone.volume_split_by_xoy()
        assert split.below == pytest.approx(cone.volume / 64)
        assert split.above == pytest.approx(cone.volume * 63 / 64)


# =============================================================================
# OBSERVER CHANNEL
# =============================================================================


class TestObserver:
    def test_add_observer_is_idempotent(self, rect):
        observer = RecordingObserver()
        rect.add_observer(observer)
        rect.add_observer(observer)
        assert rect.observer_count == 1

    def test_remove_observer(self, rect):
        observer = RecordingObserver()
        rect.add_observer(observer)
        rect.remove_observer(observer)
        assert rect.observer_count == 0

    def test_remove_unknown_observer_is_noop(self, rect):
        rect.remove_observer(RecordingObserver())
        assert rect.observer_count == 0

    def test_notifies_in_registration_order(self, rect):
        order = []
        first = RecordingObserver(order, "first")
        second = RecordingObserver(order, "second")
        rect.add_observer(first)
        rect.add_observer(second)
        rect.set_bottom_right(Point(8, 8))
        assert order == ["first", "second"]

    def test_observer_sees_recomputed_values(self, rect):
        seen = []

        class AreaObserver:
            def update(self, subject):
                seen.append(subject.area)

        rect.add_observer(AreaObserver())
        rect.set_bottom_right(Point(10, 10))
        assert seen == [100]

    def test_set_name_notifies(self, rect):
        observer = RecordingObserver()
        rect.add_observer(observer)
        rect.set_name("My Rectangle")
        assert rect.get_name() == "My Rectangle"
        assert observer.calls == [rect]

    def test_failing_observer_is_isolated(self, rect, caplog):
        after = RecordingObserver()
        rect.add_observer(FailingObserver())
        rect.add_observer(after)

        rect.set_bottom_right(Point(2, 2))

        assert after.calls == [rect]
        assert rect.area == 4
        assert any("shape.observer.failed" in record.getMessage() for record in caplog.records)
