"""
Tests for the specification algebra.
"""

import pytest

from shapevault_core import (
    AreaRangeSpecification,
    Cone,
    DistanceRangeSpecification,
    FirstQuadrantSpecification,
    FourthQuadrantSpecification,
    IdSpecification,
    NameSpecification,
    NegativeZSpecification,
    PerimeterRangeSpecification,
    Point,
    PositiveZSpecification,
    PropertyRangeSpecification,
    Rectangle,
    SecondQuadrantSpecification,
    ShapeType,
    SurfaceAreaRangeSpecification,
    ThirdQuadrantSpecification,
    TypeSpecification,
    VolumeRangeSpecification,
)


@pytest.fixture
def shapes():
    return [
        Rectangle("r1", Point(1, 1), Point(5, 5), name="Alpha"),
        Rectangle("r2", Point(-2, 3, 1), Point(0, 0), name="Beta"),
        Rectangle("r3", Point(0, 0), Point(2, 1), name="gamma"),
        Cone("c1", Point(2, -2, -1), Point(2, -2, -4), 1, 3, name="Delta"),
        Cone("c2", Point(-1, -1, 4), Point(-1, -1, 0), 2, 4, name="ALPHA cone"),
    ]


# =============================================================================
# LEAVES
# =============================================================================


class TestLeaves:
    def test_id(self, shapes):
        spec = IdSpecification("r2")
        assert [s.id for s in shapes if spec.is_satisfied_by(s)] == ["r2"]

    def test_name_case_insensitive_substring(self, shapes):
        spec = NameSpecification("alpha")
        assert [s.id for s in shapes if spec(s)] == ["r1", "c2"]

    def test_name_case_sensitive(self, shapes):
        spec = NameSpecification("Alpha", case_sensitive=True)
        assert [s.id for s in shapes if spec(s)] == ["r1"]

    def test_quadrants(self, shapes):
        assert [s.id for s in shapes if FirstQuadrantSpecification()(s)] == ["r1"]
        assert [s.id for s in shapes if SecondQuadrantSpecification()(s)] == ["r2"]
        assert [s.id for s in shapes if ThirdQuadrantSpecification()(s)] == ["c2"]
        assert [s.id for s in shapes if FourthQuadrantSpecification()(s)] == ["c1"]

    def test_point_on_axis_matches_no_quadrant(self, shapes):
        on_axis = shapes[2]
        for spec in (
            FirstQuadrantSpecification(),
            SecondQuadrantSpecification(),
            ThirdQuadrantSpecification(),
            FourthQuadrantSpecification(),
        ):
            assert not spec.is_satisfied_by(on_axis)

    def test_z_sign(self, shapes):
        assert [s.id for s in shapes if PositiveZSpecification()(s)] == ["r2", "c2"]
        assert [s.id for s in shapes if NegativeZSpecification()(s)] == ["c1"]

    def test_distance_range_is_inclusive(self):
        rect = Rectangle("r", Point(3, 4), Point(10, 10))
        assert DistanceRangeSpecification(5, 5).is_satisfied_by(rect)
        assert DistanceRangeSpecification(0, 5).is_satisfied_by(rect)
        assert not DistanceRangeSpecification(0, 4.99).is_satisfied_by(rect)

    def test_type(self, shapes):
        assert [s.id for s in shapes if TypeSpecification(ShapeType.CONE)(s)] == ["c1", "c2"]
        assert [s.id for s in shapes if TypeSpecification("Rectangle")(s)] == ["r1", "r2", "r3"]

    def test_unknown_type_matches_nothing(self, shapes):
        spec = TypeSpecification("hexagon")
        assert not any(spec(s) for s in shapes)


# =============================================================================
# PROPERTY RANGES
# =============================================================================


class TestPropertyRanges:
    def test_area_range_inclusive_bounds(self, shapes):
        # r1 area 16, r2 area 6, r3 area 2
        assert [s.id for s in shapes if AreaRangeSpecification(2, 6)(s)] == ["r2", "r3"]

    def test_perimeter_range(self, shapes):
        assert [s.id for s in shapes if PerimeterRangeSpecification(16, 16)(s)] == ["r1"]

    def test_volume_range_rejects_rectangles(self, shapes):
        spec = VolumeRangeSpecification(0, 1000)
        assert [s.id for s in shapes if spec(s)] == ["c1", "c2"]

    def test_surface_area_range(self, shapes):
        c1, c2 = shapes[3], shapes[4]
        spec = SurfaceAreaRangeSpecification(c2.surface_area, c2.surface_area)
        assert spec(c2)
        assert not spec(c1)

    def test_absent_property_never_matches(self, shapes):
        spec = PropertyRangeSpecification(ShapeType.RECTANGLE, "volume", 0, float("inf"))
        assert not any(spec(s) for s in shapes)

    def test_wrong_variant_never_matches(self, shapes):
        cone = shapes[3]
        spec = PropertyRangeSpecification(ShapeType.RECTANGLE, "height", 0, float("inf"))
        assert not spec(cone)


# =============================================================================
# COMBINATORS
# =============================================================================


class TestCombinators:
    def test_and(self, shapes):
        spec = TypeSpecification(ShapeType.RECTANGLE).and_(NameSpecification("alpha"))
        assert [s.id for s in shapes if spec(s)] == ["r1"]

    def test_or(self, shapes):
        spec = IdSpecification("r1").or_(IdSpecification("c1"))
        assert [s.id for s in shapes if spec(s)] == ["r1", "c1"]

    def test_not(self, shapes):
        spec = TypeSpecification(ShapeType.CONE).not_()
        assert [s.id for s in shapes if spec(s)] == ["r1", "r2", "r3"]

    def test_operators(self, shapes):
        spec = (FirstQuadrantSpecification() | FourthQuadrantSpecification()) & ~TypeSpecification("cone")
        assert [s.id for s in shapes if spec(s)] == ["r1"]

    def test_boolean_laws(self, shapes):
        specs = [
            FirstQuadrantSpecification(),
            TypeSpecification(ShapeType.CONE),
            NameSpecification("a"),
            PositiveZSpecification(),
        ]
        for a in specs:
            for b in specs:
                for shape in shapes:
                    assert (a & b)(shape) == (a(shape) and b(shape))
                    assert (a | b)(shape) == (a(shape) or b(shape))
                    assert (~~a)(shape) == a(shape)
                    assert (~(a & b))(shape) == ((~a) | (~b))(shape)

    def test_and_short_circuits(self):
        class Exploding(IdSpecification):
            def is_satisfied_by(self, candidate):
                raise AssertionError("right operand evaluated")

        rect = Rectangle("r", Point(1, 1), Point(2, 2))
        assert not (IdSpecification("other") & Exploding("x"))(rect)
        assert (IdSpecification("r") | Exploding("x"))(rect)

    def test_specifications_are_immutable(self):
        spec = IdSpecification("r1")
        with pytest.raises(AttributeError):
            spec.shape_id = "r2"
