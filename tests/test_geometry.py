"""
Vector3 geometry: magnitude, normalize, dot, cross, min/max, angles, lerp,
fuzzy equality.
"""

import math

import pytest

from vec3 import Vector3, NaNCoordinateError, X_AXIS, Y_AXIS, Z_AXIS
from vec3.config import Vec3Config, set_config


class TestMagnitude:
    def test_pythagorean(self):
        assert Vector3(3.0, 4.0, 0.0).magnitude() == 5.0
        assert Vector3(2.0, 3.0, 6.0).magnitude() == 7.0

    def test_zero(self):
        assert Vector3(0.0, 0.0, 0.0).magnitude() == 0.0

    def test_distance_to(self):
        assert Vector3(1.0, 1.0, 1.0).distance_to(Vector3(4.0, 5.0, 1.0)) == 5.0


class TestNormalize:
    def test_normalization(self):
        v = Vector3(1.0, 2.3, 100.123)
        v.normalize()
        assert v.x == pytest.approx(0.00998458316076644, rel=1e-12)
        assert v.y == pytest.approx(0.02296454126976281, rel=1e-12)
        assert v.z == pytest.approx(0.9996864198054183, rel=1e-12)
        assert abs(1.0 - v.magnitude()) < 1e-8

    def test_normalize_is_in_place(self):
        v = Vector3(0.0, 0.0, 5.0)
        assert v.normalize() is None
        assert v == Vector3(0.0, 0.0, 1.0)

    def test_zero_vector_is_fatal(self):
        """0 / 0 is NaN, and normalize uses the in-place divide."""
        v = Vector3(0.0, 0.0, 0.0)
        with pytest.raises(NaNCoordinateError):
            v.normalize()
        assert v == Vector3(0.0, 0.0, 0.0)

    def test_normalized_returns_copy(self):
        v = Vector3(3.0, 0.0, 4.0)
        n = v.normalized()
        assert n == Vector3(0.6, 0.0, 0.8)
        assert v == Vector3(3.0, 0.0, 4.0)

    def test_normalized_zero_vector_is_fatal(self):
        with pytest.raises(NaNCoordinateError):
            Vector3(0.0, 0.0, 0.0).normalized()


class TestProducts:
    def test_dot_product(self):
        assert Vector3(1.0, 2.0, 3.0).dot(Vector3(5.0, 0.0, -1.0)) == 2.0

    def test_cross_product(self):
        assert Vector3(1.0, 0.0, 0.0).cross(Vector3(0.0, 1.0, 0.0)) == Vector3(0.0, 0.0, 1.0)

    def test_cross_right_hand_rule(self):
        assert Y_AXIS.cross(Z_AXIS) == X_AXIS
        assert Z_AXIS.cross(X_AXIS) == Y_AXIS

    def test_cross_anti_commutes(self):
        a = Vector3(1.5, -2.0, 3.0)
        b = Vector3(0.5, 4.0, -1.25)
        assert a.cross(b) == -(b.cross(a))

    def test_cross_with_self_is_zero(self):
        a = Vector3(1.5, -2.0, 3.0)
        assert a.cross(a) == Vector3(0.0, 0.0, 0.0)

    def test_cross_of_parallel_is_zero(self):
        a = Vector3(1.0, 2.0, 3.0)
        assert a.cross(a * 2.0) == Vector3(0.0, 0.0, 0.0)

    def test_cross_is_perpendicular(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(3.0, 1.0, 2.0)
        c = a.cross(b)
        assert c == Vector3(1.0, 7.0, -5.0)
        assert c.dot(a) == 0.0
        assert c.dot(b) == 0.0


class TestMinMax:
    def test_max_components(self):
        assert Vector3(1.0, 5.0, 3.0).max(Vector3(3.0, 2.0, 4.0)) == Vector3(3.0, 5.0, 4.0)

    def test_min_components(self):
        assert Vector3(1.0, 5.0, 3.0).min(Vector3(3.0, 2.0, 4.0)) == Vector3(1.0, 2.0, 3.0)

    def test_per_component_not_magnitude(self):
        """Neither input wins outright."""
        big = Vector3(100.0, 0.0, 0.0)
        small = Vector3(0.0, 1.0, 1.0)
        assert big.max(small) == Vector3(100.0, 1.0, 1.0)

    def test_ties_take_other_component(self):
        """On equal components the argument wins, visible through signed zeros."""
        pos = Vector3(0.0, 0.0, 0.0)
        neg = Vector3(-0.0, -0.0, -0.0)
        assert all(math.copysign(1.0, c) < 0 for c in pos.max(neg))
        assert all(math.copysign(1.0, c) < 0 for c in pos.min(neg))
        assert all(math.copysign(1.0, c) > 0 for c in neg.max(pos))


class TestAngle:
    def test_angle(self):
        assert X_AXIS.angle(Y_AXIS) == 1.5707963267948966

    def test_angle_deg(self):
        assert X_AXIS.angle_deg(Y_AXIS) == pytest.approx(90.0)

    def test_opposite(self):
        assert X_AXIS.angle(-X_AXIS) == pytest.approx(math.pi)

    def test_parallel(self):
        """Rounding past cos = 1 does not turn into NaN."""
        a = Vector3(1.0, 1.0, 1.0)
        assert a.angle(a * 3.0) == pytest.approx(0.0, abs=1e-7)

    def test_symmetric(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(-3.0, 0.5, 2.0)
        assert a.angle(b) == pytest.approx(b.angle(a))

    def test_zero_vector_is_nan(self):
        assert math.isnan(Vector3(0.0, 0.0, 0.0).angle(X_AXIS))
        assert math.isnan(X_AXIS.angle_deg(Vector3(0.0, 0.0, 0.0)))


class TestLerp:
    def test_lerp(self):
        start = Vector3(0.0, 0.0, 0.0)
        end = Vector3(1.0, 2.0, 3.0)
        assert start.lerp(end, 0.75) == Vector3(0.75, 1.5, 2.25)

    def test_endpoints(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(5.0, -2.0, 7.0)
        assert a.lerp(b, 0.0) == a
        assert a.lerp(b, 1.0) == b

    def test_extrapolates(self):
        """alpha outside [0, 1] is not clamped."""
        start = Vector3(0.0, 0.0, 0.0)
        end = Vector3(1.0, 2.0, 3.0)
        assert start.lerp(end, 2.0) == Vector3(2.0, 4.0, 6.0)
        assert start.lerp(end, -1.0) == Vector3(-1.0, -2.0, -3.0)


class TestFuzzyEqual:
    def test_fuzzy_equality(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(1.01, 1.99, 3.01)
        assert a.fuzzy_equal(b, 0.02)
        assert not a.fuzzy_equal(b, 0.001)

    def test_per_axis_not_distance(self):
        """Each axis within tolerance passes even if the total distance is larger."""
        a = Vector3(0.0, 0.0, 0.0)
        b = Vector3(0.1, 0.1, 0.1)
        assert a.distance_to(b) > 0.1
        assert a.fuzzy_equal(b, 0.1)

    def test_default_epsilon(self):
        a = Vector3(1.0, 2.0, 3.0)
        assert a.fuzzy_equal(Vector3(1.0, 2.0, 3.0 + 1e-12))
        assert not a.fuzzy_equal(Vector3(1.0, 2.0, 3.1))

    def test_configured_epsilon(self):
        set_config(Vec3Config(fuzzy_epsilon=0.5))
        assert Vector3(1.0, 2.0, 3.0).fuzzy_equal(Vector3(1.4, 2.0, 3.0))
