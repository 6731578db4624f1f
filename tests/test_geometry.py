"""Tests for kle/geometry.py pure functions."""
import math
import pytest
from kle.types import Key, Bounds
from kle.geometry import GeometryError, rotate, key_corners, key_bounds, keyboard_bounds


def _close(p, q, tol=1e-9):
    return abs(p[0] - q[0]) < tol and abs(p[1] - q[1]) < tol


# --- rotate ---

class TestRotate:
    def test_zero_angle_is_identity(self):
        p = (3.5, -2.0)
        assert rotate(p, (1.0, 1.0), 0) is p

    def test_zero_angle_on_pivot(self):
        assert rotate((1.0, 1.0), (1.0, 1.0), 0) == (1.0, 1.0)

    def test_quarter_turn_is_clockwise_on_screen(self):
        # +x axis turns onto +y axis (downwards on a y-down canvas)
        assert _close(rotate((1, 0), (0, 0), 90), (0, 1))
        assert _close(rotate((0, 1), (0, 0), 90), (-1, 0))

    def test_point_above_pivot(self):
        # Negative y offset must keep its sign through the angle computation
        assert _close(rotate((1, -1), (0, 0), 90), (1, 1))
        assert _close(rotate((0, -2), (0, 0), 90), (2, 0))

    def test_negative_angle(self):
        assert _close(rotate((1, 0), (0, 0), -90), (0, -1))

    def test_about_offset_pivot(self):
        assert _close(rotate((3, 2), (2, 2), 180), (1, 2))

    def test_preserves_distance(self):
        p = rotate((4.0, 1.5), (1.0, -0.5), 33.0)
        assert abs(math.dist(p, (1.0, -0.5)) - math.dist((4.0, 1.5), (1.0, -0.5))) < 1e-12

    @pytest.mark.parametrize("p", [(1, 0), (0.3, -2.7), (-4, 5)])
    def test_full_turn_periodicity(self, p):
        assert _close(rotate(p, (0.5, 0.5), 360), rotate(p, (0.5, 0.5), 0))
        assert _close(rotate(p, (0.5, 0.5), 450), rotate(p, (0.5, 0.5), 90))

    @pytest.mark.parametrize("angle", [15, 90, 180, -45, 720])
    def test_pivot_is_fixpoint(self, angle):
        p = rotate((2.0, 3.0), (2.0, 3.0), angle)
        assert p == (2.0, 3.0)
        assert not any(math.isnan(c) for c in p)


# --- key_corners ---

class TestKeyCorners:
    def test_plain_key(self):
        c = key_corners(Key(x=1, y=2, width=2, height=1))
        assert len(c) == 8
        assert c[:4] == [(1, 2), (3, 2), (3, 3), (1, 3)]
        # zero-sized secondary rectangle collapses onto the key origin
        assert set(c[4:]) == {(1, 2)}

    def test_secondary_rectangle_offset(self):
        # ISO enter: tall primary, wider secondary sticking out to the left
        key = Key(x=13, y=1, width=1.25, height=2, x2=-0.25, width2=1.5, height2=1)
        c = key_corners(key)
        assert c[4] == (12.75, 1)
        assert c[6] == (14.25, 2)

    def test_non_positive_size_raises(self):
        with pytest.raises(GeometryError, match="positive"):
            key_corners(Key(width=0))


# --- key_bounds ---

class TestKeyBounds:
    def test_unrotated_equals_corners(self):
        key = Key(x=1, y=1)
        assert key_bounds(key) == key_corners(key)

    def test_rotated_about_origin(self):
        bounds = key_bounds(Key(rotation_angle=90))
        assert _close(bounds[0], (0, 0))
        assert _close(bounds[1], (0, 1))
        assert _close(bounds[2], (-1, 1))   # far corner (1, 1)
        assert _close(bounds[3], (-1, 0))

    def test_rotated_about_own_center(self):
        key = Key(x=0, y=0, width=2, height=2, rotation_x=1, rotation_y=1, rotation_angle=45)
        xs = [p[0] for p in key_bounds(key)]
        assert abs(min(xs) - (1 - math.sqrt(2))) < 1e-9
        assert abs(max(xs) - (1 + math.sqrt(2))) < 1e-9


# --- keyboard_bounds ---

class TestKeyboardBounds:
    def test_empty(self):
        assert keyboard_bounds([]) is None

    def test_two_keys(self):
        b = keyboard_bounds([Key(x=0, y=0), Key(x=2, y=1, width=2)])
        assert isinstance(b, Bounds)
        assert b.min == (0.0, 0.0)
        assert b.max == (4.0, 2.0)
        assert b.width == 4.0
        assert b.height == 2.0

    def test_rotation_reaches_negative_space(self):
        b = keyboard_bounds([Key(rotation_angle=90)])
        assert abs(b.min[0] - (-1.0)) < 1e-9
        assert abs(b.max[1] - 1.0) < 1e-9

    def test_returns_plain_floats(self):
        b = keyboard_bounds([Key(x=1, y=1)])
        assert type(b.min[0]) is float
