"""
Tests for the Translation2d type.
"""

import math

import pytest
import numpy as np

from robot_geometry.rotation2d import Rotation2d
from robot_geometry.translation2d import Translation2d
from robot_geometry.utils import GeometryError


class TestTranslationArithmetic:
    """Test vector arithmetic."""

    def test_default_is_zero(self):
        """Test default translation is the zero vector."""
        t = Translation2d()
        assert t.x == 0.0
        assert t.y == 0.0

    def test_plus_minus(self):
        """Test addition and subtraction."""
        a = Translation2d(1.0, 2.0)
        b = Translation2d(3.0, -1.0)

        assert a.plus(b) == Translation2d(4.0, 1.0)
        assert a.minus(b) == Translation2d(-2.0, 3.0)
        assert a + b == Translation2d(4.0, 1.0)
        assert a - b == Translation2d(-2.0, 3.0)

    def test_unary_minus(self):
        """Test negation."""
        t = Translation2d(1.5, -2.5)
        assert t.unary_minus() == Translation2d(-1.5, 2.5)
        assert -t == Translation2d(-1.5, 2.5)

    def test_times_and_div(self):
        """Test scaling by a scalar."""
        t = Translation2d(2.0, -4.0)
        assert t.times(1.5) == Translation2d(3.0, -6.0)
        assert t.div(2.0) == Translation2d(1.0, -2.0)
        assert 2 * t == Translation2d(4.0, -8.0)
        assert t * 0.5 == Translation2d(1.0, -2.0)
        assert t / 4 == Translation2d(0.5, -1.0)

    def test_div_by_zero_does_not_raise(self):
        """Test a zero divisor propagates inf/NaN."""
        result = Translation2d(1.0, 0.0).div(0.0)
        assert math.isinf(result.x)
        assert math.isnan(result.y)

    def test_integer_inputs_become_floats(self):
        """Test components are stored as floats."""
        t = Translation2d(1, 2)
        assert isinstance(t.x, float)
        assert isinstance(t.y, float)


class TestTranslationGeometry:
    """Test rotation, norm and angle queries."""

    def test_rotate_by(self):
        """Test counter-clockwise rotation about the origin."""
        t = Translation2d(2.0, 0.0).rotate_by(Rotation2d.from_degrees(90.0))
        assert t == Translation2d(0.0, 2.0)

        t = Translation2d(1.0, 1.0).rotate_by(Rotation2d.from_degrees(-90.0))
        assert t == Translation2d(1.0, -1.0)

    def test_get_norm(self):
        """Test Euclidean length."""
        assert Translation2d(3.0, 4.0).get_norm() == 5.0
        assert Translation2d().get_norm() == 0.0

    def test_get_angle(self):
        """Test direction of the vector."""
        assert Translation2d(1.0, 1.0).get_angle() == Rotation2d.from_degrees(45.0)
        assert Translation2d(0.0, -2.0).get_angle() == Rotation2d.from_degrees(-90.0)

    def test_zero_vector_angle_is_identity(self):
        """Test zero vector has the identity direction."""
        assert Translation2d().get_angle() == Rotation2d()

    def test_small_vector_angle(self):
        """Test short displacements still report their direction."""
        assert np.isclose(Translation2d(0.0, -5e-7).get_angle().get_radians(), -math.pi / 2)
        assert np.isclose(Translation2d(-5e-7, 0.0).get_angle().get_radians(), math.pi)

    def test_get_distance(self):
        """Test distance between two points."""
        assert Translation2d(1.0, 1.0).get_distance(Translation2d(4.0, 5.0)) == 5.0

    def test_from_polar(self):
        """Test construction from distance and direction."""
        t = Translation2d.from_polar(2.0, Rotation2d.from_degrees(90.0))
        assert t == Translation2d(0.0, 2.0)

    def test_interpolate(self):
        """Test linear interpolation with clamping."""
        a = Translation2d(0.0, 0.0)
        b = Translation2d(2.0, 4.0)
        assert a.interpolate(b, 0.25) == Translation2d(0.5, 1.0)
        assert a.interpolate(b, 3.0) == b

    def test_accessors(self):
        """Test projection accessors."""
        t = Translation2d(1.25, -0.5)
        assert t.get_x() == 1.25
        assert t.get_y() == -0.5


class TestTranslationArrays:
    """Test numpy interop."""

    def test_array_round_trip(self):
        """Test conversion to and from numpy arrays."""
        t = Translation2d(0.3, -0.7)
        arr = t.to_array()

        assert arr.shape == (2,)
        assert np.allclose(arr, [0.3, -0.7])
        assert Translation2d.from_array(arr) == t

    def test_from_array_bad_shape(self):
        """Test malformed arrays are rejected."""
        with pytest.raises(GeometryError):
            Translation2d.from_array([1.0, 2.0, 3.0])

    def test_repr(self):
        """Test string representation."""
        assert repr(Translation2d(1.0, 2.0)) == "Translation2d(x=1.00, y=2.00)"


if __name__ == "__main__":
    pytest.main([__file__])
