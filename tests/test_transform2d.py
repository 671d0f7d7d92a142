"""
Tests for the Transform2d type and the pose/transform group laws.
"""

import math
from concurrent.futures import ThreadPoolExecutor

import pytest
import numpy as np

from robot_geometry.pose2d import Pose2d
from robot_geometry.rotation2d import Rotation2d
from robot_geometry.transform2d import Transform2d
from robot_geometry.translation2d import Translation2d


@pytest.fixture
def pose_pairs():
    """Pairs of (initial, last) poses covering all quadrants."""
    poses = [
        Pose2d(),
        Pose2d.from_xy_theta(1.0, 1.0, math.pi / 2),
        Pose2d.from_xy_theta(-3.2, 0.7, -2.5),
        Pose2d.from_xy_theta(12.0, -8.5, 3.0),
        Pose2d.from_xy_theta(0.001, 0.002, 0.0001),
    ]
    return [(a, b) for a in poses for b in poses]


@pytest.fixture
def transforms():
    """A set of non-trivial transforms."""
    return [
        Transform2d(),
        Transform2d(Translation2d(1.0, 0.0), Rotation2d.from_degrees(90.0)),
        Transform2d(Translation2d(-2.5, 4.0), Rotation2d.from_radians(-1.2)),
        Transform2d(Translation2d(0.3, -0.1), Rotation2d.from_radians(2.9)),
    ]


class TestTransformConstruction:
    """Test construction from poses and components."""

    def test_default_is_identity(self):
        """Test default transform has no translation or rotation."""
        t = Transform2d()
        assert t.translation == Translation2d()
        assert t.rotation == Rotation2d()

    def test_from_poses_origin_to_rotated(self):
        """Test transform from (0, 0, 0 deg) to (1, 1, 90 deg)."""
        initial = Pose2d()
        last = Pose2d(Translation2d(1.0, 1.0), Rotation2d.from_degrees(90.0))

        transform = Transform2d.from_poses(initial, last)

        assert transform.get_translation() == Translation2d(1.0, 1.0)
        assert transform.get_rotation() == Rotation2d.from_degrees(90.0)
        assert initial.transform_by(transform) == last

    def test_from_poses_expressed_in_initial_frame(self):
        """Test world delta is rotated into the initial pose's frame."""
        initial = Pose2d(Translation2d(1.0, 0.0), Rotation2d.from_degrees(90.0))
        last = Pose2d(Translation2d(1.0, 1.0), Rotation2d.from_degrees(90.0))

        transform = Transform2d.from_poses(initial, last)

        assert transform.get_translation() == Translation2d(1.0, 0.0)
        assert transform.get_rotation() == Rotation2d()
        assert np.isclose(transform.get_x(), 1.0)
        assert np.isclose(transform.get_y(), 0.0, atol=1e-12)

    def test_accessors_are_projections(self):
        """Test accessors return the stored components."""
        translation = Translation2d(2.0, -1.0)
        rotation = Rotation2d.from_degrees(15.0)
        t = Transform2d(translation, rotation)

        assert t.get_translation() is translation
        assert t.get_rotation() is rotation
        assert t.get_x() == 2.0
        assert t.get_y() == -1.0


class TestTransformLaws:
    """Test the round-trip, identity and inverse laws."""

    def test_round_trip(self, pose_pairs):
        """Test applying the transform between two poses reaches the second one."""
        for initial, last in pose_pairs:
            transform = Transform2d.from_poses(initial, last)
            assert initial.transform_by(transform) == last

    def test_identity_application(self, pose_pairs):
        """Test the identity transform leaves poses unchanged."""
        for pose, _ in pose_pairs:
            assert pose.transform_by(Transform2d()) == pose

    def test_identity_composition(self, transforms):
        """Test composing with the identity on either side."""
        for t in transforms:
            assert t.plus(Transform2d()) == t
            assert Transform2d().plus(t) == t

    def test_inverse_composition(self, transforms):
        """Test a transform composed with its inverse is the identity."""
        for t in transforms:
            assert t.plus(t.inverse()) == Transform2d()
            assert t.inverse().plus(t) == Transform2d()

    def test_double_inverse(self, transforms):
        """Test inverting twice gives the original transform."""
        for t in transforms:
            assert t.inverse().inverse() == t

    def test_inverse_undoes_application(self, pose_pairs, transforms):
        """Test applying a transform then its inverse returns to the start."""
        for pose, _ in pose_pairs:
            for t in transforms:
                assert pose.transform_by(t).transform_by(t.inverse()) == pose


class TestTransformComposition:
    """Test plus, times and div."""

    def test_plus_sequential(self):
        """Test composition applies this transform first, then other."""
        turn_and_step = Transform2d(Translation2d(1.0, 0.0), Rotation2d.from_degrees(90.0))
        step = Transform2d(Translation2d(1.0, 0.0), Rotation2d())

        combined = turn_and_step.plus(step)

        assert combined.get_translation() == Translation2d(1.0, 1.0)
        assert combined.get_rotation() == Rotation2d.from_degrees(90.0)
        assert turn_and_step + step == combined

    def test_plus_matches_pose_application(self, pose_pairs, transforms):
        """Test composed transforms act like sequential application."""
        a, b = transforms[1], transforms[2]
        for pose, _ in pose_pairs:
            assert pose.transform_by(a + b) == pose.transform_by(a).transform_by(b)

    def test_plus_associative_within_tolerance(self, transforms):
        """Test composition is associative up to floating-point error."""
        a, b, c = transforms[1], transforms[2], transforms[3]
        assert (a + b) + c == a + (b + c)

    def test_times_scales_translation_linearly(self, transforms):
        """Test scaling multiplies the translation."""
        for t in transforms:
            for a in (0.0, 0.5, 2.0, -1.0):
                assert t.times(a).get_translation() == t.get_translation().times(a)

    def test_times_scales_rotation_angle(self):
        """Test scaling multiplies the rotation angle."""
        t = Transform2d(Translation2d(1.0, 2.0), Rotation2d.from_radians(0.3))
        for a in (0.5, 2.5, -3.0):
            scaled = t.times(a)
            assert np.isclose(scaled.get_rotation().get_radians(), a * 0.3)

    def test_times_operator(self):
        """Test * and / operators."""
        t = Transform2d(Translation2d(2.0, 0.0), Rotation2d.from_degrees(60.0))
        assert t * 0.5 == Transform2d(Translation2d(1.0, 0.0), Rotation2d.from_degrees(30.0))
        assert 0.5 * t == t * 0.5
        assert t / 2 == t.div(2.0)
        assert t.div(2.0) == t.times(0.5)

    def test_div_by_zero_does_not_raise(self):
        """Test a zero divisor propagates non-finite values."""
        t = Transform2d(Translation2d(1.0, 1.0), Rotation2d.from_degrees(45.0)).div(0.0)
        assert math.isinf(t.get_x())
        assert math.isnan(t.get_rotation().cos)

    def test_to_matrix(self):
        """Test homogeneous matrix form composes like the transform."""
        a = Transform2d(Translation2d(1.0, 0.5), Rotation2d.from_degrees(30.0))
        b = Transform2d(Translation2d(-0.2, 2.0), Rotation2d.from_degrees(-75.0))

        assert a.to_matrix().shape == (3, 3)
        assert np.allclose(a.to_matrix() @ b.to_matrix(), (a + b).to_matrix())
        assert np.allclose(a.inverse().to_matrix(), np.linalg.inv(a.to_matrix()))

    def test_repr(self):
        """Test string representation includes both components."""
        text = repr(Transform2d(Translation2d(1.0, 1.0), Rotation2d.from_degrees(90.0)))
        assert text.startswith("Transform2d(")
        assert "Translation2d(" in text
        assert "Rotation2d(" in text


class TestTransformSharing:
    """Test instances can be shared across threads."""

    def test_concurrent_composition(self, transforms):
        """Test composing a shared transform from many threads."""
        shared = transforms[2]
        expected = shared + shared.inverse()

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: shared + shared.inverse(), range(64)))

        assert all(r == expected for r in results)
        assert shared == transforms[2]


if __name__ == "__main__":
    pytest.main([__file__])
