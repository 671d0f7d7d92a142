"""
Absolute position and heading in a fixed world frame.
"""

import math
from dataclasses import dataclass, field

import numpy as np

from .rotation2d import Rotation2d
from .translation2d import Translation2d
from .transform2d import Transform2d
from .twist2d import Twist2d
from .utils import ensure_shape, safe_cos_sin

# Below this angle the arc formulas switch to their Taylor expansions
SMALL_ANGLE = 1e-9


@dataclass(frozen=True, eq=False)
class Pose2d:
    """A robot pose: translation plus heading."""

    translation: Translation2d = field(default_factory=Translation2d)
    rotation: Rotation2d = field(default_factory=Rotation2d)

    @classmethod
    def from_xy_theta(cls, x: float, y: float, theta: float) -> 'Pose2d':
        """Create a pose from coordinates and a heading in radians."""
        return cls(Translation2d(x, y), Rotation2d.from_radians(theta))

    @classmethod
    def from_matrix(cls, matrix) -> 'Pose2d':
        """
        Create a pose from a 3x3 homogeneous matrix.

        Raises:
            GeometryError: If the matrix is not 3x3
        """
        T = ensure_shape(matrix, (3, 3), "pose matrix")
        return cls(Translation2d(T[0, 2], T[1, 2]), Rotation2d(T[0, 0], T[1, 0]))

    def transform_by(self, transform: Transform2d) -> 'Pose2d':
        """
        Apply a transform expressed in this pose's frame.

        Args:
            transform: Displacement relative to this pose

        Returns:
            The pose reached after the displacement
        """
        return Pose2d(
            self.translation.plus(transform.translation.rotate_by(self.rotation)),
            self.rotation.plus(transform.rotation),
        )

    def plus(self, transform: Transform2d) -> 'Pose2d':
        return self.transform_by(transform)

    def minus(self, other: 'Pose2d') -> Transform2d:
        """Transform that maps other onto this pose."""
        return Transform2d.from_poses(other, self)

    def relative_to(self, other: 'Pose2d') -> 'Pose2d':
        """This pose expressed in the frame of other."""
        transform = Transform2d.from_poses(other, self)
        return Pose2d(transform.translation, transform.rotation)

    def rotate_by(self, rotation: Rotation2d) -> 'Pose2d':
        """Rotate the pose about the world origin."""
        return Pose2d(self.translation.rotate_by(rotation), self.rotation.rotate_by(rotation))

    def exp(self, twist: Twist2d) -> 'Pose2d':
        """
        Follow a twist from this pose along a constant-curvature arc.

        Args:
            twist: Change in pose, in this pose's frame

        Returns:
            The pose at the end of the arc
        """
        dx, dy, dtheta = twist.dx, twist.dy, twist.dtheta
        cos_theta, sin_theta = safe_cos_sin(dtheta)

        if abs(dtheta) < SMALL_ANGLE:
            s = 1.0 - dtheta * dtheta / 6.0
            c = 0.5 * dtheta
        else:
            s = sin_theta / dtheta
            c = (1.0 - cos_theta) / dtheta

        delta = Transform2d(
            Translation2d(dx * s - dy * c, dx * c + dy * s),
            Rotation2d(cos_theta, sin_theta),
        )
        return self.transform_by(delta)

    def log(self, end: 'Pose2d') -> Twist2d:
        """
        Twist that maps this pose onto end when passed to exp.
        """
        transform = end.relative_to(self)
        dtheta = transform.rotation.get_radians()
        half_dtheta = dtheta / 2.0
        cos_minus_one = transform.rotation.cos - 1.0

        if abs(cos_minus_one) < SMALL_ANGLE:
            half_theta_by_tan = 1.0 - dtheta * dtheta / 12.0
        else:
            half_theta_by_tan = -(half_dtheta * transform.rotation.sin) / cos_minus_one

        translation_part = transform.translation.rotate_by(
            Rotation2d(half_theta_by_tan, -half_dtheta)
        ).times(math.hypot(half_theta_by_tan, half_dtheta))

        return Twist2d(translation_part.x, translation_part.y, dtheta)

    def interpolate(self, end: 'Pose2d', t: float) -> 'Pose2d':
        """Interpolate along the arc joining this pose and end."""
        if t <= 0.0:
            return self
        if t >= 1.0:
            return end
        return self.exp(self.log(end).times(t))

    def get_translation(self) -> Translation2d:
        return self.translation

    def get_rotation(self) -> Rotation2d:
        return self.rotation

    def get_x(self) -> float:
        return self.translation.x

    def get_y(self) -> float:
        return self.translation.y

    def to_matrix(self) -> np.ndarray:
        """Return the 3x3 homogeneous matrix of this pose."""
        T = np.eye(3)
        T[:2, :2] = self.rotation.to_matrix()
        T[:2, 2] = self.translation.to_array()
        return T

    def __add__(self, other):
        if isinstance(other, Transform2d):
            return self.transform_by(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Pose2d):
            return self.minus(other)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Pose2d):
            return NotImplemented
        return self.translation == other.translation and self.rotation == other.rotation

    def __repr__(self):
        return f"Pose2d({self.translation!r}, {self.rotation!r})"
