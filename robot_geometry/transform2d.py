"""
Rigid displacement between two poses.

A Transform2d is expressed in the frame of the initial pose, not in the
world frame: the world-frame difference of two positions is rotated back by
the initial heading before it is stored.
"""

import numbers
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from .rotation2d import Rotation2d
from .translation2d import Translation2d
from .utils import reciprocal

if TYPE_CHECKING:
    from .pose2d import Pose2d


@dataclass(frozen=True, eq=False)
class Transform2d:
    """Translation and rotation mapping one pose onto another."""

    translation: Translation2d = field(default_factory=Translation2d)
    rotation: Rotation2d = field(default_factory=Rotation2d)

    @classmethod
    def from_poses(cls, initial: 'Pose2d', last: 'Pose2d') -> 'Transform2d':
        """
        Construct the transform that maps the initial pose to the last pose.

        Args:
            initial: Starting pose
            last: Pose reached after applying the transform

        Returns:
            Transform2d with initial.transform_by(result) == last
        """
        # Rotate the world-frame delta clockwise by the initial heading so it
        # is expressed in the initial pose's local frame.
        translation = (last.translation
                       .minus(initial.translation)
                       .rotate_by(initial.rotation.unary_minus()))
        rotation = last.rotation.minus(initial.rotation)
        return cls(translation, rotation)

    def times(self, scalar: float) -> 'Transform2d':
        """Scale the translation and the rotation angle by a scalar."""
        return Transform2d(self.translation.times(scalar), self.rotation.times(scalar))

    def div(self, scalar: float) -> 'Transform2d':
        return self.times(reciprocal(scalar))

    def plus(self, other: 'Transform2d') -> 'Transform2d':
        """
        Compose two transforms: apply this one, then other.

        Args:
            other: Transform applied after this one, in the intermediate frame

        Returns:
            The combined transform
        """
        from .pose2d import Pose2d

        origin = Pose2d()
        return Transform2d.from_poses(origin, origin.transform_by(self).transform_by(other))

    def inverse(self) -> 'Transform2d':
        """Return the transform that undoes this one."""
        inverted = self.rotation.unary_minus()
        return Transform2d(self.translation.unary_minus().rotate_by(inverted), inverted)

    def get_translation(self) -> Translation2d:
        return self.translation

    def get_rotation(self) -> Rotation2d:
        return self.rotation

    def get_x(self) -> float:
        return self.translation.x

    def get_y(self) -> float:
        return self.translation.y

    def to_matrix(self) -> np.ndarray:
        """Return the 3x3 homogeneous transformation matrix."""
        T = np.eye(3)
        T[:2, :2] = self.rotation.to_matrix()
        T[:2, 2] = self.translation.to_array()
        return T

    def __add__(self, other):
        if isinstance(other, Transform2d):
            return self.plus(other)
        return NotImplemented

    def __mul__(self, scalar):
        if isinstance(scalar, numbers.Real):
            return self.times(scalar)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, numbers.Real):
            return self.div(scalar)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Transform2d):
            return NotImplemented
        return self.translation == other.translation and self.rotation == other.rotation

    def __repr__(self):
        return f"Transform2d({self.translation!r}, {self.rotation!r})"
