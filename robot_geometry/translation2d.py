"""
Free 2D vector used for positions and displacements.
"""

import math
import numbers
from dataclasses import dataclass

import numpy as np

from .rotation2d import Rotation2d
from .utils import get_config, is_close, reciprocal, clamp, ensure_shape


@dataclass(frozen=True, eq=False)
class Translation2d:
    """A translation (x, y) in the plane. Has no associated frame."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @classmethod
    def from_polar(cls, distance: float, angle: Rotation2d) -> 'Translation2d':
        """Create a translation from a distance and a direction."""
        return cls(distance * angle.cos, distance * angle.sin)

    @classmethod
    def from_array(cls, arr) -> 'Translation2d':
        """
        Create a translation from a numpy array.

        Args:
            arr: Array-like [x, y]

        Raises:
            GeometryError: If the input is not shape (2,)
        """
        vec = ensure_shape(arr, (2,), "translation")
        return cls(vec[0], vec[1])

    def plus(self, other: 'Translation2d') -> 'Translation2d':
        return Translation2d(self.x + other.x, self.y + other.y)

    def minus(self, other: 'Translation2d') -> 'Translation2d':
        return self.plus(other.unary_minus())

    def unary_minus(self) -> 'Translation2d':
        return Translation2d(-self.x, -self.y)

    def times(self, scalar: float) -> 'Translation2d':
        return Translation2d(self.x * scalar, self.y * scalar)

    def div(self, scalar: float) -> 'Translation2d':
        """Divide by a scalar. A zero divisor gives inf/NaN components."""
        return self.times(reciprocal(scalar))

    def rotate_by(self, rotation: Rotation2d) -> 'Translation2d':
        """
        Rotate the vector counter-clockwise about the origin.

        Args:
            rotation: Rotation to apply

        Returns:
            (x cos - y sin, x sin + y cos)
        """
        return Translation2d(
            self.x * rotation.cos - self.y * rotation.sin,
            self.x * rotation.sin + self.y * rotation.cos,
        )

    def get_norm(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def get_angle(self) -> Rotation2d:
        """Direction of the vector (identity for the zero vector)."""
        return Rotation2d(self.x, self.y)

    def get_distance(self, other: 'Translation2d') -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    def interpolate(self, end: 'Translation2d', t: float) -> 'Translation2d':
        """Linear interpolation towards end, t clamped to [0, 1]."""
        t = clamp(t, 0.0, 1.0)
        return Translation2d(self.x + (end.x - self.x) * t,
                             self.y + (end.y - self.y) * t)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    def __add__(self, other):
        if isinstance(other, Translation2d):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Translation2d):
            return self.minus(other)
        return NotImplemented

    def __neg__(self):
        return self.unary_minus()

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
        if not isinstance(other, Translation2d):
            return NotImplemented
        return is_close(self.x, other.x) and is_close(self.y, other.y)

    def __repr__(self):
        p = get_config().display_precision
        return f"Translation2d(x={self.x:.{p}f}, y={self.y:.{p}f})"
