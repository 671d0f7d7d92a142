"""
Planar rotation stored as a unit (cos, sin) pair.

Composition multiplies the pairs as complex numbers, so no trigonometric
function is evaluated when rotations are added or subtracted. Only scaling
by a scalar goes back through the angle.
"""

import math
import numbers
import logging
from dataclasses import dataclass

import numpy as np

from .utils import (
    get_config, is_close, reciprocal, safe_cos_sin, clamp, ensure_shape
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Rotation2d:
    """
    A rotation in the plane.

    Constructing from an arbitrary (x, y) pair normalizes it onto the unit
    circle. A zero-length pair maps to the identity rotation.
    """

    cos: float = 1.0
    sin: float = 0.0

    def __post_init__(self):
        x = float(self.cos)
        y = float(self.sin)
        magnitude = math.hypot(x, y)

        if math.isinf(magnitude) and math.isfinite(x) and math.isfinite(y):
            # hypot overflowed; rescale by the larger component first
            scale = max(abs(x), abs(y))
            x, y = x / scale, y / scale
            magnitude = math.hypot(x, y)

        if magnitude > 0.0:
            x, y = x / magnitude, y / magnitude
        elif not math.isnan(magnitude):
            logger.debug(f"Rotation2d from zero vector ({x}, {y}), using identity")
            x, y = 1.0, 0.0

        # Adding 0.0 turns -0.0 into +0.0 so atan2 stays in (-pi, pi]
        object.__setattr__(self, 'cos', x + 0.0)
        object.__setattr__(self, 'sin', y + 0.0)

    @classmethod
    def from_radians(cls, angle: float) -> 'Rotation2d':
        """Create a rotation from an angle in radians."""
        return cls(*safe_cos_sin(float(angle)))

    @classmethod
    def from_degrees(cls, angle: float) -> 'Rotation2d':
        """Create a rotation from an angle in degrees."""
        return cls.from_radians(math.radians(angle))

    @classmethod
    def from_matrix(cls, matrix) -> 'Rotation2d':
        """
        Create a rotation from a 2x2 rotation matrix.

        Args:
            matrix: Array-like of shape (2, 2)

        Returns:
            Rotation2d built from the first column

        Raises:
            GeometryError: If the matrix is not 2x2
        """
        mat = ensure_shape(matrix, (2, 2), "rotation matrix")
        return cls(mat[0, 0], mat[1, 0])

    def plus(self, other: 'Rotation2d') -> 'Rotation2d':
        """Add two rotations (angle addition via complex multiplication)."""
        return Rotation2d(
            self.cos * other.cos - self.sin * other.sin,
            self.cos * other.sin + self.sin * other.cos,
        )

    def minus(self, other: 'Rotation2d') -> 'Rotation2d':
        """Subtract a rotation from this one."""
        return self.plus(other.unary_minus())

    def unary_minus(self) -> 'Rotation2d':
        """Return the inverse rotation."""
        return Rotation2d(self.cos, -self.sin)

    def times(self, scalar: float) -> 'Rotation2d':
        """Scale the rotation angle by a scalar."""
        return Rotation2d.from_radians(self.get_radians() * scalar)

    def div(self, scalar: float) -> 'Rotation2d':
        """Divide the rotation angle by a scalar."""
        return self.times(reciprocal(scalar))

    def rotate_by(self, other: 'Rotation2d') -> 'Rotation2d':
        """Rotate this rotation by another one."""
        return self.plus(other)

    def interpolate(self, end: 'Rotation2d', t: float) -> 'Rotation2d':
        """
        Interpolate along the shortest arc towards end.

        Args:
            end: Rotation reached at t = 1
            t: Interpolation parameter, clamped to [0, 1]
        """
        return self.plus(end.minus(self).times(clamp(t, 0.0, 1.0)))

    def get_radians(self) -> float:
        """Angle in radians, in (-pi, pi]."""
        return math.atan2(self.sin, self.cos)

    def get_degrees(self) -> float:
        return math.degrees(self.get_radians())

    def get_cos(self) -> float:
        return self.cos

    def get_sin(self) -> float:
        return self.sin

    def get_tan(self) -> float:
        return self.sin / self.cos if self.cos != 0.0 else math.copysign(math.inf, self.sin)

    def to_matrix(self) -> np.ndarray:
        """Return the 2x2 rotation matrix."""
        return np.array([[self.cos, -self.sin],
                         [self.sin, self.cos]])

    def __add__(self, other):
        if isinstance(other, Rotation2d):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Rotation2d):
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
        if not isinstance(other, Rotation2d):
            return NotImplemented
        return is_close(self.cos, other.cos) and is_close(self.sin, other.sin)

    def __repr__(self):
        p = get_config().display_precision
        return f"Rotation2d(Rads: {self.get_radians():.{p}f}, Deg: {self.get_degrees():.{p}f})"
