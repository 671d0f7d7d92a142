"""
Change in pose along a constant-curvature arc.
"""

import numbers
from dataclasses import dataclass

from .utils import get_config, is_close


@dataclass(frozen=True, eq=False)
class Twist2d:
    """
    A pose delta along an arc, expressed in the starting pose's frame.

    dx and dy are the linear components, dtheta the change in heading in
    radians. Applied to a pose with Pose2d.exp.
    """

    dx: float = 0.0
    dy: float = 0.0
    dtheta: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'dx', float(self.dx))
        object.__setattr__(self, 'dy', float(self.dy))
        object.__setattr__(self, 'dtheta', float(self.dtheta))

    def times(self, scalar: float) -> 'Twist2d':
        return Twist2d(self.dx * scalar, self.dy * scalar, self.dtheta * scalar)

    def __mul__(self, scalar):
        if isinstance(scalar, numbers.Real):
            return self.times(scalar)
        return NotImplemented

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Twist2d):
            return NotImplemented
        return (is_close(self.dx, other.dx)
                and is_close(self.dy, other.dy)
                and is_close(self.dtheta, other.dtheta))

    def __repr__(self):
        p = get_config().display_precision
        return f"Twist2d(dX: {self.dx:.{p}f}, dY: {self.dy:.{p}f}, dTheta: {self.dtheta:.{p}f})"
