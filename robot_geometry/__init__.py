"""
Robot Geometry Library

Planar rigid-transform algebra (SE(2)) for robot motion and control code.
"""

__version__ = "1.0.0"
__author__ = "Robot Planning Team"

# Import main classes for easy access
from .rotation2d import Rotation2d
from .translation2d import Translation2d
from .transform2d import Transform2d
from .twist2d import Twist2d
from .pose2d import Pose2d
from .unit_converter import UnitConverter
from .utils import GeometryConfig, GeometryError, load_config, save_config, get_config, set_config

__all__ = [
    "Rotation2d",
    "Translation2d",
    "Transform2d",
    "Twist2d",
    "Pose2d",
    "UnitConverter",
    "GeometryConfig",
    "GeometryError",
    "load_config",
    "save_config",
    "get_config",
    "set_config",
]
