"""
Unit conversion utilities for robot geometry.

This module handles conversions between:
- Planning system: SI units (meters, radians), 4x4 homogeneous transforms
- Robot controller: Robot units (mm, degrees), flat [x, y, theta] arrays

Planar poses are the projection of 3D planning transforms onto the XY plane.
"""

import numpy as np
import logging
from typing import Union, List
from scipy.spatial.transform import Rotation

from .pose2d import Pose2d
from .rotation2d import Rotation2d
from .translation2d import Translation2d
from .utils import get_config, ensure_shape

logger = logging.getLogger(__name__)


class UnitConverter:
    """Handles unit conversions between planning system and robot controller."""

    RAD_TO_DEG = 180.0 / np.pi
    DEG_TO_RAD = np.pi / 180.0

    @staticmethod
    def planning_to_robot_position(pos_m: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """
        Convert position from planning units (meters) to robot units (mm by default).

        Args:
            pos_m: Position in meters

        Returns:
            Position in robot units
        """
        return pos_m * get_config().position_units_scale

    @staticmethod
    def robot_to_planning_position(pos_mm: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """
        Convert position from robot units (mm by default) to planning units (meters).

        Args:
            pos_mm: Position in robot units

        Returns:
            Position in meters
        """
        return pos_mm / get_config().position_units_scale

    @staticmethod
    def planning_to_robot_angle(angle_rad: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Convert angles from radians to degrees."""
        return angle_rad * UnitConverter.RAD_TO_DEG

    @staticmethod
    def robot_to_planning_angle(angle_deg: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Convert angles from degrees to radians."""
        return angle_deg * UnitConverter.DEG_TO_RAD

    @staticmethod
    def pose_to_robot_format(pose: Pose2d) -> np.ndarray:
        """
        Convert planning pose to robot controller format.

        Args:
            pose: Pose in planning units

        Returns:
            3-element array [x_mm, y_mm, theta_deg]
        """
        pos_mm = UnitConverter.planning_to_robot_position(pose.translation.to_array())
        theta_deg = UnitConverter.planning_to_robot_angle(pose.rotation.get_radians())
        return np.array([pos_mm[0], pos_mm[1], theta_deg])

    @staticmethod
    def robot_format_to_pose(pose_robot) -> Pose2d:
        """
        Convert robot controller format to planning pose.

        Args:
            pose_robot: 3-element array [x_mm, y_mm, theta_deg]

        Returns:
            Pose2d in planning units

        Raises:
            GeometryError: If the input is not shape (3,)
        """
        arr = ensure_shape(pose_robot, (3,), "robot pose")
        pos_m = UnitConverter.robot_to_planning_position(arr[:2])
        return Pose2d(Translation2d(pos_m[0], pos_m[1]), Rotation2d.from_degrees(arr[2]))

    @staticmethod
    def planning_transform_to_pose(T_planning) -> Pose2d:
        """
        Project a 4x4 planning transform onto the XY plane.

        Args:
            T_planning: 4x4 transformation matrix in planning units

        Returns:
            Pose2d with the transform's x, y and yaw

        Raises:
            GeometryError: If the matrix is not 4x4
        """
        T = ensure_shape(T_planning, (4, 4), "planning transform")
        yaw = Rotation.from_matrix(T[:3, :3]).as_euler('xyz', degrees=False)[2]
        pose = Pose2d(Translation2d(T[0, 3], T[1, 3]), Rotation2d.from_radians(yaw))
        UnitConverter.log_conversion_info("4x4 transform to planar pose", "SE(3)", "SE(2)",
                                          T, pose)
        return pose

    @staticmethod
    def pose_to_planning_transform(pose: Pose2d, z: float = 0.0) -> np.ndarray:
        """
        Lift a planar pose to a 4x4 planning transform with a pure yaw rotation.

        Args:
            pose: Planar pose in planning units
            z: Height of the frame in meters

        Returns:
            4x4 transformation matrix in planning units
        """
        R = Rotation.from_euler('z', pose.rotation.get_radians(), degrees=False).as_matrix()

        T = np.eye(4)
        T[:3, :3] = R
        T[:3, 3] = [pose.translation.x, pose.translation.y, z]

        return T

    @staticmethod
    def convert_path_planning_to_robot(planning_path: List[Pose2d]) -> List[np.ndarray]:
        """
        Convert a sequence of planning poses to robot units.

        Args:
            planning_path: List of Pose2d in planning units

        Returns:
            List of 3-element pose arrays in robot units
        """
        return [UnitConverter.pose_to_robot_format(pose) for pose in planning_path]

    @staticmethod
    def convert_path_robot_to_planning(robot_path: List[np.ndarray]) -> List[Pose2d]:
        """
        Convert a sequence of robot-format poses to planning poses.

        Args:
            robot_path: List of 3-element pose arrays in robot units

        Returns:
            List of Pose2d in planning units
        """
        return [UnitConverter.robot_format_to_pose(pose_robot) for pose_robot in robot_path]

    @staticmethod
    def log_conversion_info(operation: str, input_units: str, output_units: str,
                            input_value, output_value):
        """
        Log unit conversion information for debugging.

        Args:
            operation: Description of the conversion operation
            input_units: Input unit description
            output_units: Output unit description
            input_value: Input value
            output_value: Output value
        """
        logger.debug(f"Unit conversion - {operation}")
        logger.debug(f"  Input ({input_units}): {input_value}")
        logger.debug(f"  Output ({output_units}): {output_value}")
