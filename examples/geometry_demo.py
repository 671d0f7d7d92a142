#!/usr/bin/env python3
"""
Geometry Demo - Shows how control code moves between poses with transforms.
Uses planning units (meters, radians) and converts to robot units (mm, degrees).
"""

import math
import sys
import os
import logging

# Add robot_geometry to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from robot_geometry import Pose2d, Transform2d, Twist2d, UnitConverter

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def demo_pose_error():
    """Compute the local-frame error between a current and a desired pose."""
    print("\n" + "="*60)
    print("POSE ERROR DEMO")
    print("="*60)

    current = Pose2d.from_xy_theta(1.0, 0.0, math.pi / 2)
    desired = Pose2d.from_xy_theta(1.0, 1.0, math.pi / 2)

    error = Transform2d.from_poses(current, desired)
    print(f"Current: {current}")
    print(f"Desired: {desired}")
    print(f"Error (local frame): {error}")

    # Take half a step towards the goal, then undo it
    half = current.transform_by(error * 0.5)
    back = half.transform_by((error * 0.5).inverse())
    print(f"Half step:  {half}")
    print(f"Undone:     {back}")


def demo_odometry_steps():
    """Advance a pose estimate with a fixed delta once per control cycle."""
    print("\n" + "="*60)
    print("CONTROL LOOP DEMO")
    print("="*60)

    delta = Pose2d().exp(Twist2d(0.1, 0.0, math.pi / 20)) - Pose2d()
    pose = Pose2d()

    for _ in range(10):
        pose = pose.transform_by(delta)

    print(f"Per-cycle delta: {delta}")
    print(f"After 10 cycles: {pose}")
    print(f"Robot format [x_mm, y_mm, theta_deg]: {UnitConverter.pose_to_robot_format(pose)}")


def demo_visualization():
    """Save an interactive plot of a pose sequence."""
    print("\n" + "="*60)
    print("VISUALIZATION DEMO")
    print("="*60)

    from robot_geometry.visualization import PoseVisualizer

    start = Pose2d()
    end = Pose2d.from_xy_theta(2.0, 1.0, math.pi / 2)
    poses = [start.interpolate(end, t / 10.0) for t in range(11)]

    PoseVisualizer().plot_poses(poses, title='Interpolated Poses', save_path='poses.html')
    print("✅ Pose plot saved to 'poses.html'")


def main():
    """Run all demonstrations."""
    print("🤖 Robot Geometry Library - Demonstrations")

    try:
        demo_pose_error()
        demo_odometry_steps()
        demo_visualization()
    except KeyboardInterrupt:
        print("\n\n⏹️  Demo interrupted by user")


if __name__ == "__main__":
    main()
