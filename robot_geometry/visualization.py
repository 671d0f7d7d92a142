"""
Visualization tools for planar poses and transforms using Plotly and Matplotlib.
"""

import numpy as np
import matplotlib.pyplot as plt
import plotly.graph_objects as go
from typing import List, Optional
import logging

from .pose2d import Pose2d
from .transform2d import Transform2d
from .translation2d import Translation2d

logger = logging.getLogger(__name__)


class PoseVisualizer:
    """Plots poses as positions with heading arrows."""

    def __init__(self, arrow_length: float = 0.1):
        """
        Initialize visualizer.

        Args:
            arrow_length: Length of heading arrows in meters
        """
        self.arrow_length = arrow_length
        self.colors = {
            'path': 'blue',
            'start': 'green',
            'goal': 'red',
            'heading': 'orange',
            'transform': 'purple'
        }

    def plot_poses(self, poses: List[Pose2d],
                   title: str = 'Pose Visualization',
                   save_path: Optional[str] = None) -> go.Figure:
        """
        Plot poses with their headings.

        Args:
            poses: Poses to plot, in order
            title: Figure title
            save_path: Optional path to save the plot as HTML

        Returns:
            Plotly figure with one position trace and one heading trace per pose
        """
        fig = go.Figure()

        positions = np.array([pose.translation.to_array() for pose in poses]).reshape(-1, 2)

        fig.add_trace(go.Scatter(
            x=positions[:, 0], y=positions[:, 1],
            mode='lines+markers',
            line=dict(color=self.colors['path'], width=2),
            marker=dict(size=6),
            name='Poses'
        ))

        for pose in poses:
            self._add_heading_arrow(fig, pose)

        self._apply_layout(fig, title)

        if save_path:
            fig.write_html(save_path)
            logger.info(f"Pose plot saved to {save_path}")

        return fig

    def plot_transform(self, initial: Pose2d, transform: Transform2d,
                       save_path: Optional[str] = None) -> go.Figure:
        """
        Plot a transform applied to an initial pose.

        Args:
            initial: Pose the transform is applied to
            transform: Displacement in the initial pose's frame
            save_path: Optional path to save the plot as HTML

        Returns:
            Plotly figure showing start, end and the connecting segment
        """
        final = initial.transform_by(transform)
        fig = go.Figure()

        fig.add_trace(go.Scatter(
            x=[initial.get_x(), final.get_x()],
            y=[initial.get_y(), final.get_y()],
            mode='lines',
            line=dict(color=self.colors['transform'], width=2, dash='dash'),
            name=repr(transform)
        ))

        fig.add_trace(go.Scatter(
            x=[initial.get_x()], y=[initial.get_y()],
            mode='markers',
            marker=dict(size=10, color=self.colors['start'], symbol='circle'),
            name='Initial'
        ))

        fig.add_trace(go.Scatter(
            x=[final.get_x()], y=[final.get_y()],
            mode='markers',
            marker=dict(size=10, color=self.colors['goal'], symbol='square'),
            name='Final'
        ))

        self._add_heading_arrow(fig, initial)
        self._add_heading_arrow(fig, final)

        self._apply_layout(fig, 'Transform Visualization')

        if save_path:
            fig.write_html(save_path)
            logger.info(f"Transform plot saved to {save_path}")

        return fig

    def plot_poses_matplotlib(self, poses: List[Pose2d], ax=None,
                              save_path: Optional[str] = None):
        """
        Static quiver plot of poses.

        Args:
            poses: Poses to plot
            ax: Optional matplotlib axes to draw into
            save_path: Optional path to save the figure as an image

        Returns:
            Matplotlib axes
        """
        if ax is None:
            _, ax = plt.subplots(figsize=(8, 8))

        positions = np.array([pose.translation.to_array() for pose in poses]).reshape(-1, 2)
        headings = np.array([[pose.rotation.cos, pose.rotation.sin] for pose in poses]).reshape(-1, 2)

        ax.plot(positions[:, 0], positions[:, 1], '-o', color=self.colors['path'], markersize=4)
        ax.quiver(positions[:, 0], positions[:, 1], headings[:, 0], headings[:, 1],
                  color=self.colors['heading'], angles='xy', scale_units='xy',
                  scale=1.0 / self.arrow_length)
        ax.set_xlabel('X (m)')
        ax.set_ylabel('Y (m)')
        ax.set_aspect('equal')
        ax.grid(True, alpha=0.3)

        if save_path:
            ax.figure.savefig(save_path, dpi=150, bbox_inches='tight')
            logger.info(f"Pose plot saved to {save_path}")

        return ax

    def _add_heading_arrow(self, fig: go.Figure, pose: Pose2d):
        """Add a heading segment for one pose."""
        tip = pose.translation.plus(Translation2d.from_polar(self.arrow_length, pose.rotation))
        fig.add_trace(go.Scatter(
            x=[pose.get_x(), tip.x],
            y=[pose.get_y(), tip.y],
            mode='lines',
            line=dict(color=self.colors['heading'], width=3),
            showlegend=False,
            hoverinfo='skip'
        ))

    @staticmethod
    def _apply_layout(fig: go.Figure, title: str):
        fig.update_layout(
            title=title,
            xaxis_title='X (m)',
            yaxis_title='Y (m)',
            yaxis=dict(scaleanchor='x', scaleratio=1),
            width=800,
            height=600
        )
