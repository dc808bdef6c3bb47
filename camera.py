# camera.py
"""
Orbit camera for the voxel viewport.

Handles the transformation between two coordinate spaces:
1. Lattice space - continuous (x, y, z) cell coordinates, y up
2. Viewport space - pixel coordinates within the visible map area

The camera orbits the grid center. Yaw turns around the vertical (y) axis,
pitch tilts toward looking down. Projection is orthographic; the returned
depth is only used to draw far voxels first.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from render.config import (
    VOXEL_PIXELS,
    ZOOM_MIN,
    ZOOM_MAX,
    PITCH_LIMIT_DEG,
)


@dataclass
class Camera:
    """Manages the view onto the lattice."""
    # Orbit angles in degrees
    yaw: float = 35.0
    pitch: float = 25.0

    # Zoom level (1.0 = VOXEL_PIXELS per cell)
    zoom: float = 1.0

    # Viewport size in pixels
    viewport_width: int = 640
    viewport_height: int = 480

    # Lattice point projected to the viewport center
    target_x: float = 0.0
    target_y: float = 0.0
    target_z: float = 0.0

    def set_viewport_size(self, width: int, height: int) -> None:
        """Set the viewport size in pixels."""
        self.viewport_width = width
        self.viewport_height = height

    def set_zoom(self, zoom_level: float) -> None:
        """Set zoom level, clamping to reasonable bounds."""
        self.zoom = max(ZOOM_MIN, min(ZOOM_MAX, zoom_level))

    def rotate(self, d_yaw: float, d_pitch: float) -> None:
        """Orbit by the given angles (degrees). Pitch is clamped, yaw wraps."""
        self.yaw = (self.yaw + d_yaw) % 360.0
        self.pitch = max(-PITCH_LIMIT_DEG, min(PITCH_LIMIT_DEG, self.pitch + d_pitch))

    def center_on_grid(self, shape: Tuple[int, int, int]) -> None:
        """Aim at the middle of a grid and pick a zoom that fits it."""
        w, h, l = shape
        self.target_x = (w - 1) / 2
        self.target_y = (h - 1) / 2
        self.target_z = (l - 1) / 2

        # Bounding sphere diameter must fit the smaller viewport side
        diameter = math.sqrt(w * w + h * h + l * l)
        fit = min(self.viewport_width, self.viewport_height) / (diameter * VOXEL_PIXELS)
        self.set_zoom(fit)

    @property
    def cell_pixels(self) -> float:
        """On-screen edge length of one cell."""
        return VOXEL_PIXELS * self.zoom

    def _rotation(self) -> np.ndarray:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        cy, sy = math.cos(yaw), math.sin(yaw)
        cp, sp = math.cos(pitch), math.sin(pitch)
        yaw_m = np.array([[cy, 0.0, -sy], [0.0, 1.0, 0.0], [sy, 0.0, cy]])
        # Positive pitch looks down: higher cells come nearer the viewer
        pitch_m = np.array([[1.0, 0.0, 0.0], [0.0, cp, sp], [0.0, -sp, cp]])
        return pitch_m @ yaw_m

    def project(self, points: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Project lattice points to viewport pixels.

        Args:
            points: Array of shape (N, 3)

        Returns:
            (screen, depth): float arrays of shape (N, 2) and (N,). Larger
            depth is farther from the viewer.
        """
        pts = np.atleast_2d(np.asarray(points, dtype=float))
        centered = pts - np.array([self.target_x, self.target_y, self.target_z])
        view = centered @ self._rotation().T

        scale = self.cell_pixels
        screen = np.empty((len(view), 2))
        screen[:, 0] = self.viewport_width / 2 + view[:, 0] * scale
        # Screen y grows downward, lattice y grows upward
        screen[:, 1] = self.viewport_height / 2 - view[:, 1] * scale
        return screen, view[:, 2]

    def project_point(self, x: float, y: float, z: float) -> Tuple[float, float]:
        """Project a single lattice point to viewport pixels."""
        screen, _ = self.project(np.array([[x, y, z]]))
        return float(screen[0, 0]), float(screen[0, 1])
