# render/voxels.py
"""Voxel viewport rendering.

Draws every occupied cell (level above the visibility threshold) as a shaded
square at its projected position, farthest first, plus the grid's bounding
box and the cursor cell.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import numpy as np
import pygame

from render.colors import voxel_colors
from render.grid_helpers import occupied_positions, occupied_levels
from render.config import (
    COLOR_BG_DARK,
    COLOR_BOUNDS,
    COLOR_CURSOR,
    COLOR_VOXEL_EDGE,
    VISIBILITY_THRESHOLD,
    VOXEL_MIN_PIXELS,
)

if TYPE_CHECKING:
    from camera import Camera

# The 12 edges of a box, as index pairs into box_corners()
_BOX_EDGES = (
    (0, 1), (0, 2), (0, 4), (1, 3), (1, 5), (2, 3),
    (2, 6), (3, 7), (4, 5), (4, 6), (5, 7), (6, 7),
)


def box_corners(shape: Tuple[int, int, int]) -> np.ndarray:
    """The 8 corners of the lattice's bounding box, shape (8, 3)."""
    w, h, l = shape
    lo, hi = -0.5, np.array([w, h, l]) - 0.5
    return np.array([
        (x, y, z)
        for x in (lo, hi[0])
        for y in (lo, hi[1])
        for z in (lo, hi[2])
    ])


def render_bounds(surface: pygame.Surface, shape: Tuple[int, int, int], camera: "Camera") -> None:
    """Wireframe of the grid's outer shell."""
    screen, _ = camera.project(box_corners(shape))
    for a, b in _BOX_EDGES:
        pygame.draw.line(surface, COLOR_BOUNDS, tuple(screen[a]), tuple(screen[b]), 1)


def render_voxels(
    surface: pygame.Surface,
    levels: np.ndarray,
    camera: "Camera",
    threshold: float = VISIBILITY_THRESHOLD,
) -> int:
    """Render occupied cells of a level field back to front.

    Args:
        surface: Surface to render to (sized to camera viewport)
        levels: Dense (W, H, L) level field
        camera: Camera defining the projection
        threshold: Minimum level for a cell to be drawn

    Returns:
        Number of voxels drawn
    """
    positions = occupied_positions(levels, threshold)
    if len(positions) == 0:
        return 0

    values = occupied_levels(levels, positions)
    screen, depth = camera.project(positions)

    colors = voxel_colors(values, depth).tolist()

    # Painter's order: farthest first
    order = np.argsort(-depth, kind="stable")

    size = max(VOXEL_MIN_PIXELS, int(round(camera.cell_pixels)))
    half = size / 2
    draw_edges = size >= 6

    for i in order:
        sx, sy = screen[i]
        rect = pygame.Rect(int(sx - half), int(sy - half), size, size)
        pygame.draw.rect(surface, colors[i], rect)
        if draw_edges:
            pygame.draw.rect(surface, COLOR_VOXEL_EDGE, rect, 1)

    return len(positions)


def render_cursor(surface: pygame.Surface, cell: Tuple[int, int, int], camera: "Camera") -> None:
    """Outline the cursor cell."""
    sx, sy = camera.project_point(*cell)
    size = max(VOXEL_MIN_PIXELS + 2, int(round(camera.cell_pixels)) + 4)
    rect = pygame.Rect(int(sx - size / 2), int(sy - size / 2), size, size)
    pygame.draw.rect(surface, COLOR_CURSOR, rect, 2)


def render_viewport(
    surface: pygame.Surface,
    levels: np.ndarray,
    camera: "Camera",
    cursor: Tuple[int, int, int],
) -> int:
    """Clear the viewport and draw bounds, voxels and cursor. Returns voxels drawn."""
    surface.fill(COLOR_BG_DARK)
    render_bounds(surface, levels.shape, camera)
    drawn = render_voxels(surface, levels, camera)
    render_cursor(surface, cursor, camera)
    return drawn
