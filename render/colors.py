# render/colors.py
"""Voxel colors.

Water is tinted from a shallow to a deep color by level, then shaded by
distance from the camera. The array helpers color a whole frame's voxels
at once; water_color is the single-cell form for the HUD swatch.
"""
from __future__ import annotations

from typing import Tuple

import numpy as np

from render.config import (
    COLOR_WATER_DEEP,
    COLOR_WATER_SHALLOW,
    DEPTH_BRIGHTNESS_MIN,
    DEPTH_BRIGHTNESS_MAX,
    VISIBILITY_THRESHOLD,
)

Color = Tuple[int, int, int]

_SHALLOW = np.array(COLOR_WATER_SHALLOW, dtype=float)
_DEEP = np.array(COLOR_WATER_DEEP, dtype=float)


def level_tint(levels: np.ndarray) -> np.ndarray:
    """Blend weight toward the deep color: 0 at the visibility threshold, 1 from level 1.0 up."""
    span = 1.0 - VISIBILITY_THRESHOLD
    return np.clip((np.asarray(levels, dtype=float) - VISIBILITY_THRESHOLD) / span, 0.0, 1.0)


def depth_brightness(depth: np.ndarray) -> np.ndarray:
    """Brightness multipliers for a frame: nearest voxel brightest, farthest darkest."""
    depth = np.asarray(depth, dtype=float)
    if depth.size == 0:
        return depth
    near, far = depth.min(), depth.max()
    if far == near:
        return np.ones_like(depth)
    closeness = (far - depth) / (far - near)
    return DEPTH_BRIGHTNESS_MIN + closeness * (DEPTH_BRIGHTNESS_MAX - DEPTH_BRIGHTNESS_MIN)


def voxel_colors(levels: np.ndarray, depth: np.ndarray) -> np.ndarray:
    """RGB rows (uint8, shape (N, 3)) for voxels with the given levels and depths."""
    weight = level_tint(levels)[:, None]
    rgb = _SHALLOW * (1.0 - weight) + _DEEP * weight
    rgb *= depth_brightness(depth)[:, None]
    return np.clip(rgb, 0, 255).astype(np.uint8)


def water_color(level: float) -> Color:
    weight = float(level_tint(level))
    r, g, b = (int(round(c)) for c in _SHALLOW * (1.0 - weight) + _DEEP * weight)
    return r, g, b
