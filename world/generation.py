# world/generation.py
"""
Initial level fields for the fluid grid.

Each generator returns a (width, height, depth) float array of non-negative
levels. Y is the vertical axis, so "floor" cells have small y.

Scenarios:
- random: independent uniform [0, 1) per cell
- dam_break: a full-height block of water against the x = 0 wall
- drop: a sphere of water hanging above a shallow pool
- mist: random field smoothed into soft clouds
"""
from __future__ import annotations

from typing import Callable, Dict, Optional

import numpy as np
from scipy import ndimage

from config import (
    DAM_BREAK_FRACTION,
    DROP_RADIUS_FRACTION,
    DROP_POOL_DEPTH,
    MIST_SIGMA,
)
from simulation.config import LEVEL_DTYPE

Generator = Callable[[int, int, int, np.random.Generator], np.ndarray]


def generate_random(width: int, height: int, depth: int, rng: np.random.Generator) -> np.ndarray:
    """Uniform [0, 1) level in every cell."""
    return rng.random((width, height, depth), dtype=LEVEL_DTYPE)


def generate_dam_break(width: int, height: int, depth: int, rng: np.random.Generator) -> np.ndarray:
    """Block of full cells against the x = 0 wall, leaving the shell empty."""
    levels = np.zeros((width, height, depth), dtype=LEVEL_DTYPE)
    dam_x = max(2, int(width * DAM_BREAK_FRACTION))
    levels[1:dam_x, 1:height - 1, 1:depth - 1] = 1.0
    return levels


def generate_drop(width: int, height: int, depth: int, rng: np.random.Generator) -> np.ndarray:
    """Sphere of water in the upper half above a shallow pool on the floor."""
    levels = np.zeros((width, height, depth), dtype=LEVEL_DTYPE)

    # Pool: the first interior layers above the floor
    pool_top = min(1 + DROP_POOL_DEPTH, height - 1)
    levels[1:width - 1, 1:pool_top, 1:depth - 1] = 1.0

    radius = max(1.0, min(width, height, depth) * DROP_RADIUS_FRACTION)
    center = np.array([(width - 1) / 2, (height - 1) * 0.7, (depth - 1) / 2])
    xs, ys, zs = np.indices((width, height, depth))
    dist_sq = (xs - center[0]) ** 2 + (ys - center[1]) ** 2 + (zs - center[2]) ** 2
    levels[dist_sq <= radius ** 2] = 1.0

    # Keep the absorbing shell empty
    _clear_shell(levels)
    return levels


def generate_mist(width: int, height: int, depth: int, rng: np.random.Generator) -> np.ndarray:
    """Random field blurred into clouds, rescaled to [0, 1]."""
    noise = rng.random((width, height, depth), dtype=LEVEL_DTYPE)
    smooth = ndimage.gaussian_filter(noise, sigma=MIST_SIGMA, mode="nearest")
    low, high = smooth.min(), smooth.max()
    if high > low:
        smooth = (smooth - low) / (high - low)
    else:
        smooth = np.zeros_like(smooth)
    return smooth


def _clear_shell(levels: np.ndarray) -> None:
    levels[0, :, :] = levels[-1, :, :] = 0.0
    levels[:, 0, :] = levels[:, -1, :] = 0.0
    levels[:, :, 0] = levels[:, :, -1] = 0.0


SCENARIOS: Dict[str, Generator] = {
    "random": generate_random,
    "dam_break": generate_dam_break,
    "drop": generate_drop,
    "mist": generate_mist,
}


def generate_level_field(
    scenario: str,
    width: int,
    height: int,
    depth: int,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Build the initial level field for a named scenario.

    Args:
        scenario: One of SCENARIOS
        width, height, depth: Lattice dimensions (must be positive)
        rng: Random generator for scenarios that use noise

    Raises:
        ValueError: Unknown scenario or non-positive dimensions
    """
    generator = SCENARIOS.get(scenario)
    if generator is None:
        raise ValueError(f"Unknown scenario '{scenario}'. Choose from: {', '.join(SCENARIOS)}")
    if min(width, height, depth) <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {(width, height, depth)}")
    if rng is None:
        rng = np.random.default_rng()
    return generator(width, height, depth, rng)
