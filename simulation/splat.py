# simulation/splat.py
"""Trilinear splatting weights.

A continuous position is resolved to the 8 lattice corners of the unit cell
that contains it (floor and floor + 1 on each axis). Each corner receives the
volume of the box between the position and the corner diagonally opposite it,
so the closer corner gets the larger share and the 8 weights sum to 1.

All helpers work on batches: positions of shape (N, 3) give corners of shape
(N, 8, 3) and weights of shape (N, 8). A single (3,) position is promoted to
a batch of one.
"""
from __future__ import annotations

from typing import Tuple

import numpy as np

from simulation.config import CORNER_OFFSETS, LEVEL_DTYPE


def trilinear_corners(positions: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Resolve positions to their 8 surrounding lattice corners and weights.

    Args:
        positions: Continuous positions, shape (3,) or (N, 3)

    Returns:
        (corners, weights): int64 array of shape (N, 8, 3) and float array
        of shape (N, 8). Corner order follows CORNER_OFFSETS.
    """
    pos = np.atleast_2d(np.asarray(positions, dtype=LEVEL_DTYPE))
    base = np.floor(pos)

    # (N, 1, 3) + (8, 3) -> (N, 8, 3)
    corners = base[:, None, :] + CORNER_OFFSETS[None, :, :]
    opposite = base[:, None, :] + (1 - CORNER_OFFSETS)[None, :, :]

    weights = np.abs(np.prod(opposite - pos[:, None, :], axis=2))
    return corners.astype(np.int64), weights


def corner_weights(position) -> np.ndarray:
    """Weights for a single position, shape (8,)."""
    _, weights = trilinear_corners(position)
    return weights[0]
