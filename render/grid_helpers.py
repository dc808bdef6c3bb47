# render/grid_helpers.py
"""Views of the dense level field derived for rendering.

The simulation only exposes the dense (W, H, L) level array. Everything the
renderer needs (which cells to draw, top-down column totals) is computed here
from that array, once per frame.
"""
from __future__ import annotations

import numpy as np

from render.config import VISIBILITY_THRESHOLD


def occupied_positions(levels: np.ndarray, threshold: float = VISIBILITY_THRESHOLD) -> np.ndarray:
    """Lattice coordinates of cells whose level exceeds `threshold`.

    Returns:
        int array of shape (N, 3), in row-major (x, y, z) order
    """
    return np.argwhere(np.asarray(levels) > threshold)


def occupied_levels(levels: np.ndarray, positions: np.ndarray) -> np.ndarray:
    """Level values at the given (N, 3) positions."""
    if len(positions) == 0:
        return np.zeros(0, dtype=np.asarray(levels).dtype)
    return np.asarray(levels)[positions[:, 0], positions[:, 1], positions[:, 2]]


def column_totals(levels: np.ndarray) -> np.ndarray:
    """Sum of each vertical (y) column, shape (W, L), for top-down views."""
    return np.asarray(levels).sum(axis=1)


def normalize_totals(totals: np.ndarray) -> np.ndarray:
    """Scale column totals to [0, 1] by the largest column (all zeros stay zero)."""
    peak = float(totals.max()) if totals.size else 0.0
    if peak <= 0:
        return np.zeros_like(totals, dtype=float)
    return totals / peak
