# simulation/config.py
"""
Configuration constants for the simulation domain.
Physics constants and array layout used by the fluid grid.
"""
from __future__ import annotations

from typing import Tuple

import numpy as np

# =============================================================================
# PHYSICS
# =============================================================================
# Gravitational acceleration in lattice units per second squared.
# Y is the vertical axis; negative Y is "down".
GRAVITY: Tuple[float, float, float] = (0.0, -9.8, 0.0)

# =============================================================================
# ARRAY LAYOUT
# =============================================================================
LEVEL_DTYPE = np.float64     # Level and velocity fields share this dtype
VECTOR_COMPONENTS = 3        # Velocity vectors are (vx, vy, vz)

# Corner offsets for trilinear splatting, in a fixed order.
# Each row picks floor (0) or floor + 1 (1) per axis.
CORNER_OFFSETS = np.array(
    [
        (1, 1, 1),
        (1, 1, 0),
        (1, 0, 1),
        (1, 0, 0),
        (0, 1, 1),
        (0, 1, 0),
        (0, 0, 1),
        (0, 0, 0),
    ],
    dtype=np.int64,
)

# Targets at or beyond this magnitude cannot be resolved to distinct corners
# (floor(p) + 1 == floor(p) in float64); their mass is treated as absorbed.
MAX_COORDINATE = 2.0 ** 52
