# config.py
"""
Centralized configuration for Cascade.

This file contains high-level, cross-cutting constants.
Domain-specific constants are in:
- simulation/config.py (physics, array layout)
- render/config.py (colors, UI dimensions, visibility threshold)
"""
from __future__ import annotations

# =============================================================================
# GRID
# =============================================================================
# Lattice resolution: x (width), y (height, vertical), z (depth)
GRID_WIDTH = 24
GRID_HEIGHT = 24
GRID_DEPTH = 24

# =============================================================================
# TIME & SIMULATION
# =============================================================================
TICK_INTERVAL = 0.1   # Wall-clock seconds between simulation ticks in the viewer
TIME_STEP = 0.02      # dt passed to FluidGrid.update per tick

# =============================================================================
# SCENARIOS
# =============================================================================
DEFAULT_SCENARIO = "drop"
DEFAULT_SEED = 1234

# Dam break: fraction of the width filled against the x = 0 wall
DAM_BREAK_FRACTION = 0.35
# Drop: sphere radius as a fraction of the smallest dimension
DROP_RADIUS_FRACTION = 0.2
DROP_POOL_DEPTH = 2           # Cells of still water under the drop
# Mist: smoothing radius (cells) for the gaussian-filtered random field
MIST_SIGMA = 1.5

# =============================================================================
# INTERACTION
# =============================================================================
MAX_POUR_AMOUNT = 10.0     # Max level added by a single pour
DEFAULT_POUR_AMOUNT = 1.0
MESSAGE_LOG_SIZE = 100     # Event log entries kept in memory
