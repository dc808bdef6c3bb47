# render/config.py
"""
Configuration constants for the rendering domain.
Includes UI dimensions, colors, font sizes, and the occupancy threshold.
"""
from __future__ import annotations

from typing import Tuple

# =============================================================================
# OCCUPANCY
# =============================================================================
# A cell is drawn when its level strictly exceeds this value
VISIBILITY_THRESHOLD = 0.4

# =============================================================================
# UI LAYOUT & DIMENSIONS
# =============================================================================
VIRTUAL_WIDTH = 1280
VIRTUAL_HEIGHT = 720

SIDEBAR_WIDTH = 300
LINE_HEIGHT = 20
FONT_SIZE = 18
SECTION_SPACING = 8
LOG_PANEL_HEIGHT = 120
MINIMAP_SIZE = 180

# Voxel drawing
VOXEL_PIXELS = 14           # Edge length of one cell at zoom 1.0
VOXEL_MIN_PIXELS = 2
ZOOM_MIN = 0.25
ZOOM_MAX = 4.0
ZOOM_STEP = 0.1
ROTATE_STEP_DEG = 5.0       # Yaw/pitch change per key press
PITCH_LIMIT_DEG = 85.0

# Depth shading: far voxels are drawn darker
DEPTH_BRIGHTNESS_MIN = 0.55
DEPTH_BRIGHTNESS_MAX = 1.15

# =============================================================================
# COLORS
# =============================================================================
# UI Colors
COLOR_BG_DARK = (20, 20, 25)
COLOR_BG_PANEL = (25, 25, 30)
COLOR_TEXT_WHITE = (230, 230, 230)
COLOR_TEXT_GRAY = (160, 160, 160)
COLOR_TEXT_DIM = (100, 100, 100)
COLOR_TEXT_HIGHLIGHT = (220, 200, 120)
COLOR_LOG_TEXT = (160, 200, 160)

# Water colors: shallow at the threshold, deep at level 1.0 and above
COLOR_WATER_DEEP: Tuple[int, int, int] = (48, 133, 214)
COLOR_WATER_SHALLOW: Tuple[int, int, int] = (140, 205, 245)
COLOR_VOXEL_EDGE: Tuple[int, int, int] = (25, 60, 110)
COLOR_BOUNDS: Tuple[int, int, int] = (90, 90, 100)
COLOR_CURSOR: Tuple[int, int, int] = (240, 240, 90)
COLOR_MINIMAP_EMPTY: Tuple[int, int, int] = (30, 30, 36)
