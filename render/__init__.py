# render/__init__.py
"""
Rendering module for the Cascade pygame frontend.

Provides modular rendering functions for the voxel viewport, HUD, minimap
and overlays.
"""
from render.colors import Color, level_tint, depth_brightness, voxel_colors, water_color
from render.grid_helpers import occupied_positions, column_totals
from render.primitives import draw_text, draw_section_header, draw_label_value
from render.voxels import render_viewport, render_voxels, render_bounds, render_cursor
from render.hud import render_hud, render_cursor_info
from render.minimap import render_minimap
from render.overlays import render_help_overlay, render_pause_overlay, render_event_log

__all__ = [
    # Colors
    "Color",
    "level_tint",
    "depth_brightness",
    "voxel_colors",
    "water_color",
    # Grid views
    "occupied_positions",
    "column_totals",
    # Primitives
    "draw_text",
    "draw_section_header",
    "draw_label_value",
    # Viewport
    "render_viewport",
    "render_voxels",
    "render_bounds",
    "render_cursor",
    # HUD
    "render_hud",
    "render_cursor_info",
    "render_minimap",
    # Overlays
    "render_help_overlay",
    "render_pause_overlay",
    "render_event_log",
]
