# render/hud.py
"""HUD panels: simulation info, mass ledger, cursor cell."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from render.colors import water_color
from render.primitives import draw_label_value, draw_section_header
from render.config import SECTION_SPACING

if TYPE_CHECKING:
    from game_state import SimState


def render_hud(
    screen,
    font,
    state: "SimState",
    hud_x: int,
    start_y: int,
    voxels_drawn: int = 0,
) -> int:
    """Render the simulation and mass panels. Returns the y below the last line."""
    grid = state.grid
    pool = state.mass_pool
    w, h, l = grid.shape

    y = draw_section_header(screen, font, "SIMULATION", (hud_x, start_y), width=260)
    y = draw_label_value(screen, font, "Grid", f"{w} x {h} x {l}", (hud_x, y))
    y = draw_label_value(screen, font, "Scenario", state.scenario, (hud_x, y))
    y = draw_label_value(screen, font, "Tick", f"{state.tick}" + (" (paused)" if state.paused else ""), (hud_x, y))
    y = draw_label_value(screen, font, "Visible", f"{voxels_drawn} cells", (hud_x, y))
    y += SECTION_SPACING

    y = draw_section_header(screen, font, "MASS", (hud_x, y), width=260)
    y = draw_label_value(screen, font, "In grid", f"{grid.total_mass():.3f}", (hud_x, y))
    y = draw_label_value(screen, font, "Expected", f"{pool.expected_mass():.3f}", (hud_x, y))
    y = draw_label_value(screen, font, "Lost to edge", f"{pool.absorbed:.3f}", (hud_x, y))
    y = draw_label_value(screen, font, "Last tick", f"{grid.last_absorbed:.4f}", (hud_x, y))
    y += SECTION_SPACING

    return render_cursor_info(screen, font, state, hud_x, y)


def render_cursor_info(screen, font, state: "SimState", hud_x: int, start_y: int) -> int:
    """Render level and velocity of the cursor cell."""
    grid = state.grid
    cell = state.cursor
    vx, vy, vz = grid.get_velocity(cell)

    y = draw_section_header(screen, font, "CURSOR", (hud_x, start_y), width=260)
    y = draw_label_value(screen, font, "Cell", f"{cell[0]}, {cell[1]}, {cell[2]}", (hud_x, y))
    level = grid.get(cell)
    pygame.draw.rect(screen, water_color(level), (hud_x + 90, y + 2, 12, 12))
    y = draw_label_value(screen, font, "Level", f"{level:.3f}", (hud_x, y))
    y = draw_label_value(screen, font, "Velocity", f"{vx:.2f}, {vy:.2f}, {vz:.2f}", (hud_x, y))
    if not grid.in_bounds(cell):
        y = draw_label_value(screen, font, "", "boundary (absorbs)", (hud_x, y))
    return y
