# render/minimap.py
"""Top-down minimap: total water in each vertical column."""
from __future__ import annotations

from typing import Tuple

import numpy as np
import pygame

from render.grid_helpers import column_totals, normalize_totals
from render.config import COLOR_MINIMAP_EMPTY, COLOR_WATER_DEEP


def render_minimap(
    surface: pygame.Surface,
    levels: np.ndarray,
    cursor: Tuple[int, int, int],
    rect: pygame.Rect,
) -> None:
    """Render the minimap to the given surface within the specified rect.

    X runs left to right and Z top to bottom. Brighter columns hold more water.
    """
    pygame.draw.rect(surface, (20, 20, 25), rect)
    pygame.draw.rect(surface, (60, 60, 70), rect, 1)

    # --- Vectorized image generation ---
    # Build an RGB array for the whole (W, L) column map, then let pygame
    # scale it, instead of drawing cells one by one.
    shade = normalize_totals(column_totals(levels))[..., None]
    empty = np.array(COLOR_MINIMAP_EMPTY, dtype=float)
    water = np.array(COLOR_WATER_DEEP, dtype=float)
    rgb_array = (empty * (1 - shade) + water * shade).astype(np.uint8)

    # surfarray expects (width, height, 3): first axis is x, second is z
    minimap_surface = pygame.surfarray.make_surface(rgb_array)
    scaled_minimap = pygame.transform.scale(minimap_surface, rect.size)
    surface.blit(scaled_minimap, rect.topleft)

    # Cursor column
    w, _, l = levels.shape
    scale_x = rect.width / w
    scale_z = rect.height / l
    cx = rect.x + int((cursor[0] + 0.5) * scale_x)
    cz = rect.y + int((cursor[2] + 0.5) * scale_z)
    pygame.draw.circle(surface, (255, 255, 0), (cx, cz), 3)
