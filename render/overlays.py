# render/overlays.py
"""Overlays drawn on top of the viewport and the log panel."""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Tuple

import pygame

from render.primitives import draw_text
from render.config import (
    LINE_HEIGHT,
    COLOR_BG_PANEL,
    COLOR_LOG_TEXT,
    COLOR_TEXT_HIGHLIGHT,
    COLOR_TEXT_GRAY,
    COLOR_TEXT_DIM,
)

if TYPE_CHECKING:
    from game_state import SimState

HELP_COLUMN_WIDTH = 200


def render_help_overlay(
    surface,
    font,
    controls: Sequence[str],
    pos: Tuple[int, int],
    available_width: int,
    available_height: int,
) -> None:
    """Lay the control descriptions out column-major inside the log panel.

    Args:
        controls: One line per control, e.g. "F: pour water"
        pos: Top-left corner of the panel content
        available_width, available_height: Panel size in pixels
    """
    x, y = pos
    panel = pygame.Rect(x - 4, y - 4, available_width, available_height)
    pygame.draw.rect(surface, COLOR_BG_PANEL, panel)
    draw_text(surface, font, "CONTROLS", (x, y), color=COLOR_TEXT_HIGHLIGHT)

    top = y + LINE_HEIGHT + 4
    rows = max(1, (panel.bottom - top) // LINE_HEIGHT)
    for i, control in enumerate(controls):
        column, row = divmod(i, rows)
        cx = x + column * HELP_COLUMN_WIDTH
        if cx >= panel.right:
            break
        draw_text(surface, font, control, (cx, top + row * LINE_HEIGHT), color=COLOR_TEXT_GRAY)


def render_event_log(
    surface,
    font,
    state: "SimState",
    pos: Tuple[int, int],
    max_height: int,
) -> int:
    """Draw the newest messages, oldest at the top. Returns how many fit."""
    x, y = pos
    draw_text(surface, font, "EVENT LOG", (x, y), color=COLOR_TEXT_HIGHLIGHT)
    y += LINE_HEIGHT + 4

    slots = (max_height - 2 * LINE_HEIGHT - 8) // LINE_HEIGHT
    if slots <= 0:
        return 0

    messages = state.messages
    hidden = max(0, len(messages) - slots)
    for offset, i in enumerate(range(hidden, len(messages))):
        draw_text(surface, font, messages[i], (x, y + offset * LINE_HEIGHT), color=COLOR_LOG_TEXT)

    if hidden:
        label = f"+{hidden} earlier"
        draw_text(surface, font, label, (x + 110, pos[1]), color=COLOR_TEXT_DIM)
    return slots


def render_pause_overlay(surface: pygame.Surface, font) -> None:
    """Tint the viewport and label it PAUSED."""
    tint = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    tint.fill((10, 20, 40, 90))
    surface.blit(tint, (0, 0))
    draw_text(surface, font, "PAUSED  (N: step, Space: resume)", (12, 12), color=COLOR_TEXT_HIGHLIGHT)
