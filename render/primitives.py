# render/primitives.py
"""Text drawing shared by the HUD, log and overlays."""
from __future__ import annotations

from collections import OrderedDict
from typing import Tuple

import pygame

from render.config import (
    LINE_HEIGHT,
    COLOR_TEXT_GRAY,
    COLOR_TEXT_WHITE,
    COLOR_TEXT_HIGHLIGHT,
)

Color = Tuple[int, int, int]
TextKey = Tuple[int, str, Color]

# Least-recently-used glyph surfaces; HUD numbers change every tick
_TEXT_CACHE: "OrderedDict[TextKey, pygame.Surface]" = OrderedDict()
_TEXT_CACHE_LIMIT = 512


def _rendered(font, text: str, color: Color) -> pygame.Surface:
    key = (id(font), text, color)
    surface = _TEXT_CACHE.get(key)
    if surface is not None:
        _TEXT_CACHE.move_to_end(key)
        return surface
    surface = font.render(text, True, color)
    _TEXT_CACHE[key] = surface
    if len(_TEXT_CACHE) > _TEXT_CACHE_LIMIT:
        _TEXT_CACHE.popitem(last=False)
    return surface


def draw_text(surface, font, text: str, pos: Tuple[int, int], color: Color = COLOR_TEXT_WHITE) -> None:
    surface.blit(_rendered(font, text, color), pos)


def draw_section_header(surface, font, text: str, pos: Tuple[int, int], width: int = 200) -> int:
    """Highlighted title with a rule under it. Returns the y to continue from."""
    x, y = pos
    draw_text(surface, font, text, pos, color=COLOR_TEXT_HIGHLIGHT)
    rule_y = y + LINE_HEIGHT
    pygame.draw.line(surface, COLOR_TEXT_GRAY, (x, rule_y), (x + width, rule_y), 1)
    return rule_y + 6


def draw_label_value(surface, font, label: str, value: str, pos: Tuple[int, int], value_x: int = 110) -> int:
    x, y = pos
    if label:
        draw_text(surface, font, label, pos, color=COLOR_TEXT_GRAY)
    draw_text(surface, font, value, (x + value_x, y))
    return y + LINE_HEIGHT
