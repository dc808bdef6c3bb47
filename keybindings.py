"""
keybindings.py - Centralized key mappings for Cascade (Pygame version)

Single source of truth for all keyboard controls.
"""
from __future__ import annotations

try:
    import pygame
except ImportError:
    # Allow import without pygame for type checking
    pygame = None


def _key(name: str) -> int:
    """Get pygame key constant by name, or placeholder if pygame not loaded."""
    if pygame is None:
        return 0
    return getattr(pygame, f"K_{name}", 0)


# Cursor movement: key -> (dx, dy, dz) in lattice cells
CURSOR_KEYS = {
    _key("a"): (-1, 0, 0),
    _key("d"): (1, 0, 0),
    _key("w"): (0, 0, -1),
    _key("s"): (0, 0, 1),
    _key("q"): (0, -1, 0),
    _key("e"): (0, 1, 0),
}

# Camera orbit: key -> (d_yaw, d_pitch) in steps
ORBIT_KEYS = {
    _key("LEFT"): (-1, 0),
    _key("RIGHT"): (1, 0),
    _key("UP"): (0, 1),
    _key("DOWN"): (0, -1),
}

# Primary action keys
POUR_KEY = _key("f")          # Pour water into the cursor cell
DRAIN_KEY = _key("x")         # Empty the cursor cell
SURVEY_KEY = _key("c")        # Describe the cursor cell in the log
STEP_KEY = _key("n")          # Single tick while paused
PAUSE_KEY = _key("SPACE")
RESET_KEY = _key("r")
STATUS_KEY = _key("t")

# System keys
QUIT_KEY = _key("ESCAPE")
HELP_KEY = _key("h")

# Control descriptions for help display
CONTROL_DESCRIPTIONS = [
    "WASD: cursor x/z",
    "Q/E: cursor down/up",
    "Arrows: orbit camera",
    "Scroll, +/-: zoom",
    "F: pour water",
    "X: drain cell",
    "C: survey cell",
    "T: mass status",
    "Space: pause",
    "N: step (paused)",
    "R: reset scenario",
    "H: help",
    "Esc: quit",
]
