# game_state/__init__.py
"""Session state management module."""

from game_state.state import SimState
from game_state.initialization import build_initial_state
from game_state.fluid_actions import (
    pour_water,
    drain_water,
)

__all__ = [
    'SimState',
    'build_initial_state',
    'pour_water',
    'drain_water',
]
