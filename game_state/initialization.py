# game_state/initialization.py
"""Session initialization: build a grid from a scenario and wire up accounting."""
from __future__ import annotations

from typing import Optional

import numpy as np

from config import (
    DEFAULT_SCENARIO,
    DEFAULT_SEED,
    GRID_WIDTH,
    GRID_HEIGHT,
    GRID_DEPTH,
)
from game_state.state import SimState
from simulation.grid import FluidGrid
from world.generation import generate_level_field
from world_state import MassPool


def build_initial_state(
    scenario: str = DEFAULT_SCENARIO,
    width: int = GRID_WIDTH,
    height: int = GRID_HEIGHT,
    depth: int = GRID_DEPTH,
    seed: Optional[int] = DEFAULT_SEED,
) -> SimState:
    """Create a new session with a freshly generated grid.

    The "random" scenario goes through FluidGrid.random so its levels are
    drawn exactly as a plain random grid would be for the same seed.
    """
    rng = np.random.default_rng(seed)
    mass_pool = MassPool()

    if scenario == "random":
        grid = FluidGrid.random(width, height, depth, rng=rng, mass_pool=mass_pool)
    else:
        levels = generate_level_field(scenario, width, height, depth, rng)
        grid = FluidGrid.from_field(levels, mass_pool=mass_pool)

    mass_pool.reset(grid.total_mass())

    state = SimState(grid=grid, mass_pool=mass_pool, scenario=scenario, seed=seed)
    state.center_cursor()
    state.messages.append(
        f"Scenario '{scenario}' on {width}x{height}x{depth} grid, mass {mass_pool.initial:.2f}."
    )
    return state
