# game_state/state.py
"""Core session state for the fluid viewer and command loop."""
from __future__ import annotations

import collections
from dataclasses import dataclass, field
from typing import Deque, Tuple

from config import DEFAULT_SCENARIO, DEFAULT_SEED, MESSAGE_LOG_SIZE
from simulation.grid import FluidGrid
from world_state import MassPool

Cell = Tuple[int, int, int]


@dataclass
class SimState:
    """Main session state container.

    The grid is the only thing the simulation mutates. Everything else is
    bookkeeping for the viewer and command handlers.
    """
    grid: FluidGrid
    mass_pool: MassPool = field(default_factory=MassPool)
    messages: Deque[str] = field(default_factory=lambda: collections.deque(maxlen=MESSAGE_LOG_SIZE))

    # Cell targeted by pour/drain/survey (lattice coordinates)
    cursor: Cell = (1, 1, 1)

    # How the session was built, so it can be rebuilt on reset
    scenario: str = DEFAULT_SCENARIO
    seed: int | None = DEFAULT_SEED

    paused: bool = False
    tick: int = 0

    # Simulation timing (accumulated wall time for tick processing)
    _tick_timer: float = 0.0

    def move_cursor(self, dx: int, dy: int, dz: int) -> None:
        """Move the cursor, clamped to the grid's raw extent."""
        w, h, l = self.grid.shape
        x, y, z = self.cursor
        self.cursor = (
            max(0, min(w - 1, x + dx)),
            max(0, min(h - 1, y + dy)),
            max(0, min(l - 1, z + dz)),
        )

    def center_cursor(self) -> None:
        w, h, l = self.grid.shape
        self.cursor = (w // 2, h // 2, l // 2)
