# game_state/fluid_actions.py
"""User actions that add or remove water at the cursor cell."""
from __future__ import annotations

from typing import TYPE_CHECKING

from config import MAX_POUR_AMOUNT

if TYPE_CHECKING:
    from game_state.state import SimState


def pour_water(state: SimState, amount: float) -> None:
    """Pour water into the cursor cell."""
    if not (0 < amount <= MAX_POUR_AMOUNT):
        state.messages.append(f"Pour between 0 and {MAX_POUR_AMOUNT:.1f}.")
        return

    grid = state.grid
    cell = state.cursor
    if not grid.in_bounds(cell):
        state.messages.append(f"Cell {cell} is on the boundary; water would drain away.")
        return

    grid.set(cell, grid.get(cell) + amount)
    state.mass_pool.pour(amount)
    state.messages.append(f"Poured {amount:.2f} at {cell}.")


def drain_water(state: SimState) -> None:
    """Empty the cursor cell."""
    grid = state.grid
    cell = state.cursor
    available = grid.get(cell)

    if available <= 0:
        state.messages.append("No water to drain here.")
        return
    if not grid.in_bounds(cell):
        state.messages.append(f"Cell {cell} is on the boundary and cannot be edited.")
        return

    grid.set(cell, 0.0)
    state.mass_pool.drain(available)
    state.messages.append(f"Drained {available:.2f} from {cell}.")
