# main.py
"""
Cascade - volumetric water prototype
A 3-D lattice of water levels and velocities falling under gravity.

Shared session logic used by the pygame frontend and headless tools:
ticking the simulation and handling text commands.
"""
from __future__ import annotations

from typing import List

import numpy as np

from config import TIME_STEP, DEFAULT_POUR_AMOUNT
from game_state import SimState, build_initial_state, pour_water, drain_water


def simulate_tick(state: SimState, dt: float = TIME_STEP) -> None:
    """Advance the grid one step and log any water lost to the boundary."""
    state.grid.update(dt)
    state.tick += 1

    absorbed = state.grid.last_absorbed
    if absorbed > 1e-9:
        state.messages.append(f"Tick {state.tick}: {absorbed:.3f} drained off the edge.")


def show_status(state: SimState) -> None:
    grid = state.grid
    pool = state.mass_pool
    w, h, l = grid.shape
    state.messages.append(
        f"{w}x{h}x{l} grid, tick {state.tick}: mass {grid.total_mass():.3f} "
        f"(expected {pool.expected_mass():.3f}, lost {pool.absorbed:.3f})"
    )


def survey_cell(state: SimState) -> None:
    """Describe the cell under the cursor."""
    grid = state.grid
    cell = state.cursor
    level = grid.get(cell)
    vx, vy, vz = grid.get_velocity(cell)
    speed = float(np.sqrt(vx * vx + vy * vy + vz * vz))

    desc = [f"Cell {cell[0]},{cell[1]},{cell[2]}", f"level={level:.3f}",
            f"vel=({vx:.2f}, {vy:.2f}, {vz:.2f})", f"speed={speed:.2f}"]
    if not grid.in_bounds(cell):
        desc.append("boundary")
    state.messages.append("Survey: " + " | ".join(desc))


def reset_state(state: SimState) -> SimState:
    """Rebuild the session from its scenario and seed."""
    w, h, l = state.grid.shape
    return build_initial_state(state.scenario, w, h, l, seed=state.seed)


def move_cursor_to(state: SimState, args: List[str]) -> None:
    x, y, z = (int(a) for a in args[:3])
    state.grid.get((x, y, z))  # raises IndexError outside the grid
    state.cursor = (x, y, z)
    state.messages.append(f"Cursor at {state.cursor}.")


def toggle_pause(state: SimState) -> None:
    state.paused = not state.paused
    state.messages.append("Paused." if state.paused else "Running.")


def step_ticks(state: SimState, args: List[str]) -> None:
    count = int(args[0]) if args else 1
    if count <= 0:
        raise ValueError("step count must be positive")
    for _ in range(count):
        simulate_tick(state)
    state.messages.append(f"Stepped {count} tick(s).")


def handle_command(state: SimState, cmd: str, args: List[str]) -> bool:
    """Process a user command. Returns True if the session should quit.

    "reset" rebuilds the grid in place on the state object, so callers keep
    their reference.
    """
    command_map = {
        "pour": lambda s, a: pour_water(s, float(a[0]) if a else DEFAULT_POUR_AMOUNT),
        "drain": lambda s, a: drain_water(s),
        "survey": lambda s, a: survey_cell(s),
        "status": lambda s, a: show_status(s),
        "step": step_ticks,
        "pause": lambda s, a: toggle_pause(s),
        "cursor": move_cursor_to,
        "reset": lambda s, a: _reset_in_place(s),
    }
    if cmd == "quit":
        return True
    handler = command_map.get(cmd)
    if not handler:
        state.messages.append(f"Unknown command: {cmd}")
        return False
    try:
        handler(state, args)
    except (TypeError, ValueError, IndexError):
        state.messages.append(f"Invalid usage for '{cmd}'.")
    return False


def _reset_in_place(state: SimState) -> None:
    fresh = reset_state(state)
    state.grid = fresh.grid
    state.mass_pool = fresh.mass_pool
    state.tick = 0
    state._tick_timer = 0.0
    state.cursor = fresh.cursor
    state.messages.extend(fresh.messages)
