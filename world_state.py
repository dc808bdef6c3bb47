# world_state.py
"""Global mass accounting for the fluid session.

The grid itself only ever loses mass (to the absorbing boundary shell).
Interactive edits can add or remove it. MassPool keeps a running ledger of
both so the total can be checked against the grid at any time.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MassPool:
    """Ledger of water entering and leaving the grid.

    - initial: mass present when the session started
    - poured: mass added by the user
    - drained: mass removed by the user
    - absorbed: mass swallowed by the boundary shell during updates

    For a consistent session, grid mass == expected_mass() within
    floating-point tolerance.
    """
    initial: float = 0.0
    poured: float = 0.0
    drained: float = 0.0
    absorbed: float = 0.0

    def pour(self, amount: float) -> None:
        """Water added to the grid by the user."""
        self.poured += amount

    def drain(self, amount: float) -> None:
        """Water taken out of the grid by the user."""
        self.drained += amount

    def absorb(self, amount: float) -> None:
        """Water lost to the boundary during an update."""
        self.absorbed += amount

    def expected_mass(self) -> float:
        """Mass the grid should hold if nothing was created or destroyed."""
        return self.initial + self.poured - self.drained - self.absorbed

    def reset(self, initial: float) -> None:
        self.initial = initial
        self.poured = 0.0
        self.drained = 0.0
        self.absorbed = 0.0
