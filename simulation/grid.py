# simulation/grid.py
"""Volumetric fluid grid: gravity, forward advection and splatting.

Each lattice cell holds a fill level (non-negative amount of water) and a
velocity vector. One call to FluidGrid.update advances the whole lattice by
one timestep:

1. The current generation (levels + velocities) is archived as "previous"
   by swapping buffers, and the new current generation is zeroed.
2. Every source cell, in row-major (x, y, z) order, gains gravity on its
   velocity and is advected forward.
3. Its level is splatted onto the 8 lattice corners around the target with
   trilinear weights. Each receiving cell blends velocities by mass.

Key concepts:
- Only strictly interior cells accept mass. The outer shell (index 0 or the
  maximum index on any axis) is an absorbing sink.
- The target position applies the cell's velocity twice: the caller offsets
  the lattice coordinate by the old velocity, and the splat offsets it again
  by the post-gravity velocity. Changing this changes the dynamics.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence, Tuple

import numpy as np

from simulation.config import GRAVITY, LEVEL_DTYPE, MAX_COORDINATE, VECTOR_COMPONENTS
from simulation.splat import trilinear_corners

if TYPE_CHECKING:
    from world_state import MassPool

Address = Tuple[int, int, int]


def _resolvable(targets: np.ndarray) -> np.ndarray:
    """Rows of `targets` that are finite and small enough to splat."""
    return np.all(np.isfinite(targets) & (np.abs(targets) < MAX_COORDINATE), axis=-1)


def _validate_dimensions(dims: Sequence[int]) -> Tuple[int, int, int]:
    if len(dims) != 3:
        raise ValueError(f"Grid must be 3-dimensional, got shape {tuple(dims)}")
    if any(int(d) <= 0 for d in dims):
        raise ValueError(f"Grid dimensions must be positive, got {tuple(dims)}")
    return int(dims[0]), int(dims[1]), int(dims[2])


class FluidGrid:
    """Two-generation level and velocity fields over a fixed W x H x L lattice.

    Levels have shape (W, H, L); velocities have shape (W, H, L, 3).
    The grid owns copies of whatever arrays it is built from.
    """

    def __init__(
        self,
        levels: np.ndarray,
        velocities: Optional[np.ndarray] = None,
        gravity: Sequence[float] = GRAVITY,
        mass_pool: Optional["MassPool"] = None,
    ) -> None:
        levels = np.array(levels, dtype=LEVEL_DTYPE)
        self._shape = _validate_dimensions(levels.shape)

        vector_shape = self._shape + (VECTOR_COMPONENTS,)
        if velocities is None:
            velocities = np.zeros(vector_shape, dtype=LEVEL_DTYPE)
        else:
            velocities = np.array(velocities, dtype=LEVEL_DTYPE)
            if velocities.shape != vector_shape:
                raise ValueError(
                    f"Velocity field shape {velocities.shape} does not match {vector_shape}"
                )

        self._levels = levels
        self._velocities = velocities
        # Previous generation: only meaningful while update() runs
        self._prev_levels = np.zeros_like(levels)
        self._prev_velocities = np.zeros_like(velocities)

        self.gravity = np.asarray(gravity, dtype=LEVEL_DTYPE)
        self.mass_pool = mass_pool
        self.last_absorbed = 0.0
        self.steps = 0

        # Lattice coordinate of every source cell, row-major, shape (N, 3)
        self._source_coords = (
            np.indices(self._shape).reshape(3, -1).T.astype(LEVEL_DTYPE)
        )
        self._upper = np.array(self._shape, dtype=np.int64) - 1

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        depth: int,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        **kwargs,
    ) -> "FluidGrid":
        """Create a grid with independent uniform [0, 1) levels and zero velocity.

        Args:
            width, height, depth: Lattice dimensions (must be positive)
            rng: Random generator to draw from; built from `seed` if omitted
            seed: Seed for a fresh generator when `rng` is not given
        """
        dims = _validate_dimensions((width, height, depth))
        if rng is None:
            rng = np.random.default_rng(seed)
        return cls(rng.random(dims, dtype=LEVEL_DTYPE), **kwargs)

    @classmethod
    def from_field(
        cls,
        levels: np.ndarray,
        velocities: Optional[np.ndarray] = None,
        **kwargs,
    ) -> "FluidGrid":
        """Create a grid from a caller-supplied level field (copied, not validated)."""
        return cls(levels, velocities=velocities, **kwargs)

    # =========================================================================
    # Shape
    # =========================================================================

    @property
    def shape(self) -> Tuple[int, int, int]:
        return self._shape

    @property
    def width(self) -> int:
        return self._shape[0]

    @property
    def height(self) -> int:
        return self._shape[1]

    @property
    def depth(self) -> int:
        return self._shape[2]

    # =========================================================================
    # Field access
    # =========================================================================

    @property
    def levels(self) -> np.ndarray:
        """Read-only view of the current level field.

        The view tracks the grid's internal buffers and is only stable until
        the next update(). Use snapshot() to keep a frame.
        """
        view = self._levels.view()
        view.flags.writeable = False
        return view

    @property
    def velocities(self) -> np.ndarray:
        """Read-only view of the current velocity field, shape (W, H, L, 3)."""
        view = self._velocities.view()
        view.flags.writeable = False
        return view

    def snapshot(self) -> np.ndarray:
        """Dense copy of the current level field.

        Renderers that keep a frame across ticks must use this rather than
        `levels`, whose buffer is reused by later updates.
        """
        return self._levels.copy()

    def total_mass(self) -> float:
        return float(self._levels.sum())

    def in_bounds(self, addr: Sequence[int]) -> bool:
        """True if `addr` is a strictly interior (writable) cell."""
        x, y, z = addr
        w, h, l = self._shape
        return 0 < x < w - 1 and 0 < y < h - 1 and 0 < z < l - 1

    @staticmethod
    def _cell(addr: Sequence[int]) -> Address:
        x, y, z = (int(c) for c in addr)
        return x, y, z

    def _check_index(self, addr: Sequence[int]) -> Address:
        x, y, z = self._cell(addr)
        w, h, l = self._shape
        if not (0 <= x < w and 0 <= y < h and 0 <= z < l):
            raise IndexError(f"Cell {(x, y, z)} outside grid of shape {self._shape}")
        return x, y, z

    def get(self, addr: Sequence[int]) -> float:
        """Level at `addr`. Boundary cells are readable.

        Raises:
            IndexError: If `addr` lies outside the array (negative indices included)
        """
        return float(self._levels[self._check_index(addr)])

    def set(self, addr: Sequence[int], value: float) -> None:
        """Write a level. Writes to the boundary shell or outside the grid are ignored.

        Coordinates are truncated to integers, the same way get() reads them.
        """
        cell = self._cell(addr)
        if self.in_bounds(cell):
            self._levels[cell] = value

    def get_velocity(self, addr: Sequence[int]) -> np.ndarray:
        return self._velocities[self._check_index(addr)].copy()

    def set_velocity(self, addr: Sequence[int], vel: Sequence[float]) -> None:
        cell = self._cell(addr)
        if self.in_bounds(cell):
            self._velocities[cell] = vel

    # =========================================================================
    # Splatting
    # =========================================================================

    def accumulate(self, addr: Sequence[int], value: float, vel: Sequence[float]) -> None:
        """Merge `value` with velocity `vel` into one cell.

        The cell's velocity becomes the mass-weighted average of what it held
        and what arrives. If both masses are zero the velocity is left as is.
        Out-of-bounds cells absorb the contribution.
        """
        cell = self._cell(addr)
        if not self.in_bounds(cell):
            return
        old = self._levels[cell]
        total = old + value
        if total != 0:
            self._velocities[cell] = (
                self._velocities[cell] * old + np.asarray(vel, dtype=LEVEL_DTYPE) * value
            ) / total
        self._levels[cell] = total

    def splat(self, pos: Sequence[float], amount: float, vel: Sequence[float]) -> None:
        """Distribute `amount` from a continuous position onto its 8 corners.

        The position is first displaced by `vel`. Corners are visited in a
        fixed order and each one is merged with accumulate().
        """
        vel = np.asarray(vel, dtype=LEVEL_DTYPE)
        target = np.asarray(pos, dtype=LEVEL_DTYPE) + vel
        if not _resolvable(target):
            return
        corners, weights = trilinear_corners(target)
        for corner, weight in zip(corners[0], weights[0]):
            self.accumulate(corner, amount * weight, vel)

    def _in_bounds_mask(self, cells: np.ndarray) -> np.ndarray:
        return np.all((cells > 0) & (cells < self._upper), axis=1)

    def _splat_batch(self, positions: np.ndarray, amounts: np.ndarray, vels: np.ndarray) -> float:
        """Vectorized splat of N sources into the current generation.

        Contributions are applied with unbuffered np.add.at in source-major,
        corner-minor order, so level sums match sequential splat() calls.
        Velocities are recovered from the accumulated momentum, which is the
        closed form of the running mass-weighted average in accumulate().

        Returns:
            Mass absorbed by the boundary (or lost to unresolvable targets)
        """
        targets = positions + vels
        finite = _resolvable(targets)
        absorbed = float(amounts[~finite].sum())
        if not np.all(finite):
            targets, amounts, vels = targets[finite], amounts[finite], vels[finite]

        corners, weights = trilinear_corners(targets)
        corners = corners.reshape(-1, 3)
        values = (amounts[:, None] * weights).reshape(-1)
        corner_vels = np.repeat(vels, weights.shape[1], axis=0)

        inside = self._in_bounds_mask(corners)
        absorbed += float(values[~inside].sum())

        cells = tuple(corners[inside].T)
        values = values[inside]
        momentum = self._velocities * self._levels[..., None]
        np.add.at(self._levels, cells, values)
        np.add.at(momentum, cells, values[:, None] * corner_vels[inside])

        mass = self._levels[..., None]
        np.divide(momentum, mass, out=self._velocities, where=mass != 0)
        return absorbed

    # =========================================================================
    # Time stepping
    # =========================================================================

    def update(self, dt: float) -> None:
        """Advance the grid by one timestep of `dt` seconds."""
        # Archive current as previous by swapping buffers; zero the new current
        self._levels, self._prev_levels = self._prev_levels, self._levels
        self._velocities, self._prev_velocities = self._prev_velocities, self._velocities
        self._levels.fill(0.0)
        self._velocities.fill(0.0)

        old_levels = self._prev_levels.reshape(-1)
        old_vels = self._prev_velocities.reshape(-1, VECTOR_COMPONENTS)
        impulse_vels = old_vels + self.gravity * dt

        # First displacement (by the old velocity) happens here; the splat
        # adds the second one (by the impulse velocity).
        positions = self._source_coords + old_vels
        absorbed = self._splat_batch(positions, old_levels, impulse_vels)

        self.last_absorbed = absorbed
        self.steps += 1
        if self.mass_pool is not None:
            self.mass_pool.absorb(absorbed)

    def __repr__(self) -> str:
        w, h, l = self._shape
        return f"FluidGrid({w}x{h}x{l}, mass={self.total_mass():.3f}, steps={self.steps})"
