"""Shared fixtures for the Cascade test suite."""
import numpy as np
import pytest

from simulation.grid import FluidGrid


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def unit_cube():
    """3x3x3 grid holding one unit of water in its only interior cell."""
    levels = np.zeros((3, 3, 3))
    levels[1, 1, 1] = 1.0
    return FluidGrid.from_field(levels)


@pytest.fixture
def empty_grid():
    return FluidGrid.from_field(np.zeros((5, 5, 5)))


@pytest.fixture
def random_grid(rng):
    return FluidGrid.random(6, 7, 5, rng=rng)
