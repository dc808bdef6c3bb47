import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from simulation.config import GRAVITY
from simulation.grid import FluidGrid
from world_state import MassPool


# =============================================================================
# Construction
# =============================================================================

def test_random_grid_matches_generator_draw():
    grid = FluidGrid.random(4, 5, 3, seed=3)
    expected = np.random.default_rng(3).random((4, 5, 3))
    assert_array_equal(grid.snapshot(), expected)
    assert_array_equal(grid.velocities, 0.0)


def test_random_levels_in_unit_interval(random_grid):
    levels = random_grid.levels
    assert levels.shape == (6, 7, 5)
    assert np.all((levels >= 0.0) & (levels < 1.0))


def test_same_seed_same_grid():
    a = FluidGrid.random(5, 5, 5, seed=11)
    b = FluidGrid.random(5, 5, 5, seed=11)
    assert_array_equal(a.snapshot(), b.snapshot())


@pytest.mark.parametrize("dims", [(0, 3, 3), (3, -1, 3), (3, 3, 0)])
def test_non_positive_dimensions_rejected(dims):
    with pytest.raises(ValueError):
        FluidGrid.random(*dims)


def test_non_3d_field_rejected():
    with pytest.raises(ValueError):
        FluidGrid.from_field(np.zeros((3, 3)))


def test_velocity_shape_must_match():
    with pytest.raises(ValueError):
        FluidGrid.from_field(np.zeros((3, 3, 3)), velocities=np.zeros((3, 3, 3, 2)))


def test_from_field_copies_input():
    field = np.zeros((3, 3, 3))
    grid = FluidGrid.from_field(field)
    field[1, 1, 1] = 5.0
    assert grid.get((1, 1, 1)) == 0.0


# =============================================================================
# Accessors
# =============================================================================

def test_boundary_cells_are_readable():
    field = np.zeros((3, 3, 3))
    field[0, 0, 0] = 0.5
    grid = FluidGrid.from_field(field)
    assert grid.get((0, 0, 0)) == 0.5


@pytest.mark.parametrize("addr", [(3, 0, 0), (0, 3, 0), (0, 0, 3), (-1, 1, 1)])
def test_get_outside_array_raises(unit_cube, addr):
    with pytest.raises(IndexError):
        unit_cube.get(addr)


def test_in_bounds_is_strictly_interior(unit_cube):
    assert unit_cube.in_bounds((1, 1, 1))
    for addr in [(0, 1, 1), (2, 1, 1), (1, 0, 1), (1, 1, 2), (5, 5, 5), (-1, 1, 1)]:
        assert not unit_cube.in_bounds(addr)


def test_set_ignores_boundary_and_outside(empty_grid):
    empty_grid.set((0, 2, 2), 1.0)
    empty_grid.set((4, 2, 2), 1.0)
    empty_grid.set((9, 9, 9), 1.0)
    empty_grid.set((-1, 2, 2), 1.0)
    assert empty_grid.total_mass() == 0.0

    empty_grid.set((2, 2, 2), 0.75)
    assert empty_grid.get((2, 2, 2)) == 0.75


def test_fractional_addresses_truncate_like_get(empty_grid):
    empty_grid.set((2.7, 2.2, 2.9), 0.5)
    assert empty_grid.get((2.7, 2.2, 2.9)) == 0.5
    assert empty_grid.get((2, 2, 2)) == 0.5

    empty_grid.set_velocity((2.5, 2.0, 2.0), (0.0, 1.0, 0.0))
    assert_array_equal(empty_grid.get_velocity((2, 2, 2)), [0.0, 1.0, 0.0])


def test_views_are_read_only(random_grid):
    with pytest.raises(ValueError):
        random_grid.levels[1, 1, 1] = 3.0
    with pytest.raises(ValueError):
        random_grid.velocities[1, 1, 1] = (1.0, 0.0, 0.0)


def test_snapshot_is_independent(random_grid):
    frame = random_grid.snapshot()
    random_grid.update(0.05)
    assert not np.array_equal(frame, random_grid.levels)


def test_snapshot_outlives_reused_buffers(unit_cube):
    unit_cube.set_velocity((1, 1, 1), (0.5, 0.0, 0.0))
    view = unit_cube.levels
    frame = unit_cube.snapshot()
    unit_cube.update(0.0)
    unit_cube.update(0.0)
    assert view.sum() == 0.0
    assert frame[1, 1, 1] == 1.0


# =============================================================================
# Accumulate / splat
# =============================================================================

def test_accumulate_blends_velocity_by_mass(empty_grid):
    empty_grid.accumulate((2, 2, 2), 1.0, (1.0, 0.0, 0.0))
    empty_grid.accumulate((2, 2, 2), 3.0, (0.0, 0.0, 4.0))
    assert empty_grid.get((2, 2, 2)) == 4.0
    assert_allclose(empty_grid.get_velocity((2, 2, 2)), [0.25, 0.0, 3.0])


def test_accumulate_zero_mass_keeps_velocity(empty_grid):
    empty_grid.set_velocity((2, 2, 2), (1.0, 2.0, 3.0))
    empty_grid.accumulate((2, 2, 2), 0.0, (9.0, 9.0, 9.0))
    assert empty_grid.get((2, 2, 2)) == 0.0
    assert_array_equal(empty_grid.get_velocity((2, 2, 2)), [1.0, 2.0, 3.0])


def test_accumulate_on_boundary_is_absorbed(empty_grid):
    empty_grid.accumulate((0, 2, 2), 1.0, (1.0, 0.0, 0.0))
    assert empty_grid.total_mass() == 0.0
    assert_array_equal(empty_grid.get_velocity((0, 2, 2)), 0.0)


def test_splat_splits_between_neighbours(empty_grid):
    empty_grid.splat((2.0, 2.0, 2.0), 1.0, (0.5, 0.0, 0.0))
    assert empty_grid.get((2, 2, 2)) == pytest.approx(0.5)
    assert empty_grid.get((3, 2, 2)) == pytest.approx(0.5)
    assert empty_grid.total_mass() == pytest.approx(1.0)
    assert_allclose(empty_grid.get_velocity((3, 2, 2)), [0.5, 0.0, 0.0])


def test_splat_scales_by_amount(empty_grid):
    empty_grid.splat((2.0, 2.0, 2.0), 0.3, (0.0, 0.5, 0.5))
    assert empty_grid.total_mass() == pytest.approx(0.3)
    assert empty_grid.get((2, 3, 3)) == pytest.approx(0.075)


def test_splat_with_non_finite_target_is_dropped(empty_grid):
    empty_grid.splat((2.0, 2.0, 2.0), 1.0, (np.nan, 0.0, 0.0))
    empty_grid.splat((2.0, 2.0, 2.0), 1.0, (0.0, np.inf, 0.0))
    assert empty_grid.total_mass() == 0.0


def test_splat_with_huge_target_is_dropped(empty_grid):
    empty_grid.splat((2.0, 2.0, 2.0), 1.0, (1e17, 0.0, 0.0))
    assert empty_grid.total_mass() == 0.0


def test_huge_velocity_mass_is_counted_as_absorbed():
    pool = MassPool()
    field = np.zeros((5, 5, 5))
    field[2, 2, 2] = 1.0
    velocities = np.zeros((5, 5, 5, 3))
    velocities[2, 2, 2] = (1e17, 0.0, 0.0)
    grid = FluidGrid.from_field(field, velocities, mass_pool=pool)
    pool.reset(grid.total_mass())

    grid.update(0.0)
    assert grid.total_mass() == 0.0
    assert grid.last_absorbed == pytest.approx(1.0)
    assert pool.expected_mass() == pytest.approx(grid.total_mass())


# =============================================================================
# Update
# =============================================================================

def test_resting_water_stays_put(unit_cube):
    before = unit_cube.snapshot()
    unit_cube.update(0.0)
    assert_array_equal(unit_cube.levels, before)
    assert_array_equal(unit_cube.velocities, 0.0)
    assert unit_cube.last_absorbed == 0.0


def test_water_advected_onto_boundary_is_lost(unit_cube):
    unit_cube.set_velocity((1, 1, 1), (0.5, 0.0, 0.0))
    unit_cube.update(0.0)
    assert unit_cube.total_mass() == 0.0
    assert unit_cube.last_absorbed == pytest.approx(1.0)


def test_interior_motion_conserves_mass():
    field = np.zeros((9, 9, 9))
    field[4, 4, 4] = 1.0
    velocities = np.zeros((9, 9, 9, 3))
    velocities[4, 4, 4] = (0.1, 0.05, -0.1)
    grid = FluidGrid.from_field(field, velocities)

    grid.update(0.01)
    assert grid.total_mass() == pytest.approx(1.0)
    assert grid.last_absorbed == pytest.approx(0.0, abs=1e-12)


def test_velocity_counts_twice_in_displacement():
    field = np.zeros((9, 9, 9))
    field[2, 4, 4] = 1.0
    velocities = np.zeros((9, 9, 9, 3))
    velocities[2, 4, 4] = (1.0, 0.0, 0.0)
    grid = FluidGrid.from_field(field, velocities, gravity=(0.0, 0.0, 0.0))

    grid.update(0.1)
    assert grid.get((4, 4, 4)) == pytest.approx(1.0)
    assert_allclose(grid.get_velocity((4, 4, 4)), [1.0, 0.0, 0.0])


def test_gravity_pulls_water_down():
    field = np.zeros((7, 7, 7))
    field[3, 4, 3] = 1.0
    grid = FluidGrid.from_field(field)
    dt = 0.1

    grid.update(dt)
    levels = grid.snapshot()
    ys = np.indices(levels.shape)[1]
    center_y = float((levels * ys).sum() / levels.sum())
    assert center_y < 4.0
    for addr in [(3, 3, 3), (3, 4, 3)]:
        assert_allclose(grid.get_velocity(addr), [0.0, GRAVITY[1] * dt, 0.0])


def test_mass_never_increases_and_stays_non_negative(random_grid):
    previous = random_grid.total_mass()
    for _ in range(15):
        random_grid.update(0.05)
        current = random_grid.total_mass()
        assert current <= previous + 1e-9
        assert np.all(random_grid.levels >= 0.0)
        previous = current


def test_updates_are_deterministic():
    a = FluidGrid.random(6, 6, 6, seed=7)
    b = FluidGrid.random(6, 6, 6, seed=7)
    for _ in range(5):
        a.update(0.03)
        b.update(0.03)
    assert_array_equal(a.levels, b.levels)
    assert_array_equal(a.velocities, b.velocities)


def test_batched_update_matches_sequential_splats(rng):
    shape = (6, 6, 6)
    levels = rng.random(shape)
    velocities = rng.uniform(-0.6, 0.6, size=shape + (3,))
    dt = 0.04
    grid = FluidGrid.from_field(levels, velocities)

    reference = FluidGrid.from_field(np.zeros(shape))
    gravity = np.asarray(GRAVITY)
    for x, y, z in np.ndindex(*shape):
        old_vel = velocities[x, y, z]
        position = np.array([x, y, z], dtype=float) + old_vel
        reference.splat(position, levels[x, y, z], old_vel + gravity * dt)

    grid.update(dt)
    assert_allclose(grid.levels, reference.levels, rtol=1e-9, atol=1e-12)
    assert_allclose(grid.velocities, reference.velocities, rtol=1e-9, atol=1e-12)


def test_update_feeds_mass_pool(rng):
    pool = MassPool()
    grid = FluidGrid.random(5, 6, 5, rng=rng, mass_pool=pool)
    pool.reset(grid.total_mass())

    lost = 0.0
    for _ in range(10):
        grid.update(0.05)
        lost += grid.last_absorbed

    assert grid.steps == 10
    assert pool.absorbed == pytest.approx(lost)
    assert pool.expected_mass() == pytest.approx(grid.total_mass(), rel=1e-9, abs=1e-9)


def test_repr_reports_shape_and_steps(unit_cube):
    unit_cube.update(0.0)
    assert repr(unit_cube) == "FluidGrid(3x3x3, mass=1.000, steps=1)"
