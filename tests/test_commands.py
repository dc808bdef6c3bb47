import pytest

from config import DEFAULT_POUR_AMOUNT, MESSAGE_LOG_SIZE
from game_state import build_initial_state
from main import handle_command, simulate_tick


@pytest.fixture
def state():
    return build_initial_state("dam_break", 8, 8, 8, seed=1)


def test_initial_state_is_centered_and_balanced(state):
    assert state.cursor == (4, 4, 4)
    assert state.tick == 0
    assert state.mass_pool.initial == pytest.approx(state.grid.total_mass())
    assert "dam_break" in state.messages[-1]


def test_random_scenario_matches_plain_random_grid():
    from simulation.grid import FluidGrid

    state = build_initial_state("random", 5, 5, 5, seed=9)
    plain = FluidGrid.random(5, 5, 5, seed=9)
    assert (state.grid.levels == plain.levels).all()


def test_message_log_is_bounded(state):
    for _ in range(MESSAGE_LOG_SIZE + 20):
        handle_command(state, "status", [])
    assert len(state.messages) == MESSAGE_LOG_SIZE


def test_pour_adds_to_cursor_cell(state):
    handle_command(state, "pour", ["2.5"])
    assert state.grid.get(state.cursor) == pytest.approx(2.5)
    assert state.mass_pool.poured == pytest.approx(2.5)
    assert state.mass_pool.expected_mass() == pytest.approx(state.grid.total_mass())


def test_pour_defaults_amount(state):
    handle_command(state, "pour", [])
    assert state.grid.get(state.cursor) == pytest.approx(DEFAULT_POUR_AMOUNT)


def test_pour_out_of_range_rejected(state):
    handle_command(state, "pour", ["100"])
    assert state.grid.get(state.cursor) == 0.0
    assert "Pour between" in state.messages[-1]


def test_pour_on_boundary_rejected(state):
    state.cursor = (0, 4, 4)
    before = state.grid.total_mass()
    handle_command(state, "pour", ["1"])
    assert state.grid.total_mass() == before
    assert state.mass_pool.poured == 0.0
    assert "boundary" in state.messages[-1]


def test_drain_empties_cell(state):
    handle_command(state, "pour", ["3"])
    handle_command(state, "drain", [])
    assert state.grid.get(state.cursor) == 0.0
    assert state.mass_pool.drained == pytest.approx(3.0)
    assert state.mass_pool.expected_mass() == pytest.approx(state.grid.total_mass())


def test_drain_empty_cell_reports(state):
    handle_command(state, "drain", [])
    assert "No water" in state.messages[-1]


def test_bad_argument_reports_invalid_usage(state):
    assert handle_command(state, "pour", ["lots"]) is False
    assert state.messages[-1] == "Invalid usage for 'pour'."


def test_unknown_command_reported(state):
    assert handle_command(state, "fly", []) is False
    assert state.messages[-1] == "Unknown command: fly"


def test_quit_ends_session(state):
    assert handle_command(state, "quit", []) is True


def test_step_advances_ticks(state):
    handle_command(state, "step", ["3"])
    assert state.tick == 3
    assert state.grid.steps == 3
    assert state.messages[-1] == "Stepped 3 tick(s)."


def test_step_rejects_non_positive_count(state):
    handle_command(state, "step", ["0"])
    assert state.tick == 0
    assert state.messages[-1] == "Invalid usage for 'step'."


def test_cursor_moves_within_grid(state):
    handle_command(state, "cursor", ["1", "2", "3"])
    assert state.cursor == (1, 2, 3)


@pytest.mark.parametrize("args", [["99", "0", "0"], ["-1", "0", "0"], ["1"]])
def test_cursor_rejects_bad_cells(state, args):
    handle_command(state, "cursor", args)
    assert state.cursor == (4, 4, 4)
    assert state.messages[-1] == "Invalid usage for 'cursor'."


def test_move_cursor_clamps_to_grid(state):
    state.move_cursor(-100, 0, 100)
    assert state.cursor == (0, 4, 7)


def test_pause_toggles(state):
    handle_command(state, "pause", [])
    assert state.paused
    handle_command(state, "pause", [])
    assert not state.paused


def test_survey_and_status_log_messages(state):
    handle_command(state, "survey", [])
    assert state.messages[-1].startswith("Survey: Cell 4,4,4")
    handle_command(state, "status", [])
    assert "mass" in state.messages[-1]


def test_reset_rebuilds_scenario_in_place(state):
    initial_mass = state.grid.total_mass()
    handle_command(state, "pour", ["2"])
    handle_command(state, "step", ["4"])

    handle_command(state, "reset", [])
    assert state.tick == 0
    assert state.grid.steps == 0
    assert state.grid.total_mass() == pytest.approx(initial_mass)
    assert state.mass_pool.poured == 0.0


def test_ticks_log_boundary_losses():
    state = build_initial_state("random", 5, 5, 5, seed=2)
    simulate_tick(state)
    assert state.grid.last_absorbed > 0.0
    assert "drained off the edge" in state.messages[-1]
    assert state.mass_pool.expected_mass() == pytest.approx(state.grid.total_mass())
