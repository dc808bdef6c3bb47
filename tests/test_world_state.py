import pytest

from world_state import MassPool


def test_ledger_tracks_every_flow():
    pool = MassPool(initial=10.0)
    pool.pour(2.5)
    pool.drain(1.0)
    pool.absorb(0.25)
    assert pool.expected_mass() == pytest.approx(11.25)


def test_reset_clears_flows():
    pool = MassPool(initial=1.0, poured=2.0, drained=0.5, absorbed=0.5)
    pool.reset(4.0)
    assert pool == MassPool(initial=4.0)
    assert pool.expected_mass() == 4.0
