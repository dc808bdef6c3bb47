#!/usr/bin/env python3
# performance/benchmarks/simulation.py
"""
Performance benchmarking script for the Cascade fluid grid.

Runs FluidGrid.update headless (no rendering) to measure pure simulation
performance. Reports tick times, throughput, memory, mass drift, and
optionally the hottest code paths from cProfile.
"""
from __future__ import annotations

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import argparse
import cProfile
import io
import pstats
import tracemalloc
from typing import List, Optional

from config import DEFAULT_SEED, TIME_STEP
from game_state import build_initial_state
from main import simulate_tick
from world.generation import SCENARIOS
from performance.benchmarks.utils import (
    TickStats,
    Timer,
    banner,
    cells_per_second,
    megabytes,
    metric,
    ms,
    progress,
    rate,
)


class SimulationMetrics:
    """Tracks performance metrics during a benchmark run."""

    def __init__(self, num_cells: int):
        self.num_cells = num_cells
        self.tick_times: List[float] = []
        self.memory_snapshots: List[int] = []  # Bytes
        self.mass_start: float = 0.0
        self.mass_end: float = 0.0
        self.mass_absorbed: float = 0.0
        self.ledger_error: float = 0.0

    def record_tick_time(self, tick_time: float):
        self.tick_times.append(tick_time)

    def record_memory(self):
        """Record current traced memory usage."""
        current, _peak = tracemalloc.get_traced_memory()
        self.memory_snapshots.append(current)

    def print_report(self, shape):
        """Print a performance report."""
        w, h, l = shape
        banner(f"CASCADE SIMULATION BENCHMARK ({w}x{h}x{l} = {self.num_cells} cells)")

        stats = TickStats.from_samples(self.tick_times)
        metric("Ticks:", str(stats.count))
        metric("Mean tick:", ms(stats.mean))
        metric("Median tick:", ms(stats.median))
        metric("Std dev:", ms(stats.stdev))
        metric("Min / Max:", f"{ms(stats.low)} / {ms(stats.high)}")
        metric("Throughput:", rate(cells_per_second(self.num_cells, stats.mean)) + " cells")

        if self.memory_snapshots:
            metric("Memory (peak):", megabytes(max(self.memory_snapshots)))

        metric("Mass start:", f"{self.mass_start:.4f}")
        metric("Mass end:", f"{self.mass_end:.4f}")
        metric("Lost to boundary:", f"{self.mass_absorbed:.4f}")
        metric("Ledger error:", f"{self.ledger_error:.2e}")


def run_benchmark(
    scenario: str,
    size: int,
    num_ticks: int,
    dt: float = TIME_STEP,
    seed: Optional[int] = DEFAULT_SEED,
) -> SimulationMetrics:
    """Run `num_ticks` updates on a cubic grid and collect metrics."""
    state = build_initial_state(scenario, size, size, size, seed=seed)
    metrics = SimulationMetrics(num_cells=size ** 3)
    metrics.mass_start = state.grid.total_mass()

    tracemalloc.start()
    try:
        for tick in range(num_ticks):
            with Timer() as timer:
                simulate_tick(state, dt)
            metrics.record_tick_time(timer.elapsed)
            if tick % 10 == 0:
                metrics.record_memory()
            progress(tick + 1, num_ticks)
    finally:
        tracemalloc.stop()

    metrics.mass_end = state.grid.total_mass()
    metrics.mass_absorbed = state.mass_pool.absorbed
    metrics.ledger_error = abs(state.mass_pool.expected_mass() - metrics.mass_end)
    return metrics


def profile_ticks(scenario: str, size: int, num_ticks: int, top: int = 15) -> str:
    """Profile `num_ticks` updates and return the cumulative-time report."""
    state = build_initial_state(scenario, size, size, size)
    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(num_ticks):
        simulate_tick(state)
    profiler.disable()

    stream = io.StringIO()
    pstats.Stats(profiler, stream=stream).sort_stats("cumulative").print_stats(top)
    return stream.getvalue()


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Headless FluidGrid.update benchmark"
    )
    parser.add_argument(
        "--scenario", choices=sorted(SCENARIOS), default="random",
        help="Initial water layout (default: random)"
    )
    parser.add_argument(
        "--size", type=int, default=32,
        help="Edge length of the cubic grid (default: 32)"
    )
    parser.add_argument(
        "--num-ticks", type=int, default=100,
        help="Number of simulation ticks to run (default: 100)"
    )
    parser.add_argument(
        "--profile", action="store_true",
        help="Print cProfile hot paths after the timing run"
    )

    args = parser.parse_args()

    metrics = run_benchmark(args.scenario, args.size, args.num_ticks)
    metrics.print_report((args.size, args.size, args.size))

    if args.profile:
        banner("HOT PATHS (cumulative)")
        print(profile_ticks(args.scenario, args.size, min(args.num_ticks, 20)))


if __name__ == "__main__":
    main()
