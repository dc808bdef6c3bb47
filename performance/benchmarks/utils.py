# performance/benchmarks/utils.py
"""Timing, statistics and report helpers for the headless benchmarks."""
from __future__ import annotations

import time
from dataclasses import dataclass
from statistics import mean, median, stdev
from typing import Sequence


class Timer:
    """Context manager recording wall time of its block in `elapsed` (seconds)."""

    def __enter__(self) -> "Timer":
        self.start = time.perf_counter()
        self.elapsed = 0.0
        return self

    def __exit__(self, *exc_info) -> None:
        self.elapsed = time.perf_counter() - self.start


@dataclass
class TickStats:
    """Summary of per-tick durations, in seconds."""
    count: int
    mean: float
    median: float
    stdev: float
    low: float
    high: float

    @classmethod
    def from_samples(cls, samples: Sequence[float]) -> "TickStats":
        if not samples:
            return cls(0, 0.0, 0.0, 0.0, 0.0, 0.0)
        return cls(
            count=len(samples),
            mean=mean(samples),
            median=median(samples),
            stdev=stdev(samples) if len(samples) > 1 else 0.0,
            low=min(samples),
            high=max(samples),
        )


def cells_per_second(num_cells: int, seconds: float) -> float:
    """Lattice cells advected per second for one update taking `seconds`."""
    return num_cells / seconds if seconds > 0 else 0.0


# =============================================================================
# Formatting
# =============================================================================

def ms(seconds: float) -> str:
    return f"{seconds * 1000:.2f}ms"


def megabytes(num_bytes: int) -> str:
    return f"{num_bytes / (1024 * 1024):.1f} MB"


def rate(per_second: float) -> str:
    """Compact rate: '1.23M/s', '45.6k/s', '789/s'."""
    if per_second >= 1e6:
        return f"{per_second / 1e6:.2f}M/s"
    if per_second >= 1e3:
        return f"{per_second / 1e3:.1f}k/s"
    return f"{per_second:.0f}/s"


# =============================================================================
# Console output
# =============================================================================

RULE_WIDTH = 72


def banner(title: str) -> None:
    rule = "-" * RULE_WIDTH
    print(f"\n{rule}\n{title}\n{rule}")


def metric(label: str, value: str) -> None:
    print(f"  {label:<22} {value}")


def progress(done: int, total: int, label: str = "Ticks") -> None:
    """Single-line progress counter; finishes with a newline once done == total."""
    pct = 100.0 * done / total if total else 100.0
    end = "\n" if done >= total else "\r"
    print(f"    {label}: {done}/{total} ({pct:.0f}%)", end=end)
