# ============================================================================
# RescueTower - Operation Metrics
#
# Purpose: Comparison count + elapsed time pair returned by every sort/search
# Inputs: Context manager around the algorithm body
# Outputs: Metrics value
# Dependencies: time, contextlib, dataclasses
# Usage: with stopwatch() as sw: ...; Metrics(comparisons, sw.elapsed_ms)
#
# Changelog:
#   2026-03-02: Initial Metrics and stopwatch
# ============================================================================

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Metrics:
    """Observation of one instrumented operation."""

    comparisons: int
    elapsed_ms: float


@dataclass
class Stopwatch:
    """Elapsed wall time of a `stopwatch()` block, filled in when the block exits."""

    elapsed_ms: float = 0.0


@contextmanager
def stopwatch() -> Iterator[Stopwatch]:
    """Time a block with the monotonic high-resolution clock."""
    watch = Stopwatch()
    start = time.perf_counter()
    try:
        yield watch
    finally:
        watch.elapsed_ms = (time.perf_counter() - start) * 1000
