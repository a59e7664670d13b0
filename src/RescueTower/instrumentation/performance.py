# ============================================================================
# RescueTower - Performance Monitor
#
# Purpose: Session-level timing of tower operations (sorts, searches, loads)
# Inputs: Context manager calls around operations
# Outputs: Summary (operations, totals, unaccounted time) and optional per-operation breakdown
# Dependencies: time, contextlib
# Usage: with monitor.operation("sort_by_name") as timing: ...
#
# Changelog:
#   2026-03-05: Initial performance monitor for --perf
#   2026-03-07: Comparison counts carried on OperationTiming so the summary can
#               report totals next to wall time
# ============================================================================

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional
import time


@dataclass
class OperationTiming:
    """Timing for a single operation."""
    operation_name: str
    duration_ms: float = 0.0
    comparisons: Optional[int] = None  # None for operations that compare nothing (loads)
    metadata: Dict[str, Any] = field(default_factory=dict)


class PerformanceMonitor:
    """
    Lightweight performance monitor. Tracks wall time per operation via context managers.
    Sequential execution only; no overlapping.
    """

    def __init__(self, mode: str = "summary"):
        self.mode = mode  # "summary" | "detailed"
        self.timings: List[OperationTiming] = []
        self._run_start_time: Optional[float] = None
        self._run_end_time: Optional[float] = None
        self.total_wall_time_ms: float = 0.0

    def mark_run_start(self) -> None:
        """Mark the start of the monitored session (for total_wall_time_ms)."""
        self._run_start_time = time.perf_counter()

    def mark_run_end(self) -> None:
        """Mark the end of the monitored session (for total_wall_time_ms)."""
        self._run_end_time = time.perf_counter()
        if self._run_start_time is not None:
            self.total_wall_time_ms = (self._run_end_time - self._run_start_time) * 1000

    @contextmanager
    def operation(self, name: str, **metadata: Any) -> Iterator[OperationTiming]:
        """Time an operation.

        The duration here includes facade overhead (logging, snapshots); the
        algorithm-only time is what the operation's own Metrics report.

        Args:
            name: Operation name
            **metadata: Additional metadata to store with the timing
        """
        start = time.perf_counter()
        timing = OperationTiming(operation_name=name, metadata=metadata)
        self.timings.append(timing)
        try:
            yield timing
        finally:
            timing.duration_ms = (time.perf_counter() - start) * 1000

    def _sum_operation_ms(self) -> float:
        return sum(t.duration_ms for t in self.timings)

    def total_comparisons(self) -> int:
        return sum(t.comparisons or 0 for t in self.timings)

    def build_summary_dict(self) -> Dict[str, Any]:
        """Build the object for Report.extensions['performance']."""
        total = self.total_wall_time_ms or self._sum_operation_ms()
        operations = []
        for t in self.timings:
            entry: Dict[str, Any] = {
                "name": t.operation_name,
                "ms": round(t.duration_ms, 4),
                "pct": round(100.0 * t.duration_ms / total, 2) if total else 0.0,
            }
            if t.comparisons is not None:
                entry["comparisons"] = t.comparisons
            operations.append(entry)

        unaccounted_ms = total - self._sum_operation_ms()
        out: Dict[str, Any] = {
            "mode": self.mode,
            "total_wall_time_ms": round(total, 4),
            "total_comparisons": self.total_comparisons(),
            "operations": operations,
            "unaccounted_time": {
                "ms": round(unaccounted_ms, 4),
                "pct": round(100.0 * unaccounted_ms / total, 2) if total else 0.0,
            },
        }
        if self.mode == "detailed":
            out["breakdown"] = self.build_detailed_breakdown()
        return out

    def build_detailed_breakdown(self) -> Dict[str, Any]:
        """Per-operation-name statistics over repeated runs."""
        grouped: Dict[str, List[OperationTiming]] = {}
        for t in self.timings:
            grouped.setdefault(t.operation_name, []).append(t)

        breakdown: Dict[str, Any] = {}
        for name, samples in grouped.items():
            ms = [s.duration_ms for s in samples]
            d: Dict[str, Any] = {
                "count": len(samples),
                "min_ms": round(min(ms), 4),
                "max_ms": round(max(ms), 4),
                "avg_ms": round(sum(ms) / len(ms), 4),
            }
            comparisons = [s.comparisons for s in samples if s.comparisons is not None]
            if comparisons:
                d["comparisons"] = {
                    "min": min(comparisons),
                    "max": max(comparisons),
                    "total": sum(comparisons),
                }
            breakdown[name] = d
        return breakdown
