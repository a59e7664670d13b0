# ============================================================================
# RescueTower - Instrumentation Package
#
# Purpose: Per-operation metrics and session-level performance monitoring
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from RescueTower.instrumentation import Metrics, PerformanceMonitor
#
# Changelog:
#   2026-03-02: Initial instrumentation package (Metrics, stopwatch)
#   2026-03-05: Exported PerformanceMonitor and OperationTiming
# ============================================================================

from RescueTower.instrumentation.metrics import Metrics, Stopwatch, stopwatch
from RescueTower.instrumentation.performance import OperationTiming, PerformanceMonitor

__all__ = [
    "Metrics",
    "Stopwatch",
    "stopwatch",
    "PerformanceMonitor",
    "OperationTiming",
]
