# ============================================================================
# RescueTower - Instrumented Sorts
#
# Purpose: The three in-place component orderings, each counting comparisons
#          and timing only its own comparison/swap work
# Inputs: Mutable sequence of Components (Catalog or list)
# Outputs: Metrics (comparisons, elapsed_ms); the sequence is reordered in place
# Dependencies: instrumentation.metrics, logging_utils
# Usage: metrics = bubble_sort_by_name(catalog)
#
# Changelog:
#   2026-03-02: Initial bubble/insertion/selection sorts
#   2026-03-06: Logging moved outside the timed block
# ============================================================================

from typing import MutableSequence

from RescueTower.catalog import Component
from RescueTower.instrumentation.metrics import Metrics, stopwatch
from RescueTower.logging_utils import get_logger

logger = get_logger(__name__)


def bubble_sort_by_name(components: MutableSequence[Component]) -> Metrics:
    """
    Sort ascending by name with bubble sort.

    Every adjacent pair of every pass is examined, with no early exit when a
    pass makes no swap, so the comparison count is always n(n-1)/2. A pair is
    swapped only when the left name is strictly greater; equal names never
    move past each other.

    Args:
        components: Sequence reordered in place

    Returns:
        Metrics for this run
    """
    n = len(components)
    comparisons = 0
    with stopwatch() as watch:
        for i in range(n - 1):
            for j in range(n - i - 1):
                comparisons += 1
                if components[j].name > components[j + 1].name:
                    components[j], components[j + 1] = components[j + 1], components[j]

    logger.debug(f"bubble_sort_by_name: n={n} comparisons={comparisons} elapsed_ms={watch.elapsed_ms:.4f}")
    return Metrics(comparisons=comparisons, elapsed_ms=watch.elapsed_ms)


def insertion_sort_by_category(components: MutableSequence[Component]) -> Metrics:
    """
    Sort ascending by category with insertion sort.

    Only strictly greater predecessors are shifted, so equal categories keep
    their relative order. One comparison is counted per leftward scan step,
    including the step that stops the scan: n-1 on sorted input, n(n-1)/2 on
    strictly reverse-sorted input.

    Args:
        components: Sequence reordered in place

    Returns:
        Metrics for this run
    """
    n = len(components)
    comparisons = 0
    with stopwatch() as watch:
        for i in range(1, n):
            key = components[i]
            j = i - 1
            while j >= 0:
                comparisons += 1
                if components[j].category > key.category:
                    components[j + 1] = components[j]
                    j -= 1
                else:
                    break
            components[j + 1] = key

    logger.debug(
        f"insertion_sort_by_category: n={n} comparisons={comparisons} elapsed_ms={watch.elapsed_ms:.4f}"
    )
    return Metrics(comparisons=comparisons, elapsed_ms=watch.elapsed_ms)


def selection_sort_by_priority(components: MutableSequence[Component]) -> Metrics:
    """
    Sort descending by priority with selection sort.

    Descending on purpose: the most important components come first. Each pass
    scans the whole unsorted suffix (one comparison per element, n(n-1)/2 in
    total regardless of input) and keeps the first maximum it meets; the swap
    is skipped when the maximum is already in place. Not stable.

    Args:
        components: Sequence reordered in place

    Returns:
        Metrics for this run
    """
    n = len(components)
    comparisons = 0
    with stopwatch() as watch:
        for i in range(n - 1):
            max_idx = i
            for j in range(i + 1, n):
                comparisons += 1
                if components[j].priority > components[max_idx].priority:
                    max_idx = j
            if max_idx != i:
                components[i], components[max_idx] = components[max_idx], components[i]

    logger.debug(
        f"selection_sort_by_priority: n={n} comparisons={comparisons} elapsed_ms={watch.elapsed_ms:.4f}"
    )
    return Metrics(comparisons=comparisons, elapsed_ms=watch.elapsed_ms)
