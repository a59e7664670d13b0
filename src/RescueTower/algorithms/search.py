# ============================================================================
# RescueTower - Instrumented Binary Search
#
# Purpose: Binary search by name over a catalog the caller keeps name-sorted
# Inputs: Sequence of Components, target name
# Outputs: SearchResult (index or None, Metrics)
# Dependencies: instrumentation.metrics, errors, logging_utils
# Usage: result = binary_search_by_name(catalog, "Chip Central")
#
# Changelog:
#   2026-03-02: Initial binary search
#   2026-03-09: Optional verify_sorted pass (off by default, not counted)
# ============================================================================

from dataclasses import dataclass
from typing import Optional, Sequence

from RescueTower.catalog import Component
from RescueTower.errors import UnsortedCatalogError
from RescueTower.instrumentation.metrics import Metrics, stopwatch
from RescueTower.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a binary search: matching index (None when not found) plus metrics."""

    index: Optional[int]
    metrics: Metrics

    @property
    def found(self) -> bool:
        return self.index is not None


def first_unsorted_index(components: Sequence[Component]) -> Optional[int]:
    """Index i of the first pair with name(i) > name(i+1), or None if name-sorted."""
    for i in range(len(components) - 1):
        if components[i].name > components[i + 1].name:
            return i
    return None


def binary_search_by_name(
    components: Sequence[Component],
    target: str,
    verify_sorted: bool = False,
) -> SearchResult:
    """
    Find a component whose name equals ``target`` exactly.

    Precondition: ``components`` is sorted ascending by name. It is NOT checked
    unless ``verify_sorted`` is set; on an unsorted sequence the result is
    unspecified (a wrong "not found", or any index), never an exception. With
    duplicate names any one matching index may be returned.

    Args:
        components: Name-sorted sequence to search
        target: Exact name to look for
        verify_sorted: Run an O(n) sortedness check first (excluded from metrics)

    Returns:
        SearchResult with the matching index or None

    Raises:
        UnsortedCatalogError: Only when verify_sorted is set and the check fails
    """
    if verify_sorted:
        bad = first_unsorted_index(components)
        if bad is not None:
            raise UnsortedCatalogError(
                "Catalog is not sorted by name; sort by name before searching",
                details=f"{components[bad].name!r} precedes {components[bad + 1].name!r} at index {bad}",
            )

    comparisons = 0
    found: Optional[int] = None
    with stopwatch() as watch:
        low = 0
        high = len(components) - 1
        while low <= high:
            mid = low + (high - low) // 2
            comparisons += 1
            name = components[mid].name
            if name == target:
                found = mid
                break
            if name < target:
                low = mid + 1
            else:
                high = mid - 1

    logger.debug(
        f"binary_search_by_name: target={target!r} index={found} comparisons={comparisons} "
        f"elapsed_ms={watch.elapsed_ms:.4f}"
    )
    return SearchResult(index=found, metrics=Metrics(comparisons=comparisons, elapsed_ms=watch.elapsed_ms))
