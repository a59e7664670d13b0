# ============================================================================
# RescueTower - Algorithms Package
#
# Purpose: Instrumented sorts, binary search and the sort strategy registry
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from RescueTower.algorithms import bubble_sort_by_name, binary_search_by_name
#
# Changelog:
#   2026-03-02: Initial algorithms package
#   2026-03-03: Exported SortStrategy registry
# ============================================================================

from RescueTower.algorithms.registry import SORT_STRATEGIES, SortStrategy, get_sort_strategy
from RescueTower.algorithms.search import SearchResult, binary_search_by_name, first_unsorted_index
from RescueTower.algorithms.sorting import (
    bubble_sort_by_name,
    insertion_sort_by_category,
    selection_sort_by_priority,
)

__all__ = [
    "bubble_sort_by_name",
    "insertion_sort_by_category",
    "selection_sort_by_priority",
    "binary_search_by_name",
    "first_unsorted_index",
    "SearchResult",
    "SortStrategy",
    "SORT_STRATEGIES",
    "get_sort_strategy",
]
