# ============================================================================
# RescueTower - Package Initialization
#
# Purpose: Package-level exports and version information
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from RescueTower import RescueTower, Component
#
# Changelog:
#   2026-03-02: Initial package setup
# ============================================================================

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from RescueTower.algorithms import (
    SearchResult,
    binary_search_by_name,
    bubble_sort_by_name,
    insertion_sort_by_category,
    selection_sort_by_priority,
)
from RescueTower.catalog import Catalog, Component
from RescueTower.config import Config
from RescueTower.instrumentation.metrics import Metrics
from RescueTower.reporting.schema import Report
from RescueTower.tower import RescueTower, SearchOutcome, SortOutcome

__all__ = [
    "__version__",
    "Catalog",
    "Component",
    "Config",
    "Metrics",
    "Report",
    "RescueTower",
    "SearchOutcome",
    "SearchResult",
    "SortOutcome",
    "binary_search_by_name",
    "bubble_sort_by_name",
    "insertion_sort_by_category",
    "selection_sort_by_priority",
]
