# ============================================================================
# RescueTower - Sort Strategy Registry
#
# Purpose: Single source of truth mapping a sort key to its algorithm
# Inputs: Sort key ("name", "category", "priority")
# Outputs: SortStrategy dataclass
# Dependencies: algorithms.sorting, errors
# Usage: strategy = get_sort_strategy("priority"); metrics = strategy.sort(catalog)
#
# Changelog:
#   2026-03-03: Initial registry (one fixed algorithm per key)
# ============================================================================

from dataclasses import dataclass
from typing import Callable, Dict, Literal, MutableSequence

from RescueTower.algorithms.sorting import (
    bubble_sort_by_name,
    insertion_sort_by_category,
    selection_sort_by_priority,
)
from RescueTower.catalog import Component, SortKey
from RescueTower.errors import UnknownStrategyError
from RescueTower.instrumentation.metrics import Metrics

Direction = Literal["ascending", "descending"]


@dataclass(frozen=True)
class SortStrategy:
    """
    A sort key bound to the one algorithm that orders by it.

    Keys are deliberately not interchangeable: each algorithm carries its own
    comparison-count contract and tie-break rule.
    """

    key: SortKey
    algorithm: str
    direction: Direction
    stable: bool
    sort: Callable[[MutableSequence[Component]], Metrics]

    @property
    def label(self) -> str:
        return f"{self.algorithm} by {self.key}"


SORT_STRATEGIES: Dict[str, SortStrategy] = {
    "name": SortStrategy(
        key="name",
        algorithm="Bubble Sort",
        direction="ascending",
        stable=True,
        sort=bubble_sort_by_name,
    ),
    "category": SortStrategy(
        key="category",
        algorithm="Insertion Sort",
        direction="ascending",
        stable=True,
        sort=insertion_sort_by_category,
    ),
    "priority": SortStrategy(
        key="priority",
        algorithm="Selection Sort",
        direction="descending",
        stable=False,
        sort=selection_sort_by_priority,
    ),
}


def get_sort_strategy(key: str) -> SortStrategy:
    """
    Look up the strategy for a sort key.

    Raises:
        UnknownStrategyError: If no strategy is registered for the key
    """
    try:
        return SORT_STRATEGIES[key]
    except KeyError:
        raise UnknownStrategyError(
            f"Unknown sort key: {key!r}",
            details=f"Available: {', '.join(SORT_STRATEGIES)}",
        ) from None
