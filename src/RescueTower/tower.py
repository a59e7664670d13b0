"""
RescueTower - Library API: RescueTower facade

Owns one Catalog and the knowledge of how it is currently ordered:
- add/load components (capacity and field validation)
- sort(key) with the key's fixed algorithm, returning the new order + metrics
- search(name) by binary search, warning when the catalog is not known to be
  name-sorted (the search itself never refuses to run)
- history of every outcome, and build_report() for the JSON report
"""

from contextlib import nullcontext
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from RescueTower.algorithms.registry import SortStrategy, get_sort_strategy
from RescueTower.algorithms.search import SearchResult, binary_search_by_name
from RescueTower.catalog import Catalog, Component, SortKey, validate_component
from RescueTower.config import Config
from RescueTower.errors import CapacityError
from RescueTower.instrumentation.metrics import Metrics
from RescueTower.instrumentation.performance import PerformanceMonitor
from RescueTower.logging_utils import get_logger
from RescueTower.sample_data import sample_components

logger = get_logger(__name__)

NOT_NAME_SORTED_WARNING = "Catalog is not known to be sorted by name; the search result may be wrong."


@dataclass(frozen=True)
class SortOutcome:
    """A finished sort: which strategy ran, its metrics, and the resulting order."""

    strategy: SortStrategy
    metrics: Metrics
    components: Tuple[Component, ...]

    @property
    def key(self) -> SortKey:
        return self.strategy.key


@dataclass(frozen=True)
class SearchOutcome:
    """A finished search plus the sort state it ran against."""

    target: str
    result: SearchResult
    component: Optional[Component]
    sorted_by: Optional[SortKey]
    warning: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.result.found

    @property
    def metrics(self) -> Metrics:
        return self.result.metrics

    @property
    def position(self) -> Optional[int]:
        """1-based position for display, None when not found."""
        return None if self.result.index is None else self.result.index + 1


Outcome = Union[SortOutcome, SearchOutcome]


class RescueTower:
    """
    Embeddable tower: a catalog plus the sort state that binary search relies on.

    ``sorted_by`` is set by each sort and cleared by every insertion or reload;
    nothing else inspects the order.
    """

    def __init__(self, config: Optional[Config] = None, monitor: Optional[PerformanceMonitor] = None):
        """
        Args:
            config: Configuration (defaults to Config())
            monitor: Optional performance monitor; every operation is recorded on it
        """
        self.config = config or Config()
        self.monitor = monitor
        self.catalog = Catalog(self.config.catalog)
        self.sorted_by: Optional[SortKey] = None
        self.history: List[Outcome] = []

    def _op(self, name: str, **metadata):
        return self.monitor.operation(name, **metadata) if self.monitor else nullcontext()

    @property
    def components(self) -> List[Component]:
        return self.catalog.snapshot()

    def __len__(self) -> int:
        return len(self.catalog)

    def add_component(self, name: str, category: str, priority: int) -> Component:
        """
        Append one component.

        Raises:
            CapacityError: If the catalog is full
            ComponentValidationError: If a field is out of bounds
        """
        component = Component(name=name, category=category, priority=priority)
        self.catalog.append(component)
        self.sorted_by = None
        logger.info(f"Added component {name!r} ({len(self.catalog)}/{self.catalog.capacity})")
        return component

    def load_components(self, components: Iterable[Component], replace: bool = True) -> int:
        """
        Load many components at once. All-or-nothing: nothing changes on error.

        Args:
            components: Components to add, in order
            replace: Clear the catalog first

        Returns:
            Number of components loaded

        Raises:
            CapacityError: If the result would exceed capacity
            ComponentValidationError: If any component is invalid
        """
        incoming = list(components)
        for component in incoming:
            validate_component(component, self.config.catalog)
        base = 0 if replace else len(self.catalog)
        if base + len(incoming) > self.catalog.capacity:
            raise CapacityError(
                f"Cannot load {len(incoming)} component(s): capacity is {self.catalog.capacity}",
                details=f"{base} already present" if base else None,
            )

        with self._op("load", count=len(incoming)):
            if replace:
                self.catalog.clear()
            self.catalog.extend(incoming)
        self.sorted_by = None
        logger.info(f"Loaded {len(incoming)} component(s) ({len(self.catalog)}/{self.catalog.capacity})")
        return len(incoming)

    def load_sample_data(self) -> int:
        """Replace the catalog contents with the built-in seed components."""
        return self.load_components(sample_components(), replace=True)

    def clear(self) -> None:
        self.catalog.clear()
        self.sorted_by = None

    def sort(self, key: str) -> SortOutcome:
        """
        Sort the catalog in place by ``key`` with that key's algorithm.

        Raises:
            UnknownStrategyError: If key is not name, category or priority
        """
        strategy = get_sort_strategy(key)
        with self._op(f"sort_by_{strategy.key}", algorithm=strategy.algorithm) as timing:
            metrics = strategy.sort(self.catalog)
            if timing is not None:
                timing.comparisons = metrics.comparisons
        self.sorted_by = strategy.key

        outcome = SortOutcome(strategy=strategy, metrics=metrics, components=tuple(self.catalog))
        self.history.append(outcome)
        logger.info(
            f"{strategy.label}: {metrics.comparisons} comparisons in {metrics.elapsed_ms:.4f} ms"
        )
        return outcome

    def search(self, name: str) -> SearchOutcome:
        """
        Binary-search the catalog for an exact name.

        Runs even when the catalog is not known to be name-sorted; the outcome
        then carries a warning and its result is unreliable. With
        ``config.search.verify_sorted`` an unsorted catalog raises instead.

        Raises:
            UnsortedCatalogError: Only with verify_sorted enabled
        """
        warning = None
        if self.sorted_by != "name":
            warning = NOT_NAME_SORTED_WARNING
            logger.warning(f"Searching for {name!r} while sorted_by={self.sorted_by!r}: {warning}")

        with self._op("binary_search_by_name") as timing:
            result = binary_search_by_name(
                self.catalog,
                name,
                verify_sorted=self.config.search.verify_sorted,
            )
            if timing is not None:
                timing.comparisons = result.metrics.comparisons

        component = self.catalog[result.index] if result.found else None
        outcome = SearchOutcome(
            target=name,
            result=result,
            component=component,
            sorted_by=self.sorted_by,
            warning=warning,
        )
        self.history.append(outcome)
        logger.info(
            f"Search {name!r}: {'found at index ' + str(result.index) if result.found else 'not found'} "
            f"({result.metrics.comparisons} comparisons)"
        )
        return outcome

    def build_report(self):
        """Build a Report of the current catalog and every outcome so far."""
        from RescueTower.reporting.report_builder import ReportBuilder

        return ReportBuilder(self.config).build(self)
