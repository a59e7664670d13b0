# ============================================================================
# RescueTower - Library API (RescueTower facade) Tests
# ============================================================================

import logging

import pytest

from RescueTower.catalog import Component
from RescueTower.config import Config
from RescueTower.errors import CapacityError, ComponentValidationError, UnknownStrategyError, UnsortedCatalogError
from RescueTower.instrumentation.performance import PerformanceMonitor
from RescueTower.tower import NOT_NAME_SORTED_WARNING, RescueTower


class TestLoading:
    def test_load_sample_data(self, tower):
        assert len(tower) == 8
        assert tower.sorted_by is None

    def test_load_replaces_contents(self, tower):
        tower.load_components([Component("Solo", "controle", 1)])
        assert [c.name for c in tower.components] == ["Solo"]

    def test_load_appends_when_not_replacing(self, tower):
        tower.load_components([Component("Solo", "controle", 1)], replace=False)
        assert len(tower) == 9

    def test_load_over_capacity_changes_nothing(self, tower):
        extra = [Component(f"Part {i}", "controle", 5) for i in range(13)]
        with pytest.raises(CapacityError):
            tower.load_components(extra, replace=False)
        assert len(tower) == 8

    def test_load_invalid_changes_nothing(self, tower):
        with pytest.raises(ComponentValidationError):
            tower.load_components([Component("Ok", "controle", 5), Component("Bad", "controle", 0)])
        assert len(tower) == 8

    def test_add_component_clears_sort_state(self, tower):
        tower.sort("name")
        assert tower.sorted_by == "name"
        tower.add_component("Zeta", "suporte", 2)
        assert tower.sorted_by is None
        assert tower.components[-1] == Component("Zeta", "suporte", 2)

    def test_add_component_when_full(self):
        tower = RescueTower(Config())
        for i in range(20):
            tower.add_component(f"Part {i:02d}", "controle", 5)
        with pytest.raises(CapacityError):
            tower.add_component("Overflow", "controle", 5)

    def test_clear(self, tower):
        tower.sort("priority")
        tower.clear()
        assert len(tower) == 0
        assert tower.sorted_by is None


class TestSort:
    @pytest.mark.parametrize(
        "key, algorithm, comparisons",
        [("name", "Bubble Sort", 28), ("category", "Insertion Sort", 16), ("priority", "Selection Sort", 28)],
    )
    def test_sort_outcome(self, tower, key, algorithm, comparisons):
        outcome = tower.sort(key)
        assert outcome.key == key
        assert outcome.strategy.algorithm == algorithm
        assert outcome.metrics.comparisons == comparisons
        assert list(outcome.components) == tower.components
        assert tower.sorted_by == key

    def test_outcome_snapshot_is_not_affected_by_later_sorts(self, tower):
        by_name = tower.sort("name")
        tower.sort("priority")
        assert [c.name for c in by_name.components][0] == "Antena Satelite"
        assert tower.components[0].name == "Chip Central"

    def test_unknown_key(self, tower):
        with pytest.raises(UnknownStrategyError):
            tower.sort("weight")
        assert tower.history == []

    def test_sort_empty_tower(self):
        outcome = RescueTower().sort("name")
        assert outcome.metrics.comparisons == 0
        assert outcome.components == ()


class TestSearch:
    def test_search_after_name_sort(self, tower):
        tower.sort("name")
        outcome = tower.search("Chip Central")
        assert outcome.found
        assert outcome.result.index == 2
        assert outcome.position == 3
        assert outcome.component == Component("Chip Central", "controle", 10)
        assert outcome.warning is None
        assert outcome.sorted_by == "name"

    def test_search_missing(self, tower):
        tower.sort("name")
        outcome = tower.search("Nonexistent")
        assert not outcome.found
        assert outcome.component is None
        assert outcome.position is None

    def test_search_without_name_sort_warns_but_runs(self, tower, caplog):
        tower.sort("priority")
        with caplog.at_level(logging.WARNING, logger="RescueTower.tower"):
            outcome = tower.search("Chip Central")
        assert outcome.warning == NOT_NAME_SORTED_WARNING
        assert outcome.sorted_by == "priority"
        assert outcome.metrics.comparisons >= 1
        assert any("sorted_by='priority'" in r.message for r in caplog.records)

    def test_search_with_verification_enabled(self):
        config = Config()
        config.search.verify_sorted = True
        tower = RescueTower(config)
        tower.load_sample_data()
        with pytest.raises(UnsortedCatalogError):
            tower.search("Chip Central")
        tower.sort("name")
        assert tower.search("Chip Central").found

    def test_search_empty_tower(self):
        outcome = RescueTower().search("Chip Central")
        assert not outcome.found
        assert outcome.metrics.comparisons == 0

    def test_walkthrough(self, trio):
        tower = RescueTower()
        tower.load_components(trio)
        by_priority = tower.sort("priority")
        assert [c.name for c in by_priority.components] == ["Chip", "Motor", "Base"]
        assert by_priority.metrics.comparisons == 3
        by_name = tower.sort("name")
        assert [c.name for c in by_name.components] == ["Base", "Chip", "Motor"]
        assert by_name.metrics.comparisons == 3
        found = tower.search("Chip")
        assert found.result.index == 1
        assert len(tower.history) == 3


class TestMonitor:
    def test_operations_recorded(self):
        monitor = PerformanceMonitor(mode="summary")
        tower = RescueTower(monitor=monitor)
        tower.load_sample_data()
        tower.sort("name")
        tower.search("Painel Solar")
        names = [t.operation_name for t in monitor.timings]
        assert names == ["load", "sort_by_name", "binary_search_by_name"]
        assert monitor.timings[0].comparisons is None
        assert monitor.timings[1].comparisons == 28
        assert monitor.total_comparisons() == 28 + monitor.timings[2].comparisons
