# ============================================================================
# RescueTower - Binary Search Tests
#
# Purpose: Found/not-found contract, comparison counts, unsorted precondition
# Dependencies: pytest, RescueTower
# Usage: pytest tests/test_search.py -v
# ============================================================================

import pytest

from RescueTower.algorithms.search import SearchResult, binary_search_by_name, first_unsorted_index
from RescueTower.algorithms.sorting import bubble_sort_by_name, selection_sort_by_priority
from RescueTower.catalog import Component
from RescueTower.errors import UnsortedCatalogError


@pytest.fixture
def name_sorted(components):
    bubble_sort_by_name(components)
    return components


class TestBinarySearchByName:
    def test_finds_chip_central(self, name_sorted):
        result = binary_search_by_name(name_sorted, "Chip Central")
        assert result.found
        assert result.index == 2
        assert name_sorted[result.index].name == "Chip Central"
        assert result.metrics.comparisons == 3

    def test_nonexistent_is_not_found(self, name_sorted):
        result = binary_search_by_name(name_sorted, "Nonexistent")
        assert not result.found
        assert result.index is None
        assert 1 <= result.metrics.comparisons <= 4

    @pytest.mark.parametrize(
        "name",
        [
            "Antena Satelite",
            "Base Estrutural",
            "Chip Central",
            "Escudo Termico",
            "Motor Propulsor",
            "Painel Solar",
            "Sistema Navegacao",
            "Tanque Combustivel",
        ],
    )
    def test_every_name_found_at_its_index(self, name_sorted, name):
        result = binary_search_by_name(name_sorted, name)
        assert name_sorted[result.index].name == name
        assert result.metrics.comparisons <= 4

    def test_exact_match_only(self, name_sorted):
        assert not binary_search_by_name(name_sorted, "chip central").found
        assert not binary_search_by_name(name_sorted, "Chip").found
        assert not binary_search_by_name(name_sorted, "Chip Central ").found

    def test_empty_collection(self):
        result = binary_search_by_name([], "Chip Central")
        assert result == SearchResult(index=None, metrics=result.metrics)
        assert result.metrics.comparisons == 0

    def test_singleton(self):
        items = [Component("Solo", "controle", 1)]
        assert binary_search_by_name(items, "Solo").index == 0
        miss = binary_search_by_name(items, "Other")
        assert miss.index is None
        assert miss.metrics.comparisons == 1

    def test_duplicates_return_a_matching_index(self):
        items = [
            Component("Alpha", "a", 1),
            Component("Twin", "a", 1),
            Component("Twin", "b", 2),
            Component("Twin", "c", 3),
            Component("Zulu", "a", 1),
        ]
        result = binary_search_by_name(items, "Twin")
        assert items[result.index].name == "Twin"

    def test_walkthrough(self, trio):
        selection_sort_by_priority(trio)
        bubble_sort_by_name(trio)
        result = binary_search_by_name(trio, "Chip")
        assert result.index == 1
        assert result.metrics.comparisons == 1


class TestUnsortedPrecondition:
    def test_unsorted_input_does_not_raise_by_default(self, components):
        selection_sort_by_priority(components)
        # Result is unspecified; only the absence of an error is guaranteed
        result = binary_search_by_name(components, "Antena Satelite")
        assert isinstance(result, SearchResult)

    def test_unsorted_input_can_miss_a_present_name(self):
        items = [Component("Zulu", "x", 1), Component("Mike", "x", 1), Component("Alpha", "x", 1)]
        result = binary_search_by_name(items, "Alpha")
        assert not result.found

    def test_verify_sorted_raises_on_unsorted(self, components):
        with pytest.raises(UnsortedCatalogError) as exc_info:
            binary_search_by_name(components, "Chip Central", verify_sorted=True)
        assert "not sorted by name" in exc_info.value.message

    def test_verify_sorted_does_not_change_comparisons(self, name_sorted):
        plain = binary_search_by_name(name_sorted, "Painel Solar")
        verified = binary_search_by_name(name_sorted, "Painel Solar", verify_sorted=True)
        assert plain.index == verified.index
        assert plain.metrics.comparisons == verified.metrics.comparisons

    def test_first_unsorted_index(self, name_sorted):
        assert first_unsorted_index(name_sorted) is None
        assert first_unsorted_index([]) is None
        items = [Component("A", "x", 1), Component("C", "x", 1), Component("B", "x", 1)]
        assert first_unsorted_index(items) == 1
