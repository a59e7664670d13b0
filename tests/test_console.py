# ============================================================================
# RescueTower - Console Rendering Tests
#
# Purpose: Text blocks printed by the CLI and the menu
# Dependencies: pytest, RescueTower
# Usage: pytest tests/test_console.py -v
# ============================================================================

from RescueTower.reporting.console import (
    NOT_FOUND_HINT,
    format_component_table,
    format_search_outcome,
    format_sort_outcome,
)


def test_not_found_always_carries_hint(tower):
    tower.sort("name")
    outcome = tower.search("Nonexistent")
    assert outcome.warning is None
    text = format_search_outcome(outcome)
    assert "[NOT FOUND] Component 'Nonexistent' not found" in text
    assert NOT_FOUND_HINT in text
    assert "Sort by NAME first." not in text


def test_found_on_sorted_catalog_has_no_hint(tower):
    tower.sort("name")
    text = format_search_outcome(tower.search("Chip Central"))
    assert "├─ Position:    3" in text
    assert NOT_FOUND_HINT not in text
    assert "⚠" not in text


def test_found_on_unsorted_catalog_warns(tower):
    text = format_search_outcome(tower.search("Chip Central"))
    assert "Sort by NAME first." in text


def test_sort_block(tower):
    text = format_sort_outcome(tower.sort("priority"))
    assert text.startswith("[DONE] Selection Sort by PRIORITY (descending)")
    assert "├─ Comparisons: 28" in text


def test_table_numbering(tower):
    text = format_component_table(tower.components, 20)
    assert "Total: 8/20 components" in text
    assert "[01] Chip Central" in text
