# ============================================================================
# RescueTower - Console Rendering
#
# Purpose: Plain-text blocks for the CLI and the interactive menu
# Inputs: Components, SortOutcome, SearchOutcome
# Outputs: Strings (callers decide where to print)
# Dependencies: tower
# Usage: print(format_component_table(tower.components, capacity=20))
#
# Changelog:
#   2026-03-06: Initial console rendering
#   2026-03-12: Not-found results always carry the sort-by-name hint
# ============================================================================

from typing import Sequence

from RescueTower.catalog import Component
from RescueTower.tower import SearchOutcome, SortOutcome

RULE = "=" * 60
NOT_FOUND_HINT = "⚠  Check that the catalog is sorted by NAME!"


def format_component_table(components: Sequence[Component], capacity: int) -> str:
    """Numbered listing of the catalog, 1-based like the positions users see."""
    lines = [RULE, "      TOWER COMPONENTS", RULE]
    if not components:
        lines.append("No components registered.")
    else:
        lines.append(f"Total: {len(components)}/{capacity} components")
        lines.append("")
        for i, c in enumerate(components, start=1):
            lines.append(f"[{i:02d}] {c.name:<25s} | Category: {c.category:<12s} | Priority: {c.priority}")
    lines.append(RULE)
    return "\n".join(lines)


def format_sort_outcome(outcome: SortOutcome) -> str:
    strategy = outcome.strategy
    return "\n".join(
        [
            f"[DONE] {strategy.algorithm} by {strategy.key.upper()} ({strategy.direction})",
            f"├─ Comparisons: {outcome.metrics.comparisons}",
            f"└─ Time: {outcome.metrics.elapsed_ms:.4f} ms",
        ]
    )


def format_search_outcome(outcome: SearchOutcome) -> str:
    metrics = outcome.metrics
    if outcome.found and outcome.component is not None:
        c = outcome.component
        lines = [
            "[FOUND] Key component located",
            f"├─ Name:        {c.name}",
            f"├─ Category:    {c.category}",
            f"├─ Priority:    {c.priority}",
            f"├─ Position:    {outcome.position}",
            f"├─ Comparisons: {metrics.comparisons}",
            f"└─ Time:        {metrics.elapsed_ms:.4f} ms",
        ]
    else:
        lines = [
            f"[NOT FOUND] Component {outcome.target!r} not found",
            f"├─ Comparisons: {metrics.comparisons}",
            f"└─ Time: {metrics.elapsed_ms:.4f} ms",
            NOT_FOUND_HINT,
        ]
    if outcome.warning:
        lines.append(f"⚠  {outcome.warning} Sort by NAME first.")
    return "\n".join(lines)
