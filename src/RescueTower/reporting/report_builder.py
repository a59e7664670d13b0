# ============================================================================
# RescueTower - Report Builder
#
# Purpose: Build Report objects from a RescueTower session
# Inputs: RescueTower (catalog + history), Config
# Outputs: Complete Report object
# Dependencies: reporting.schema, tower
# Usage: builder = ReportBuilder(config); report = builder.build(tower)
#
# Changelog:
#   2026-03-04: Initial report builder
#   2026-03-09: Searches against a catalog not sorted by name add an
#               UNSORTED_SEARCH warning
# ============================================================================

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING, List

from RescueTower.config import Config
from RescueTower.instrumentation.metrics import Metrics
from RescueTower.logging_utils import get_logger
from RescueTower.reporting.schema import (
    CatalogInfo,
    ComponentInfo,
    MetricsInfo,
    Report,
    SearchRecord,
    SortRecord,
    Summary,
    Warning,
)

if TYPE_CHECKING:
    from RescueTower.tower import RescueTower

logger = get_logger(__name__)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _metrics_info(metrics: Metrics) -> MetricsInfo:
    return MetricsInfo(comparisons=metrics.comparisons, elapsed_ms=metrics.elapsed_ms)


class ReportBuilder:
    """
    Build structured Report objects from a tower session.
    """

    def __init__(self, config: Config):
        self.config = config

    def build(self, tower: "RescueTower") -> Report:
        """
        Build a report of the tower's current catalog and its outcome history.

        Args:
            tower: Session to report on

        Returns:
            Report (extensions['performance'] is filled in when the tower has a monitor)
        """
        from RescueTower.tower import SortOutcome

        operations: List = []
        warnings: List[Warning] = []
        summary = Summary()

        for outcome in tower.history:
            metrics = outcome.metrics
            summary.total_comparisons += metrics.comparisons
            summary.total_elapsed_ms += metrics.elapsed_ms
            if isinstance(outcome, SortOutcome):
                summary.sorts += 1
                operations.append(
                    SortRecord(
                        key=outcome.strategy.key,
                        algorithm=outcome.strategy.algorithm,
                        direction=outcome.strategy.direction,
                        metrics=_metrics_info(metrics),
                        order=[c.name for c in outcome.components],
                    )
                )
            else:
                summary.searches += 1
                operations.append(
                    SearchRecord(
                        target=outcome.target,
                        found=outcome.found,
                        index=outcome.result.index,
                        metrics=_metrics_info(metrics),
                        sorted_by=outcome.sorted_by,
                    )
                )
                if outcome.warning:
                    warnings.append(
                        Warning(code="UNSORTED_SEARCH", message=f"Search for {outcome.target!r}: {outcome.warning}")
                    )

        catalog = CatalogInfo(
            capacity=tower.catalog.capacity,
            size=len(tower.catalog),
            sorted_by=tower.sorted_by,
            components=[
                ComponentInfo(name=c.name, category=c.category, priority=c.priority) for c in tower.catalog
            ],
        )

        report = Report(
            trace_id=str(uuid.uuid4()),
            created_at_utc=_utc_timestamp(),
            catalog=catalog,
            operations=operations,
            summary=summary,
            warnings=warnings,
        )

        if tower.monitor is not None:
            report.extensions["performance"] = tower.monitor.build_summary_dict()

        logger.debug(
            f"Report {report.trace_id[:8]} built: {summary.sorts} sort(s), {summary.searches} search(es)"
        )
        return report
