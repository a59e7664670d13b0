# ============================================================================
# RescueTower - Report Validation
#
# Purpose: Validate Report objects against schema requirements and check
#          that the recorded numbers agree with each other
# Inputs: Report object
# Outputs: Validation result (bool or exception)
# Dependencies: reporting.schema, errors
# Usage: validate_report(report)
#
# Changelog:
#   2026-03-04: Initial validation
#   2026-03-07: Comparison-count bounds per sort algorithm
# ============================================================================

from RescueTower.errors import ValidationError
from RescueTower.logging_utils import get_logger
from RescueTower.reporting.schema import SCHEMA_VERSION, Report, SearchRecord, SortRecord

logger = get_logger(__name__)


def _max_search_comparisons(n: int) -> int:
    """floor(log2(n)) + 1 probes at most; 0 for an empty catalog."""
    return n.bit_length()


def validate_report(report: Report) -> bool:
    """
    Validate a Report object.

    Args:
        report: Report to validate

    Returns:
        True if valid

    Raises:
        ValidationError: If validation fails
    """
    errors = []

    if report.schema_version != SCHEMA_VERSION:
        errors.append(f"Invalid schema_version: {report.schema_version}")

    if not report.trace_id:
        errors.append("Missing trace_id")

    if not report.created_at_utc:
        errors.append("Missing created_at_utc")

    catalog = report.catalog
    if catalog.size != len(catalog.components):
        errors.append(f"catalog.size {catalog.size} != {len(catalog.components)} components")
    if catalog.size > catalog.capacity:
        errors.append(f"catalog.size {catalog.size} exceeds capacity {catalog.capacity}")

    sorts = 0
    searches = 0
    total = 0
    for i, op in enumerate(report.operations):
        total += op.metrics.comparisons
        if isinstance(op, SortRecord):
            sorts += 1
            n = len(op.order)
            full = n * (n - 1) // 2
            if op.key in ("name", "priority") and op.metrics.comparisons != full:
                errors.append(f"operations[{i}]: {op.algorithm} on {n} items must make {full} comparisons")
            elif op.key == "category" and not (max(n - 1, 0) <= op.metrics.comparisons <= full):
                errors.append(f"operations[{i}]: {op.algorithm} comparisons out of range [{n - 1}, {full}]")
        elif isinstance(op, SearchRecord):
            searches += 1
            if op.found != (op.index is not None):
                errors.append(f"operations[{i}]: found={op.found} but index={op.index}")
            if op.metrics.comparisons > _max_search_comparisons(catalog.capacity):
                errors.append(f"operations[{i}]: too many comparisons for a binary search")

    if report.summary.sorts != sorts or report.summary.searches != searches:
        errors.append("Summary operation counts do not match operations")
    if report.summary.total_comparisons != total:
        errors.append(f"summary.total_comparisons {report.summary.total_comparisons} != {total}")

    if errors:
        error_msg = "Report validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        logger.error(error_msg)
        raise ValidationError("Report validation failed", details="\n".join(errors))

    logger.debug("Report validation passed")
    return True
