# ============================================================================
# RescueTower - Reporting Package
#
# Purpose: Report schema, building, validation and console rendering
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from RescueTower.reporting import Report, ReportBuilder, validate_report
#
# Changelog:
#   2026-03-04: Initial reporting package
# ============================================================================

from RescueTower.reporting.report_builder import ReportBuilder
from RescueTower.reporting.schema import Report
from RescueTower.reporting.validation import validate_report

__all__ = ["Report", "ReportBuilder", "validate_report"]
