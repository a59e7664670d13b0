# ============================================================================
# RescueTower - Local File Sink
#
# Purpose: Persist session reports as JSON files for later inspection
# Inputs: Report objects
# Outputs: runs/report_<trace8>.json
# Dependencies: pathlib, reporting.schema
# Usage: LocalFileSink(config.sink.output_dir, indent=2).write(report)
#
# Changelog:
#   2026-03-04: Initial LocalFileSink
#   2026-03-05: Performance data now arrives inside report.extensions before write()
#   2026-03-12: Standalone class; only OS errors become SinkError
# ============================================================================

from pathlib import Path
from typing import Optional, Union

from RescueTower.errors import SinkError
from RescueTower.logging_utils import get_logger
from RescueTower.reporting.schema import Report, serialize_report_to_json

logger = get_logger(__name__)


class LocalFileSink:
    """
    Writes one JSON file per session report.

    Reports are named after the first eight characters of their trace id, so
    two sessions written to the same directory never overwrite each other in
    practice. The catalog inside a report is a record of the session, not
    something RescueTower reloads.
    """

    def __init__(self, output_dir: Union[str, Path] = "runs", indent: Optional[int] = None):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.indent = indent

    def path_for(self, report: Report) -> Path:
        return self.output_dir / f"report_{report.trace_id[:8]}.json"

    def write(self, report: Report) -> str:
        """
        Write the report and return the file path.

        Raises:
            SinkError: If the file cannot be written
        """
        filepath = self.path_for(report)
        text = serialize_report_to_json(report, indent=self.indent)
        try:
            filepath.write_text(text, encoding="utf-8")
        except OSError as e:
            raise SinkError(f"Failed to write report to {filepath}", details=str(e)) from e

        logger.info(
            f"Report {report.trace_id[:8]} written to {filepath} "
            f"({len(report.operations)} operation(s), {report.catalog.size}/{report.catalog.capacity} components)"
        )
        return str(filepath)
