# ============================================================================
# RescueTower - Report Schema
#
# Purpose: Pydantic models for JSON run reports
# Inputs: None (schema definitions)
# Outputs: Type-safe report models
# Dependencies: pydantic
# Usage: report = Report(...); text = serialize_report_to_json(report, indent=2)
#
# Changelog:
#   2026-03-04: Initial schema (1.0.0)
#   2026-03-09: SearchRecord.sorted_by and warnings for searches run against a
#               catalog not known to be name-sorted
#   2026-03-12: serialize_report_to_json moved here from a separate utils module
# ============================================================================

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

SCHEMA_VERSION = "1.0.0"


class ComponentInfo(BaseModel):
    """One component as stored in the catalog."""

    name: str
    category: str
    priority: int


class MetricsInfo(BaseModel):
    """Comparison count and algorithm-only elapsed time."""

    comparisons: int = Field(ge=0)
    elapsed_ms: float = Field(ge=0)


class SortRecord(BaseModel):
    """A sort that ran during the session."""

    kind: Literal["sort"] = "sort"
    key: str
    algorithm: str
    direction: str
    metrics: MetricsInfo
    order: List[str] = Field(default_factory=list, description="Component names in the order the sort left them.")


class SearchRecord(BaseModel):
    """A binary search that ran during the session."""

    kind: Literal["search"] = "search"
    target: str
    found: bool
    index: Optional[int] = None
    metrics: MetricsInfo
    sorted_by: Optional[str] = Field(
        default=None,
        description="Sort key in effect when the search ran. Anything but 'name' makes the result unreliable.",
    )


Operation = Annotated[Union[SortRecord, SearchRecord], Field(discriminator="kind")]


class CatalogInfo(BaseModel):
    """Catalog state at report time."""

    capacity: int
    size: int
    sorted_by: Optional[str] = None
    components: List[ComponentInfo] = Field(default_factory=list)


class Summary(BaseModel):
    """Session totals."""

    sorts: int = 0
    searches: int = 0
    total_comparisons: int = 0
    total_elapsed_ms: float = 0.0


class Warning(BaseModel):
    """Warning message."""

    code: str
    message: str


class Report(BaseModel):
    """Complete session report: catalog state, every operation, totals."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "schema_version": SCHEMA_VERSION,
                "trace_id": "7b1f8c7e-6d4f-4b4a-a7c5-3d9d6a3b5e6a",
                "created_at_utc": "2026-03-04T15:22:08Z",
            }
        }
    )

    schema_version: str = SCHEMA_VERSION
    trace_id: str
    created_at_utc: str
    catalog: CatalogInfo
    operations: List[Operation] = Field(
        default_factory=list,
        description="Sorts and searches in execution order.",
    )
    summary: Summary = Field(default_factory=Summary)
    warnings: List[Warning] = Field(default_factory=list)
    extensions: Dict[str, Any] = Field(
        default_factory=dict,
        description="Known keys: 'performance' (PerformanceMonitor summary).",
    )


def serialize_report_to_json(report: Report, indent: Optional[int] = None) -> str:
    """
    Render a report as JSON.

    Compact unless an indent is given. Unset optional fields (a search's index
    when nothing was found, its sorted_by on a fresh catalog) are left out
    rather than written as null.
    """
    return report.model_dump_json(indent=indent, exclude_none=True)
