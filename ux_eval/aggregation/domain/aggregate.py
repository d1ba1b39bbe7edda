"""Cross-set aggregation results — groups, surface comparison, trends and stats."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field

from ux_eval.finding.domain.analysis_set import SurfaceId
from ux_eval.finding.domain.finding import Finding, Severity

UNASSIGNED_SURFACE: SurfaceId = "unassigned"


class AggregateGroup(BaseModel, frozen=True):
    """Findings from many sets that share the same first-matching keyword."""

    keyword: str = Field(min_length=1)
    label: str = Field(min_length=1)
    occurrences: int = Field(ge=1)
    affected_surfaces: frozenset[SurfaceId] = frozenset()
    dominant_severity: Severity


class SurfaceComparison(BaseModel, frozen=True):
    surface_id: SurfaceId
    surface_type: str | None = None
    finding_count: int = Field(ge=0)
    severe_count: int = Field(ge=0)
    average_severity: str
    severe_findings: tuple[Finding, ...] = ()


class TrendDirection(StrEnum):
    IMPROVING = "improving"
    WORSENING = "worsening"
    FLAT = "flat"


class TrendSignal(BaseModel, frozen=True):
    """Change in mean critical-finding count between earlier and later runs."""

    direction: TrendDirection
    earlier_mean: float = Field(ge=0.0)
    later_mean: float = Field(ge=0.0)


class ProjectStats(BaseModel, frozen=True):
    total_sets: int = Field(ge=0)
    total_findings: int = Field(ge=0)
    judges_used: tuple[str, ...] = ()
    surface_types: dict[str, int] = Field(default_factory=dict)
    earliest: datetime | None = None
    latest: datetime | None = None
    total_processing_time_ms: int = Field(default=0, ge=0)
    findings_per_minute: float = Field(default=0.0, ge=0.0)


class AggregateReport(BaseModel, frozen=True):
    """Everything one aggregation call produces; never persisted by the engine."""

    groups: tuple[AggregateGroup, ...] = ()
    severity_distribution: dict[Severity, int] = Field(default_factory=dict)
    surface_comparison: tuple[SurfaceComparison, ...] = ()
    trend: TrendSignal | None = None
    surface_trends: dict[SurfaceId, TrendSignal] = Field(default_factory=dict)
    stats: ProjectStats
