"""CrossSetAggregator — summarises findings across many analysis runs and surfaces."""

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ux_eval.aggregation.domain.aggregate import (
    UNASSIGNED_SURFACE,
    AggregateGroup,
    AggregateReport,
    ProjectStats,
    SurfaceComparison,
    TrendDirection,
    TrendSignal,
)
from ux_eval.aggregation.domain.keywords import AggregationConfig
from ux_eval.aggregation.domain.observer import AggregationObserver
from ux_eval.finding.domain.analysis_set import AnalysisSet, SurfaceId
from ux_eval.finding.domain.finding import Finding, Severity


@dataclass(frozen=True)
class _LocatedFinding:
    """A finding paired with the surface its set evaluated."""

    finding: Finding
    surface_id: SurfaceId


def _surface_of(analysis: AnalysisSet) -> SurfaceId:
    return analysis.surface_id or UNASSIGNED_SURFACE


def _by_surface(
    analysis_sets: Sequence[AnalysisSet],
) -> dict[SurfaceId, list[AnalysisSet]]:
    """Group sets by surface in first-seen order."""
    grouped: dict[SurfaceId, list[AnalysisSet]] = {}
    for analysis in analysis_sets:
        grouped.setdefault(_surface_of(analysis), []).append(analysis)
    return grouped


def _label_for(keyword: str) -> str:
    return f"{keyword[:1].upper()}{keyword[1:]}-related issues"


class CrossSetAggregator:
    """Builds an AggregateReport from any number of AnalysisSets.

    Grouping relies on the first keyword of the configured list that occurs in
    a finding's title or description, so each finding joins at most one group.
    """

    def __init__(self, config: AggregationConfig, observer: AggregationObserver) -> None:
        self._config = config
        self._observer = observer

    def aggregate(self, analysis_sets: Sequence[AnalysisSet]) -> AggregateReport:
        located = [
            _LocatedFinding(finding=finding, surface_id=_surface_of(analysis))
            for analysis in analysis_sets
            for finding in analysis.findings
        ]
        self._observer.aggregation_started(
            total_sets=len(analysis_sets), total_findings=len(located)
        )

        surfaces = self.compare_surfaces(analysis_sets)
        trend = self.trend(analysis_sets)
        if trend is None:
            self._observer.aggregation_trend_skipped(
                scope="project", total_sets=len(analysis_sets)
            )

        report = AggregateReport(
            groups=self.group(located),
            severity_distribution=self.severity_distribution(
                [item.finding for item in located]
            ),
            surface_comparison=surfaces,
            trend=trend,
            surface_trends=self._surface_trends(analysis_sets),
            stats=_project_stats(analysis_sets, total_findings=len(located)),
        )

        self._observer.aggregation_completed(
            total_groups=len(report.groups), total_surfaces=len(surfaces)
        )
        return report

    def primary_keyword(self, finding: Finding) -> str | None:
        text = finding.text.lower()
        for keyword in self._config.keywords:
            if keyword in text:
                return keyword
        return None

    def group(self, located: Sequence[_LocatedFinding]) -> tuple[AggregateGroup, ...]:
        buckets: dict[str, list[_LocatedFinding]] = {}
        for item in located:
            keyword = self.primary_keyword(item.finding)
            if keyword is not None:
                buckets.setdefault(keyword, []).append(item)

        groups = [
            AggregateGroup(
                keyword=keyword,
                label=_label_for(keyword),
                occurrences=len(members),
                affected_surfaces=frozenset(m.surface_id for m in members),
                dominant_severity=_dominant_severity(m.finding for m in members),
            )
            for keyword, members in buckets.items()
            if len(members) >= self._config.min_group_size
        ]
        # sorted() is stable, so equal counts keep first-seen order.
        groups.sort(key=lambda g: g.occurrences, reverse=True)
        return tuple(groups[: self._config.max_groups])

    def severity_distribution(self, findings: Sequence[Finding]) -> dict[Severity, int]:
        return dict(Counter(f.severity for f in findings))

    def compare_surfaces(
        self, analysis_sets: Sequence[AnalysisSet]
    ) -> tuple[SurfaceComparison, ...]:
        scale = self._config.severity_scale
        comparisons: list[SurfaceComparison] = []
        for surface_id, sets in _by_surface(analysis_sets).items():
            findings = [f for s in sets for f in s.findings]
            average = (
                sum(scale.score(f.severity) for f in findings) / len(findings)
                if findings
                else 0.0
            )
            surface_type = next(
                (s.surface_type for s in sets if s.surface_type), None
            )
            severe = tuple(f for f in findings if f.severity in scale.severe)
            comparisons.append(
                SurfaceComparison(
                    surface_id=surface_id,
                    surface_type=surface_type,
                    finding_count=len(findings),
                    severe_count=len(severe),
                    average_severity=scale.label(average),
                    severe_findings=severe,
                )
            )
        return tuple(comparisons)

    def trend(self, analysis_sets: Sequence[AnalysisSet]) -> TrendSignal | None:
        """Compare mean critical findings per set between earlier and later runs.

        The earlier window is the first ceil(n/2) sets and the later window
        starts at floor(n/2), so for an odd count the middle run belongs to
        both. Returns None for fewer than two sets.
        """
        if len(analysis_sets) < 2:
            return None

        ordered = sorted(analysis_sets, key=lambda s: s.created_at)
        n = len(ordered)
        earlier = ordered[: math.ceil(n / 2)]
        later = ordered[n // 2 :]

        earlier_mean = self._mean_critical(earlier)
        later_mean = self._mean_critical(later)

        if later_mean < earlier_mean:
            direction = TrendDirection.IMPROVING
        elif later_mean > earlier_mean:
            direction = TrendDirection.WORSENING
        else:
            direction = TrendDirection.FLAT

        return TrendSignal(
            direction=direction, earlier_mean=earlier_mean, later_mean=later_mean
        )

    def _mean_critical(self, sets: Sequence[AnalysisSet]) -> float:
        critical = self._config.severity_scale.critical
        total = sum(
            1 for s in sets for f in s.findings if f.severity in critical
        )
        return total / len(sets)

    def _surface_trends(
        self, analysis_sets: Sequence[AnalysisSet]
    ) -> dict[SurfaceId, TrendSignal]:
        trends: dict[SurfaceId, TrendSignal] = {}
        for surface_id, sets in _by_surface(analysis_sets).items():
            signal = self.trend(sets)
            if signal is not None:
                trends[surface_id] = signal
        return trends


def _dominant_severity(findings: Iterable[Finding]) -> Severity:
    counts = Counter(f.severity for f in findings)
    # most_common keeps first-seen order among equal counts.
    return counts.most_common(1)[0][0] if counts else Severity.UNRATED


def _project_stats(
    analysis_sets: Sequence[AnalysisSet], total_findings: int
) -> ProjectStats:
    judges: list[str] = []
    for analysis in analysis_sets:
        if analysis.display_name not in judges:
            judges.append(analysis.display_name)

    surface_types = dict(
        Counter(s.surface_type for s in analysis_sets if s.surface_type)
    )
    dates = sorted(s.created_at for s in analysis_sets)
    processing_ms = sum(s.processing_time_ms or 0 for s in analysis_sets)
    per_minute = (
        round(total_findings / (processing_ms / 60000), 2) if processing_ms > 0 else 0.0
    )

    return ProjectStats(
        total_sets=len(analysis_sets),
        total_findings=total_findings,
        judges_used=tuple(judges),
        surface_types=surface_types,
        earliest=dates[0] if dates else None,
        latest=dates[-1] if dates else None,
        total_processing_time_ms=processing_ms,
        findings_per_minute=per_minute,
    )
