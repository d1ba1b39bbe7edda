"""Markdown rendering of reconciliation metrics, qualitative assessments and aggregates.

Pure formatting: every function takes engine results and returns a string.
Empty inputs render an explicit "No data" section instead of raising.
"""

from collections.abc import Mapping, Sequence

from ux_eval.aggregation.domain.aggregate import (
    AggregateReport,
    SurfaceComparison,
    TrendDirection,
)
from ux_eval.finding.domain.finding import Finding, Severity
from ux_eval.reconciliation.domain.metrics import (
    EvaluationMetrics,
    ReconciliationSummary,
)
from ux_eval.scoring.domain.profile import DepthLevel, JudgeAssessment, RelevanceLevel

NO_DATA = "_No data._"

_SEVERE = frozenset({Severity.CATASTROPHIC, Severity.CRITICAL, Severity.SERIOUS})
_MAX_SURFACE_ISSUES = 5
_MANY_FINDINGS = 10


def _bullets(items: Sequence[str], empty: str = NO_DATA) -> list[str]:
    if not items:
        return [empty]
    return [f"- {item}" for item in items]


def _finding_line(finding: Finding) -> str:
    title = finding.title or "(untitled)"
    return f"{title} [{finding.severity.value}]"


def _pct(value: float) -> str:
    return f"{value:.1%}"


def _table(header: Sequence[str], rows: Sequence[Sequence[str]]) -> list[str]:
    lines = [
        "| " + " | ".join(header) + " |",
        "| " + " | ".join("---" for _ in header) + " |",
    ]
    lines.extend("| " + " | ".join(row) + " |" for row in rows)
    return lines


def _join(lines: Sequence[str]) -> str:
    return "\n".join(lines).rstrip() + "\n"


# ---------------------------------------------------------------------------
# Reconciliation
# ---------------------------------------------------------------------------


def render_evaluation_report(
    metrics: Mapping[str, EvaluationMetrics] | Sequence[EvaluationMetrics],
    summary: ReconciliationSummary | None = None,
    title: str = "Ground-Truth Evaluation",
) -> str:
    """Render precision/recall per judge, error distributions and unique contributions."""
    items = list(metrics.values()) if isinstance(metrics, Mapping) else list(metrics)
    lines = [f"# {title}", ""]

    lines += ["## Overview", ""]
    if not items:
        lines += [NO_DATA, ""]
        return _join(lines)

    lines += _table(
        ["Judge", "TP", "FP", "FN", "Precision", "Recall"],
        [
            [
                m.display_name or "(unnamed)",
                str(len(m.true_positives)),
                str(len(m.false_positives)),
                str(len(m.false_negatives)),
                _pct(m.precision),
                _pct(m.recall),
            ]
            for m in items
        ],
    )
    lines.append("")

    for m in items:
        lines += [f"## {m.display_name or '(unnamed)'}", ""]
        lines += ["### Error distribution", ""]
        populated = {k: v for k, v in m.error_distribution.items() if v}
        if populated:
            lines += [f"- {kind}: {count}" for kind, count in populated.items()]
        else:
            lines.append("- No false positives")
        lines += ["", "### Unique contributions", ""]
        lines += _bullets(
            [_finding_line(f) for f in m.unique_contributions],
            empty="- None",
        )
        lines += ["", "### Missed reference findings", ""]
        lines += _bullets(
            [_finding_line(f) for f in m.false_negatives],
            empty="- None",
        )
        lines.append("")

    if summary is not None:
        lines += ["## Summary", "", "### Strengths", ""]
        lines += _bullets(list(summary.strengths))
        lines += ["", "### Weaknesses", ""]
        lines += _bullets(list(summary.weaknesses))
        lines += ["", "### Recommendations", ""]
        lines += _bullets(list(summary.recommendations))
        lines.append("")

    return _join(lines)


# ---------------------------------------------------------------------------
# Qualitative scoring
# ---------------------------------------------------------------------------


def render_qualitative_report(
    assessments: Sequence[JudgeAssessment],
    title: str = "Qualitative Evaluation",
) -> str:
    """Render each judge's qualitative profile with strengths and weaknesses."""
    lines = [f"# {title}", ""]
    if not assessments:
        lines += ["## Judges", "", NO_DATA, ""]
        return _join(lines)

    lines += ["## Overview", ""]
    lines += _table(
        ["Judge", "Findings", "Clarity", "Specificity", "Actionability", "Unique"],
        [
            [
                a.display_name,
                str(a.total_findings),
                f"{a.profile.clarity:.2f}",
                f"{a.profile.specificity:.2f}",
                f"{a.profile.actionability:.2f}",
                str(len(a.profile.unique_findings)),
            ]
            for a in assessments
        ],
    )
    lines.append("")

    for a in assessments:
        p = a.profile
        lines += [f"## {a.display_name}", ""]
        lines.append(f"**Findings:** {a.total_findings}")
        lines.append("")
        lines += ["### Dimensions", ""]
        lines.append(
            "- Depth: "
            + ", ".join(f"{level.value} {p.depth.get(level, 0)}" for level in DepthLevel)
        )
        lines.append(
            "- Relevance: "
            + ", ".join(
                f"{level.value} {p.relevance.get(level, 0)}" for level in RelevanceLevel
            )
        )
        lines.append(
            f"- Reproducibility {p.reproducibility:.2f}, "
            f"systematicity {p.systematicity:.2f}"
        )
        lines.append(
            f"- Context consideration {p.context_consideration:.2f}, "
            f"subtle problems {p.subtle_problems_found}"
        )
        covered = sorted(p.dimensions_covered)
        lines.append(
            f"- Dimensions covered ({len(covered)}): "
            + (", ".join(covered) if covered else "none")
        )
        lines += ["", "### Strengths", ""]
        lines += _bullets(list(a.strengths), empty="- None identified")
        lines += ["", "### Weaknesses", ""]
        lines += _bullets(list(a.weaknesses), empty="- None identified")
        lines += ["", "### Unique contributions", ""]
        lines.append(f"- {len(p.unique_findings)} problems found only by this judge")
        lines += [f"- {perspective}" for perspective in p.distinctive_perspectives]
        lines += ["", "---", ""]

    return _join(lines)


# ---------------------------------------------------------------------------
# Cross-set aggregation
# ---------------------------------------------------------------------------


def _executive_summary(report: AggregateReport) -> str:
    stats = report.stats
    severe = sum(
        count for sev, count in report.severity_distribution.items() if sev in _SEVERE
    )
    share = round(severe / stats.total_findings * 100) if stats.total_findings else 0
    if share < 20:
        priority = "acceptable"
    elif share < 40:
        priority = "elevated"
    else:
        priority = "high"
    average = round(stats.total_findings / stats.total_sets, 2) if stats.total_sets else 0

    text = (
        f"{stats.total_sets} analyses produced {stats.total_findings} findings "
        f"(on average {average} per analysis). {severe} ({share}%) are rated "
        f"serious or worse, which signals {priority} priority for improvements."
    )
    if report.groups:
        top = ", ".join(g.label.lower() for g in report.groups[:3])
        text += f" The most frequent problem areas are {top}."
    return text


def _key_findings(report: AggregateReport) -> list[str]:
    findings: list[str] = []
    if report.groups:
        top = report.groups[0]
        findings.append(
            f"{top.label}: {top.occurrences} occurrences on "
            f"{len(top.affected_surfaces)} surfaces"
        )
    if report.severity_distribution and report.stats.total_findings:
        severity, count = max(
            report.severity_distribution.items(), key=lambda item: item[1]
        )
        share = round(count / report.stats.total_findings * 100)
        findings.append(
            f'{share}% of all findings are rated "{severity.value}" '
            f"({count} of {report.stats.total_findings})"
        )
    surfaces = [s for s in report.surface_comparison if s.finding_count > 0]
    if len(surfaces) > 1:
        best = min(surfaces, key=lambda s: s.severe_count)
        worst = max(surfaces, key=lambda s: s.severe_count)
        if best.surface_id != worst.surface_id:
            findings.append(
                f'Best surface: "{best.surface_id}" ({best.severe_count} severe findings)'
            )
            findings.append(
                f'Needs attention: "{worst.surface_id}" '
                f"({worst.severe_count} severe findings)"
            )
    return findings


def _is_mobile(surface_type: str | None) -> bool:
    return (surface_type or "").casefold() == "mobile"


def _surface_summary(surface: SurfaceComparison) -> str:
    return (
        f'"{surface.surface_id}" ({surface.surface_type or "unknown type"}) produced '
        f"{surface.finding_count} findings, {surface.severe_count} of them serious "
        f"or worse. Average severity: {surface.average_severity}."
    )


def _surface_recommendations(surface: SurfaceComparison) -> list[str]:
    recommendations: list[str] = []
    if surface.severe_count > 0:
        recommendations.append(
            f"Fix the {surface.severe_count} serious problems immediately"
        )
    if surface.finding_count > _MANY_FINDINGS:
        recommendations.append("Prioritize the findings by business impact")
    if _is_mobile(surface.surface_type):
        recommendations.append("Run mobile-specific usability tests")
    return recommendations


def _cross_surface_recommendations(report: AggregateReport) -> list[str]:
    recommendations = [
        "Establish shared design guidelines for a consistent user experience",
        "Test across surfaces to catch problems that occur everywhere",
        "Prioritize the most frequent problem areas for maximum impact",
    ]
    if len(report.groups) > 3:
        recommendations.append("Review the design system to reduce recurring problems")
    if any(
        _is_mobile(surface_type) and count > 0
        for surface_type, count in report.stats.surface_types.items()
    ):
        recommendations.append(
            "Adopt a mobile-first approach for consistency across devices"
        )
    return recommendations


def _trend_text(direction: TrendDirection) -> str:
    if direction is TrendDirection.IMPROVING:
        return "Critical findings decreased"
    if direction is TrendDirection.WORSENING:
        return "Critical findings increased"
    return "No change in critical findings"


def render_aggregate_report(
    report: AggregateReport, title: str = "Consolidated Usability Report"
) -> str:
    """Render the cross-surface aggregate as a consolidated Markdown report."""
    stats = report.stats
    lines = [f"# {title}", ""]

    if stats.total_sets == 0:
        lines += ["## Executive summary", "", NO_DATA, ""]
        return _join(lines)

    if stats.earliest and stats.latest:
        lines.append(
            f"**Period:** {stats.earliest.date().isoformat()} - "
            f"{stats.latest.date().isoformat()}"
        )
    lines.append(f"**Analyses:** {stats.total_sets}")
    lines.append("")

    lines += ["## Executive summary", "", _executive_summary(report), ""]
    lines += ["## Key findings", ""]
    lines += _bullets(_key_findings(report))
    lines.append("")

    lines += ["## Surface analyses", ""]
    if not report.surface_comparison:
        lines += [NO_DATA, ""]
    for surface in report.surface_comparison:
        lines += [f"### {surface.surface_id}", "", _surface_summary(surface), ""]
        lines += ["**Serious problems:**", ""]
        lines += _bullets(
            [
                f"{f.severity.value.upper()}: {f.title or '(untitled)'}"
                for f in surface.severe_findings[:_MAX_SURFACE_ISSUES]
            ],
            empty="- No serious problems identified",
        )
        lines += ["", "**Recommendations:**", ""]
        lines += _bullets(
            _surface_recommendations(surface),
            empty="- No specific recommendations",
        )
        lines.append("")

    lines += ["## Common problems", ""]
    if report.groups:
        lines += _table(
            ["Problem", "Occurrences", "Surfaces", "Dominant severity"],
            [
                [
                    g.label,
                    str(g.occurrences),
                    ", ".join(sorted(g.affected_surfaces)),
                    g.dominant_severity.value,
                ]
                for g in report.groups
            ],
        )
    else:
        lines.append(NO_DATA)
    lines.append("")

    lines += ["## Severity distribution", ""]
    if report.severity_distribution and stats.total_findings:
        lines += _table(
            ["Severity", "Count", "Share"],
            [
                [
                    sev.value,
                    str(count),
                    _pct(count / stats.total_findings),
                ]
                for sev, count in report.severity_distribution.items()
            ],
        )
    else:
        lines.append(NO_DATA)
    lines.append("")

    lines += ["## Surface comparison", ""]
    if report.surface_comparison:
        lines += _table(
            ["Surface", "Type", "Findings", "Severe", "Average severity"],
            [
                [
                    s.surface_id,
                    s.surface_type or "-",
                    str(s.finding_count),
                    str(s.severe_count),
                    s.average_severity,
                ]
                for s in report.surface_comparison
            ],
        )
    else:
        lines.append(NO_DATA)
    lines.append("")

    lines += ["## Trends", ""]
    trend_lines: list[str] = []
    if report.trend is not None:
        trend_lines.append(
            f"Project: {_trend_text(report.trend.direction)} "
            f"({report.trend.earlier_mean:.2f} -> {report.trend.later_mean:.2f} per analysis)"
        )
    for surface_id, signal in report.surface_trends.items():
        trend_lines.append(f"{surface_id}: {signal.direction.value}")
    lines += _bullets(trend_lines, empty="- No trend: fewer than two analyses")
    lines.append("")

    lines += ["## Recommendations", ""]
    lines += _bullets(_cross_surface_recommendations(report))
    lines.append("")

    lines += ["## Technical details", ""]
    lines.append(f"- Judges: {', '.join(stats.judges_used) or 'none'}")
    if stats.surface_types:
        lines.append(
            "- Surface types: "
            + ", ".join(f"{t}: {n}" for t, n in stats.surface_types.items())
        )
    lines.append(f"- Total processing time: {stats.total_processing_time_ms} ms")
    lines.append(f"- Findings per minute: {stats.findings_per_minute}")
    lines.append(
        "- Cross-surface grouping is keyword-based and should be complemented "
        "by manual review"
    )
    lines.append("")

    return _join(lines)
