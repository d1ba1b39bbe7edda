"""GroundTruthReconciler — classifies judge findings against a reference set."""

from collections.abc import Sequence

from ux_eval.config.domain.matching import MatchingConfig
from ux_eval.finding.domain.analysis_set import AnalysisSet, JudgeId, ReferenceSet
from ux_eval.finding.domain.finding import ErrorKind, Finding
from ux_eval.matching.domain.matcher import find_match, validate_threshold
from ux_eval.reconciliation.domain.metrics import (
    EvaluationMetrics,
    ReconciliationSummary,
)
from ux_eval.reconciliation.domain.observer import ReconciliationObserver

_UNIQUE_ERROR_KINDS = frozenset({ErrorKind.NONE, ErrorKind.NO_ISSUE})

# Distribution buckets are always present, even when empty.
_DISTRIBUTION_KEYS: tuple[ErrorKind, ...] = (
    ErrorKind.NO_ISSUE,
    ErrorKind.UNCERTAIN,
    ErrorKind.IRRELEVANT,
    ErrorKind.DUPLICATE,
    ErrorKind.UNCLASSIFIED,
)


def _ratio(numerator: int, denominator: int) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator


def error_distribution(false_positives: Sequence[Finding]) -> dict[str, int]:
    """Count false positives per error kind; unannotated ones are unclassified."""
    distribution = {kind.value: 0 for kind in _DISTRIBUTION_KEYS}
    for finding in false_positives:
        kind = finding.error_kind
        if kind is ErrorKind.NONE:
            kind = ErrorKind.UNCLASSIFIED
        distribution[kind.value] += 1
    return distribution


class GroundTruthReconciler:
    """Reconciles each judge's findings against the same, unconsumed reference set.

    Within one judge, matching is one-to-one: each candidate claims at most one
    reference finding and a claimed reference finding cannot be claimed again.
    Across judges nothing is shared, so every judge's recall is measured
    against the full reference set.
    """

    def __init__(
        self, config: MatchingConfig, observer: ReconciliationObserver
    ) -> None:
        self._config = config
        self._observer = observer

    def reconcile(
        self,
        candidates: Sequence[Finding],
        reference: Sequence[Finding],
        threshold: float | None = None,
        judge_id: str = "",
        judge_name: str = "",
    ) -> EvaluationMetrics:
        """Classify candidates into true/false positives and reference into false negatives.

        Raises:
            InvalidThresholdError: if threshold lies outside [0, 1].
        """
        effective = (
            self._config.ground_truth_threshold if threshold is None else threshold
        )
        validate_threshold(effective)

        self._observer.reconciliation_started(
            judge_id=judge_id,
            total_candidates=len(candidates),
            total_reference=len(reference),
        )
        if not reference:
            self._observer.reconciliation_reference_empty(judge_id=judge_id)

        unclaimed: list[tuple[int, Finding]] = list(enumerate(reference))
        true_positives: list[Finding] = []
        false_positives: list[Finding] = []

        for candidate in candidates:
            pool = [finding for _, finding in unclaimed]
            hit = find_match(
                candidate, pool, effective, stop_words=self._config.stop_words
            )
            if hit is None:
                false_positives.append(candidate)
            else:
                true_positives.append(candidate)
                del unclaimed[hit]

        false_negatives = [finding for _, finding in unclaimed]

        precision = _ratio(len(true_positives), len(true_positives) + len(false_positives))
        recall = _ratio(len(true_positives), len(reference))

        metrics = EvaluationMetrics(
            judge_id=judge_id,
            judge_name=judge_name,
            true_positives=tuple(true_positives),
            false_positives=tuple(false_positives),
            false_negatives=tuple(false_negatives),
            precision=precision,
            recall=recall,
            error_distribution=error_distribution(false_positives),
            unique_contributions=tuple(
                f for f in false_positives if f.error_kind in _UNIQUE_ERROR_KINDS
            ),
        )

        self._observer.reconciliation_completed(
            judge_id=judge_id,
            true_positives=len(true_positives),
            false_positives=len(false_positives),
            false_negatives=len(false_negatives),
            precision=precision,
            recall=recall,
        )
        return metrics

    def compare_judges(
        self,
        analysis_sets: Sequence[AnalysisSet],
        reference: ReferenceSet,
        threshold: float | None = None,
    ) -> dict[JudgeId, EvaluationMetrics]:
        """Reconcile every analysis set independently against the same reference.

        Later sets from the same judge replace earlier ones in the result. Both
        a replacement and a set whose surface differs from the reference's are
        reported to the observer; neither stops the comparison.
        """
        results: dict[JudgeId, EvaluationMetrics] = {}
        for analysis in analysis_sets:
            if (
                analysis.surface_id is not None
                and reference.surface_id is not None
                and analysis.surface_id != reference.surface_id
            ):
                self._observer.reconciliation_surface_mismatch(
                    judge_id=analysis.judge_id,
                    surface_id=analysis.surface_id,
                    reference_surface_id=reference.surface_id,
                )
            if analysis.judge_id in results:
                self._observer.reconciliation_run_replaced(judge_id=analysis.judge_id)
            results[analysis.judge_id] = self.reconcile(
                candidates=analysis.findings,
                reference=reference.findings,
                threshold=threshold,
                judge_id=analysis.judge_id,
                judge_name=analysis.judge_name,
            )
        return results


def summarize(metrics: Sequence[EvaluationMetrics]) -> ReconciliationSummary:
    """Derive strengths, weaknesses and recommendations from per-judge metrics."""
    if not metrics:
        return ReconciliationSummary()

    strengths: list[str] = []
    weaknesses: list[str] = []
    recommendations: list[str] = []

    for metric in metrics:
        name = metric.display_name
        if metric.precision > 0.8:
            strengths.append(
                f"{name} shows high precision ({metric.precision:.1%}): few false alarms"
            )
        if metric.recall > 0.7:
            strengths.append(
                f"{name} shows good recall ({metric.recall:.1%}): finds most problems"
            )
        if metric.precision < 0.5:
            weaknesses.append(
                f"{name} has low precision ({metric.precision:.1%}): many false alarms"
            )
        if metric.recall < 0.5:
            weaknesses.append(
                f"{name} has low recall ({metric.recall:.1%}): misses many problems"
            )
        if metric.unique_contributions:
            strengths.append(
                f"{name} identifies {len(metric.unique_contributions)} unique problems"
            )

    average_precision = sum(m.precision for m in metrics) / len(metrics)
    average_recall = sum(m.recall for m in metrics) / len(metrics)

    if average_precision < 0.7:
        recommendations.append("Revise prompts to reduce false alarms")
    if average_recall < 0.7:
        recommendations.append("Extend prompts to improve problem detection")
    recommendations.append("Consider combining several judges for better coverage")
    recommendations.append("Iterate on prompts based on the error analysis")

    return ReconciliationSummary(
        strengths=tuple(strengths),
        weaknesses=tuple(weaknesses),
        recommendations=tuple(recommendations),
    )
