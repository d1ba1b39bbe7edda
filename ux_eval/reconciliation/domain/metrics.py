"""EvaluationMetrics — the outcome of reconciling one judge against ground truth."""

from pydantic import BaseModel, Field

from ux_eval.finding.domain.finding import Finding


class EvaluationMetrics(BaseModel, frozen=True):
    """Immutable per-judge classification and precision/recall.

    Used as a cross-layer DTO: produced by the reconciler, consumed by the
    report generator and by downstream exporters.
    """

    judge_id: str = ""
    judge_name: str = ""
    true_positives: tuple[Finding, ...] = ()
    false_positives: tuple[Finding, ...] = ()
    false_negatives: tuple[Finding, ...] = ()
    precision: float = Field(ge=0.0, le=1.0)
    recall: float = Field(ge=0.0, le=1.0)
    error_distribution: dict[str, int] = Field(default_factory=dict)
    unique_contributions: tuple[Finding, ...] = ()

    @property
    def display_name(self) -> str:
        return self.judge_name or self.judge_id


class ReconciliationSummary(BaseModel, frozen=True):
    """Plain-language reading of a set of per-judge metrics."""

    strengths: tuple[str, ...] = ()
    weaknesses: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
