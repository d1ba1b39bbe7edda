"""SeverityScale — explicit, versioned severity-to-score lookup.

Severity vocabularies differ between analysis variants upstream, so the
numeric ordering is a table rather than something inferred from the enum.
"""

from pydantic import BaseModel, Field

from ux_eval.finding.domain.finding import Severity

DEFAULT_SEVERITY_SCORES: dict[Severity, float] = {
    Severity.CATASTROPHIC: 5.0,
    Severity.CRITICAL: 4.0,
    Severity.SERIOUS: 3.0,
    Severity.MINOR: 2.0,
    Severity.POSITIVE: 1.0,
    Severity.UNRATED: 0.0,
}


class SeverityScale(BaseModel, frozen=True):
    version: str = Field(default="1", min_length=1)
    scores: dict[Severity, float] = Field(
        default_factory=lambda: dict(DEFAULT_SEVERITY_SCORES)
    )
    high_cutoff: float = 4.0
    medium_cutoff: float = 2.5
    severe: frozenset[Severity] = frozenset(
        {Severity.CATASTROPHIC, Severity.CRITICAL, Severity.SERIOUS}
    )
    critical: frozenset[Severity] = frozenset({Severity.CATASTROPHIC, Severity.CRITICAL})

    def score(self, severity: Severity) -> float:
        return self.scores.get(severity, 0.0)

    def label(self, average: float) -> str:
        """Bucket an average score into High / Medium / Low."""
        if average >= self.high_cutoff:
            return "High"
        if average >= self.medium_cutoff:
            return "Medium"
        return "Low"
