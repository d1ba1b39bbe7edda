"""Tests for the versioned severity scale."""

import pytest

from ux_eval.aggregation.domain.severity_scale import SeverityScale
from ux_eval.finding.domain.finding import Severity


class TestSeverityScale:
    """Scores come from an explicit table and averages bucket into labels."""

    @pytest.mark.parametrize(
        "severity, expected",
        [
            (Severity.CATASTROPHIC, 5.0),
            (Severity.CRITICAL, 4.0),
            (Severity.SERIOUS, 3.0),
            (Severity.MINOR, 2.0),
            (Severity.POSITIVE, 1.0),
            (Severity.UNRATED, 0.0),
        ],
    )
    def test_default_scores(self, severity: Severity, expected: float) -> None:
        assert SeverityScale().score(severity) == expected

    @pytest.mark.parametrize(
        "average, label",
        [(5.0, "High"), (4.0, "High"), (3.99, "Medium"), (2.5, "Medium"), (2.49, "Low"), (0.0, "Low")],
    )
    def test_labels(self, average: float, label: str) -> None:
        assert SeverityScale().label(average) == label

    def test_missing_severity_scores_zero(self) -> None:
        scale = SeverityScale(scores={Severity.CRITICAL: 10.0})
        assert scale.score(Severity.MINOR) == 0.0
        assert scale.score(Severity.CRITICAL) == 10.0

    def test_default_version(self) -> None:
        assert SeverityScale().version == "1"

    def test_critical_is_subset_of_severe(self) -> None:
        scale = SeverityScale()
        assert scale.critical <= scale.severe
