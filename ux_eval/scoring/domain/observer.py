"""ScoringObserver port — domain events emitted while scoring a judge."""

from typing import Protocol


class ScoringObserver(Protocol):
    def scoring_started(
        self, judge_id: str, total_findings: int, total_other_findings: int
    ) -> None: ...

    def scoring_completed(
        self, judge_id: str, unique_findings: int, dimensions_covered: int
    ) -> None: ...

    def scoring_no_comparison_judges(self, judge_id: str) -> None: ...
