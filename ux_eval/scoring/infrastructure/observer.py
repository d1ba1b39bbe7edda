"""Structlog implementation of the ScoringObserver port."""

import structlog


class StructlogScoringObserver:
    """Delegates scoring domain events to structlog.

    Satisfies the ScoringObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def scoring_started(
        self, judge_id: str, total_findings: int, total_other_findings: int
    ) -> None:
        self._log.debug(
            "scoring.started",
            judge_id=judge_id,
            total_findings=total_findings,
            total_other_findings=total_other_findings,
        )

    def scoring_completed(
        self, judge_id: str, unique_findings: int, dimensions_covered: int
    ) -> None:
        self._log.info(
            "scoring.completed",
            judge_id=judge_id,
            unique_findings=unique_findings,
            dimensions_covered=dimensions_covered,
        )

    def scoring_no_comparison_judges(self, judge_id: str) -> None:
        self._log.warning(
            "scoring.no_comparison_judges",
            judge_id=judge_id,
            message="No other judge to compare against; every finding counts as unique",
        )
