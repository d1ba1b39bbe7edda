"""Structlog implementation of the AggregationObserver port."""

import structlog


class StructlogAggregationObserver:
    """Delegates aggregation domain events to structlog.

    Satisfies the AggregationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def aggregation_started(self, total_sets: int, total_findings: int) -> None:
        self._log.info(
            "aggregation.started",
            total_sets=total_sets,
            total_findings=total_findings,
        )

    def aggregation_completed(self, total_groups: int, total_surfaces: int) -> None:
        self._log.info(
            "aggregation.completed",
            total_groups=total_groups,
            total_surfaces=total_surfaces,
        )

    def aggregation_trend_skipped(self, scope: str, total_sets: int) -> None:
        self._log.warning(
            "aggregation.trend_skipped",
            scope=scope,
            total_sets=total_sets,
            message="At least two analysis sets are needed to compute a trend",
        )
