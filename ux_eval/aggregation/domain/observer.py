"""AggregationObserver port — domain events emitted during cross-set aggregation."""

from typing import Protocol


class AggregationObserver(Protocol):
    """Observer port for aggregation domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def aggregation_started(self, total_sets: int, total_findings: int) -> None: ...

    def aggregation_completed(self, total_groups: int, total_surfaces: int) -> None: ...

    def aggregation_trend_skipped(self, scope: str, total_sets: int) -> None: ...
