"""ReconciliationObserver port — domain events emitted while reconciling findings."""

from typing import Protocol


class ReconciliationObserver(Protocol):
    """Observer port for reconciliation domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def reconciliation_started(
        self, judge_id: str, total_candidates: int, total_reference: int
    ) -> None: ...

    def reconciliation_completed(
        self,
        judge_id: str,
        true_positives: int,
        false_positives: int,
        false_negatives: int,
        precision: float,
        recall: float,
    ) -> None: ...

    def reconciliation_reference_empty(self, judge_id: str) -> None: ...

    def reconciliation_surface_mismatch(
        self, judge_id: str, surface_id: str, reference_surface_id: str
    ) -> None: ...

    def reconciliation_run_replaced(self, judge_id: str) -> None: ...
