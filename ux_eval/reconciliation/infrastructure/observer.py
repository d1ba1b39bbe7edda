"""Structlog implementation of the ReconciliationObserver port."""

import structlog


class StructlogReconciliationObserver:
    """Delegates reconciliation domain events to structlog.

    Satisfies the ReconciliationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def reconciliation_started(
        self, judge_id: str, total_candidates: int, total_reference: int
    ) -> None:
        self._log.debug(
            "reconciliation.started",
            judge_id=judge_id,
            total_candidates=total_candidates,
            total_reference=total_reference,
        )

    def reconciliation_completed(
        self,
        judge_id: str,
        true_positives: int,
        false_positives: int,
        false_negatives: int,
        precision: float,
        recall: float,
    ) -> None:
        self._log.info(
            "reconciliation.completed",
            judge_id=judge_id,
            true_positives=true_positives,
            false_positives=false_positives,
            false_negatives=false_negatives,
            precision=round(precision, 4),
            recall=round(recall, 4),
        )

    def reconciliation_reference_empty(self, judge_id: str) -> None:
        self._log.warning(
            "reconciliation.reference_empty",
            judge_id=judge_id,
            message="Reference set is empty; recall is reported as 0.0",
        )

    def reconciliation_surface_mismatch(
        self, judge_id: str, surface_id: str, reference_surface_id: str
    ) -> None:
        self._log.warning(
            "reconciliation.surface_mismatch",
            judge_id=judge_id,
            surface_id=surface_id,
            reference_surface_id=reference_surface_id,
            message="Analysis set and reference describe different surfaces",
        )

    def reconciliation_run_replaced(self, judge_id: str) -> None:
        self._log.warning(
            "reconciliation.run_replaced",
            judge_id=judge_id,
            message="A later run from the same judge replaces the earlier result",
        )
