"""Structlog implementation of the FindingLoadObserver port."""

import structlog


class StructlogFindingLoadObserver:
    """Delegates finding-loading events to structlog.

    Satisfies the FindingLoadObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def finding_loading_started(self, path: str, kind: str) -> None:
        self._log.info("finding.loading_started", path=path, kind=kind)

    def finding_set_loaded(self, judge_id: str, total_findings: int) -> None:
        self._log.debug(
            "finding.set_loaded", judge_id=judge_id, total_findings=total_findings
        )

    def finding_loading_completed(
        self, path: str, total_sets: int, total_findings: int
    ) -> None:
        self._log.info(
            "finding.loading_completed",
            path=path,
            total_sets=total_sets,
            total_findings=total_findings,
        )

    def finding_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("finding.loading_failed", path=path, reason=reason)
