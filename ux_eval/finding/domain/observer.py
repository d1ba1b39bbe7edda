"""Observer port for finding loading — defines events in domain language."""

from typing import Protocol


class FindingLoadObserver(Protocol):
    def finding_loading_started(self, path: str, kind: str) -> None: ...

    def finding_set_loaded(self, judge_id: str, total_findings: int) -> None: ...

    def finding_loading_completed(
        self, path: str, total_sets: int, total_findings: int
    ) -> None: ...

    def finding_loading_failed(self, path: str, reason: str) -> None: ...
