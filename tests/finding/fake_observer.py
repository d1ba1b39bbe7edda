"""FakeFindingLoadObserver — records finding-loading events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoadingStartedEvent:
    path: str
    kind: str


@dataclass(frozen=True)
class SetLoadedEvent:
    judge_id: str
    total_findings: int


@dataclass(frozen=True)
class LoadingCompletedEvent:
    path: str
    total_sets: int
    total_findings: int


@dataclass(frozen=True)
class LoadingFailedEvent:
    path: str
    reason: str


class FakeFindingLoadObserver:
    """Records all emitted finding-loading events as typed frozen dataclasses."""

    def __init__(self) -> None:
        self.started: list[LoadingStartedEvent] = []
        self.set_loaded: list[SetLoadedEvent] = []
        self.completed: list[LoadingCompletedEvent] = []
        self.failed: list[LoadingFailedEvent] = []

    def finding_loading_started(self, path: str, kind: str) -> None:
        self.started.append(LoadingStartedEvent(path=path, kind=kind))

    def finding_set_loaded(self, judge_id: str, total_findings: int) -> None:
        self.set_loaded.append(
            SetLoadedEvent(judge_id=judge_id, total_findings=total_findings)
        )

    def finding_loading_completed(
        self, path: str, total_sets: int, total_findings: int
    ) -> None:
        self.completed.append(
            LoadingCompletedEvent(
                path=path, total_sets=total_sets, total_findings=total_findings
            )
        )

    def finding_loading_failed(self, path: str, reason: str) -> None:
        self.failed.append(LoadingFailedEvent(path=path, reason=reason))
