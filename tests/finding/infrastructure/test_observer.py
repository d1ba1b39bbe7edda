"""Tests for StructlogFindingLoadObserver."""

from structlog.testing import capture_logs

from ux_eval.finding.infrastructure.observer import StructlogFindingLoadObserver


class TestStructlogFindingLoadObserver:
    def test_events(self) -> None:
        observer = StructlogFindingLoadObserver()
        with capture_logs() as logs:
            observer.finding_loading_started(path="sets.json", kind="analysis_sets")
            observer.finding_set_loaded(judge_id="a", total_findings=2)
            observer.finding_loading_completed(
                path="sets.json", total_sets=1, total_findings=2
            )
            observer.finding_loading_failed(path="sets.json", reason="boom")

        assert [(log["event"], log["log_level"]) for log in logs] == [
            ("finding.loading_started", "info"),
            ("finding.set_loaded", "debug"),
            ("finding.loading_completed", "info"),
            ("finding.loading_failed", "error"),
        ]
