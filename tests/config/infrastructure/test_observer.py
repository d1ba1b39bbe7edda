"""Tests for StructlogConfigObserver."""

from structlog.testing import capture_logs

from ux_eval.config.infrastructure.observer import StructlogConfigObserver


class TestStructlogConfigObserver:
    def test_events(self) -> None:
        observer = StructlogConfigObserver()
        with capture_logs() as logs:
            observer.config_defaults_used(path="engine.yaml")
            observer.config_loaded(path="engine.yaml", severity_scale_version="1")

        assert [(log["event"], log["log_level"]) for log in logs] == [
            ("config.defaults_used", "warning"),
            ("config.loaded", "info"),
        ]
        assert logs[1]["severity_scale_version"] == "1"
