"""Tests for the ux-eval typer app."""

from pathlib import Path

from typer.testing import CliRunner

from ux_eval.cli.main import app

FIXTURES = Path(__file__).parent.parent / "fixtures"

runner = CliRunner()


def _fixture(name: str) -> str:
    return str(FIXTURES / name)


class TestReconcileCommand:
    """`ux-eval reconcile` prints the evaluation report."""

    def test_prints_report(self) -> None:
        result = runner.invoke(
            app, ["reconcile", _fixture("analysis_sets.json"), _fixture("reference.json")]
        )

        assert result.exit_code == 0
        assert "# Ground-Truth Evaluation" in result.output
        assert "| Heuristic Judge | 1 | 1 | 2 | 50.0% | 33.3% |" in result.output
        assert "## Summary" in result.output

    def test_table_option(self) -> None:
        result = runner.invoke(
            app,
            [
                "reconcile",
                _fixture("analysis_sets.json"),
                _fixture("reference.json"),
                "--table",
            ],
        )

        assert result.exit_code == 0
        assert "Ground-truth reconciliation" in result.output

    def test_threshold_override(self) -> None:
        result = runner.invoke(
            app,
            [
                "reconcile",
                _fixture("analysis_sets.json"),
                _fixture("reference.json"),
                "--threshold",
                "1.0",
            ],
        )

        assert result.exit_code == 0
        # Titles match exactly, so a threshold of 1.0 keeps the same matches.
        assert "| Heuristic Judge | 1 | 1 | 2 | 50.0% | 33.3% |" in result.output

    def test_invalid_threshold_exits_with_error(self) -> None:
        result = runner.invoke(
            app,
            [
                "reconcile",
                _fixture("analysis_sets.json"),
                _fixture("reference.json"),
                "--threshold",
                "1.5",
            ],
        )

        assert result.exit_code == 1
        assert "Failed to match findings" in result.output

    def test_missing_reference_exits_with_error(self) -> None:
        result = runner.invoke(
            app, ["reconcile", _fixture("analysis_sets.json"), _fixture("missing.json")]
        )

        assert result.exit_code == 1
        assert "Failed to load findings: file not found" in result.output

    def test_output_file(self, tmp_path: Path) -> None:
        target = tmp_path / "reports" / "evaluation.md"
        result = runner.invoke(
            app,
            [
                "reconcile",
                _fixture("analysis_sets.json"),
                _fixture("reference.json"),
                "--output",
                str(target),
            ],
        )

        assert result.exit_code == 0
        assert f"Report written to {target}" in result.output
        assert target.read_text(encoding="utf-8").startswith("# Ground-Truth Evaluation")


class TestScoreCommand:
    def test_prints_report(self) -> None:
        result = runner.invoke(app, ["score", _fixture("analysis_sets.json")])

        assert result.exit_code == 0
        assert "# Qualitative Evaluation" in result.output
        assert "## Heuristic Judge" in result.output
        assert "## walkthrough" in result.output


class TestAggregateCommand:
    def test_prints_report(self) -> None:
        result = runner.invoke(app, ["aggregate", _fixture("analysis_sets.json")])

        assert result.exit_code == 0
        assert "# Consolidated Usability Report" in result.output
        assert "2 analyses produced 4 findings" in result.output

    def test_custom_title(self) -> None:
        result = runner.invoke(
            app, ["aggregate", _fixture("analysis_sets.json"), "--title", "Shop audit"]
        )

        assert result.exit_code == 0
        assert "# Shop audit" in result.output

    def test_config_override(self) -> None:
        result = runner.invoke(
            app,
            [
                "aggregate",
                _fixture("analysis_sets.json"),
                "--config",
                _fixture("override_config.yaml"),
            ],
        )

        assert result.exit_code == 0
        assert "# Consolidated Usability Report" in result.output

    def test_invalid_config_exits_with_error(self) -> None:
        result = runner.invoke(
            app,
            [
                "aggregate",
                _fixture("analysis_sets.json"),
                "--config",
                _fixture("invalid_threshold_config.yaml"),
            ],
        )

        assert result.exit_code == 1
        assert "Failed to validate config" in result.output

    def test_invalid_sets_exit_with_error(self) -> None:
        result = runner.invoke(app, ["aggregate", _fixture("invalid_analysis_sets.json")])

        assert result.exit_code == 1
        assert "Failed to load findings" in result.output


class TestLogFormat:
    def test_json_logs(self) -> None:
        result = runner.invoke(
            app,
            ["aggregate", _fixture("analysis_sets.json"), "--log-format", "json"],
        )

        assert result.exit_code == 0
        assert '"event": "aggregation.completed"' in result.output

    def test_invalid_log_format(self) -> None:
        result = runner.invoke(
            app, ["score", _fixture("analysis_sets.json"), "--log-format", "xml"]
        )

        assert result.exit_code == 1
        assert "Invalid log format" in result.output
