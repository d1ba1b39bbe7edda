"""CLI entrypoint for ux-eval — typer app with reconcile, score and aggregate commands."""

import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console

from ux_eval.aggregation.application.aggregator import CrossSetAggregator
from ux_eval.aggregation.infrastructure.observer import StructlogAggregationObserver
from ux_eval.cli.view.table import build_metrics_table
from ux_eval.config.domain.config import EngineConfig
from ux_eval.config.infrastructure.observer import StructlogConfigObserver
from ux_eval.config.infrastructure.yaml_loader import YamlConfigLoader
from ux_eval.core.errors import UxEvalError
from ux_eval.finding.infrastructure.json_loader import JsonFindingLoader
from ux_eval.finding.infrastructure.observer import StructlogFindingLoadObserver
from ux_eval.reconciliation.application.reconciler import (
    GroundTruthReconciler,
    summarize,
)
from ux_eval.reconciliation.infrastructure.observer import (
    StructlogReconciliationObserver,
)
from ux_eval.report.markdown import (
    render_aggregate_report,
    render_evaluation_report,
    render_qualitative_report,
)
from ux_eval.scoring.application.scorer import QualitativeScorer
from ux_eval.scoring.infrastructure.observer import StructlogScoringObserver

app = typer.Typer(add_completion=False)

_CONFIG_HELP = "Optional YAML file overriding thresholds and vocabularies"
_LOG_FORMAT_HELP = "Log format: 'console' or 'json'"
_OUTPUT_HELP = "Write the Markdown report to this file instead of stdout"


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format.

    Logs go to stderr so that stdout carries only the report.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> EngineConfig:
    if config_path is None:
        return EngineConfig()
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


def _emit(report: str, output: Path | None) -> None:
    """Print the report, or write it to ``output`` and say where it went."""
    if output is None:
        typer.echo(report, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(report, encoding="utf-8")
    typer.echo(f"Report written to {output}")


@app.command()
def reconcile(
    sets_path: Path = typer.Argument(..., help="JSON file with one or more analysis sets"),
    reference_path: Path = typer.Argument(..., help="JSON file with the reference findings"),
    threshold: float | None = typer.Option(
        None,
        "--threshold",
        help="Override the ground-truth similarity threshold (0..1)",
    ),
    table: bool = typer.Option(
        False, "--table", help="Also print a precision/recall table"
    ),
    config_path: Path | None = typer.Option(None, "--config", help=_CONFIG_HELP),
    log_format: str = typer.Option("console", "--log-format", help=_LOG_FORMAT_HELP),
    output: Path | None = typer.Option(None, "--output", "-o", help=_OUTPUT_HELP),
) -> None:
    """Reconcile each judge's findings against a curated reference set."""
    _configure_structlog(log_format=log_format)
    try:
        config = _load_config(config_path=config_path)
        loader = JsonFindingLoader(observer=StructlogFindingLoadObserver())
        analysis_sets = loader.load_analysis_sets(path=sets_path)
        reference = loader.load_reference(path=reference_path)

        reconciler = GroundTruthReconciler(
            config=config.matching, observer=StructlogReconciliationObserver()
        )
        results = reconciler.compare_judges(
            analysis_sets=analysis_sets, reference=reference, threshold=threshold
        )
    except UxEvalError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    metrics = list(results.values())
    if table:
        Console().print(build_metrics_table(metrics=metrics))
    _emit(
        report=render_evaluation_report(metrics=metrics, summary=summarize(metrics)),
        output=output,
    )


@app.command()
def score(
    sets_path: Path = typer.Argument(..., help="JSON file with one or more analysis sets"),
    config_path: Path | None = typer.Option(None, "--config", help=_CONFIG_HELP),
    log_format: str = typer.Option("console", "--log-format", help=_LOG_FORMAT_HELP),
    output: Path | None = typer.Option(None, "--output", "-o", help=_OUTPUT_HELP),
) -> None:
    """Score every judge qualitatively against the other judges in the file."""
    _configure_structlog(log_format=log_format)
    try:
        config = _load_config(config_path=config_path)
        loader = JsonFindingLoader(observer=StructlogFindingLoadObserver())
        analysis_sets = loader.load_analysis_sets(path=sets_path)
    except UxEvalError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    scorer = QualitativeScorer(
        vocabulary=config.scoring,
        matching=config.matching,
        observer=StructlogScoringObserver(),
    )
    assessments = scorer.assess_all(analysis_sets=analysis_sets)
    _emit(report=render_qualitative_report(assessments=assessments), output=output)


@app.command()
def aggregate(
    sets_path: Path = typer.Argument(..., help="JSON file with one or more analysis sets"),
    title: str = typer.Option(
        "Consolidated Usability Report", "--title", help="Report heading"
    ),
    config_path: Path | None = typer.Option(None, "--config", help=_CONFIG_HELP),
    log_format: str = typer.Option("console", "--log-format", help=_LOG_FORMAT_HELP),
    output: Path | None = typer.Option(None, "--output", "-o", help=_OUTPUT_HELP),
) -> None:
    """Aggregate findings across runs and surfaces into a consolidated report."""
    _configure_structlog(log_format=log_format)
    try:
        config = _load_config(config_path=config_path)
        loader = JsonFindingLoader(observer=StructlogFindingLoadObserver())
        analysis_sets = loader.load_analysis_sets(path=sets_path)
    except UxEvalError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    aggregator = CrossSetAggregator(
        config=config.aggregation, observer=StructlogAggregationObserver()
    )
    report = aggregator.aggregate(analysis_sets=analysis_sets)
    _emit(report=render_aggregate_report(report=report, title=title), output=output)


if __name__ == "__main__":
    app()
