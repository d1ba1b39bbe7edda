"""Rich precision/recall table for the `ux-eval reconcile --table` option."""

from collections.abc import Sequence

from rich.table import Table
from rich.text import Text

from ux_eval.reconciliation.domain.metrics import EvaluationMetrics


def _rate_style(value: float) -> str:
    if value >= 0.8:
        return "bright_green"
    if value >= 0.5:
        return "yellow"
    return "red"


def build_metrics_table(metrics: Sequence[EvaluationMetrics]) -> Table:
    """Build one row per judge with finding counts and colour-coded rates."""
    table = Table(title="Ground-truth reconciliation")
    table.add_column("Judge", style="cyan", no_wrap=True)
    table.add_column("TP", justify="right")
    table.add_column("FP", justify="right")
    table.add_column("FN", justify="right")
    table.add_column("Precision", justify="right")
    table.add_column("Recall", justify="right")
    table.add_column("Unique", justify="right")

    for m in metrics:
        table.add_row(
            m.display_name,
            str(len(m.true_positives)),
            str(len(m.false_positives)),
            str(len(m.false_negatives)),
            Text(f"{m.precision:.1%}", style=_rate_style(m.precision)),
            Text(f"{m.recall:.1%}", style=_rate_style(m.recall)),
            str(len(m.unique_contributions)),
        )
    return table
