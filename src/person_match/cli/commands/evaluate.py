from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from person_match.cli.utils import format_metric, load_settings, write_json
from person_match.config import get_config
from person_match.evaluation import evaluate, load_samples
from person_match.matching import full_compare

console = Console()


def evaluate_command(
    dataset: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        min=1,
        help="Worker threads (default: evaluation.workers from config)",
    ),
    thorough: bool = typer.Option(
        False,
        "--thorough",
        help="Enable the token reordering fallback",
    ),
    show_mismatches: bool = typer.Option(
        True,
        "--show-mismatches/--quiet",
        help="List misclassified pairs",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the report as JSON",
    ),
):
    """
    Score the matcher against a labelled CSV of name pairs.
    """
    cfg = get_config()
    if workers is None:
        workers = int(cfg.evaluation.get("workers", 1) or 1)

    samples = load_samples(dataset)
    report = evaluate(
        samples,
        compare=partial(full_compare, settings=load_settings(thorough=thorough)),
        workers=workers,
        log_mismatches=False,
    )

    if as_json:
        write_json(report.as_dict())
        return

    if show_mismatches and report.mismatches:
        mismatch_table = Table(title="Misclassified pairs")
        mismatch_table.add_column("Id", justify="right")
        mismatch_table.add_column("Name 1")
        mismatch_table.add_column("Name 2")
        mismatch_table.add_column("Expected")
        for m in report.mismatches:
            mismatch_table.add_row(
                m.sample.identifier or "",
                m.sample.name1,
                m.sample.name2,
                "same" if m.sample.expected else "different",
            )
        console.print(mismatch_table)

    matrix = report.matrix
    table = Table(title=f"Evaluation of {matrix.total} pairs")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("True positives", str(matrix.tp))
    table.add_row("False positives", str(matrix.fp))
    table.add_row("False negatives", str(matrix.fn))
    table.add_row("True negatives", str(matrix.tn))
    table.add_row("Precision", format_metric(report.precision))
    table.add_row("Recall", format_metric(report.recall))
    table.add_row("F1", format_metric(report.f1))
    console.print(table)
