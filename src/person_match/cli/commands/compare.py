from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from person_match.cli.utils import load_settings
from person_match.matching import explain_compare

console = Console()


def compare_command(
    name1: str = typer.Argument(..., help="First name"),
    name2: str = typer.Argument(..., help="Second name"),
    explain: bool = typer.Option(
        False,
        "--explain",
        "-e",
        help="Show the deciding rule, normalized names and slugs",
    ),
    thorough: bool = typer.Option(
        False,
        "--thorough",
        help="Fall back to token reordering search when direct comparison fails",
    ),
):
    """
    Decide whether two names refer to the same person.

    Exits with status 0 on a match and 1 otherwise.
    """
    result = explain_compare(name1, name2, load_settings(thorough=thorough))

    if result.matched:
        console.print("[bold green]MATCH[/bold green]")
    else:
        console.print("[bold red]NO MATCH[/bold red]")

    if explain:
        table = Table(show_header=True)
        table.add_column("", style="bold")
        table.add_column("Name 1")
        table.add_column("Name 2")
        table.add_row("Input", name1, name2)
        table.add_row("Normalized", *result.normalized)
        table.add_row("Slug", *result.slugs)
        console.print(table)
        console.print(f"Rule: {result.rule}")

    raise typer.Exit(code=0 if result.matched else 1)
