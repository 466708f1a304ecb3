from __future__ import annotations

from functools import partial
from pathlib import Path

import typer
from rich.console import Console

from person_match.cli.utils import load_settings, read_names, write_json
from person_match.matching import cluster_names, full_compare

console = Console()


def dedupe_command(
    names_file: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    thorough: bool = typer.Option(
        False,
        "--thorough",
        help="Enable the token reordering fallback",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print clusters as JSON",
    ),
):
    """
    Group the names in a file (one per line) into presumed duplicates.
    """
    names = read_names(names_file)
    compare = partial(full_compare, settings=load_settings(thorough=thorough))
    clusters = cluster_names(names, compare=compare)
    duplicates = [c for c in clusters if len(c) > 1]

    if as_json:
        write_json({"names": len(names), "clusters": duplicates})
        return

    if not duplicates:
        console.print("No duplicates found")
        return

    for index, cluster in enumerate(duplicates, start=1):
        console.print(f"[bold]Cluster {index}[/bold] ({len(cluster)} names)")
        for name in cluster:
            console.print(f"  {name}", markup=False)
