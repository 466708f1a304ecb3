
from __future__ import annotations

import typer

from person_match.cli.commands.compare import compare_command
from person_match.cli.commands.dedupe import dedupe_command
from person_match.cli.commands.evaluate import evaluate_command

app = typer.Typer(
    name="person-match",
    help="Fuzzy same-person name matching and accuracy evaluation",
    add_completion=False,
)

app.command("compare")(compare_command)
app.command("evaluate")(evaluate_command)
app.command("dedupe")(dedupe_command)


def main():
    app()


if __name__ == "__main__":
    main()
