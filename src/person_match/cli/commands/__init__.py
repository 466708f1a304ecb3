"""
CLI command modules for person_match.

Each command module defines a single Typer-compatible command function.
"""

from person_match.cli.commands.compare import compare_command
from person_match.cli.commands.dedupe import dedupe_command
from person_match.cli.commands.evaluate import evaluate_command

__all__ = [
    "compare_command",
    "dedupe_command",
    "evaluate_command",
]
