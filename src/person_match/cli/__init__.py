
"""
CLI package for person_match.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from person_match.cli.app import app, main

__all__ = [
    "app",
    "main",
]
