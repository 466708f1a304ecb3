from __future__ import annotations

from pathlib import Path


class PersonMatchError(Exception):
    """Base exception for person_match failures."""


class ConfigError(PersonMatchError):
    """Raised when a configuration value cannot be used."""


class DatasetError(PersonMatchError):
    """Raised when a labelled dataset record cannot be read."""

    def __init__(self, message: str, path: str | Path | None = None, lineno: int | None = None):
        self.path = str(path) if path is not None else None
        self.lineno = lineno
        location = ""
        if self.path is not None:
            location = f"{self.path}:{lineno}: " if lineno is not None else f"{self.path}: "
        super().__init__(f"{location}{message}")


class EvaluationError(PersonMatchError):
    """Raised when an evaluation run fails."""
