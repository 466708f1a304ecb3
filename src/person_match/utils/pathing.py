# src/person_match/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union


# This file lives at <project_root>/src/person_match/utils/pathing.py, so
# parents[3] is the project root (the directory holding src/, tests/, config/).
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Examples:
        resolve_project_path("config/person_match.yml")
        resolve_project_path(Path("tests") / "data" / "ground_truth.csv")
    """
    return project_root() / Path(relative)


def tests_data_path(*parts: Union[str, Path]) -> Path:
    """
    Return the absolute path to a file under tests/data/.

    Examples:
        tests_data_path("ground_truth.csv")
    """
    return resolve_project_path(Path("tests") / "data" / Path(*parts))
