"""
Ground-truth dataset loader.

Each record has four ordered fields:

    identifier,label,name1,name2

``label`` is the literal text ``TRUE`` or ``FALSE``. Fields containing a comma
are wrapped in double quotes. A first row whose label is neither literal is
treated as a header and skipped; blank lines are ignored.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, List, Union

from person_match.core.exceptions import DatasetError
from person_match.evaluation.models import EvaluationSample
from person_match.logging import get_logger

log = get_logger("dataset")

LABELS = {"TRUE": True, "FALSE": False}
FIELD_COUNT = 4


def parse_samples(lines: Iterable[str], source: Union[str, Path] = "<memory>") -> List[EvaluationSample]:
    """Parse CSV text lines into samples, in file order."""
    samples: List[EvaluationSample] = []
    reader = csv.reader(lines)
    seen_record = False

    for row in reader:
        lineno = reader.line_num
        if not row or all(not cell.strip() for cell in row):
            continue

        if len(row) < FIELD_COUNT:
            raise DatasetError(
                f"expected {FIELD_COUNT} fields, found {len(row)}",
                path=source,
                lineno=lineno,
            )

        identifier, label, name1, name2 = row[:FIELD_COUNT]
        expected = LABELS.get(label.strip())
        if expected is None:
            if not seen_record:
                log.debug("Skipping header row in %s: %r", source, row)
                seen_record = True
                continue
            raise DatasetError(f"label must be TRUE or FALSE, got {label!r}", path=source, lineno=lineno)

        seen_record = True
        samples.append(
            EvaluationSample(
                name1=name1,
                name2=name2,
                expected=expected,
                identifier=identifier.strip() or None,
            )
        )

    return samples


def load_samples(path: Union[str, Path]) -> List[EvaluationSample]:
    """Read a ground-truth CSV file from disk."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Dataset file not found: {path}")

    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        samples = parse_samples(f, source=path)

    log.info("Loaded %d labelled pairs from %s", len(samples), path)
    return samples
