from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from person_match.evaluation.confusion import ConfusionMatrix


@dataclass(frozen=True)
class EvaluationSample:
    """One labelled name pair from the ground-truth dataset."""

    name1: str
    name2: str
    expected: bool
    identifier: Optional[str] = None


@dataclass(frozen=True)
class Mismatch:
    """A sample whose prediction disagreed with its label."""

    sample: EvaluationSample
    predicted: bool


@dataclass
class EvaluationReport:
    matrix: ConfusionMatrix
    mismatches: List[Mismatch] = field(default_factory=list)

    @property
    def precision(self) -> float:
        return self.matrix.precision

    @property
    def recall(self) -> float:
        return self.matrix.recall

    @property
    def f1(self) -> float:
        return self.matrix.f1

    def as_dict(self) -> Dict[str, Any]:
        """JSON-friendly view; undefined metrics become ``None``."""

        def _metric(value: float) -> Optional[float]:
            return None if math.isnan(value) else value

        return {
            "confusion_matrix": self.matrix.as_dict(),
            "total": self.matrix.total,
            "precision": _metric(self.precision),
            "recall": _metric(self.recall),
            "f1": _metric(self.f1),
            "mismatches": [
                {
                    "id": m.sample.identifier,
                    "name1": m.sample.name1,
                    "name2": m.sample.name2,
                    "expected": m.sample.expected,
                    "predicted": m.predicted,
                }
                for m in self.mismatches
            ],
        }
