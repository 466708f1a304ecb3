# src/person_match/evaluation/confusion.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict


def _ratio(numerator: float, denominator: float) -> float:
    """Division that yields NaN instead of raising on a zero denominator."""
    if denominator == 0:
        return math.nan
    return numerator / denominator


@dataclass
class ConfusionMatrix:
    """
    2x2 counts keyed by (predicted, expected).

        tp: predicted same,      actually same
        fp: predicted same,      actually different
        fn: predicted different, actually same
        tn: predicted different, actually different

    Matrices from separate shards of one run are merged with ``+``.
    """

    tp: int = 0
    fp: int = 0
    fn: int = 0
    tn: int = 0

    def record(self, predicted: bool, expected: bool) -> None:
        if predicted and expected:
            self.tp += 1
        elif predicted:
            self.fp += 1
        elif expected:
            self.fn += 1
        else:
            self.tn += 1

    def __add__(self, other: "ConfusionMatrix") -> "ConfusionMatrix":
        if not isinstance(other, ConfusionMatrix):
            return NotImplemented
        return ConfusionMatrix(
            tp=self.tp + other.tp,
            fp=self.fp + other.fp,
            fn=self.fn + other.fn,
            tn=self.tn + other.tn,
        )

    @property
    def total(self) -> int:
        return self.tp + self.fp + self.fn + self.tn

    @property
    def precision(self) -> float:
        return _ratio(self.tp, self.tp + self.fp)

    @property
    def recall(self) -> float:
        return _ratio(self.tp, self.tp + self.fn)

    @property
    def f1(self) -> float:
        precision, recall = self.precision, self.recall
        # NaN propagates through the arithmetic; only 0 / 0 needs a guard.
        return _ratio(2 * precision * recall, precision + recall)

    def as_dict(self) -> Dict[str, int]:
        return {"tp": self.tp, "fp": self.fp, "fn": self.fn, "tn": self.tn}
