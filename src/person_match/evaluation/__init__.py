"""
Evaluation harness: labelled samples, confusion matrix and metrics.
"""

from person_match.evaluation.confusion import ConfusionMatrix
from person_match.evaluation.dataset import load_samples, parse_samples
from person_match.evaluation.evaluator import evaluate
from person_match.evaluation.models import EvaluationReport, EvaluationSample, Mismatch

__all__ = [
    "ConfusionMatrix",
    "EvaluationReport",
    "EvaluationSample",
    "Mismatch",
    "evaluate",
    "load_samples",
    "parse_samples",
]
