"""
person_match: decide whether two free-text person names refer to the same
individual, and measure how well that decision does on labelled pairs.

    from person_match import full_compare
    full_compare("Alexander Smith", "Alexandr Smith")  # True
"""

from person_match.evaluation import ConfusionMatrix, EvaluationSample, evaluate, load_samples
from person_match.matching import (
    MatchSettings,
    compare_two_names,
    explain_compare,
    full_compare,
    smart_jaro,
    thorough_compare,
)
from person_match.normalization import normalize_name, slugify_name
from person_match.similarity import jaro, jaro_winkler

__version__ = "0.1.0"

__all__ = [
    "ConfusionMatrix",
    "EvaluationSample",
    "MatchSettings",
    "compare_two_names",
    "evaluate",
    "explain_compare",
    "full_compare",
    "jaro",
    "jaro_winkler",
    "load_samples",
    "normalize_name",
    "slugify_name",
    "smart_jaro",
    "thorough_compare",
]
