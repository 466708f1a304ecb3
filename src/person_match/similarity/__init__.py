"""
Character-level similarity metrics used by the name matchers.
"""

from person_match.similarity.jaro import SimilarityMetric, jaro, jaro_winkler

__all__ = [
    "SimilarityMetric",
    "jaro",
    "jaro_winkler",
]
