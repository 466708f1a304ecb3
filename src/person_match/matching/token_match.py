# src/person_match/matching/token_match.py

from __future__ import annotations

from typing import Union

from person_match.similarity import SimilarityMetric, jaro

NEAR_DUPLICATE_LIMIT = 0.99
LENGTH_GAP = 3
LENGTH_GAP_PENALTY = 0.2

TokenScore = Union[bool, float]


def smart_jaro(a: str, b: str, metric: SimilarityMetric = jaro) -> TokenScore:
    """
    Compare two name tokens, tolerating a wrong or extra leading character.

    Returns ``True`` as soon as a first-character-dropped variant scores
    above 0.99: both first characters dropped, or only ``b``'s. An extra
    leading character on ``a`` alone does not short-circuit. Otherwise
    returns ``metric(a, b)``, lowered by 0.2 when the token lengths differ
    by 3 or more.

    ``True`` compares as 1, so callers can feed either result type straight
    into ``min`` / threshold checks.
    """
    if metric(a[1:], b[1:]) > NEAR_DUPLICATE_LIMIT:
        return True
    if metric(a, b[1:]) > NEAR_DUPLICATE_LIMIT:
        return True
    # Same pair as the first check.
    if metric(a[1:], b[1:]) > NEAR_DUPLICATE_LIMIT:
        return True

    score = metric(a, b)
    if abs(len(a) - len(b)) >= LENGTH_GAP:
        score -= LENGTH_GAP_PENALTY
    return score
