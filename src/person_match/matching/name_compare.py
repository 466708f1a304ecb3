# src/person_match/matching/name_compare.py

from __future__ import annotations

from functools import partial

from person_match.matching.token_match import smart_jaro
from person_match.similarity import jaro, jaro_winkler

DEFAULT_STRAIGHT_LIMIT = 0.7
DEFAULT_SMART_LIMIT = 0.96
DEFAULT_TOKEN_LIMIT = 0.88


def compare_two_names(
    name1: str,
    name2: str,
    straight_limit: float = DEFAULT_STRAIGHT_LIMIT,
    smart_limit: float = DEFAULT_SMART_LIMIT,
    token_limit: float = DEFAULT_TOKEN_LIMIT,
    scaling_factor: float = 0.1,
) -> bool:
    """
    Whole-name comparison.

    1. Jaro over the full strings: above ``smart_limit`` is a match, below
       ``straight_limit`` is not.
    2. In between, tokens are paired by position (the extra tokens of the
       longer name are ignored) and scored with ``smart_jaro`` using
       Jaro-Winkler. The weakest pair must score above ``token_limit``.

    Not symmetric: ``compare_two_names(a, b)`` and ``compare_two_names(b, a)``
    can disagree.
    """
    straight_similarity = jaro(name1, name2)
    if straight_similarity > smart_limit:
        return True
    if straight_similarity < straight_limit:
        return False

    metric = partial(jaro_winkler, scaling_factor=scaling_factor)
    min_pair_score = 1.0
    for token1, token2 in zip(name1.split(), name2.split()):
        min_pair_score = min(smart_jaro(token1, token2, metric=metric), min_pair_score)

    return min_pair_score > token_limit
