# src/person_match/similarity/jaro.py

"""
Jaro and Jaro-Winkler similarity.

The matching window and scan order below are the ones the name thresholds
were tuned against, so they are kept exactly:

    window = floor(max(len(s), len(t)) / 2) - 1
    candidates for s[i] are t[j] with  i - window <= j < i + window

Characters of ``s`` are matched left to right against the first unmatched
equal character of ``t`` in that half-open range. Because the range is not
centred on ``i`` the metric is not symmetric for every pair. When the longer
string has 3 characters or fewer the window is empty and only identical
strings score above 0.
"""

from __future__ import annotations

from typing import Callable, List

SimilarityMetric = Callable[[str, str], float]

WINKLER_BOOST_THRESHOLD = 0.7
WINKLER_MAX_PREFIX = 4


def _match_window(s_len: int, t_len: int) -> int:
    return max(s_len, t_len) // 2 - 1


def jaro(s: str, t: str) -> float:
    """
    Jaro similarity of ``s`` against ``t``.

    Returns 1.0 for identical strings (two empty strings included) and 0.0
    when no character matches, which includes one empty and one non-empty
    string.
    """
    if s == t:
        return 1.0
    s_len, t_len = len(s), len(t)

    window = _match_window(s_len, t_len)
    s_matches: List[bool] = [False] * s_len
    t_matches: List[bool] = [False] * t_len
    matches = 0

    for i in range(s_len):
        start = max(0, i - window)
        end = min(i + window, t_len)
        for j in range(start, end):
            if t_matches[j] or s[i] != t[j]:
                continue
            s_matches[i] = True
            t_matches[j] = True
            matches += 1
            break

    if matches == 0:
        return 0.0

    transpositions = 0
    k = 0
    for i in range(s_len):
        if not s_matches[i]:
            continue
        while not t_matches[k]:
            k += 1
        if s[i] != t[k]:
            transpositions += 1
        k += 1

    return (
        matches / s_len
        + matches / t_len
        + (matches - transpositions / 2) / matches
    ) / 3


def jaro_winkler(s: str, t: str, scaling_factor: float = 0.1) -> float:
    """
    Jaro similarity boosted by the length of the common prefix (max 4).

    The boost only applies when the Jaro score exceeds 0.7. With a scaling
    factor above 0.25 the result can exceed 1.
    """
    weight = jaro(s, t)
    prefix = 0
    if weight > WINKLER_BOOST_THRESHOLD:
        limit = min(WINKLER_MAX_PREFIX, len(s), len(t))
        while prefix < limit and s[prefix] == t[prefix]:
            prefix += 1
    return weight + prefix * scaling_factor * (1 - weight)
