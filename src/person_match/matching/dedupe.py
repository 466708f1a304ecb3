# src/person_match/matching/dedupe.py

"""
Duplicate detection over a list of names.

Every pair is compared with ``full_compare`` (no blocking) and matched pairs
are merged with union-find into clusters.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Tuple

from person_match.logging import get_logger
from person_match.matching.full_compare import full_compare

log = get_logger("dedupe")

DEFAULT_MAX_PAIRS = 200_000

NameComparison = Callable[[str, str], bool]


def find_duplicate_pairs(
    names: Sequence[str],
    compare: NameComparison = full_compare,
    max_pairs: int = DEFAULT_MAX_PAIRS,
) -> List[Tuple[int, int]]:
    """
    Return index pairs ``(i, j)``, ``i < j``, that ``compare`` judges to be
    the same person. Stops comparing after ``max_pairs`` candidate pairs.
    """
    pairs: List[Tuple[int, int]] = []
    compared = 0
    n = len(names)

    for i in range(n):
        for j in range(i + 1, n):
            if compared >= max_pairs:
                log.warning("Pair budget of %d reached; remaining pairs skipped", max_pairs)
                return pairs
            compared += 1
            if compare(names[i], names[j]):
                pairs.append((i, j))

    log.info("Compared %d pairs, found %d duplicates", compared, len(pairs))
    return pairs


def _find(parent: Dict[int, int], i: int) -> int:
    while parent[i] != i:
        parent[i] = parent[parent[i]]
        i = parent[i]
    return i


def cluster_names(
    names: Sequence[str],
    compare: NameComparison = full_compare,
    max_pairs: int = DEFAULT_MAX_PAIRS,
) -> List[List[str]]:
    """
    Group names into clusters of presumed duplicates.

    Clusters, and names inside each cluster, keep first-seen order. Names
    with no duplicate form singleton clusters.
    """
    parent = {i: i for i in range(len(names))}

    for i, j in find_duplicate_pairs(names, compare=compare, max_pairs=max_pairs):
        root_i, root_j = _find(parent, i), _find(parent, j)
        if root_i != root_j:
            parent[max(root_i, root_j)] = min(root_i, root_j)

    clusters: Dict[int, List[str]] = {}
    for i, name in enumerate(names):
        clusters.setdefault(_find(parent, i), []).append(name)
    return list(clusters.values())
