# src/person_match/matching/permutations.py

from __future__ import annotations

import math
from itertools import islice, permutations
from typing import Iterator, Optional, Sequence, Tuple

from person_match.matching.name_compare import compare_two_names

DEFAULT_MAX_SPLITS = 7


def attempt_limit(max_splits: int = DEFAULT_MAX_SPLITS) -> int:
    """Upper bound on reorderings tried by ``thorough_compare``: (max_splits + 1)!"""
    return math.factorial(max(max_splits, 0) + 1)


def token_permutations(
    tokens: Sequence[str],
    limit: Optional[int] = None,
) -> Iterator[Tuple[str, ...]]:
    """
    Lazily yield reorderings of ``tokens``, original order first.

    At most ``limit`` orderings are produced when a limit is given.
    """
    orderings = permutations(tuple(tokens))
    if limit is not None:
        orderings = islice(orderings, max(limit, 0))
    return orderings


def thorough_compare(
    name1: str,
    name2: str,
    max_splits: int = DEFAULT_MAX_SPLITS,
    **compare_kwargs,
) -> bool:
    """
    Compare ``name1`` against every token reordering of ``name2``.

    Stops at the first reordering ``compare_two_names`` accepts. The search is
    capped at ``(max_splits + 1)!`` orderings.
    """
    tokens = name2.split()
    for ordering in token_permutations(tokens, limit=attempt_limit(max_splits)):
        if compare_two_names(name1, " ".join(ordering), **compare_kwargs):
            return True
    return False
