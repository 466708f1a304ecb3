"""
Name matching: token heuristics, whole-name comparison, permutation search,
the top-level ``full_compare`` decision and duplicate clustering.
"""

from person_match.matching.dedupe import cluster_names, find_duplicate_pairs
from person_match.matching.full_compare import MatchResult, explain_compare, full_compare
from person_match.matching.name_compare import compare_two_names
from person_match.matching.permutations import attempt_limit, thorough_compare, token_permutations
from person_match.matching.settings import DEFAULT_SETTINGS, MatchSettings
from person_match.matching.token_match import smart_jaro

__all__ = [
    "DEFAULT_SETTINGS",
    "MatchResult",
    "MatchSettings",
    "attempt_limit",
    "cluster_names",
    "compare_two_names",
    "explain_compare",
    "find_duplicate_pairs",
    "full_compare",
    "smart_jaro",
    "thorough_compare",
    "token_permutations",
]
