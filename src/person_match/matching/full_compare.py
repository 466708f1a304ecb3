"""
Top-level same-person decision.

Rules run in order and the first one that fires decides:

  slug_equal     normalized slugs are identical
  slug_prefix    one slug starts with the other (shorter slug >= 10 chars)
  slug_suffix    one slug ends with the other (shorter slug >= 10 chars)
  slug_jaro      Jaro of the slugs above 0.95, either argument order
  token_compare  compare_two_names in either direction
  thorough       token reordering search, only with thorough_fallback on

Anything else is ``no_match``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from person_match.logging import get_logger
from person_match.matching.name_compare import compare_two_names
from person_match.matching.permutations import thorough_compare
from person_match.matching.settings import DEFAULT_SETTINGS, MatchSettings
from person_match.normalization import normalize_name, slugify_name
from person_match.similarity import jaro

log = get_logger("full_compare")

RULE_SLUG_EQUAL = "slug_equal"
RULE_SLUG_PREFIX = "slug_prefix"
RULE_SLUG_SUFFIX = "slug_suffix"
RULE_SLUG_JARO = "slug_jaro"
RULE_TOKEN_COMPARE = "token_compare"
RULE_THOROUGH = "thorough"
RULE_NO_MATCH = "no_match"


@dataclass(frozen=True)
class MatchResult:
    matched: bool
    rule: str
    normalized: tuple[str, str]
    slugs: tuple[str, str]

    def __bool__(self) -> bool:
        return self.matched


def _contains_at_edge(slug1: str, slug2: str, min_length: int, *, prefix: bool) -> bool:
    """True if either slug starts (or ends) with the other and that other is long enough."""
    check = str.startswith if prefix else str.endswith
    if check(slug1, slug2) and len(slug2) >= min_length:
        return True
    return check(slug2, slug1) and len(slug1) >= min_length


def _decide(name1: str, name2: str, slug1: str, slug2: str, settings: MatchSettings) -> str:
    if slug1 == slug2:
        return RULE_SLUG_EQUAL

    min_length = settings.min_containment_length
    if _contains_at_edge(slug1, slug2, min_length, prefix=True):
        return RULE_SLUG_PREFIX
    if _contains_at_edge(slug1, slug2, min_length, prefix=False):
        return RULE_SLUG_SUFFIX

    if jaro(slug1, slug2) > settings.slug_jaro_limit:
        return RULE_SLUG_JARO
    if jaro(slug2, slug1) > settings.slug_jaro_limit:
        return RULE_SLUG_JARO

    kwargs = settings.compare_kwargs()
    if compare_two_names(name1, name2, **kwargs) or compare_two_names(name2, name1, **kwargs):
        return RULE_TOKEN_COMPARE

    if settings.thorough_fallback:
        if (
            thorough_compare(name1, name2, settings.max_splits, **kwargs)
            or thorough_compare(name2, name1, settings.max_splits, **kwargs)
        ):
            return RULE_THOROUGH

    return RULE_NO_MATCH


def explain_compare(
    name1: str,
    name2: str,
    settings: Optional[MatchSettings] = None,
) -> MatchResult:
    """Run the full decision and report which rule settled it."""
    settings = settings or DEFAULT_SETTINGS

    norm1, norm2 = normalize_name(name1), normalize_name(name2)
    slug1, slug2 = slugify_name(norm1), slugify_name(norm2)

    rule = _decide(norm1, norm2, slug1, slug2, settings)
    log.debug("%r vs %r -> %s", norm1, norm2, rule)

    return MatchResult(
        matched=rule != RULE_NO_MATCH,
        rule=rule,
        normalized=(norm1, norm2),
        slugs=(slug1, slug2),
    )


def full_compare(
    name1: str,
    name2: str,
    settings: Optional[MatchSettings] = None,
) -> bool:
    """Return True when ``name1`` and ``name2`` are judged to be the same person."""
    return explain_compare(name1, name2, settings).matched
