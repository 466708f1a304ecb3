"""
name_normalization.py
Name normalization and slug keys.

normalize_name() folds spelling variance seen in the Ukrainian / Russian
name corpus onto a single form. Steps run in order and later steps see the
output of earlier ones:

  1. drop punctuation: . , " ' ’ ʼ ` and the soft sign ь, plus hyphens
  2. collapse whitespace runs to one space, trim
  3. є -> е
  4. і (Ukrainian) and Latin i -> и
  5. конст -> кост

The transform is case-sensitive and idempotent.

slugify_name() turns a normalized name into a compact key with no spaces or
digits, used for equality / containment checks.
"""

from __future__ import annotations

import re
from typing import List, Tuple

# . , " ' U+2019 U+02BC ` U+044C(ь) -
_PUNCTUATION_RE = re.compile("[.,\"'’ʼ`ь-]")
_WHITESPACE_RE = re.compile(r"\s+")

# (pattern, replacement), applied sequentially.
SUBSTITUTIONS: List[Tuple[re.Pattern, str]] = [
    (re.compile("є"), "е"),            # є -> е
    (re.compile("[іi]"), "и"),         # і, Latin i -> и
    (re.compile("конст"), "кост"),
]


def normalize_name(name: str) -> str:
    s = _PUNCTUATION_RE.sub("", name)
    s = _WHITESPACE_RE.sub(" ", s).strip()
    for pattern, replacement in SUBSTITUTIONS:
        s = pattern.sub(replacement, s)
    return s


def slugify_name(name: str) -> str:
    """Remove whitespace and digits, keeping every other character in order."""
    return "".join(ch for ch in name if not (ch.isspace() or ch.isdigit()))
