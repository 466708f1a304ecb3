"""
person_match.normalization package

- name_normalization: punctuation stripping, whitespace folding,
  transliteration substitutions and slug keys
"""

from person_match.normalization.name_normalization import normalize_name, slugify_name

__all__ = [
    "normalize_name",
    "slugify_name",
]
