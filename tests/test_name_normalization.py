# tests/test_name_normalization.py

from __future__ import annotations

import pytest

from person_match.normalization import normalize_name, slugify_name


def test_whitespace_is_collapsed_and_trimmed() -> None:
    assert normalize_name("  Olena \t  Shevchenko\n") == "Olena Shevchenko"


def test_punctuation_is_removed() -> None:
    assert normalize_name('"Smith", J.') == "Smиth J"
    assert normalize_name("O’Connor") == "OConnor"
    assert normalize_name("Mary-Jane") == "MaryJane"
    assert normalize_name("Dʼyachenko") == "Dyachenko"


def test_removed_hyphen_does_not_leave_double_space() -> None:
    assert normalize_name("Anna - Maria") == "Anna Marиa"


def test_soft_sign_is_dropped() -> None:
    assert normalize_name("Ігорь") == "Ігор"


def test_ukrainian_ye_becomes_ie() -> None:
    assert "є" not in normalize_name("Сергієнко Олексієва")
    assert normalize_name("Олексієва") == "Олексиева"


def test_ukrainian_i_and_latin_i_become_cyrillic_i() -> None:
    assert normalize_name("Марія") == "Мария"
    # Latin i is folded too, so mixed-script spellings line up.
    assert normalize_name("Marina") == "Marиna"


def test_konst_is_rewritten_everywhere() -> None:
    assert normalize_name("константин") == "костантин"
    assert normalize_name("анна конст") == "анна кост"


def test_substitutions_are_case_sensitive() -> None:
    assert normalize_name("Константин") == "Константин"
    assert normalize_name("ЄВА") == "ЄВА"


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "Olena  Shevchenko",
        "Anna - Maria",
        " O'Brien , Jr. ",
        "Сергієнко  Олексій",
        "конконстт",
        "ь ь ь",
        "a  b",
    ],
)
def test_normalize_is_idempotent(raw: str) -> None:
    once = normalize_name(raw)
    assert normalize_name(once) == once


def test_slugify_removes_spaces_and_digits() -> None:
    assert slugify_name("Olena Shevchenko 2") == "OlenaShevchenko"
    assert slugify_name("John 3rd Smith") == "JohnrdSmith"


@pytest.mark.parametrize("raw", ["", "a b c", "12 34", "Анна ١٢ Кост", "x\t9 y²"])
def test_slugify_output_has_no_spaces_or_digits(raw: str) -> None:
    slug = slugify_name(raw)
    assert not any(ch.isspace() or ch.isdigit() for ch in slug)


def test_slugify_keeps_character_order() -> None:
    assert slugify_name("b a 1 c") == "bac"
