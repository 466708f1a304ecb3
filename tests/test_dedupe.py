# tests/test_dedupe.py

from __future__ import annotations

from person_match.matching import cluster_names, find_duplicate_pairs

NAMES = [
    "Olena Shevchenko",
    "Alexander Smith",
    "Olena Shevchenko 2",
    "Alexandr Smith",
    "John Smith",
    "Peter Parker",
]


def test_duplicate_pairs() -> None:
    assert find_duplicate_pairs(NAMES) == [(0, 2), (1, 3)]


def test_clusters_keep_first_seen_order() -> None:
    assert cluster_names(NAMES) == [
        ["Olena Shevchenko", "Olena Shevchenko 2"],
        ["Alexander Smith", "Alexandr Smith"],
        ["John Smith"],
        ["Peter Parker"],
    ]


def test_clusters_are_transitive() -> None:
    # a~b and b~c puts a and c together even though a !~ c
    links = {("a", "b"), ("b", "c")}

    def compare(x: str, y: str) -> bool:
        return (x, y) in links or (y, x) in links

    assert cluster_names(["c", "x", "a", "b"], compare=compare) == [["c", "a", "b"], ["x"]]


def test_pair_budget() -> None:
    calls = []

    def compare(x: str, y: str) -> bool:
        calls.append((x, y))
        return True

    pairs = find_duplicate_pairs(["a", "b", "c", "d"], compare=compare, max_pairs=2)
    assert pairs == [(0, 1), (0, 2)]
    assert len(calls) == 2
