# tests/test_dataset.py

from __future__ import annotations

import pytest

from person_match.core.exceptions import DatasetError
from person_match.evaluation import EvaluationSample, load_samples, parse_samples


def test_load_ground_truth_fixture(ground_truth_path) -> None:
    samples = load_samples(ground_truth_path)
    assert len(samples) == 12
    assert samples[0] == EvaluationSample(
        name1="Olena Shevchenko",
        name2="Olena Shevchenko 2",
        expected=True,
        identifier="1",
    )
    assert [s.expected for s in samples].count(True) == 7


def test_quoted_field_keeps_comma(ground_truth_path) -> None:
    samples = load_samples(ground_truth_path)
    quoted = next(s for s in samples if s.identifier == "6")
    assert quoted.name1 == "Smith, John"
    assert quoted.name2 == "John Smith"


def test_parse_without_header() -> None:
    samples = parse_samples(["1,TRUE,Ivan Petrov,Ivan Petrov", "2,FALSE,Ivan,Oleg"])
    assert [(s.identifier, s.expected) for s in samples] == [("1", True), ("2", False)]


def test_blank_lines_are_skipped() -> None:
    samples = parse_samples(["", "1,TRUE,a,b", "   ", ""])
    assert len(samples) == 1


def test_short_record_raises_with_location() -> None:
    with pytest.raises(DatasetError) as excinfo:
        parse_samples(["1,TRUE,a,b", "2,FALSE,only-one-name"], source="pairs.csv")
    assert excinfo.value.lineno == 2
    assert excinfo.value.path == "pairs.csv"
    assert "pairs.csv:2" in str(excinfo.value)


def test_unknown_label_after_first_row_raises() -> None:
    with pytest.raises(DatasetError):
        parse_samples(["1,TRUE,a,b", "2,MAYBE,a,b"])


def test_labels_are_literal() -> None:
    with pytest.raises(DatasetError):
        parse_samples(["1,TRUE,a,b", "2,true,a,b"])


def test_missing_file() -> None:
    with pytest.raises(FileNotFoundError):
        load_samples("does/not/exist.csv")
