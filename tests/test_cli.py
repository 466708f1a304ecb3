# tests/test_cli.py

from __future__ import annotations

import json

from typer.testing import CliRunner

from person_match.cli import app

runner = CliRunner()


def test_compare_match_exits_zero() -> None:
    result = runner.invoke(app, ["compare", "Alexander Smith", "Alexandr Smith"])
    assert result.exit_code == 0
    assert "MATCH" in result.output
    assert "NO MATCH" not in result.output


def test_compare_no_match_exits_one() -> None:
    result = runner.invoke(app, ["compare", "John Smith", "Jane Doe"])
    assert result.exit_code == 1
    assert "NO MATCH" in result.output


def test_compare_explain_shows_rule() -> None:
    result = runner.invoke(app, ["compare", "Olena Shevchenko", "Olena Shevchenko 2", "--explain"])
    assert result.exit_code == 0
    assert "Rule: slug_equal" in result.output


def test_compare_thorough_flag() -> None:
    assert runner.invoke(app, ["compare", "Ivan Petrov", "Petrov Ivan"]).exit_code == 1
    assert runner.invoke(app, ["compare", "Ivan Petrov", "Petrov Ivan", "--thorough"]).exit_code == 0


def test_evaluate_json(ground_truth_path) -> None:
    result = runner.invoke(app, ["evaluate", str(ground_truth_path), "--json"])
    assert result.exit_code == 0, result.output

    payload = json.loads(result.stdout)
    assert payload["confusion_matrix"] == {"tp": 5, "fp": 1, "fn": 2, "tn": 4}
    assert payload["total"] == 12
    assert abs(payload["f1"] - 10 / 13) < 1e-9
    assert [m["id"] for m in payload["mismatches"]] == ["6", "7", "11"]


def test_evaluate_table(ground_truth_path) -> None:
    result = runner.invoke(app, ["evaluate", str(ground_truth_path), "--workers", "2"])
    assert result.exit_code == 0, result.output
    assert "Precision" in result.output
    assert "0.8333" in result.output
    assert "Misclassified pairs" in result.output


def test_evaluate_quiet_hides_mismatches(ground_truth_path) -> None:
    result = runner.invoke(app, ["evaluate", str(ground_truth_path), "--quiet"])
    assert result.exit_code == 0
    assert "Misclassified pairs" not in result.output


def test_evaluate_missing_file() -> None:
    result = runner.invoke(app, ["evaluate", "no/such/file.csv"])
    assert result.exit_code != 0


def test_dedupe_json(tmp_path) -> None:
    names = tmp_path / "names.txt"
    names.write_text(
        "Olena Shevchenko\nAlexander Smith\n\nOlena Shevchenko 2\nAlexandr Smith\nJohn Smith\n",
        encoding="utf-8",
    )
    result = runner.invoke(app, ["dedupe", str(names), "--json"])
    assert result.exit_code == 0, result.output

    payload = json.loads(result.stdout)
    assert payload["names"] == 5
    assert payload["clusters"] == [
        ["Olena Shevchenko", "Olena Shevchenko 2"],
        ["Alexander Smith", "Alexandr Smith"],
    ]


def test_dedupe_no_duplicates(tmp_path) -> None:
    names = tmp_path / "names.txt"
    names.write_text("John Smith\nPeter Parker\n", encoding="utf-8")
    result = runner.invoke(app, ["dedupe", str(names)])
    assert result.exit_code == 0
    assert "No duplicates found" in result.output
