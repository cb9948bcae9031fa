from __future__ import annotations

import json
import re
from pathlib import Path

from typer.testing import CliRunner

from weighted_levenshtein.cli import app

runner = CliRunner()


def test_distance_command_prints_characters_distance() -> None:
    result = runner.invoke(app, ["distance", "kitten", "sitting"])
    assert result.exit_code == 0, result.output
    assert re.search(r"distance\W+3\b", result.output)


def test_distance_command_by_words_with_indel() -> None:
    result = runner.invoke(
        app,
        ["distance", "the quick fox", "the slow fox", "--unit", "words", "--model", "indel"],
    )
    assert result.exit_code == 0, result.output
    assert re.search(r"distance\W+2\b", result.output)


def test_distance_command_with_cost_table(tmp_path: Path) -> None:
    costs = tmp_path / "costs.yaml"
    costs.write_text("add: {x: 10}\n", encoding="utf-8")
    result = runner.invoke(app, ["distance", "ab", "abx", "--costs", str(costs)])
    assert result.exit_code == 0, result.output
    assert re.search(r"distance\W+10\b", result.output)


def test_unknown_model_exits_with_error() -> None:
    result = runner.invoke(app, ["distance", "a", "b", "--model", "nope"])
    assert result.exit_code == 1
    assert "Unknown cost model" in result.output


def test_element_model_is_rejected_on_the_command_line() -> None:
    result = runner.invoke(app, ["distance", "a", "b", "--model", "element"])
    assert result.exit_code == 1


def test_missing_cost_table_exits_with_error(tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["distance", "a", "b", "--costs", str(tmp_path / "absent.yaml")]
    )
    assert result.exit_code == 1


def test_batch_writes_results(tmp_path: Path) -> None:
    pairs = tmp_path / "pairs.jsonl"
    pairs.write_text(
        "\n".join(
            json.dumps(row)
            for row in [
                {"id": "p1", "a": "abc", "b": "abcc"},
                {"id": "p2", "a": "abcdefg", "b": "xabc"},
                {"id": "p3", "a": ["The", "quick"], "b": ["The", "very", "quick"]},
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    output = tmp_path / "out" / "results.jsonl"
    result = runner.invoke(app, ["batch", str(pairs), "--output", str(output)])
    assert result.exit_code == 0, result.output

    rows = [json.loads(line) for line in output.read_text(encoding="utf-8").splitlines()]
    assert [row["id"] for row in rows] == ["p1", "p2", "p3"]
    assert [row["distance"] for row in rows] == [1, 5, 1]
    assert rows[1]["normalized_distance"] == 5 / 7


def test_batch_rejects_rows_without_pairs(tmp_path: Path) -> None:
    pairs = tmp_path / "pairs.jsonl"
    pairs.write_text(json.dumps({"a": "only"}) + "\n", encoding="utf-8")
    result = runner.invoke(app, ["batch", str(pairs)])
    assert result.exit_code == 1


def test_batch_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["batch", str(tmp_path / "none.jsonl")])
    assert result.exit_code == 1


def test_models_lists_registry() -> None:
    result = runner.invoke(app, ["models"])
    assert result.exit_code == 0
    for name in ("uniform", "indel", "table", "element"):
        assert name in result.output


def test_batch_rejects_malformed_json(tmp_path: Path) -> None:
    pairs = tmp_path / "pairs.jsonl"
    pairs.write_text('{"a": "abc", "b": "abd"}\n{"a": "abc",\n', encoding="utf-8")
    result = runner.invoke(app, ["batch", str(pairs)])
    assert result.exit_code == 1
    assert "Malformed JSON" in result.output


def test_malformed_cost_table_exits_with_error(tmp_path: Path) -> None:
    costs = tmp_path / "costs.yaml"
    costs.write_text("add: [unclosed\n", encoding="utf-8")
    result = runner.invoke(app, ["distance", "a", "b", "--costs", str(costs)])
    assert result.exit_code == 1
    assert "Cannot load cost table" in result.output
