import argparse
from pathlib import Path

import pytest

from linepad.__main__ import main, parse_columns


def test_dump_tags_annotated_runs(tmp_path: Path, capsys) -> None:
    source = tmp_path / "main.rs"
    source.write_text("fn main() {\n    let x = 1; // hi\n}\n", encoding="utf-8")

    assert main([str(source)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == [
        "<keyword>fn</keyword> main() {",
        "    <keyword>let</keyword> x = <number>1</number>; <comment>// hi</comment>",
        "}",
    ]


def test_dump_clips_columns_and_highlights_search(tmp_path: Path, capsys) -> None:
    source = tmp_path / "notes.txt"
    source.write_text("find the needle here\n", encoding="utf-8")

    assert main([str(source), "--columns", "5:15", "--search", "needle"]) == 0

    assert capsys.readouterr().out.splitlines()[0] == "the <match>needle</match>"


def test_missing_file_reports_error(tmp_path: Path, capsys) -> None:
    assert main([str(tmp_path / "missing.rs")]) == 1

    assert "Error loading" in capsys.readouterr().err


def test_parse_columns() -> None:
    assert parse_columns("5:10") == range(5, 10)
    assert parse_columns(":8") == range(0, 8)

    with pytest.raises(argparse.ArgumentTypeError):
        parse_columns("abc")
