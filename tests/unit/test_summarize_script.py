"""Tests for the summarize_inventory command-line script."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make scripts/ importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "scripts"))

from summarize_inventory import main  # noqa: E402


@pytest.fixture
def stock_csv(tmp_path):
    path = tmp_path / "stock.csv"
    path.write_bytes(
        b"Code,Quantity,Location\n"
        b"A1,3,B1 2\n"
        b"A1,5,B1 2\n"
        b"oops\n"
        b"B2,1,A1 9\n"
    )
    return path


class TestMain:
    def test_prints_table(self, stock_csv, capsys):
        assert main([str(stock_csv)]) == 0
        out, err = capsys.readouterr()
        lines = out.splitlines()
        assert lines[0].split() == ["Code", "Quantity", "Location"]
        assert lines[1].split() == ["B2", "1", "A1", "9"]
        assert lines[2].split() == ["A1", "8", "B1", "2"]
        assert "Skipped 1 malformed rows" in err

    def test_writes_output_csv(self, stock_csv, tmp_path):
        output = tmp_path / "sorted_products.csv"
        assert main([str(stock_csv), "--output", str(output)]) == 0
        assert output.read_bytes() == b"Code,Quantity,Location\nB2,1,A1 9\nA1,8,B1 2\n"

    def test_no_header(self, tmp_path, capsys):
        path = tmp_path / "stock.csv"
        path.write_bytes(b"A1,3,B1 2\n")
        assert main([str(path), "--no-header"]) == 0
        assert capsys.readouterr().out.splitlines()[1].split() == ["A1", "3", "B1", "2"]

    def test_parse_error_exits_nonzero(self, tmp_path, capsys):
        path = tmp_path / "stock.csv"
        path.write_bytes(b"Code,Quantity,Location\nA1,abc,B1 2\n")
        assert main([str(path)]) == 1
        assert "Invalid quantity on line 2" in capsys.readouterr().err

    def test_missing_file_exits_nonzero(self, tmp_path, capsys):
        assert main([str(tmp_path / "absent.csv")]) == 1
        assert "Error processing CSV" in capsys.readouterr().err

    def test_log_level_is_case_insensitive(self, stock_csv):
        assert main([str(stock_csv), "--log-level", "debug"]) == 0

    def test_unknown_log_level_rejected(self, stock_csv, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([str(stock_csv), "--log-level", "bogus"])
        assert excinfo.value.code == 2
        assert "invalid choice" in capsys.readouterr().err
