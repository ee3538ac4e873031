"""
CLI tests: read loop and argument handling.
"""

import io
import sys

from ripsaw import cli
from ripsaw.sizing import CutList


def test_read_loop_stops_at_quit():
    out = io.StringIO()
    cut_list = cli.read_cut_list(["2x4x8\n", "2x4x8\n", "1x6x10\n", "q\n", "2x2x2\n"], CutList(), out=out)
    assert cut_list.get_num_boards() == 3
    assert len(cut_list) == 2


def test_read_loop_skips_bad_specs():
    out = io.StringIO()
    cut_list = cli.read_cut_list(["2x4\n", "\n", "2x4x8\n"], CutList(), out=out)
    assert cut_list.get_num_boards() == 1
    assert "Invalid spec" in out.getvalue()


def test_read_loop_nominal_mode():
    cut_list = cli.read_cut_list(["2x4x8"], CutList(), nominal=True, out=io.StringIO())
    board, count = next(cut_list.entries())
    assert board.is_nominal is True
    assert count == 1


def test_main_prints_report(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2x4x8\n2x4x8\nq\n"))
    assert cli.main(["--blade-width", "0.1"]) == 0
    out = capsys.readouterr().out
    assert "Cut list:" in out
    assert "2.0x4.0x8.0 (2)" in out
    assert "Total boards: 2" in out


def test_main_writes_pdf(monkeypatch, tmp_path, capsys):
    pdf_path = tmp_path / "cuts.pdf"
    monkeypatch.setattr(sys, "stdin", io.StringIO("1x4x8\n"))
    assert cli.main(["--nominal", "--pdf", str(pdf_path)]) == 0
    assert pdf_path.read_bytes()[:5] == b"%PDF-"
