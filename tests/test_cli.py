import io

import pytest

import geoshorthand.__main__ as cli


def test_main_prints_numbered_translations(tmp_path, capsys):
    path = tmp_path / "problem.txt"
    path.write_text("\\\\P:A/S:AB\\\\", encoding="utf-8")

    cli.main([str(path)])

    out = capsys.readouterr().out
    assert out == "1. P:A\n   Construct point A.\n2. S:AB\n   Connect segment AB.\n"


def test_main_plain_output(tmp_path, capsys):
    path = tmp_path / "problem.txt"
    path.write_text("P:A/ABC*IS?", encoding="utf-8")

    cli.main([str(path), "--plain"])

    assert capsys.readouterr().out == "Construct point A.\nIs ABC isosceles?\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(cli.sys, "stdin", io.StringIO("C:O;5"))

    cli.main(["--plain"])

    assert capsys.readouterr().out == "Construct a circle with center O and radius 5.\n"


def test_main_passes_max_depth(monkeypatch, capsys):
    monkeypatch.setattr(cli.sys, "stdin", io.StringIO("\\p:\\p:P:A"))

    cli.main(["-", "--plain", "--max-depth", "1"])

    assert capsys.readouterr().out == "\\p:\\p:P:A\n"


def test_main_prints_reference(capsys):
    cli.main(["--reference"])

    assert capsys.readouterr().out.strip() == cli.REFERENCE


def test_main_exits_on_unreadable_file(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path / "missing.txt")])

    assert excinfo.value.code == 1
