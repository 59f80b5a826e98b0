import io
import json
import logging
import pytest
from binner.cli import build_parser, main


def test_defaults():
    args = build_parser().parse_args([])
    assert args.bin_width == 1.0
    assert args.bin_origin == 0.0
    assert args.input is None


def test_stdin_to_stdout(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1.0\n55.6\n-15.2\n55.9\n"))
    assert main(["-w", "1.0", "-s", "1.0"]) == 0
    assert capsys.readouterr().out == "-15.5\t1\n1.5\t1\n55.5\t2\n"


def test_input_file_and_invalid_lines(tmp_path, capsys, caplog):
    f = tmp_path / "vals.txt"
    f.write_text("0.5\nnot-a-number\n 0.7 \n3\n")
    with caplog.at_level(logging.WARNING):
        assert main(["--width", "2", str(f)]) == 0
    assert capsys.readouterr().out == "1\t2\n3\t1\n"
    assert any("Invalid value entered" in r.getMessage() for r in caplog.records)


def test_empty_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_bad_width_aborts(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-w", "wide"])
    assert exc.value.code == 2
    assert "invalid float value" in capsys.readouterr().err


def test_missing_input_file(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert main([str(tmp_path / "nope.txt")]) == 1
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_report_and_plot(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0.1\n0.2\n1.4\n"))
    report = tmp_path / "bins.json"
    plot = tmp_path / "bins.png"
    assert main(["--report", str(report), "--plot", str(plot)]) == 0
    assert capsys.readouterr().out == "0.5\t2\n1.5\t1\n"
    assert json.loads(report.read_text())["n_bins"] == 2
    assert plot.exists() and plot.stat().st_size > 0


def test_undecodable_line_is_skipped(tmp_path, capsys):
    f = tmp_path / "vals.txt"
    f.write_bytes(b"1.0\n\xff\n2.5\n")
    assert main([str(f)]) == 0
    assert capsys.readouterr().out == "1.5\t1\n2.5\t1\n"
