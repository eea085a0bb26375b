import io
import json
from pathlib import Path

import pytest

from descape_py import __version__
from descape_py.cli import main


def test_unescapes_arguments(capsys) -> None:
    assert main(["a\\tb", "line\\u{21}"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "a\tb\nline!\n"


def test_invalid_escape_exits_with_error(capsys) -> None:
    assert main(["Uh oh! \\xJJ"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "ERROR: invalid escape sequence at byte 9\n"


def test_reads_file(tmp_path: Path, capsys) -> None:
    path = tmp_path / "input.txt"
    path.write_text("one\\ntwo", encoding="utf-8")
    assert main(["--file", str(path)]) == 0
    assert capsys.readouterr().out == "one\ntwo"


def test_missing_file(tmp_path: Path, capsys) -> None:
    assert main(["-f", str(tmp_path / "nope.txt")]) == 1
    assert capsys.readouterr().err.startswith("ERROR: ")


def test_reads_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("\\x41\\102C"))
    assert main([]) == 0
    assert capsys.readouterr().out == "ABC"


def test_lenient_flag(capsys) -> None:
    assert main(["\\q"]) == 1
    capsys.readouterr()
    assert main(["--lenient", "\\q"]) == 0
    assert capsys.readouterr().out == "q\n"


def test_no_extended_flag(capsys) -> None:
    assert main(["--no-extended", "\\e"]) == 1
    assert "byte 1" in capsys.readouterr().err


def test_config_file(tmp_path: Path, capsys) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"lenient": True}))
    assert main(["--config", str(path), "\\z"]) == 0
    assert capsys.readouterr().out == "z\n"


def test_version(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_file_that_is_not_utf8(tmp_path: Path, capsys) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"\xff\xfe\\n")
    assert main(["-f", str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("ERROR: ")


def test_stdin_that_is_not_utf8(monkeypatch, capsys) -> None:
    stdin = io.TextIOWrapper(io.BytesIO(b"ok \xff\\n"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", stdin)
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("ERROR: ")
