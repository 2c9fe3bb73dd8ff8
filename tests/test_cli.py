"""
Tests for the command line interface.
"""

import json
from pathlib import Path

import pytest

from perfect_ini.__main__ import EXIT_ERROR, EXIT_NOT_FOUND, EXIT_OK, build_parser, main


def test_get(ini_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """get prints the value."""
    assert main(["get", str(ini_file), "server", "port"]) == EXIT_OK
    assert capsys.readouterr().out == "8080\n"


def test_get_missing_key(ini_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """get reports a missing key with its own exit code."""
    assert main(["get", str(ini_file), "server", "nope"]) == EXIT_NOT_FOUND
    assert capsys.readouterr().out == ""


def test_set_in_place(ini_file: Path) -> None:
    """set rewrites the file, touching only the edited line."""
    assert main(["set", str(ini_file), "server", "port", "1"]) == EXIT_OK

    assert ini_file.read_bytes() == b"; settings\r\n[server]\r\nhost = localhost\r\nport=1"


def test_set_to_output(ini_file: Path, tmp_path: Path) -> None:
    """set --output leaves the source file alone."""
    original = ini_file.read_bytes()
    output = tmp_path / "out.ini"

    assert main(["set", str(ini_file), "new", "k", "v", "--output", str(output)]) == EXIT_OK

    assert ini_file.read_bytes() == original
    assert output.read_bytes() == original + b"\r\n[new]\r\nk=v"


def test_dump(ini_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """dump prints the plain view as JSON."""
    assert main(["dump", str(ini_file)]) == EXIT_OK

    assert json.loads(capsys.readouterr().out) == {
        "server": {"host ": "localhost", "port": "8080"},
    }


def test_check(ini_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """check confirms the round trip."""
    assert main(["check", str(ini_file)]) == EXIT_OK
    assert "OK (1 sections, 2 keys)" in capsys.readouterr().out


def test_check_mixed_line_endings(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """check fails for a file that would not be written back unchanged."""
    path = tmp_path / "mixed.ini"
    path.write_bytes(b"[a]\nb=c\r\n")

    assert main(["--no-color", "check", str(path)]) == EXIT_ERROR

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "round trip changed the content" in captured.err
    assert path.read_bytes() == b"[a]\nb=c\r\n"


def test_parse_error_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Invalid files give exit code 1 and a message on stderr."""
    path = tmp_path / "bad.ini"
    path.write_text("oops\n")

    assert main(["--no-color", "check", str(path)]) == EXIT_ERROR
    assert "Line 1, column 1" in capsys.readouterr().err


def test_command_is_required() -> None:
    """Running without a subcommand is a usage error."""
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
