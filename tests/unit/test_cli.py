"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys

import pytest

from bitsparrow import __version__
from bitsparrow.cli.convert import decode_values, encode_values, parse_pair, parse_value
from bitsparrow.cli.main import main


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = subprocess.run(
        [sys.executable, "-m", "bitsparrow.cli.main", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "bitsparrow: Compact Binary Codec" in result.stdout
    assert "--encode" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = subprocess.run(
        [sys.executable, "-m", "bitsparrow", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert f"bitsparrow {__version__}" in result.stdout


def test_cli_size(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--size", "300"]) == 0
    assert capsys.readouterr().out == "812c\n"


def test_cli_encode(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--encode", "uint8:200", "string:hi", "bool:true"]) == 0
    assert capsys.readouterr().out == "c802686901\n"


def test_cli_decode(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--decode", "c8", "02 6869", "01", "--types", "uint8,string,bool"]) == 0
    assert capsys.readouterr().out.splitlines() == ["uint8: 200", "string: 'hi'", "bool: True"]


def test_cli_decode_trailing_bytes(capsys: pytest.CaptureFixture[str]) -> None:
    """Test unread bytes are reported as an error."""
    assert main(["--decode", "c8ff", "--types", "uint8"]) == 1
    assert "1 bytes left unread" in capsys.readouterr().err


def test_cli_decode_requires_types(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--decode", "c8"]) == 1
    assert "--types" in capsys.readouterr().err


@pytest.mark.parametrize(
    "args",
    [
        ["--encode", "uint8:300"],
        ["--encode", "uint128:1"],
        ["--encode", "uint8"],
        ["--size", str(2**53)],
        ["--decode", "zz", "--types", "uint8"],
        ["--decode", "0102", "--types", "uint32"],
    ],
)
def test_cli_errors(args: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    """Test invalid input exits with status 1 and an error message."""
    assert main(args) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_cli_no_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "usage:" in capsys.readouterr().out


class TestConvert:
    """Test text conversion helpers."""

    @pytest.mark.parametrize(
        ("kind", "text", "expected"),
        [
            ("uint16", "0x10", 16),
            ("int8", "-5", -5),
            ("float32", "1.5", 1.5),
            ("bool", "Yes", True),
            ("bool", "off", False),
            ("bytes", "00ff", b"\x00\xff"),
            ("string", "a:b", "a:b"),
        ],
    )
    def test_parse_value(self, kind: str, text: str, expected: object) -> None:
        assert parse_value(kind, text) == expected

    def test_parse_pair_keeps_colons_in_value(self) -> None:
        assert parse_pair("string:a:b") == ("string", "a:b")

    def test_parse_bad_bool(self) -> None:
        with pytest.raises(ValueError, match="Not a boolean"):
            parse_value("bool", "maybe")

    def test_encode_decode_values(self) -> None:
        pairs = [("uint8", 1), ("bool", True), ("bytes", b"x")]
        data = encode_values(pairs)
        assert decode_values(data, ["uint8", "bool", "bytes"]) == [1, True, b"x"]


def test_main_module_import_does_not_exit() -> None:
    """Test importing the package entry module leaves the process running."""
    import importlib

    module = importlib.import_module("bitsparrow.__main__")
    assert module.main is main
