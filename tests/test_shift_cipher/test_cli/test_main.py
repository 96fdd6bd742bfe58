"""Tests for the shift-encipher and shift-decipher entry points."""

import os
from pathlib import Path

import pytest

from shift_cipher.character.stream import StreamTransformer
from shift_cipher.cli.main import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    decipher_main,
    encipher_main,
    run,
)
from shift_cipher.shared.config import Direction

LINESEP = os.linesep.encode("ascii")


@pytest.fixture
def plain_file(tmp_path: Path) -> Path:
    path = tmp_path / "hello.txt"
    path.write_bytes(b"Hello, World!\nRoom 101\n")
    return path


class TestUsageAndHelp:
    """Test runs that stop before touching any file."""

    def test_no_options_prints_usage(self, capsys, tmp_path: Path):
        """Test that no options prints the usage and exits 0."""
        exit_code = encipher_main(["shift-encipher"])

        captured = capsys.readouterr()
        assert exit_code == EXIT_SUCCESS
        assert captured.out.startswith("Usage:")
        assert "shift-encipher -i <IFILE>" in captured.out
        assert captured.err == ""
        assert list(tmp_path.iterdir()) == []

    def test_usage_uses_stripped_program_name(self, capsys):
        """Test the usage text names the program without its directory."""
        run(["/opt/tools/bin/shift-decipher"], Direction.DECIPHER)

        out = capsys.readouterr().out
        assert "/opt/tools/bin" not in out
        assert "IFILE.dec" in out

    @pytest.mark.parametrize("flag", ["-h", "--help", "-nh"])
    def test_help(self, capsys, plain_file: Path, flag):
        """Test help prints the full message and processes nothing."""
        exit_code = encipher_main(["shift-encipher", "-i", str(plain_file), flag])

        captured = capsys.readouterr()
        assert exit_code == EXIT_SUCCESS
        assert "--shift-amount" in captured.out
        assert not Path(str(plain_file) + ".ciph").exists()


class TestErrors:
    """Test fatal error reporting."""

    def test_invalid_option(self, capsys):
        """Test an unknown option exits 1 with the token on stderr."""
        exit_code = encipher_main(["shift-encipher", "--bogus"])

        captured = capsys.readouterr()
        assert exit_code == EXIT_FAILURE
        assert "Error: Invalid argument (--bogus) used." in captured.err
        assert "--help" in captured.err
        assert captured.out == ""

    def test_invalid_shift(self, capsys, plain_file: Path):
        """Test a non-integer shift exits 1 without writing output."""
        exit_code = encipher_main(["shift-encipher", "-i", str(plain_file), "-s", "ten"])

        assert exit_code == EXIT_FAILURE
        assert "(ten)" in capsys.readouterr().err
        assert not Path(str(plain_file) + ".ciph").exists()

    def test_oversized_shift(self, capsys, plain_file: Path):
        """Test a shift with thousands of digits is a range error, not a crash."""
        exit_code = encipher_main(
            ["shift-encipher", "-i", str(plain_file), "-s", "9" * 5000]
        )

        assert exit_code == EXIT_FAILURE
        assert "is out of range" in capsys.readouterr().err
        assert not Path(str(plain_file) + ".ciph").exists()

    def test_missing_input_file(self, capsys, tmp_path: Path):
        """Test a missing input file exits 1 and names the file."""
        missing = tmp_path / "absent.txt"

        exit_code = encipher_main(["shift-encipher", "-i", str(missing)])

        captured = capsys.readouterr()
        assert exit_code == EXIT_FAILURE
        assert f"Input file not found: {missing}" in captured.err
        assert captured.out == ""

    def test_unwritable_output(self, capsys, plain_file: Path, tmp_path: Path):
        """Test an output in a missing directory exits 1."""
        target = tmp_path / "missing_dir" / "out.txt"

        exit_code = encipher_main(
            ["shift-encipher", "-i", str(plain_file), "-o", str(target)]
        )

        assert exit_code == EXIT_FAILURE
        assert "Output file cannot be opened" in capsys.readouterr().err

    def test_unexpected_error(self, capsys, plain_file: Path, monkeypatch):
        """Test an unanticipated failure exits 1 with the generic message."""
        def explode(self, input_path, output_path):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(StreamTransformer, "transform_file", explode)

        exit_code = encipher_main(["shift-encipher", "-i", str(plain_file)])

        captured = capsys.readouterr()
        assert exit_code == EXIT_FAILURE
        assert "Unexpected error encountered. Program terminated." in captured.err
        assert "disk on fire" not in captured.err

    def test_unexpected_error_traceback_stays_at_debug(
        self, capsys, plain_file: Path, monkeypatch
    ):
        """Test -l does not surface the traceback of an unexpected failure."""
        def explode(self, input_path, output_path):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(StreamTransformer, "transform_file", explode)

        exit_code = encipher_main(["shift-encipher", "-l", "-i", str(plain_file)])

        captured = capsys.readouterr()
        assert exit_code == EXIT_FAILURE
        assert "Traceback" not in captured.err
        assert "disk on fire" not in captured.err

    def test_unreadable_input(self, capsys, plain_file: Path, monkeypatch):
        """Test an input that cannot be opened is named and the output is kept."""
        existing = Path(str(plain_file) + ".ciph")
        existing.write_bytes(b"keep me\n")
        original_open = Path.open

        def refuse_input(self, *args, **kwargs):
            if self == plain_file:
                raise PermissionError(13, "Permission denied", str(self))
            return original_open(self, *args, **kwargs)

        monkeypatch.setattr(Path, "open", refuse_input)

        exit_code = encipher_main(["shift-encipher", "-i", str(plain_file)])

        monkeypatch.undo()
        assert exit_code == EXIT_FAILURE
        assert f"Input file cannot be opened for reading: {plain_file}" in capsys.readouterr().err
        assert existing.read_bytes() == b"keep me\n"


class TestCipherRuns:
    """Test complete encipher and decipher runs."""

    def test_encipher_default_output(self, capsys, plain_file: Path):
        """Test enciphering writes IFILE.ciph and reports the count."""
        exit_code = encipher_main(["shift-encipher", "-i", str(plain_file)])

        output = Path(str(plain_file) + ".ciph")
        assert exit_code == EXIT_SUCCESS
        assert output.read_bytes() == b"Mjqqt, Btwqi!" + LINESEP + b"Wttr 101" + LINESEP
        assert "Read 21 characters from the input file." in capsys.readouterr().out

    def test_encipher_with_digits(self, plain_file: Path, tmp_path: Path):
        """Test -n shifts digits modulo 10."""
        output = tmp_path / "out.txt"

        encipher_main(["shift-encipher", "-n", "-i", str(plain_file), "-o", str(output)])

        assert output.read_bytes().splitlines()[1] == b"Wttr 656"

    def test_round_trip(self, plain_file: Path, tmp_path: Path):
        """Test deciphering with the same options restores the input."""
        enciphered = tmp_path / "hello.ciph"
        restored = tmp_path / "hello.out"

        assert encipher_main(["shift-encipher", "-a", "-s", "-80",
                              "-i", str(plain_file), "-o", str(enciphered)]) == EXIT_SUCCESS
        assert decipher_main(["shift-decipher", "-a", "-s", "-80",
                              "-i", str(enciphered), "-o", str(restored)]) == EXIT_SUCCESS

        assert restored.read_bytes().splitlines() == plain_file.read_bytes().splitlines()

    def test_decipher_default_output(self, plain_file: Path):
        """Test deciphering writes IFILE.dec."""
        decipher_main(["shift-decipher", "-i", str(plain_file)])

        output = Path(str(plain_file) + ".dec")
        assert output.read_bytes().splitlines()[0] == b"Czggj, Rjmgy!"

    def test_show_log_summary(self, capsys, plain_file: Path):
        """Test -l prints the diagnostic summary to stderr."""
        exit_code = encipher_main(["./shift-encipher", "-l", "-n", "-s", "13",
                                   "-i", str(plain_file)])

        captured = capsys.readouterr()
        assert exit_code == EXIT_SUCCESS
        assert "[Raw] Program name:  ./shift-encipher" in captured.err
        assert "[Stripped] Name:     shift-encipher" in captured.err
        assert "Shift amount:        13" in captured.err
        assert "[Reduced] Shift:     13" in captured.err
        assert "Number shift amount: 3" in captured.err
        assert "Punct. shift amount: 0" in captured.err
        assert "Encipher dictionary: {(A,N), (B,O)" in captured.err
        assert "Number chars read:   21" in captured.err
        assert "Throughput:" in captured.err
        assert "Memory growth:" in captured.err
        assert "Read 21 characters from the input file." not in captured.out

    def test_empty_input(self, capsys, tmp_path: Path):
        """Test an empty input produces an empty output."""
        source = tmp_path / "empty.txt"
        source.write_bytes(b"")

        exit_code = encipher_main(["shift-encipher", "-i", str(source)])

        assert exit_code == EXIT_SUCCESS
        assert Path(str(source) + ".ciph").read_bytes() == b""
        assert "Read 0 characters" in capsys.readouterr().out
