"""Tests for shift cipher error types."""

from pathlib import Path

from shift_cipher.shared.errors import (
    CipherError,
    ConfigValidationError,
    InputNotFoundError,
    InputUnavailableError,
    IntegerParseError,
    OptionParseError,
    OutputUnavailableError,
)


class TestOptionParseError:
    """Test option error messages."""

    def test_invalid_argument_message(self):
        """Test the default message for an unrecognized token."""
        error = OptionParseError("--bogus")

        assert str(error) == "Invalid argument (--bogus) used."
        assert error.token == "--bogus"
        assert error.character is None
        assert error.suggestions == ["See HELP with -h or --help option."]

    def test_invalid_character_message(self):
        """Test the message for a bad character in a combined token."""
        error = OptionParseError("-npq", character="q")

        assert str(error) == "Invalid single-character option (q) within (-npq)."

    def test_integer_error(self):
        """Test IntegerParseError is an OptionParseError naming the token."""
        error = IntegerParseError("12a")

        assert isinstance(error, OptionParseError)
        assert str(error) == "Shift amount (12a) is not a valid signed integer."
        assert error.token == "12a"


class TestFileErrors:
    """Test file error messages."""

    def test_input_not_found(self):
        """Test the missing input message and path."""
        error = InputNotFoundError("data/in.txt")

        assert str(error) == "Input file not found: data/in.txt"
        assert error.path == Path("data/in.txt")
        assert error.suggestions == []

    def test_input_unavailable(self):
        """Test the unreadable input message, path and reason."""
        error = InputUnavailableError("in.txt", "Permission denied")

        assert str(error) == (
            "Input file cannot be opened for reading: in.txt (Permission denied)"
        )
        assert error.path == Path("in.txt")
        assert error.reason == "Permission denied"

    def test_output_unavailable_with_reason(self):
        """Test the reason is appended when given."""
        error = OutputUnavailableError("out.txt", "Permission denied")

        assert str(error) == (
            "Output file cannot be opened for writing: out.txt (Permission denied)"
        )
        assert error.reason == "Permission denied"

    def test_output_unavailable_without_reason(self):
        """Test the message without a reason."""
        assert str(OutputUnavailableError("out.txt")) == (
            "Output file cannot be opened for writing: out.txt"
        )


def test_hierarchy():
    """Test every error derives from CipherError."""
    for error in (
        OptionParseError("-x"),
        IntegerParseError("x"),
        InputNotFoundError("a"),
        InputUnavailableError("a"),
        OutputUnavailableError("b"),
        ConfigValidationError("bad", field_name="shift_amount"),
    ):
        assert isinstance(error, CipherError)
