"""Error types raised or reported by the shift cipher.

Every fatal condition a run can hit has its own class so the top-level
handler can map it to a message and an exit code.
"""

from pathlib import Path
from typing import List, Optional, Union

PathLike = Union[str, Path]


class CipherError(Exception):
    """Base exception for all shift cipher errors."""

    def __init__(self, message: str, suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.suggestions = suggestions or []


class OptionParseError(CipherError):
    """A command-line token could not be interpreted."""

    def __init__(
        self,
        token: str,
        message: Optional[str] = None,
        character: Optional[str] = None,
    ):
        if message is None:
            if character is not None:
                message = (
                    f"Invalid single-character option ({character}) "
                    f"within ({token})."
                )
            else:
                message = f"Invalid argument ({token}) used."
        super().__init__(
            message, suggestions=["See HELP with -h or --help option."]
        )
        self.token = token
        self.character = character


class IntegerParseError(OptionParseError):
    """The shift amount is not a signed integer in the accepted range."""

    def __init__(self, token: str, message: Optional[str] = None):
        super().__init__(
            token,
            message or f"Shift amount ({token}) is not a valid signed integer.",
        )


class InputNotFoundError(CipherError):
    """The input file does not exist."""

    def __init__(self, path: PathLike):
        super().__init__(f"Input file not found: {path}")
        self.path = Path(path)


class InputUnavailableError(CipherError):
    """The input file exists but cannot be opened for reading."""

    def __init__(self, path: PathLike, reason: Optional[str] = None):
        message = f"Input file cannot be opened for reading: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = Path(path)
        self.reason = reason


class OutputUnavailableError(CipherError):
    """The output file cannot be opened for writing."""

    def __init__(self, path: PathLike, reason: Optional[str] = None):
        message = f"Output file cannot be opened for writing: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = Path(path)
        self.reason = reason


class ConfigValidationError(CipherError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message, suggestions)
        self.field_name = field_name
