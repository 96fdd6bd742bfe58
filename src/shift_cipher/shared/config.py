"""Configuration classes for the shift cipher.

This module provides the configuration objects that control how a cipher run
builds its substitution table and how the stream transformer writes lines.
"""

import json
import os
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict

from .errors import ConfigValidationError

# Range accepted for a shift amount (a signed 32-bit integer)
SHIFT_MIN = -(2 ** 31)
SHIFT_MAX = 2 ** 31 - 1

DEFAULT_SHIFT_AMOUNT = 5

VALID_LINE_TERMINATORS = ("\n", "\r\n", "\r")


class Direction(Enum):
    """Direction of a cipher run."""

    ENCIPHER = "encipher"
    DECIPHER = "decipher"

    @property
    def default_suffix(self) -> str:
        """Suffix appended to the input name when no output name is given."""
        return ".ciph" if self is Direction.ENCIPHER else ".dec"

    @property
    def title(self) -> str:
        """Capitalized name used in headings."""
        return self.value.capitalize()


@dataclass(frozen=True)
class StreamConfig:
    """Configuration for line-by-line stream transformation."""

    line_terminator: str = os.linesep

    def __post_init__(self) -> None:
        """Validate stream configuration."""
        if self.line_terminator not in VALID_LINE_TERMINATORS:
            raise ConfigValidationError(
                f"line_terminator must be one of {VALID_LINE_TERMINATORS!r}",
                field_name="line_terminator",
            )

    @property
    def terminator_bytes(self) -> bytes:
        """Line terminator as written to the output file."""
        return self.line_terminator.encode("ascii")


@dataclass(frozen=True)
class CipherConfig:
    """Complete configuration for one cipher run.

    Uppercase and lowercase letters are always shifted; digits and punctuation
    are shifted only when their flag is set. Thread-safe due to frozen
    dataclass implementation.
    """

    shift_amount: int = DEFAULT_SHIFT_AMOUNT
    shift_digits: bool = False
    shift_punctuation: bool = False
    direction: Direction = Direction.ENCIPHER
    stream: StreamConfig = field(default_factory=StreamConfig)

    def __post_init__(self) -> None:
        """Validate cipher configuration."""
        if isinstance(self.shift_amount, bool) or not isinstance(self.shift_amount, int):
            raise ConfigValidationError(
                "shift_amount must be an integer", field_name="shift_amount"
            )
        if not SHIFT_MIN <= self.shift_amount <= SHIFT_MAX:
            raise ConfigValidationError(
                f"shift_amount must be between {SHIFT_MIN} and {SHIFT_MAX}",
                field_name="shift_amount",
                suggestions=["Use a smaller shift; it is reduced per class anyway"],
            )
        if not isinstance(self.direction, Direction):
            raise ConfigValidationError(
                "direction must be a Direction", field_name="direction"
            )

    @classmethod
    def letters_only(cls, shift_amount: int = DEFAULT_SHIFT_AMOUNT) -> "CipherConfig":
        """Create configuration shifting only upper and lowercase letters."""
        return cls(shift_amount=shift_amount)

    @classmethod
    def all_classes(cls, shift_amount: int = DEFAULT_SHIFT_AMOUNT) -> "CipherConfig":
        """Create configuration shifting letters, digits and punctuation."""
        return cls(
            shift_amount=shift_amount,
            shift_digits=True,
            shift_punctuation=True,
        )

    def override(self, **kwargs: Any) -> "CipherConfig":
        """Create a new configuration with specific overrides.

        Nested stream fields use ``stream__`` notation:

            >>> config = CipherConfig().override(
            ...     shift_amount=13, stream__line_terminator="\\n"
            ... )
        """
        stream_overrides: Dict[str, Any] = {}
        top_level: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if key.startswith("stream__"):
                stream_overrides[key.split("__", 1)[1]] = value
            else:
                top_level[key] = value

        if stream_overrides:
            top_level["stream"] = replace(self.stream, **stream_overrides)

        return replace(self, **top_level)

    def inverted(self) -> "CipherConfig":
        """Return the same configuration running in the opposite direction."""
        opposite = (
            Direction.DECIPHER if self.direction is Direction.ENCIPHER
            else Direction.ENCIPHER
        )
        return replace(self, direction=opposite)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {
            "shift_amount": self.shift_amount,
            "shift_digits": self.shift_digits,
            "shift_punctuation": self.shift_punctuation,
            "direction": self.direction.name,
            "stream": {
                "line_terminator": self.stream.line_terminator,
            },
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CipherConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected so typos do not silently fall back to
        defaults.
        """
        known = {"shift_amount", "shift_digits", "shift_punctuation",
                 "direction", "stream"}
        unknown = set(data) - known
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration keys: {sorted(unknown)}",
                suggestions=[f"Valid keys are {sorted(known)}"],
            )

        values: Dict[str, Any] = {k: v for k, v in data.items() if k != "stream"}
        if "direction" in values and isinstance(values["direction"], str):
            try:
                values["direction"] = Direction[values["direction"].upper()]
            except KeyError as e:
                raise ConfigValidationError(
                    f"Unknown direction: {values['direction']}",
                    field_name="direction",
                ) from e
        if "stream" in data:
            values["stream"] = StreamConfig(**data["stream"])

        return cls(**values)

    @classmethod
    def from_json(cls, json_str: str) -> "CipherConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))
