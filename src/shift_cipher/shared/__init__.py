"""Shared utilities for the shift cipher.

This module provides configuration objects, error types, result metrics and
logging helpers used across the character and CLI layers.
"""

from .config import (
    CipherConfig,
    Direction,
    StreamConfig,
)
from .errors import (
    CipherError,
    ConfigValidationError,
    InputNotFoundError,
    InputUnavailableError,
    IntegerParseError,
    OptionParseError,
    OutputUnavailableError,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)
from .result import PerformanceMetrics

__all__ = [
    "CipherConfig",
    "Direction",
    "StreamConfig",
    "CipherError",
    "ConfigValidationError",
    "InputNotFoundError",
    "InputUnavailableError",
    "IntegerParseError",
    "OptionParseError",
    "OutputUnavailableError",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
    "PerformanceMetrics",
]
