"""Character processing layer for the shift cipher.

This module provides the character class alphabets, substitution table
construction, and line-by-line stream transformation.
"""

from .alphabet import (
    ALL_CLASSES,
    LETTER_CLASSES,
    CharacterClass,
    enabled_classes,
)
from .table import (
    ShiftTableBuilder,
    SubstitutionTable,
    build_table,
    reduce_shift,
)
from .stream import (
    StreamTransformer,
    TransformResult,
)

__all__ = [
    # Modules
    "alphabet",
    "table",
    "stream",
    # Alphabets
    "ALL_CLASSES",
    "LETTER_CLASSES",
    "CharacterClass",
    "enabled_classes",
    # Table construction
    "ShiftTableBuilder",
    "SubstitutionTable",
    "build_table",
    "reduce_shift",
    # Stream processing
    "StreamTransformer",
    "TransformResult",
]
