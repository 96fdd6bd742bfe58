"""Shift Cipher.

Enciphers and deciphers text files with a circular shift over four
independently shiftable character classes: uppercase letters, lowercase
letters, digits and punctuation.

Progressive API Disclosure:
- Level 1: Simple functions - encipher(), decipher()
- Level 2: Table and stream objects - ShiftTableBuilder, StreamTransformer
- Level 3: Command-line tools - shift-encipher, shift-decipher
"""

__version__ = "0.1.0"
__author__ = "Shift Cipher Team"

from .api import decipher, encipher, transform_file
from .character.alphabet import CharacterClass
from .character.stream import StreamTransformer, TransformResult
from .character.table import ShiftTableBuilder, SubstitutionTable, build_table
from .shared.config import CipherConfig, Direction, StreamConfig

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple functions
    "encipher",
    "decipher",
    "transform_file",

    # Level 2: Table and stream objects
    "ShiftTableBuilder",
    "StreamTransformer",
    "SubstitutionTable",
    "build_table",

    # Result objects and data structures
    "CharacterClass",
    "TransformResult",

    # Configuration classes for advanced usage
    "CipherConfig",
    "Direction",
    "StreamConfig",
]
