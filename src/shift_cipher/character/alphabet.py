"""Character classes and their canonical alphabets.

Each class owns an immutable, ordered alphabet of single-byte ASCII symbols.
Classes are pairwise disjoint; punctuation is kept in ASCII order.
"""

from enum import Enum
from typing import FrozenSet

UPPERCASE_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE_ALPHABET = b"abcdefghijklmnopqrstuvwxyz"
DIGIT_ALPHABET = b"0123456789"
PUNCTUATION_ALPHABET = b"!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"


class CharacterClass(Enum):
    """The four independently shiftable groups of symbols."""

    UPPER_ALPHA = "upper_alpha"
    LOWER_ALPHA = "lower_alpha"
    DIGIT = "digit"
    PUNCTUATION = "punctuation"

    @property
    def alphabet(self) -> bytes:
        """Canonical ordered alphabet of this class."""
        return _ALPHABETS[self]

    @property
    def size(self) -> int:
        """Number of symbols in the alphabet (the modulus for this class)."""
        return len(_ALPHABETS[self])


_ALPHABETS = {
    CharacterClass.UPPER_ALPHA: UPPERCASE_ALPHABET,
    CharacterClass.LOWER_ALPHA: LOWERCASE_ALPHABET,
    CharacterClass.DIGIT: DIGIT_ALPHABET,
    CharacterClass.PUNCTUATION: PUNCTUATION_ALPHABET,
}

LETTER_CLASSES: FrozenSet[CharacterClass] = frozenset(
    {CharacterClass.UPPER_ALPHA, CharacterClass.LOWER_ALPHA}
)
ALL_CLASSES: FrozenSet[CharacterClass] = frozenset(CharacterClass)


def enabled_classes(
    shift_digits: bool = False, shift_punctuation: bool = False
) -> FrozenSet[CharacterClass]:
    """Build the set of classes to shift.

    Letters are always included; digits and punctuation follow their flags.
    """
    classes = set(LETTER_CLASSES)
    if shift_digits:
        classes.add(CharacterClass.DIGIT)
    if shift_punctuation:
        classes.add(CharacterClass.PUNCTUATION)
    return frozenset(classes)
