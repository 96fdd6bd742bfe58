"""Substitution table construction for the circular shift cipher.

A table is built once per run from a signed shift amount, the set of enabled
character classes, and a direction. Each enabled class is rotated by the shift
reduced modulo its own alphabet size, so the same shift moves letters, digits
and punctuation by different effective amounts.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from ..shared.config import CipherConfig, Direction
from ..shared.logging import get_logger
from .alphabet import CharacterClass, enabled_classes

PREVIEW_ANCHOR = "A"
PREVIEW_LENGTH = 10


def reduce_shift(raw_shift: int, modulus: int) -> int:
    """Reduce a signed shift into ``[0, modulus)``.

    Python's ``%`` is a floor modulo, so negative shifts land in range
    without a correction loop.

    Args:
        raw_shift: Shift amount as entered, any sign or magnitude
        modulus: Alphabet size of the class being shifted

    Returns:
        Effective rotation for the class
    """
    if modulus <= 0:
        raise ValueError(f"modulus must be > 0, got {modulus}")
    return raw_shift % modulus


def rotate(alphabet: bytes, reduced_shift: int) -> bytes:
    """Circularly rotate an alphabet left by ``reduced_shift`` positions.

    Position ``i`` of the result holds ``alphabet[(i + reduced_shift) % len]``.
    """
    return alphabet[reduced_shift:] + alphabet[:reduced_shift]


@dataclass(frozen=True)
class SubstitutionTable:
    """Immutable byte-to-byte mapping for one direction of a shift.

    Only symbols of enabled classes have entries; every other byte is
    passed through by omission.

    Attributes:
        direction: Whether the table enciphers or deciphers
        shift_amount: Raw shift the table was built from
        reduced_shifts: Effective rotation per enabled class
        mapping: Read-only byte value -> byte value mapping
    """
    direction: Direction
    shift_amount: int
    reduced_shifts: Mapping[CharacterClass, int]
    mapping: Mapping[int, int]
    _translation: bytes = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Freeze the mappings and precompute the 256-entry translation."""
        object.__setattr__(self, "mapping", MappingProxyType(dict(self.mapping)))
        object.__setattr__(
            self, "reduced_shifts", MappingProxyType(dict(self.reduced_shifts))
        )
        keys = bytes(self.mapping.keys())
        values = bytes(self.mapping.values())
        object.__setattr__(self, "_translation", bytes.maketrans(keys, values))

    def __contains__(self, byte: object) -> bool:
        return byte in self.mapping

    def __getitem__(self, byte: int) -> int:
        return self.mapping[byte]

    def __len__(self) -> int:
        return len(self.mapping)

    @property
    def classes(self) -> FrozenSet[CharacterClass]:
        """Character classes that contributed entries."""
        return frozenset(self.reduced_shifts)

    def reduced_shift(self, char_class: CharacterClass) -> int:
        """Effective rotation of a class, 0 when the class is disabled."""
        return self.reduced_shifts.get(char_class, 0)

    def substitute(self, byte: int) -> int:
        """Map a single byte, passing it through when it has no entry."""
        return self.mapping.get(byte, byte)

    def translate(self, data: bytes) -> bytes:
        """Map every byte of ``data`` through the table."""
        return data.translate(self._translation)

    def is_identity(self) -> bool:
        """Check whether every entry maps a byte onto itself."""
        return all(key == value for key, value in self.mapping.items())

    def inverse(self) -> "SubstitutionTable":
        """Build the table for the opposite direction."""
        opposite = (
            Direction.DECIPHER if self.direction is Direction.ENCIPHER
            else Direction.ENCIPHER
        )
        return SubstitutionTable(
            direction=opposite,
            shift_amount=self.shift_amount,
            reduced_shifts=self.reduced_shifts,
            mapping={value: key for key, value in self.mapping.items()},
        )

    def preview(
        self, anchor: str = PREVIEW_ANCHOR, count: int = PREVIEW_LENGTH
    ) -> List[Tuple[str, str]]:
        """Return up to ``count`` entries in ascending key order from ``anchor``."""
        start = ord(anchor)
        keys = sorted(key for key in self.mapping if key >= start)
        return [(chr(key), chr(self.mapping[key])) for key in keys[:count]]


class ShiftTableBuilder:
    """Builds substitution tables from a shift amount and enabled classes."""

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        """Initialize the builder.

        Args:
            correlation_id: Optional correlation ID for logging
        """
        self.logger = get_logger(__name__, correlation_id, "table_builder")

    def build(
        self,
        raw_shift: int,
        enabled: Iterable[CharacterClass],
        direction: Direction = Direction.ENCIPHER,
    ) -> SubstitutionTable:
        """Build the substitution table for a shift.

        For enciphering, ``alphabet[i]`` maps to ``rotated[i]``; for
        deciphering the pairs are reversed, giving the exact inverse of the
        enciphering table for the same shift and classes.

        Args:
            raw_shift: Signed shift amount
            enabled: Character classes to include
            direction: Encipher or decipher

        Returns:
            Immutable SubstitutionTable
        """
        mapping: Dict[int, int] = {}
        reduced_shifts: Dict[CharacterClass, int] = {}

        # Iterate in declaration order so the table is built deterministically
        enabled_set = frozenset(enabled)
        for char_class in CharacterClass:
            if char_class not in enabled_set:
                continue

            alphabet = char_class.alphabet
            reduced = reduce_shift(raw_shift, char_class.size)
            rotated = rotate(alphabet, reduced)
            reduced_shifts[char_class] = reduced

            if direction is Direction.ENCIPHER:
                mapping.update(zip(alphabet, rotated))
            else:
                mapping.update(zip(rotated, alphabet))

        table = SubstitutionTable(
            direction=direction,
            shift_amount=raw_shift,
            reduced_shifts=reduced_shifts,
            mapping=mapping,
        )

        self.logger.debug(
            "Built substitution table",
            extra={
                "direction": direction.value,
                "shift_amount": raw_shift,
                "entries": len(table),
                "reduced_shifts": {c.value: s for c, s in reduced_shifts.items()},
            },
        )
        return table

    def from_config(self, config: CipherConfig) -> SubstitutionTable:
        """Build the table described by a cipher configuration."""
        return self.build(
            config.shift_amount,
            enabled_classes(config.shift_digits, config.shift_punctuation),
            config.direction,
        )


def build_table(
    raw_shift: int,
    enabled: Iterable[CharacterClass],
    direction: Direction = Direction.ENCIPHER,
) -> SubstitutionTable:
    """Build a substitution table with a default builder."""
    return ShiftTableBuilder().build(raw_shift, enabled, direction)
