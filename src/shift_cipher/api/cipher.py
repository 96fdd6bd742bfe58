"""Simple functions for enciphering and deciphering text and files.

These wrap ``ShiftTableBuilder`` and ``StreamTransformer`` for callers that do
not need to manage tables themselves.
"""

from pathlib import Path
from typing import Optional, Union

from ..character.alphabet import enabled_classes
from ..character.stream import StreamTransformer, TransformResult
from ..character.table import ShiftTableBuilder
from ..shared.config import DEFAULT_SHIFT_AMOUNT, CipherConfig, Direction

TextLike = Union[str, bytes]
PathLike = Union[str, Path]


def _shift_text(
    data: TextLike,
    shift_amount: int,
    shift_digits: bool,
    shift_punctuation: bool,
    direction: Direction,
) -> TextLike:
    table = ShiftTableBuilder().build(
        shift_amount, enabled_classes(shift_digits, shift_punctuation), direction
    )
    if isinstance(data, bytes):
        return table.translate(data)
    # UTF-8 multi-byte sequences never contain ASCII bytes, so they pass through
    encoded = data.encode("utf-8", errors="surrogatepass")
    return table.translate(encoded).decode("utf-8", errors="surrogatepass")


def encipher(
    data: TextLike,
    shift_amount: int = DEFAULT_SHIFT_AMOUNT,
    shift_digits: bool = False,
    shift_punctuation: bool = False,
) -> TextLike:
    """Encipher text or bytes in memory.

    Line endings are left as they are; only symbols of the enabled classes
    change.

    Examples:
        >>> encipher("Hello, World!", 5)
        'Mjqqt, Btwqi!'
        >>> encipher("abc", -3)
        'xyz'
    """
    return _shift_text(
        data, shift_amount, shift_digits, shift_punctuation, Direction.ENCIPHER
    )


def decipher(
    data: TextLike,
    shift_amount: int = DEFAULT_SHIFT_AMOUNT,
    shift_digits: bool = False,
    shift_punctuation: bool = False,
) -> TextLike:
    """Decipher text or bytes in memory.

    Examples:
        >>> decipher("Mjqqt, Btwqi!", 5)
        'Hello, World!'
    """
    return _shift_text(
        data, shift_amount, shift_digits, shift_punctuation, Direction.DECIPHER
    )


def transform_file(
    input_path: PathLike,
    output_path: Optional[PathLike] = None,
    config: Optional[CipherConfig] = None,
    correlation_id: Optional[str] = None,
) -> TransformResult:
    """Encipher or decipher a file according to ``config``.

    Args:
        input_path: File to read
        output_path: File to write; defaults to the input name plus the
            direction's suffix (``.ciph`` or ``.dec``)
        config: Cipher configuration, letters only with shift 5 by default
        correlation_id: Optional correlation ID for logging

    Returns:
        TransformResult with byte counts and metrics

    Raises:
        InputNotFoundError: If the input file does not exist
        OutputUnavailableError: If the output cannot be opened for writing
    """
    config = config or CipherConfig()
    if output_path is None:
        output_path = str(input_path) + config.direction.default_suffix

    table = ShiftTableBuilder(correlation_id).from_config(config)
    transformer = StreamTransformer(table, config.stream, correlation_id)
    return transformer.transform_file(input_path, output_path)
